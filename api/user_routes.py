"""Profile routes for the signed-in user."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from pymongo import ReturnDocument

from api.auth import get_current_user_id
from api.errors import server_error
from models.database import get_users_collection
from schemas.user import Profile, ProfileUpdate
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me", response_model=Profile)
async def get_profile(user_id: str = Depends(get_current_user_id)):
    """Get the caller's profile, or an empty one if none was saved."""
    try:
        document = await get_users_collection().find_one({"user_id": user_id})
        if not document:
            return Profile(user_id=user_id)
        document.pop("_id", None)
        return Profile.model_validate(document)

    except Exception as e:
        logger.error(f"Error fetching profile for {user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))


@router.put("/me", response_model=Profile)
async def update_profile(payload: ProfileUpdate, user_id: str = Depends(get_current_user_id)):
    """Upsert the fields the caller sent."""
    try:
        changes = payload.model_dump(exclude_unset=True)
        if "preferences" in changes and changes["preferences"] is None:
            changes["preferences"] = {}
        changes["updated_at"] = datetime.now(timezone.utc)

        document = await get_users_collection().find_one_and_update(
            {"user_id": user_id},
            {"$set": changes, "$setOnInsert": {"user_id": user_id}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        document.pop("_id", None)
        logger.info(f"Updated profile for {user_id}: {sorted(changes)}")
        return Profile.model_validate(document)

    except Exception as e:
        logger.error(f"Error updating profile for {user_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))
