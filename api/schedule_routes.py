"""Schedule routes: one block list per user per day."""

from fastapi import APIRouter, Depends, HTTPException, Query

from api.auth import get_current_user_id
from api.errors import server_error
from models.database import get_schedule_collection
from schemas.schedule import BlockUpdate, Schedule, ScheduleUpdate
from services.schedule_service import (
    BlockNotFoundError,
    delete_block,
    find_owned_schedule,
    get_schedule_for_date,
    update_block,
    upsert_schedule,
)
from utils.helpers import parse_api_date
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/schedules", tags=["schedules"])

SCHEDULE_NOT_FOUND = "Schedule not found"
BLOCK_NOT_FOUND = "Block not found"


@router.get("", response_model=Schedule, response_model_exclude_none=True)
async def get_schedule(
    date: str = Query(..., description="Calendar date, YYYY-MM-DD"),
    user_id: str = Depends(get_current_user_id),
):
    """
    Get the caller's schedule for a date.
    Returns an empty block list without an _id when nothing was saved yet.
    """
    try:
        date = parse_api_date(date).isoformat()
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid date, expected YYYY-MM-DD")

    try:
        return await get_schedule_for_date(get_schedule_collection(), user_id, date)

    except Exception as e:
        logger.error(f"Error fetching schedule for {date}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))


@router.put("", response_model=Schedule, response_model_exclude_none=True)
async def replace_schedule(payload: ScheduleUpdate, user_id: str = Depends(get_current_user_id)):
    """Replace the whole block list for a date, creating the schedule on first write."""
    try:
        return await upsert_schedule(
            get_schedule_collection(), user_id, payload.date, payload.blocks
        )

    except Exception as e:
        logger.error(f"Error saving schedule for {payload.date}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))


@router.patch(
    "/{schedule_id}/blocks/{block_id}",
    response_model=Schedule,
    response_model_exclude_none=True,
)
async def patch_schedule_block(
    schedule_id: str,
    block_id: str,
    payload: BlockUpdate,
    user_id: str = Depends(get_current_user_id),
):
    """Update some fields of one block, e.g. {"completed": true}."""
    try:
        collection = get_schedule_collection()
        schedule = await find_owned_schedule(collection, schedule_id, user_id)
        if not schedule:
            raise HTTPException(status_code=404, detail=SCHEDULE_NOT_FOUND)

        return await update_block(collection, schedule, block_id, payload)

    except BlockNotFoundError:
        raise HTTPException(status_code=404, detail=BLOCK_NOT_FOUND)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating block {block_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))


@router.delete(
    "/{schedule_id}/blocks/{block_id}",
    response_model=Schedule,
    response_model_exclude_none=True,
)
async def delete_schedule_block(
    schedule_id: str,
    block_id: str,
    user_id: str = Depends(get_current_user_id),
):
    """Remove one block from a schedule."""
    try:
        collection = get_schedule_collection()
        schedule = await find_owned_schedule(collection, schedule_id, user_id)
        if not schedule:
            raise HTTPException(status_code=404, detail=SCHEDULE_NOT_FOUND)

        return await delete_block(collection, schedule, block_id)

    except BlockNotFoundError:
        raise HTTPException(status_code=404, detail=BLOCK_NOT_FOUND)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting block {block_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))
