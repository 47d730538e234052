"""Goal routes for goal management."""

import json
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from api.auth import get_current_user_id
from api.errors import server_error
from models.database import get_goal_collection
from schemas.enums import GoalType
from schemas.goal import (
    Goal,
    GoalCreate,
    GoalEnvelope,
    GoalList,
    GoalResponse,
    MessageResponse,
    ProgressUpdate,
)
from services.goal_service import (
    apply_progress_update,
    delete_owned_goal,
    find_owned_goal,
    save_goal,
)
from utils.helpers import serialize_document
from utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter(prefix="/api/goals", tags=["goals"])

GOAL_NOT_FOUND = "Goal not found"


async def read_progress_update(request: Request) -> ProgressUpdate:
    """Parse the progress body leniently: bad JSON or fields mean 'no change'."""
    raw = await request.body()
    try:
        data = json.loads(raw) if raw else {}
    except ValueError:
        logger.info("Ignoring malformed progress body")
        data = {}
    if not isinstance(data, dict):
        data = {}
    return ProgressUpdate.model_validate(data)


@router.put("/{goal_id}/progress", response_model=GoalResponse)
async def update_goal_progress(
    goal_id: str,
    request: Request,
    user_id: str = Depends(get_current_user_id),
):
    """
    Update a goal's progress.
    numeric/habit goals take currentValue; milestone goals take progress,
    clamped to [0, 100]. Anything else in the body is ignored.
    """
    try:
        goal_collection = get_goal_collection()

        goal = await find_owned_goal(goal_collection, goal_id, user_id)
        if not goal:
            raise HTTPException(status_code=404, detail=GOAL_NOT_FOUND)

        update = await read_progress_update(request)
        apply_progress_update(goal, update)

        goal = await save_goal(goal_collection, goal)

        return GoalResponse(message="Progress updated successfully", goal=goal)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Progress update error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))


@router.post("", response_model=GoalResponse, status_code=201)
async def create_goal(payload: GoalCreate, user_id: str = Depends(get_current_user_id)):
    """Create a new goal owned by the caller."""
    try:
        goal = Goal(user_id=user_id, **payload.model_dump())
        goal = await save_goal(get_goal_collection(), goal)
        return GoalResponse(message="Goal created successfully", goal=goal)

    except Exception as e:
        logger.error(f"Error creating goal: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))


@router.get("", response_model=GoalList)
async def list_goals(
    type: Optional[GoalType] = Query(None, description="Only goals of this type"),
    user_id: str = Depends(get_current_user_id),
):
    """List the caller's goals, newest first."""
    try:
        query = {"user_id": user_id}
        if type:
            query["type"] = type.value

        cursor = get_goal_collection().find(query).sort("created_at", -1)
        documents = await cursor.to_list(length=None)

        goals = []
        for document in documents:
            goals.append(Goal.model_validate(serialize_document(document)))

        return GoalList(goals=goals)

    except Exception as e:
        logger.error(f"Error listing goals: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))


@router.get("/{goal_id}", response_model=GoalEnvelope)
async def get_goal(goal_id: str, user_id: str = Depends(get_current_user_id)):
    """Fetch one of the caller's goals."""
    try:
        goal = await find_owned_goal(get_goal_collection(), goal_id, user_id)
        if not goal:
            raise HTTPException(status_code=404, detail=GOAL_NOT_FOUND)
        return GoalEnvelope(goal=goal)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching goal {goal_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))


@router.delete("/{goal_id}", response_model=MessageResponse)
async def delete_goal(goal_id: str, user_id: str = Depends(get_current_user_id)):
    """Delete one of the caller's goals."""
    try:
        deleted = await delete_owned_goal(get_goal_collection(), goal_id, user_id)
        if not deleted:
            raise HTTPException(status_code=404, detail=GOAL_NOT_FOUND)

        logger.info(f"Deleted goal {goal_id} for user {user_id}")
        return MessageResponse(message="Goal deleted successfully")

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting goal {goal_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=server_error(e))
