"""Goal lookup, progress rules and persistence."""

import math
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from config.settings import settings
from schemas.enums import GoalType, VALUE_TRACKED_TYPES
from schemas.goal import Goal, ProgressUpdate
from utils.helpers import serialize_document, to_object_id
from utils.logger import setup_logger

logger = setup_logger(__name__)

ProgressCalculator = Callable[[Goal], float]


def clamp_progress(value: float) -> float:
    """Clamp a progress percentage to [0, 100]; NaN becomes 0."""
    if math.isnan(value):
        return 0
    return min(max(value, 0), 100)


def preserve_progress(goal: Goal) -> float:
    """Keep whatever progress is already stored."""
    return goal.progress


def target_ratio_progress(goal: Goal) -> float:
    """current_value as a percentage of target_value, when a target exists."""
    if not goal.target_value or goal.target_value <= 0:
        return goal.progress
    return goal.current_value / goal.target_value * 100


_calculators: Dict[str, ProgressCalculator] = {
    "preserve": preserve_progress,
    "target_ratio": target_ratio_progress,
}


def register_progress_calculator(name: str, calculator: ProgressCalculator) -> None:
    """Make a progress derivation selectable through settings.goal_progress_formula."""
    _calculators[name] = calculator


def get_progress_calculator(name: Optional[str] = None) -> ProgressCalculator:
    """Look up a calculator by name, defaulting to the configured one."""
    name = name or settings.goal_progress_formula
    try:
        return _calculators[name]
    except KeyError:
        raise ValueError(f"Unknown goal progress formula: {name!r}")


async def find_owned_goal(collection, goal_id: str, user_id: str) -> Optional[Goal]:
    """Load a goal by id and owner in a single query.

    A malformed id is treated exactly like a missing one, so callers
    cannot tell another user's goal apart from a goal that does not exist.
    """
    oid = to_object_id(goal_id)
    if oid is None:
        return None

    document = await collection.find_one({"_id": oid, "user_id": user_id})
    if not document:
        return None

    return Goal.model_validate(serialize_document(document))


def apply_progress_update(goal: Goal, update: ProgressUpdate) -> Goal:
    """Apply the type-specific progress rule in place and return the goal."""
    if goal.type in VALUE_TRACKED_TYPES:
        if update.current_value is not None:
            goal.current_value = update.current_value
    elif goal.type == GoalType.MILESTONE.value:
        if update.progress is not None:
            goal.progress = clamp_progress(update.progress)
    return goal


def prepare_for_save(goal: Goal, calculator: Optional[ProgressCalculator] = None) -> Goal:
    """Stamp timestamps and recompute progress; the result always lies in [0, 100]."""
    now = datetime.now(timezone.utc)
    if goal.created_at is None:
        goal.created_at = now
    goal.updated_at = now

    if goal.type in VALUE_TRACKED_TYPES:
        calculator = calculator or get_progress_calculator()
        goal.progress = calculator(goal)
    goal.progress = clamp_progress(goal.progress)
    return goal


async def save_goal(collection, goal: Goal, calculator: Optional[ProgressCalculator] = None) -> Goal:
    """Insert or replace a goal document. Last write wins."""
    prepare_for_save(goal, calculator)
    document: Dict[str, Any] = goal.to_document()

    if goal.id is None:
        result = await collection.insert_one(document)
        goal.id = str(result.inserted_id)
        logger.info(f"Created goal {goal.id} for user {goal.user_id}")
        return goal

    await collection.replace_one(
        {"_id": to_object_id(goal.id), "user_id": goal.user_id},
        document,
    )
    logger.info(f"Saved goal {goal.id} for user {goal.user_id}")
    return goal


async def delete_owned_goal(collection, goal_id: str, user_id: str) -> bool:
    """Delete a goal by id and owner. Returns False when nothing matched."""
    oid = to_object_id(goal_id)
    if oid is None:
        return False
    result = await collection.delete_one({"_id": oid, "user_id": user_id})
    return result.deleted_count > 0
