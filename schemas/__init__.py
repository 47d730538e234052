"""Collection schemas organized by collection type."""

from schemas.enums import Category, GoalType
from schemas.goal import (
    Goal,
    GoalCreate,
    GoalEnvelope,
    GoalList,
    GoalResponse,
    MessageResponse,
    ProgressUpdate,
)
from schemas.schedule import Block, BlockUpdate, Schedule, ScheduleUpdate
from schemas.user import Profile, ProfileUpdate

__all__ = [
    "Category",
    "GoalType",
    "Goal",
    "GoalCreate",
    "GoalEnvelope",
    "GoalList",
    "GoalResponse",
    "MessageResponse",
    "ProgressUpdate",
    "Block",
    "BlockUpdate",
    "Schedule",
    "ScheduleUpdate",
    "Profile",
    "ProfileUpdate",
]
