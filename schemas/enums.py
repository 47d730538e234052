"""Enums for collection fields."""

from enum import Enum


class GoalType(str, Enum):
    """How a goal measures progress."""
    NUMERIC = "numeric"
    HABIT = "habit"
    MILESTONE = "milestone"


class Category(str, Enum):
    """Life area a goal or schedule block belongs to."""
    PHYSICAL = "physical"
    MENTAL = "mental"
    FINANCIAL = "financial"
    SOCIAL = "social"
    PERSONAL = "personal"


# Goal types whose progress is derived from current_value on save
VALUE_TRACKED_TYPES = (GoalType.NUMERIC.value, GoalType.HABIT.value)
