"""Goal collection schema."""

import math
import sys
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from schemas.enums import Category, GoalType


class Goal(BaseModel):
    """Goal collection model.

    Stored with snake_case keys, serialized to clients in camelCase with the
    ObjectId exposed as ``_id``.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    id: Optional[str] = Field(None, alias="_id", description="Goal identifier")
    user_id: str = Field(..., description="Owning user identifier")
    title: str = Field(..., description="Name of the goal")
    description: Optional[str] = Field(None, description="Free-form description")
    type: GoalType = Field(..., description="numeric, habit or milestone")
    category: Optional[Category] = Field(None, description="Life area of the goal")
    target_value: Optional[float] = Field(None, description="Target for numeric/habit goals")
    current_value: float = Field(0, description="Current value for numeric/habit goals")
    unit: Optional[str] = Field(None, description="Unit of current/target values")
    progress: float = Field(0, description="Completion percentage in [0, 100]")
    deadline: Optional[datetime] = Field(None, description="Optional due date")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_document(self) -> dict:
        """Dump to the snake_case shape stored in MongoDB, without the id."""
        return self.model_dump(exclude={"id"})


class GoalCreate(BaseModel):
    """Request body for creating a goal."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        allow_inf_nan=False,
    )

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    type: GoalType
    category: Optional[Category] = None
    target_value: Optional[float] = None
    current_value: float = 0
    unit: Optional[str] = None
    progress: float = 0
    deadline: Optional[datetime] = None


class ProgressUpdate(BaseModel):
    """Request body for PUT /goals/{id}/progress.

    Fields that are missing or not usable numbers are dropped to None
    instead of failing validation.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    current_value: Optional[float] = None
    progress: Optional[float] = None

    @field_validator("current_value", "progress", mode="before")
    @classmethod
    def ignore_invalid_numbers(cls, value: Any) -> Optional[float]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        try:
            number = float(value)
        except OverflowError:
            # integers beyond float range saturate so the clamp still applies
            return sys.float_info.max if value > 0 else -sys.float_info.max
        if not math.isfinite(number):
            return None
        return number


class GoalResponse(BaseModel):
    """Goal wrapped with a status message."""
    message: str
    goal: Goal


class GoalEnvelope(BaseModel):
    goal: Goal


class GoalList(BaseModel):
    goals: List[Goal]


class MessageResponse(BaseModel):
    message: str
