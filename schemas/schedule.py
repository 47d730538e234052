"""Schedule collection schema."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from schemas.enums import Category
from utils.helpers import parse_api_date

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True, use_enum_values=True)


class Block(BaseModel):
    """One time-blocked task inside a schedule."""
    model_config = _CAMEL

    id: str = Field(..., description="Client-generated block identifier")
    title: str = Field(..., description="Task title")
    category: Category = Field(..., description="Life area of the task")
    start_time: str = Field(..., description="Start time, HH:MM")
    end_time: str = Field(..., description="End time, HH:MM")
    completed: bool = Field(False, description="Whether the task is done")
    goal_id: Optional[str] = Field(None, description="Linked goal identifier")


class BlockUpdate(BaseModel):
    """Partial update for one block; only fields that were sent are applied."""
    model_config = _CAMEL

    title: Optional[str] = None
    category: Optional[Category] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    completed: Optional[bool] = None
    goal_id: Optional[str] = None


class Schedule(BaseModel):
    """Schedule collection model: one user's blocks for one calendar day."""
    model_config = _CAMEL

    id: Optional[str] = Field(None, alias="_id", description="Schedule identifier")
    user_id: str = Field(..., description="Owning user identifier")
    date: str = Field(..., description="Calendar date, YYYY-MM-DD")
    blocks: List[Block] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ScheduleUpdate(BaseModel):
    """Request body replacing the whole block list for a date."""
    model_config = _CAMEL

    date: str
    blocks: List[Block] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def validate_date(cls, value: str) -> str:
        return parse_api_date(value).isoformat()
