"""User profile collection schema."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Profile(BaseModel):
    """User collection model."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str = Field(..., description="Unique user identifier")
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Contact email")
    timezone: Optional[str] = Field(None, description="IANA timezone name")
    bio: Optional[str] = Field(None, description="Short personal note")
    preferences: Dict[str, Any] = Field(default_factory=dict, description="Client preferences")
    updated_at: Optional[datetime] = None


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = None
    email: Optional[str] = None
    timezone: Optional[str] = None
    bio: Optional[str] = None
    preferences: Optional[Dict[str, Any]] = None
