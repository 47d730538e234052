"""Helper utility functions."""

import uuid
from datetime import date, datetime
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: str) -> Optional[ObjectId]:
    """Parse a path id, returning None for anything that is not an ObjectId."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Copy a MongoDB document with its ObjectId converted to a string."""
    if not document:
        return None
    doc = dict(document)
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def generate_block_id() -> str:
    """Generate a client-side id for a schedule block."""
    return f"block_{uuid.uuid4().hex[:12]}"


def format_date_for_api(value: date) -> str:
    """Format a date (or datetime) as YYYY-MM-DD."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def parse_api_date(value: str) -> date:
    """Parse a Y-M-D string (zero padding optional), raising ValueError on anything else."""
    return datetime.strptime(value, "%Y-%m-%d").date()
