"""Builders for stored documents and wire payloads used across tests."""

from datetime import datetime, timezone
from typing import Any, Dict


def goal_document(user_id: str = "user-1", **overrides) -> Dict[str, Any]:
    """A stored goal document in its snake_case MongoDB shape."""
    now = datetime(2024, 3, 1, tzinfo=timezone.utc)
    document = {
        "user_id": user_id,
        "title": "Run 100 km",
        "description": None,
        "type": "numeric",
        "category": "physical",
        "target_value": 100.0,
        "current_value": 10.0,
        "unit": "km",
        "progress": 10.0,
        "deadline": None,
        "created_at": now,
        "updated_at": now,
    }
    document.update(overrides)
    return document


def block(block_id: str = "block_1", **overrides) -> Dict[str, Any]:
    """A schedule block in its camelCase wire shape."""
    data = {
        "id": block_id,
        "title": "Morning run",
        "category": "physical",
        "startTime": "07:00",
        "endTime": "08:00",
        "completed": False,
    }
    data.update(overrides)
    return data
