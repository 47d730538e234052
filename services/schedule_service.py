"""Schedule persistence: per-day block lists scoped to one user."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import ReturnDocument

from schemas.schedule import Block, BlockUpdate, Schedule
from utils.helpers import serialize_document, to_object_id
from utils.logger import setup_logger

logger = setup_logger(__name__)


class BlockNotFoundError(LookupError):
    """Raised when a schedule exists but does not contain the requested block."""


def _to_schedule(document: Dict[str, Any]) -> Schedule:
    return Schedule.model_validate(serialize_document(document))


async def get_schedule_for_date(collection, user_id: str, date_str: str) -> Schedule:
    """Return the user's schedule for a date, or an empty unsaved one."""
    document = await collection.find_one({"user_id": user_id, "date": date_str})
    if not document:
        return Schedule(user_id=user_id, date=date_str, blocks=[])
    return _to_schedule(document)


async def upsert_schedule(collection, user_id: str, date_str: str, blocks: List[Block]) -> Schedule:
    """Replace the whole block list for (user, date), creating the schedule if needed."""
    now = datetime.now(timezone.utc)
    document = await collection.find_one_and_update(
        {"user_id": user_id, "date": date_str},
        {
            "$set": {
                "blocks": [block.model_dump() for block in blocks],
                "updated_at": now,
            },
            "$setOnInsert": {"user_id": user_id, "date": date_str, "created_at": now},
        },
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    logger.info(f"Saved schedule for user {user_id} on {date_str} with {len(blocks)} blocks")
    return _to_schedule(document)


async def find_owned_schedule(collection, schedule_id: str, user_id: str) -> Optional[Schedule]:
    """Load a schedule by id and owner in a single query."""
    oid = to_object_id(schedule_id)
    if oid is None:
        return None
    document = await collection.find_one({"_id": oid, "user_id": user_id})
    if not document:
        return None
    return _to_schedule(document)


async def _save_blocks(collection, schedule: Schedule) -> Schedule:
    schedule.updated_at = datetime.now(timezone.utc)
    await collection.update_one(
        {"_id": to_object_id(schedule.id), "user_id": schedule.user_id},
        {"$set": {
            "blocks": [block.model_dump() for block in schedule.blocks],
            "updated_at": schedule.updated_at,
        }},
    )
    return schedule


async def update_block(collection, schedule: Schedule, block_id: str, update: BlockUpdate) -> Schedule:
    """Merge the fields that were sent into one block and persist the schedule."""
    # goal_id may be cleared with an explicit null; other fields may not
    changes = {
        key: value
        for key, value in update.model_dump(exclude_unset=True).items()
        if value is not None or key == "goal_id"
    }
    for index, block in enumerate(schedule.blocks):
        if block.id == block_id:
            schedule.blocks[index] = block.model_copy(update=changes)
            break
    else:
        raise BlockNotFoundError(block_id)

    logger.info(f"Updated block {block_id} in schedule {schedule.id}: {sorted(changes)}")
    return await _save_blocks(collection, schedule)


async def delete_block(collection, schedule: Schedule, block_id: str) -> Schedule:
    """Remove one block and persist the schedule."""
    remaining = [block for block in schedule.blocks if block.id != block_id]
    if len(remaining) == len(schedule.blocks):
        raise BlockNotFoundError(block_id)

    schedule.blocks = remaining
    logger.info(f"Deleted block {block_id} from schedule {schedule.id}")
    return await _save_blocks(collection, schedule)
