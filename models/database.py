"""Database models and connection setup."""

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, DESCENDING
from typing import Optional
from config.settings import settings
from utils.logger import setup_logger

logger = setup_logger(__name__)


class Database:
    """Database connection manager."""

    client: Optional[AsyncIOMotorClient] = None


db = Database()


async def connect_to_mongo():
    """Create database connection."""
    db.client = AsyncIOMotorClient(settings.mongodb_url)
    logger.info(f"Connected to MongoDB database '{get_database_name()}'")


async def close_mongo_connection():
    """Close database connection."""
    if db.client:
        db.client.close()
        db.client = None
        logger.info("Disconnected from MongoDB")


async def init_mongo():
    """Initialize MongoDB connection and all collections with indexes."""
    await connect_to_mongo()

    database = get_database()

    # Users collection (profiles)
    await database.users.create_index([("user_id", ASCENDING)], unique=True)

    # Goals collection
    await database.goals.create_index([("user_id", ASCENDING), ("created_at", DESCENDING)])

    # Schedules collection: one document per user per day
    await database.schedules.create_index(
        [("user_id", ASCENDING), ("date", ASCENDING)],
        unique=True,
    )

    logger.info("MongoDB initialized: All collections created with indexes")


def get_database_name() -> str:
    """Database name is the path component of the connection URL."""
    location = settings.mongodb_url.split("://", 1)[-1]
    if "/" not in location:
        return "lifesync"
    name = location.rsplit("/", 1)[-1].split("?", 1)[0]
    return name or "lifesync"


def get_database():
    """Get database instance."""
    if db.client is None:
        raise RuntimeError("MongoDB client is not connected")
    return db.client[get_database_name()]


# Helper functions to get collections
def get_users_collection():
    """Get users collection."""
    return get_database().users


def get_goal_collection():
    """Get goal collection."""
    return get_database().goals


def get_schedule_collection():
    """Get schedule collection."""
    return get_database().schedules
