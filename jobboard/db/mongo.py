# jobboard/db/mongo.py
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from jobboard.core.config import settings

logger = logging.getLogger(__name__)

USERS = "users"
COMPANIES = "companies"
JOBS = "jobs"
APPLICATIONS = "applications"
INVITATIONS = "invitations"
LEGAL_CONTENT = "legalContent"
NOTIFICATIONS = "notifications"

# (collection, keys) pairs backing the predicates the repositories push down
INDEXES = [
    (USERS, [("role", 1), ("created_at", -1)]),
    (USERS, [("role", 1), ("is_profile_searchable", 1), ("updated_at", -1)]),
    (COMPANIES, [("status", 1), ("name", 1)]),
    (JOBS, [("status", 1), ("posted_date", -1)]),
    (JOBS, [("company_id", 1), ("created_at", -1)]),
    (APPLICATIONS, [("job_id", 1)]),
    (APPLICATIONS, [("applicant_id", 1), ("job_id", 1)]),
    (APPLICATIONS, [("company_id", 1), ("applied_at", -1)]),
    (INVITATIONS, [("recruiter_email", 1), ("status", 1)]),
    (NOTIFICATIONS, [("user_id", 1), ("created_at", -1)]),
]

_mongo_client: Optional[AsyncIOMotorClient] = None


def get_mongo_client() -> AsyncIOMotorClient:
    """
    Returns a cached Motor client.
    """
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = AsyncIOMotorClient(settings.MONGODB_URI)
    return _mongo_client


def get_db() -> AsyncIOMotorDatabase:
    client = get_mongo_client()
    return client[settings.MONGODB_DB]


async def init_db():
    db = get_db()
    for collection, keys in INDEXES:
        await db[collection].create_index(keys)
    logger.info("MongoDB indexes ensured on %s", settings.MONGODB_DB)


def close_db():
    global _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
