# jobboard/repositories/notifications.py
import logging
from typing import List, Optional

from jobboard.db.mongo import get_db, NOTIFICATIONS
from jobboard.models.content import Notification
from jobboard.repositories.common import new_id, now, to_id

logger = logging.getLogger(__name__)


async def create_notification(
    user_id: str,
    title: str,
    message: str,
    type: str = "GENERIC_INFO",
    link: Optional[str] = None,
) -> Notification:
    db = get_db()
    payload = {
        "_id": new_id(),
        "user_id": user_id,
        "title": title,
        "message": message,
        "type": type,
        "link": link,
        "is_read": False,
        "created_at": now(),
    }
    await db[NOTIFICATIONS].insert_one(payload)
    logger.debug("Notification %s (%s) queued for %s", payload["_id"], type, user_id)
    return Notification.model_validate(to_id(payload))


async def list_notifications(user_id: str, limit: int = 50) -> List[Notification]:
    db = get_db()
    cur = db[NOTIFICATIONS].find({"user_id": user_id}).sort("created_at", -1).limit(limit)
    return [Notification.model_validate(to_id(d)) async for d in cur]


async def mark_read(notification_id: str, user_id: str) -> bool:
    db = get_db()
    res = await db[NOTIFICATIONS].update_one(
        {"_id": notification_id, "user_id": user_id}, {"$set": {"is_read": True}}
    )
    return res.matched_count > 0
