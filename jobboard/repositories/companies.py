# jobboard/repositories/companies.py
from typing import Any, Dict, List, Optional

from jobboard.db.mongo import get_db, COMPANIES, USERS
from jobboard.models.company import Company
from jobboard.models.user import UserProfile
from jobboard.repositories.common import chunked, new_id, now, to_id


def _to_company(doc) -> Optional[Company]:
    doc = to_id(doc)
    return Company.model_validate(doc) if doc else None


async def create_company(name: str, admin_uid: str) -> Company:
    db = get_db()
    payload = {
        "_id": new_id(),
        "name": name or "New Company",
        "admin_uids": [admin_uid],
        "recruiter_uids": [admin_uid],
        "status": "pending",
        "moderation_reason": None,
        "created_at": now(),
        "updated_at": now(),
    }
    await db[COMPANIES].insert_one(payload)
    return _to_company(payload)


async def get_company(company_id: str) -> Optional[Company]:
    db = get_db()
    doc = await db[COMPANIES].find_one({"_id": company_id})
    return _to_company(doc)


async def get_approved_companies() -> List[Company]:
    db = get_db()
    cur = db[COMPANIES].find({"status": "approved"}).sort("name", 1)
    return [_to_company(d) async for d in cur]


async def update_company_profile(company_id: str, data: Dict[str, Any]) -> bool:
    db = get_db()
    res = await db[COMPANIES].update_one({"_id": company_id}, {"$set": {**data, "updated_at": now()}})
    return res.matched_count > 0


async def add_recruiter(company_id: str, uid: str) -> None:
    db = get_db()
    await db[COMPANIES].update_one({"_id": company_id}, {"$addToSet": {"recruiter_uids": uid}})


async def get_company_recruiters(recruiter_uids: List[str]) -> List[UserProfile]:
    if not recruiter_uids:
        return []
    db = get_db()
    out: List[UserProfile] = []
    for batch in chunked(recruiter_uids):
        async for d in db[USERS].find({"_id": {"$in": batch}}):
            out.append(UserProfile.model_validate(to_id(d, "uid")))
    return out
