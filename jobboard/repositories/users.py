# jobboard/repositories/users.py
import logging
from typing import Any, Dict, List, Optional

from jobboard.db.mongo import get_db, USERS
from jobboard.models.user import ADMIN_LIKE_ROLES, UserProfile, UserProfileCreate
from jobboard.repositories import companies as companies_repo
from jobboard.repositories import invitations as invitations_repo
from jobboard.repositories.common import chunked, now, to_id

logger = logging.getLogger(__name__)


def to_profile(doc) -> Optional[UserProfile]:
    doc = to_id(doc, "uid")
    return UserProfile.model_validate(doc) if doc else None


async def get_user_profile(uid: str) -> Optional[UserProfile]:
    db = get_db()
    doc = await db[USERS].find_one({"_id": uid})
    return to_profile(doc)


async def update_user_profile(uid: str, data: Dict[str, Any]) -> bool:
    db = get_db()
    res = await db[USERS].update_one({"_id": uid}, {"$set": {**data, "updated_at": now()}})
    return res.matched_count > 0


async def touch_last_active(uid: str) -> None:
    db = get_db()
    await db[USERS].update_one({"_id": uid}, {"$set": {"last_active": now()}})


async def add_to_set(uid: str, field: str, value: Any) -> None:
    db = get_db()
    await db[USERS].update_one({"_id": uid}, {"$addToSet": {field: value}, "$set": {"updated_at": now()}})


async def pull(uid: str, field: str, match: Any) -> None:
    db = get_db()
    await db[USERS].update_one({"_id": uid}, {"$pull": {field: match}, "$set": {"updated_at": now()}})


def _default_name(role: str) -> str:
    if role == "employer":
        return "Recruiter"
    if role in ADMIN_LIKE_ROLES:
        return "Platform Staff"
    return "New User"


async def create_user_profile(uid: str, payload: UserProfileCreate) -> UserProfile:
    """
    Create the profile document for a freshly authenticated user.

    Employers either join the company that invited their e-mail address or,
    when they give a company name, register a new pending company they admin.
    """
    db = get_db()
    company_id: Optional[str] = None
    is_company_admin = False

    if payload.role == "employer":
        invitation = await invitations_repo.find_pending_invitation(payload.email)
        if invitation:
            company_id = invitation.company_id
            await companies_repo.add_recruiter(company_id, uid)
            await invitations_repo.accept_invitation(invitation.id, uid)
            logger.info("User %s accepted invitation %s to company %s", uid, invitation.id, company_id)
        elif payload.company_name:
            company = await companies_repo.create_company(payload.company_name, uid)
            company_id = company.id
            is_company_admin = True

    doc: Dict[str, Any] = {
        "_id": uid,
        "email": payload.email,
        "name": payload.name or _default_name(payload.role),
        "role": payload.role,
        "avatar_url": "",
        "status": "active",
        "created_at": now(),
        "updated_at": now(),
        "last_active": now(),
    }
    if payload.role == "employer":
        doc["company_id"] = company_id
        doc["is_company_admin"] = is_company_admin

    await db[USERS].replace_one({"_id": uid}, doc, upsert=True)
    return to_profile(doc)


async def get_searchable_candidates() -> List[UserProfile]:
    db = get_db()
    cur = db[USERS].find({"role": "jobSeeker", "is_profile_searchable": True}).sort("updated_at", -1)
    return [to_profile(d) async for d in cur]


async def get_users_by_ids(uids: List[str]) -> Dict[str, UserProfile]:
    db = get_db()
    out: Dict[str, UserProfile] = {}
    for batch in chunked(uids):
        async for d in db[USERS].find({"_id": {"$in": batch}}):
            profile = to_profile(d)
            out[profile.uid] = profile
    return out
