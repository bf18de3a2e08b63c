# jobboard/repositories/invitations.py
from typing import List, Optional

from jobboard.db.mongo import get_db, INVITATIONS
from jobboard.models.company import RecruiterInvitation
from jobboard.repositories.common import new_id, now, to_id


def _to_invitation(doc) -> Optional[RecruiterInvitation]:
    doc = to_id(doc)
    return RecruiterInvitation.model_validate(doc) if doc else None


async def create_invitation(company_id: str, company_name: str, email: str, name: str = "") -> RecruiterInvitation:
    db = get_db()
    payload = {
        "_id": new_id(),
        "company_id": company_id,
        "company_name": company_name,
        "recruiter_email": email.strip().lower(),
        "recruiter_name": name,
        "status": "pending",
        "created_at": now(),
    }
    await db[INVITATIONS].insert_one(payload)
    return _to_invitation(payload)


async def list_company_invitations(company_id: str) -> List[RecruiterInvitation]:
    db = get_db()
    cur = db[INVITATIONS].find({"company_id": company_id}).sort("created_at", -1)
    return [_to_invitation(d) async for d in cur]


async def find_pending_invitation(email: str, company_id: Optional[str] = None) -> Optional[RecruiterInvitation]:
    db = get_db()
    query = {"recruiter_email": email.strip().lower(), "status": "pending"}
    if company_id:
        query["company_id"] = company_id
    doc = await db[INVITATIONS].find_one(query)
    return _to_invitation(doc)


async def accept_invitation(invitation_id: str, uid: str) -> None:
    db = get_db()
    await db[INVITATIONS].update_one(
        {"_id": invitation_id},
        {"$set": {"status": "accepted", "accepted_at": now(), "user_id": uid}},
    )
