# jobboard/repositories/applications.py
from datetime import timedelta
from typing import Any, Dict, List, Optional

from jobboard.db.mongo import get_db, APPLICATIONS
from jobboard.models.application import Application, ApplicationStats
from jobboard.repositories.common import new_id, now, to_id


def to_application(doc) -> Optional[Application]:
    doc = to_id(doc)
    return Application.model_validate(doc) if doc else None


async def get_user_applications(uid: str) -> Dict[str, Application]:
    """Applications of one job seeker keyed by job id."""
    db = get_db()
    out: Dict[str, Application] = {}
    async for d in db[APPLICATIONS].find({"applicant_id": uid}):
        app = to_application(d)
        out[app.job_id] = app
    return out


async def get_application(application_id: str) -> Optional[Application]:
    db = get_db()
    doc = await db[APPLICATIONS].find_one({"_id": application_id})
    return to_application(doc)


async def find_application(applicant_id: str, job_id: str) -> Optional[Application]:
    db = get_db()
    doc = await db[APPLICATIONS].find_one({"applicant_id": applicant_id, "job_id": job_id})
    return to_application(doc)


async def create_application(data: Dict[str, Any]) -> Application:
    db = get_db()
    ts = now()
    payload = {**data, "_id": new_id(), "applied_at": ts, "updated_at": ts}
    payload.setdefault("status", "Applied")
    await db[APPLICATIONS].insert_one(payload)
    return to_application(payload)


async def update_application_status(application_id: str, status: str, employer_notes: Optional[str] = None) -> bool:
    db = get_db()
    update: Dict[str, Any] = {"status": status, "updated_at": now()}
    if employer_notes is not None:
        update["employer_notes"] = employer_notes
    res = await db[APPLICATIONS].update_one({"_id": application_id}, {"$set": update})
    return res.matched_count > 0


async def get_applications_for_job(job_id: str) -> List[Application]:
    db = get_db()
    cur = db[APPLICATIONS].find({"job_id": job_id}).sort("applied_at", -1)
    return [to_application(d) async for d in cur]


async def get_applications_for_candidate_by_company(applicant_id: str, company_id: str) -> List[Application]:
    db = get_db()
    cur = db[APPLICATIONS].find({"applicant_id": applicant_id, "company_id": company_id}).sort("applied_at", -1)
    return [to_application(d) async for d in cur]


async def get_company_application_stats(company_id: str) -> ApplicationStats:
    db = get_db()
    cutoff = now() - timedelta(days=7)
    stats = ApplicationStats()
    async for d in db[APPLICATIONS].find({"company_id": company_id}, {"status": 1, "applied_at": 1}):
        stats.total_applications += 1
        applied_at = d.get("applied_at")
        if applied_at and applied_at >= cutoff:
            stats.new_applications_last_7_days += 1
        status = d.get("status") or "Applied"
        stats.applications_by_status[status] = stats.applications_by_status.get(status, 0) + 1
    return stats


async def get_recent_applications_by_company(company_id: str, count: int = 5) -> List[Application]:
    db = get_db()
    cur = db[APPLICATIONS].find({"company_id": company_id}).sort("applied_at", -1).limit(count)
    return [to_application(d) async for d in cur]


async def count_applications(query: Optional[Dict[str, Any]] = None) -> int:
    db = get_db()
    return await db[APPLICATIONS].count_documents(query or {})
