# jobboard/repositories/admin.py
"""
Admin-only reads and moderation writes.

Listing endpoints return whole collections (newest first) with their
aggregate counts filled in; the table service sorts and pages them.
"""
import asyncio
from typing import Dict, List, Optional, Tuple

from jobboard.db.mongo import get_db, APPLICATIONS, COMPANIES, JOBS, USERS
from jobboard.models.company import Company
from jobboard.models.content import PlatformStats
from jobboard.models.job import JobWithApplicantCount
from jobboard.models.user import ADMIN_LIKE_ROLES, UserProfile
from jobboard.repositories.common import now, to_id
from jobboard.repositories.jobs import to_job, with_applicant_counts
from jobboard.repositories.users import to_profile


def moderation_reason(status: str, reason: Optional[str], reasoned_statuses: Tuple[str, ...]) -> Optional[str]:
    """
    Reason stored alongside a moderation status: kept (or defaulted to
    "<Status> by admin") for the given statuses and for an approval that
    came with an explicit reason, cleared otherwise.
    """
    if status in reasoned_statuses or (status == "approved" and reason):
        return reason or f"{status[:1].upper()}{status[1:]} by admin"
    return None


async def get_platform_stats() -> PlatformStats:
    db = get_db()
    counts = await asyncio.gather(
        db[USERS].count_documents({"role": "jobSeeker"}),
        db[COMPANIES].count_documents({}),
        db[JOBS].count_documents({}),
        db[JOBS].count_documents({"status": "approved"}),
        db[APPLICATIONS].count_documents({}),
    )
    return PlatformStats(
        total_job_seekers=counts[0],
        total_companies=counts[1],
        total_jobs=counts[2],
        approved_jobs=counts[3],
        total_applications=counts[4],
    )


async def get_pending_jobs() -> List[JobWithApplicantCount]:
    db = get_db()
    cur = db[JOBS].find({"status": "pending"}).sort("created_at", -1)
    # applicant counts are not fetched for the moderation queue
    return [JobWithApplicantCount(**to_job(d).model_dump()) async for d in cur]


async def get_pending_companies() -> List[Company]:
    db = get_db()
    cur = db[COMPANIES].find({"status": "pending"}).sort("created_at", -1)
    return [Company.model_validate(to_id(d)) async for d in cur]


async def _company_counts(company_id: str) -> Dict[str, int]:
    db = get_db()
    job_count, application_count = await asyncio.gather(
        db[JOBS].count_documents({"company_id": company_id}),
        db[APPLICATIONS].count_documents({"company_id": company_id}),
    )
    return {"job_count": job_count, "application_count": application_count}


async def get_all_companies_for_admin() -> List[Company]:
    db = get_db()
    cur = db[COMPANIES].find({}).sort("created_at", -1)
    companies = [Company.model_validate(to_id(d)) async for d in cur]
    counts = await asyncio.gather(*(_company_counts(c.id) for c in companies))
    return [c.model_copy(update=cnt) for c, cnt in zip(companies, counts)]


async def get_all_jobs_for_admin() -> List[JobWithApplicantCount]:
    db = get_db()
    cur = db[JOBS].find({}).sort("created_at", -1)
    jobs = [to_job(d) async for d in cur]
    return await with_applicant_counts(jobs)


async def get_all_job_seekers_for_admin() -> List[UserProfile]:
    db = get_db()
    cur = db[USERS].find({"role": "jobSeeker"}).sort("created_at", -1)
    out = []
    async for d in cur:
        profile = to_profile(d)
        profile.jobs_applied_count = len(profile.applied_job_ids)
        out.append(profile)
    return out


async def get_all_platform_users_for_admin() -> List[UserProfile]:
    db = get_db()
    cur = db[USERS].find({"role": {"$in": ADMIN_LIKE_ROLES}}).sort("created_at", -1)
    return [to_profile(d) async for d in cur]


async def update_job_status(job_id: str, status: str, reason: Optional[str] = None) -> Optional[str]:
    """Returns the stored moderation reason."""
    db = get_db()
    stored_reason = moderation_reason(status, reason, ("rejected", "suspended"))
    await db[JOBS].update_one(
        {"_id": job_id},
        {"$set": {"status": status, "moderation_reason": stored_reason, "updated_at": now()}},
    )
    return stored_reason


async def update_company_status(
    company_id: str, intended_status: str, reason: Optional[str] = None
) -> Tuple[str, Optional[str]]:
    """Returns (final status, stored moderation reason); "active" is stored as "approved"."""
    db = get_db()
    final_status = "approved" if intended_status == "active" else intended_status
    stored_reason = moderation_reason(final_status, reason, ("rejected", "suspended", "deleted"))
    await db[COMPANIES].update_one(
        {"_id": company_id},
        {"$set": {"status": final_status, "moderation_reason": stored_reason, "updated_at": now()}},
    )
    return final_status, stored_reason


async def update_user_status(uid: str, status: str) -> None:
    db = get_db()
    await db[USERS].update_one({"_id": uid}, {"$set": {"status": status, "updated_at": now()}})
