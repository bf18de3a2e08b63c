# jobboard/repositories/jobs.py
import asyncio
import re
from typing import Any, Dict, List, Optional

from jobboard.db.mongo import get_db, APPLICATIONS, JOBS
from jobboard.models.filters import JobFilters
from jobboard.models.job import Job, JobWithApplicantCount
from jobboard.repositories.common import chunked, new_id, now, to_id


def to_job(doc) -> Optional[Job]:
    doc = to_id(doc)
    return Job.model_validate(doc) if doc else None


def _pushdown_query(filters: Optional[JobFilters]) -> Dict[str, Any]:
    # only exact-match predicates go to the database; filter_jobs re-checks everything
    query: Dict[str, Any] = {"status": "approved"}
    if filters is None:
        return query
    if filters.is_remote:
        query["is_remote"] = True
    if filters.role_type and filters.role_type.lower() != "all":
        query["type"] = {"$regex": f"^{re.escape(filters.role_type)}$", "$options": "i"}
    if filters.experience_level and filters.experience_level.lower() != "all":
        query["experience_level"] = {"$regex": f"^{re.escape(filters.experience_level)}$", "$options": "i"}
    return query


async def get_approved_jobs(prefilter: Optional[JobFilters] = None) -> List[Job]:
    db = get_db()
    cur = db[JOBS].find(_pushdown_query(prefilter)).sort("posted_date", -1)
    return [to_job(d) async for d in cur]


async def get_job(job_id: str) -> Optional[Job]:
    db = get_db()
    doc = await db[JOBS].find_one({"_id": job_id})
    return to_job(doc)


async def get_jobs_by_company(company_id: str) -> List[Job]:
    db = get_db()
    cur = db[JOBS].find({"company_id": company_id, "status": "approved"}).sort("posted_date", -1)
    return [to_job(d) async for d in cur]


async def get_jobs_by_ids(job_ids: List[str]) -> Dict[str, Job]:
    db = get_db()
    out: Dict[str, Job] = {}
    for batch in chunked(job_ids):
        async for d in db[JOBS].find({"_id": {"$in": batch}}):
            job = to_job(d)
            out[job.id] = job
    return out


async def count_applicants(job_id: str) -> int:
    db = get_db()
    return await db[APPLICATIONS].count_documents({"job_id": job_id})


async def with_applicant_counts(jobs: List[Job]) -> List[JobWithApplicantCount]:
    counts = await asyncio.gather(*(count_applicants(j.id) for j in jobs))
    return [JobWithApplicantCount(**j.model_dump(), applicant_count=c) for j, c in zip(jobs, counts)]


async def get_company_jobs_for_dashboard(company_id: str) -> List[JobWithApplicantCount]:
    db = get_db()
    cur = db[JOBS].find({"company_id": company_id}).sort("created_at", -1)
    jobs = [to_job(d) async for d in cur]
    return await with_applicant_counts(jobs)


async def save_job(payload: Dict[str, Any], job_id: Optional[str] = None) -> str:
    """
    Create a job (stamped with today's posted date and held for moderation)
    or update an existing one. Returns the job id.
    """
    db = get_db()
    if job_id:
        await db[JOBS].update_one({"_id": job_id}, {"$set": {**payload, "updated_at": now()}})
        return job_id
    ts = now()
    doc = {
        **payload,
        "_id": new_id(),
        "status": "pending",
        "posted_date": ts.replace(hour=0, minute=0, second=0, microsecond=0),
        "created_at": ts,
        "updated_at": ts,
    }
    await db[JOBS].insert_one(doc)
    return doc["_id"]
