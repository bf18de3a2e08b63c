# jobboard/api/v1/admin.py
import logging
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from jobboard.api.deps import require_admin, require_legal_editor, require_moderator
from jobboard.models.company import Company
from jobboard.models.content import LegalDocument, LegalDocumentId, PlatformStats
from jobboard.models.job import JobStatus, JobWithApplicantCount
from jobboard.models.user import ADMIN_LIKE_ROLES, UserProfile, UserStatus
from jobboard.repositories import admin as admin_repo
from jobboard.repositories import companies as companies_repo
from jobboard.repositories import jobs as jobs_repo
from jobboard.repositories import notifications as notifications_repo
from jobboard.repositories import users as users_repo
from jobboard.repositories.legal import save_legal_document
from jobboard.services.table import Page, TableQuery, build_table

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


class JobStatusIn(BaseModel):
    status: JobStatus
    reason: Optional[str] = None


class CompanyStatusIn(BaseModel):
    status: Literal["approved", "rejected", "suspended", "active", "deleted"]
    reason: Optional[str] = None


class UserStatusIn(BaseModel):
    status: UserStatus


class LegalDocumentIn(BaseModel):
    content: str


class ModerationResp(BaseModel):
    id: str
    status: str
    moderation_reason: Optional[str] = None


@router.get("/stats", response_model=PlatformStats)
async def stats(user: UserProfile = Depends(require_admin)):
    return await admin_repo.get_platform_stats()


@router.get("/jobs/pending", response_model=List[JobWithApplicantCount])
async def pending_jobs(user: UserProfile = Depends(require_admin)):
    return await admin_repo.get_pending_jobs()


@router.get("/companies/pending", response_model=List[Company])
async def pending_companies(user: UserProfile = Depends(require_admin)):
    return await admin_repo.get_pending_companies()


# sortable columns per admin table; other sort keys are rejected
JOB_TABLE_COLUMNS = ["title", "company", "location", "type", "status", "posted_date", "created_at", "applicant_count"]
COMPANY_TABLE_COLUMNS = ["name", "website_url", "status", "created_at", "job_count", "application_count"]
JOB_SEEKER_TABLE_COLUMNS = ["name", "email", "status", "created_at", "last_active", "jobs_applied_count"]
PLATFORM_USER_TABLE_COLUMNS = ["name", "email", "role", "status", "created_at", "last_active"]


def _table(items, query: TableQuery, search_fields: List[str], sortable: List[str]) -> Page:
    if query.sort_key and query.sort_key not in sortable:
        raise HTTPException(status_code=422, detail=f"Cannot sort by '{query.sort_key}'")
    return build_table(items, query, search_fields)


@router.get("/jobs", response_model=Page)
async def jobs_table(query: TableQuery = Depends(), user: UserProfile = Depends(require_admin)):
    return _table(await admin_repo.get_all_jobs_for_admin(), query, ["title", "company"], JOB_TABLE_COLUMNS)


@router.get("/companies", response_model=Page)
async def companies_table(query: TableQuery = Depends(), user: UserProfile = Depends(require_admin)):
    return _table(
        await admin_repo.get_all_companies_for_admin(), query, ["name", "website_url"], COMPANY_TABLE_COLUMNS
    )


@router.get("/job-seekers", response_model=Page)
async def job_seekers_table(query: TableQuery = Depends(), user: UserProfile = Depends(require_admin)):
    return _table(
        await admin_repo.get_all_job_seekers_for_admin(), query, ["name", "email"], JOB_SEEKER_TABLE_COLUMNS
    )


@router.get("/platform-users", response_model=Page)
async def platform_users_table(query: TableQuery = Depends(), user: UserProfile = Depends(require_admin)):
    return _table(
        await admin_repo.get_all_platform_users_for_admin(), query, ["name", "email"], PLATFORM_USER_TABLE_COLUMNS
    )


@router.patch("/jobs/{job_id}/status", response_model=ModerationResp)
async def update_job_status_route(job_id: str, payload: JobStatusIn, user: UserProfile = Depends(require_moderator)):
    job = await jobs_repo.get_job(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    reason = await admin_repo.update_job_status(job_id, payload.status, payload.reason)
    logger.info("Job %s set to %s by %s", job_id, payload.status, user.uid)
    if job.posted_by_id and payload.status in ("approved", "rejected"):
        await notifications_repo.create_notification(
            job.posted_by_id,
            title=f"Job {payload.status}",
            message=f"Your job posting '{job.title}' was {payload.status}." + (f" Reason: {reason}" if reason else ""),
            type="JOB_APPROVED" if payload.status == "approved" else "JOB_REJECTED",
            link="/employer/posted-jobs",
        )
    return {"id": job_id, "status": payload.status, "moderation_reason": reason}


@router.patch("/companies/{company_id}/status", response_model=ModerationResp)
async def update_company_status_route(
    company_id: str, payload: CompanyStatusIn, user: UserProfile = Depends(require_moderator)
):
    company = await companies_repo.get_company(company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    final_status, reason = await admin_repo.update_company_status(company_id, payload.status, payload.reason)
    logger.info("Company %s set to %s by %s", company_id, final_status, user.uid)
    if final_status in ("approved", "rejected"):
        for admin_uid in company.admin_uids:
            await notifications_repo.create_notification(
                admin_uid,
                title=f"Company {final_status}",
                message=f"{company.name} was {final_status}." + (f" Reason: {reason}" if reason else ""),
                type="COMPANY_APPROVED" if final_status == "approved" else "COMPANY_REJECTED",
                link="/employer",
            )
    return {"id": company_id, "status": final_status, "moderation_reason": reason}


@router.patch("/users/{uid}/status")
async def update_user_status_route(uid: str, payload: UserStatusIn, user: UserProfile = Depends(require_moderator)):
    if uid == user.uid:
        raise HTTPException(status_code=400, detail="You cannot change your own status")
    target = await users_repo.get_user_profile(uid)
    if not target:
        raise HTTPException(status_code=404, detail="User not found")
    if target.role in ADMIN_LIKE_ROLES and user.role != "superAdmin":
        raise HTTPException(status_code=403, detail="Only a super admin can change staff account status")
    await admin_repo.update_user_status(uid, payload.status)
    logger.info("User %s set to %s by %s", uid, payload.status, user.uid)
    return {"uid": uid, "status": payload.status}


@router.put("/legal/{doc_id}", response_model=LegalDocument)
async def save_legal_route(doc_id: LegalDocumentId, payload: LegalDocumentIn, user: UserProfile = Depends(require_legal_editor)):
    return await save_legal_document(doc_id, payload.content)
