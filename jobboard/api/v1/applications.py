# jobboard/api/v1/applications.py
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from jobboard.api.deps import require_employer, require_job_seeker
from jobboard.models.application import Application, ApplicationAnswer, ApplicationStats
from jobboard.models.job import JobWithApplicantCount
from jobboard.models.user import UserProfile
from jobboard.repositories import applications as applications_repo
from jobboard.repositories import jobs as jobs_repo
from jobboard.services import employer_actions, job_seeker_actions

router = APIRouter()


class ApplyIn(BaseModel):
    answers: List[ApplicationAnswer] = Field(default_factory=list)


class StatusUpdateIn(BaseModel):
    status: str
    employer_notes: Optional[str] = None


def _company_id(user: UserProfile) -> str:
    if not user.company_id:
        raise HTTPException(status_code=404, detail="No company associated with this account")
    return user.company_id


@router.post("/jobs/{job_id}/apply", response_model=Application, status_code=201)
async def apply_route(job_id: str, payload: Optional[ApplyIn] = None, user: UserProfile = Depends(require_job_seeker)):
    answers = payload.answers if payload else []
    return await job_seeker_actions.apply_for_job(user, job_id, answers)


@router.post("/jobs/{job_id}/withdraw", response_model=Application)
async def withdraw_route(job_id: str, user: UserProfile = Depends(require_job_seeker)):
    return await job_seeker_actions.withdraw_application(user, job_id)


@router.get("/users/me/applications", response_model=Dict[str, Application])
async def my_applications(user: UserProfile = Depends(require_job_seeker)):
    """Applications keyed by job id."""
    return await applications_repo.get_user_applications(user.uid)


@router.get("/employer/jobs", response_model=List[JobWithApplicantCount])
async def employer_jobs(user: UserProfile = Depends(require_employer)):
    return await jobs_repo.get_company_jobs_for_dashboard(_company_id(user))


@router.get("/employer/jobs/{job_id}/applications", response_model=List[Application])
async def job_applications(job_id: str, user: UserProfile = Depends(require_employer)):
    job = await jobs_repo.get_job(job_id)
    if not job or job.company_id != _company_id(user):
        raise HTTPException(status_code=404, detail="Job not found")
    return await applications_repo.get_applications_for_job(job_id)


@router.patch("/applications/{application_id}/status", response_model=Application)
async def update_status_route(application_id: str, payload: StatusUpdateIn, user: UserProfile = Depends(require_employer)):
    return await employer_actions.update_application_status(
        user, application_id, payload.status, payload.employer_notes
    )


@router.get("/employer/stats", response_model=ApplicationStats)
async def employer_stats(user: UserProfile = Depends(require_employer)):
    return await applications_repo.get_company_application_stats(_company_id(user))


@router.get("/employer/applications/recent", response_model=List[Application])
async def recent_applications(count: int = Query(5, ge=1, le=50), user: UserProfile = Depends(require_employer)):
    return await applications_repo.get_recent_applications_by_company(_company_id(user), count)


@router.get("/employer/candidates/{applicant_id}/applications", response_model=List[Application])
async def candidate_applications(applicant_id: str, user: UserProfile = Depends(require_employer)):
    return await applications_repo.get_applications_for_candidate_by_company(applicant_id, _company_id(user))
