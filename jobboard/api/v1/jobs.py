# jobboard/api/v1/jobs.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from jobboard.api.deps import require_employer
from jobboard.models.filters import JobFilters
from jobboard.models.job import Job, JobContent
from jobboard.models.user import UserProfile
from jobboard.repositories import jobs as jobs_repo
from jobboard.services import employer_actions
from jobboard.services.job_filters import filter_jobs

router = APIRouter()


class SaveJobResp(BaseModel):
    id: str
    status: str = "pending"


@router.get("/jobs", response_model=List[Job])
async def list_jobs(filters: JobFilters = Depends()):
    """Approved jobs, newest first, narrowed by the filter query parameters."""
    jobs = await jobs_repo.get_approved_jobs(prefilter=filters)
    return filter_jobs(jobs, filters)


@router.get("/jobs/{job_id}", response_model=Job)
async def get_job_route(job_id: str):
    job = await jobs_repo.get_job(job_id)
    if not job or job.status != "approved":
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("/jobs", response_model=SaveJobResp, status_code=201)
async def post_job_route(payload: JobContent, user: UserProfile = Depends(require_employer)):
    job_id = await employer_actions.post_job(user, payload)
    return {"id": job_id}


@router.put("/jobs/{job_id}", response_model=SaveJobResp)
async def edit_job_route(job_id: str, payload: JobContent, user: UserProfile = Depends(require_employer)):
    await employer_actions.edit_job(user, job_id, payload)
    return {"id": job_id}


@router.get("/companies/{company_id}/jobs", response_model=List[Job])
async def company_jobs_route(company_id: str):
    return await jobs_repo.get_jobs_by_company(company_id)
