# jobboard/api/v1/ai.py
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from pydantic import BaseModel, Field

from jobboard.api.deps import get_current_user, require_employer, require_job_seeker
from jobboard.models.job import Job
from jobboard.models.user import UserProfile
from jobboard.repositories import jobs as jobs_repo
from jobboard.repositories import users as users_repo
from jobboard.services import employer_actions
from jobboard.services.data_uri import to_data_uri
from jobboard.services.flows.candidate_matching import (
    AIPoweredCandidateMatchingInput,
    AIPoweredCandidateMatchingOutput,
    ai_powered_candidate_matching,
)
from jobboard.services.flows.job_matching import (
    AIPoweredJobMatchingInput,
    AIPoweredJobMatchingOutput,
    ai_powered_job_matching,
)
from jobboard.services.flows.parse_job_description import (
    ParseJobDescriptionInput,
    ParseJobDescriptionOutput,
    parse_job_description_flow,
)
from jobboard.services.flows.parse_resume import ParseResumeInput, ParseResumeOutput, parse_resume_flow
from jobboard.services.flows.profile_summary import (
    GenerateProfileSummaryInput,
    GenerateProfileSummaryOutput,
    generate_profile_summary,
)
from jobboard.services.formatting import (
    format_candidates_for_ai,
    format_job_for_candidate_matching,
    format_job_seeker_profile,
    format_jobs_for_ai,
    format_profile_for_summary,
)

router = APIRouter(prefix="/ai")

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class JobMatchesResp(AIPoweredJobMatchingOutput):
    jobs: List[Job] = Field(default_factory=list)


class CandidateMatchesResp(AIPoweredCandidateMatchingOutput):
    candidates: List[UserProfile] = Field(default_factory=list)


class SummaryTargetIn(BaseModel):
    target_role_or_company: Optional[str] = None


@router.post("/parse-resume", response_model=ParseResumeOutput)
async def parse_resume_route(payload: ParseResumeInput, user: UserProfile = Depends(get_current_user)):
    return await parse_resume_flow(payload)


@router.post("/parse-resume/upload", response_model=ParseResumeOutput)
async def parse_resume_upload(file: UploadFile = File(...), user: UserProfile = Depends(get_current_user)):
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail="File too large")
    data_uri = to_data_uri(content, file.content_type or "text/plain")
    return await parse_resume_flow(ParseResumeInput(resume_data_uri=data_uri))


@router.post("/parse-job-description", response_model=ParseJobDescriptionOutput)
async def parse_job_description_route(payload: ParseJobDescriptionInput, user: UserProfile = Depends(require_employer)):
    return await parse_job_description_flow(payload)


@router.post("/job-matching", response_model=AIPoweredJobMatchingOutput)
async def job_matching_route(payload: AIPoweredJobMatchingInput, user: UserProfile = Depends(get_current_user)):
    return await ai_powered_job_matching(payload)


@router.post("/job-matching/me", response_model=JobMatchesResp)
async def my_job_matches(user: UserProfile = Depends(require_job_seeker)):
    """Match the signed-in job seeker against every approved job."""
    jobs = await jobs_repo.get_approved_jobs()
    if not jobs:
        raise HTTPException(status_code=404, detail="No approved jobs available for matching")
    result = await ai_powered_job_matching(
        AIPoweredJobMatchingInput(
            job_seeker_profile=format_job_seeker_profile(user),
            job_postings=format_jobs_for_ai(jobs),
        )
    )
    by_id = {j.id: j for j in jobs}
    matched = [by_id[i] for i in result.relevant_job_ids if i in by_id]
    return JobMatchesResp(**result.model_dump(), jobs=matched)


@router.post("/candidate-matching", response_model=AIPoweredCandidateMatchingOutput)
async def candidate_matching_route(payload: AIPoweredCandidateMatchingInput, user: UserProfile = Depends(require_employer)):
    return await ai_powered_candidate_matching(payload)


@router.post("/candidate-matching/job/{job_id}", response_model=CandidateMatchesResp)
async def candidate_matches_for_job(job_id: str, user: UserProfile = Depends(require_employer)):
    """Match searchable candidates against one of the employer's jobs."""
    company = await employer_actions.get_active_company(user)
    job = await jobs_repo.get_job(job_id)
    if not job or job.company_id != company.id:
        raise HTTPException(status_code=404, detail="Job not found")
    candidates = await users_repo.get_searchable_candidates()
    if not candidates:
        raise HTTPException(status_code=404, detail="No searchable candidates available")
    result = await ai_powered_candidate_matching(
        AIPoweredCandidateMatchingInput(
            job_description=format_job_for_candidate_matching(job),
            candidate_profiles=format_candidates_for_ai(candidates),
        )
    )
    by_uid = {c.uid: c for c in candidates}
    matched = [by_uid[i] for i in result.relevant_candidate_ids if i in by_uid]
    return CandidateMatchesResp(**result.model_dump(), candidates=matched)


@router.post("/profile-summary", response_model=GenerateProfileSummaryOutput)
async def profile_summary_route(payload: GenerateProfileSummaryInput, user: UserProfile = Depends(get_current_user)):
    return await generate_profile_summary(payload)


@router.post("/profile-summary/me", response_model=GenerateProfileSummaryOutput)
async def my_profile_summary(payload: Optional[SummaryTargetIn] = None, user: UserProfile = Depends(require_job_seeker)):
    target = payload.target_role_or_company if payload else None
    return await generate_profile_summary(
        GenerateProfileSummaryInput(
            job_seeker_profile_data=format_profile_for_summary(user),
            target_role_or_company=target,
        )
    )
