# jobboard/services/job_seeker_actions.py
"""
Job-seeker side effects: applying, withdrawing, saved jobs and saved searches.
"""
import logging
from typing import List, Optional

from jobboard.core.errors import (
    AccountRestrictedError,
    ConflictError,
    InvalidStateError,
    NotFoundError,
    PermissionDeniedError,
)
from jobboard.models.application import Application, ApplicationAnswer
from jobboard.models.filters import JobFilters
from jobboard.models.job import Job
from jobboard.models.user import SavedSearch, UserProfile
from jobboard.repositories import applications as applications_repo
from jobboard.repositories import jobs as jobs_repo
from jobboard.repositories import notifications as notifications_repo
from jobboard.repositories import users as users_repo
from jobboard.repositories.common import new_id, now

logger = logging.getLogger(__name__)


def _ensure_job_seeker(user: UserProfile) -> None:
    if user.role != "jobSeeker":
        raise PermissionDeniedError("Only job seekers can perform this action.")
    if user.status == "suspended":
        raise AccountRestrictedError("Account suspended.")


def _is_answered(answer: Optional[ApplicationAnswer]) -> bool:
    if answer is None:
        return False
    value = answer.answer
    if isinstance(value, bool):
        return True
    if isinstance(value, str):
        return bool(value.strip())
    return len(value) > 0


def check_required_answers(job: Job, answers: List[ApplicationAnswer]) -> None:
    by_id = {a.question_id: a for a in answers}
    for question in job.screening_questions:
        if question.is_required and not _is_answered(by_id.get(question.id)):
            raise InvalidStateError(f"Please answer the required question: {question.question_text}")


async def apply_for_job(user: UserProfile, job_id: str, answers: Optional[List[ApplicationAnswer]] = None) -> Application:
    _ensure_job_seeker(user)
    answers = answers or []

    if await applications_repo.find_application(user.uid, job_id):
        raise ConflictError("Already applied or application process started.")

    job = await jobs_repo.get_job(job_id)
    if job is None:
        raise NotFoundError("Job not found.")
    if job.status != "approved":
        raise InvalidStateError("This job is not accepting applications.")
    check_required_answers(job, answers)

    # keep the question text alongside each answer for the employer view
    questions = {q.id: q.question_text for q in job.screening_questions}
    answers = [
        a if a.question_text else a.model_copy(update={"question_text": questions.get(a.question_id, "")})
        for a in answers
    ]

    application = await applications_repo.create_application(
        {
            "job_id": job.id,
            "job_title": job.title,
            "applicant_id": user.uid,
            "applicant_name": user.name,
            "applicant_avatar_url": user.avatar_url or "",
            "applicant_headline": user.headline or "",
            "company_id": job.company_id,
            "posted_by_id": job.posted_by_id,
            "status": "Applied",
            "answers": [a.model_dump() for a in answers],
        }
    )
    await users_repo.add_to_set(user.uid, "applied_job_ids", job.id)

    if job.posted_by_id:
        await notifications_repo.create_notification(
            job.posted_by_id,
            title="New application",
            message=f"{user.name or 'A candidate'} applied for {job.title}.",
            type="NEW_APPLICATION",
            link=f"/employer/jobs/{job.id}/applicants",
        )
    logger.info("User %s applied for job %s (application %s)", user.uid, job.id, application.id)
    return application


async def withdraw_application(user: UserProfile, job_id: str) -> Application:
    _ensure_job_seeker(user)
    application = await applications_repo.find_application(user.uid, job_id)
    if application is None:
        raise NotFoundError("Application not found.")
    if application.status != "Applied":
        raise InvalidStateError(f"Cannot withdraw an application with status '{application.status}'.")
    await applications_repo.update_application_status(application.id, "Withdrawn by Applicant")
    return application.model_copy(update={"status": "Withdrawn by Applicant"})


async def save_job(user: UserProfile, job_id: str) -> None:
    _ensure_job_seeker(user)
    if await jobs_repo.get_job(job_id) is None:
        raise NotFoundError("Job not found.")
    await users_repo.add_to_set(user.uid, "saved_job_ids", job_id)


async def unsave_job(user: UserProfile, job_id: str) -> None:
    _ensure_job_seeker(user)
    await users_repo.pull(user.uid, "saved_job_ids", job_id)


async def save_search(user: UserProfile, name: str, filters: JobFilters) -> SavedSearch:
    _ensure_job_seeker(user)
    if not name.strip():
        raise InvalidStateError("Search name is required.")
    search = SavedSearch(id=new_id(), name=name.strip(), filters=filters, created_at=now())
    await users_repo.add_to_set(user.uid, "saved_searches", search.model_dump())
    return search


async def delete_search(user: UserProfile, search_id: str) -> None:
    _ensure_job_seeker(user)
    await users_repo.pull(user.uid, "saved_searches", {"id": search_id})
