# jobboard/services/employer_actions.py
"""
Employer side effects. Every action requires the caller to belong to a
company that is not suspended or deleted.
"""
import logging
from typing import Any, Dict, Optional

from jobboard.core.errors import (
    AccountRestrictedError,
    ConflictError,
    InvalidStateError,
    NotFoundError,
    PermissionDeniedError,
)
from jobboard.models.application import EMPLOYER_MANAGED_STATUSES, Application
from jobboard.models.company import RESTRICTED_COMPANY_STATUSES, Company, RecruiterInvitation
from jobboard.models.filters import CandidateFilters
from jobboard.models.job import JobContent
from jobboard.models.user import SavedCandidateSearch, UserProfile
from jobboard.repositories import applications as applications_repo
from jobboard.repositories import companies as companies_repo
from jobboard.repositories import invitations as invitations_repo
from jobboard.repositories import jobs as jobs_repo
from jobboard.repositories import notifications as notifications_repo
from jobboard.repositories import users as users_repo
from jobboard.repositories.common import new_id, now

logger = logging.getLogger(__name__)


async def get_active_company(user: UserProfile) -> Company:
    if user.role != "employer":
        raise PermissionDeniedError("Only employers can perform this action.")
    if user.status == "suspended":
        raise AccountRestrictedError("Account suspended.")
    if not user.company_id:
        raise PermissionDeniedError("You are not associated with a company.")
    company = await companies_repo.get_company(user.company_id)
    if company is None:
        raise NotFoundError("Company not found.")
    if company.status in RESTRICTED_COMPANY_STATUSES:
        raise AccountRestrictedError(f"Company account is {company.status}. This action is disabled.")
    return company


async def _get_company_admin(user: UserProfile) -> Company:
    company = await get_active_company(user)
    if not user.is_company_admin and user.uid not in company.admin_uids:
        raise PermissionDeniedError("Only company admins can perform this action.")
    return company


async def update_application_status(
    user: UserProfile, application_id: str, status: str, employer_notes: Optional[str] = None
) -> Application:
    company = await get_active_company(user)
    application = await applications_repo.get_application(application_id)
    if application is None:
        raise NotFoundError("Application not found.")
    if application.company_id != company.id:
        raise PermissionDeniedError("This application belongs to another company.")
    if status not in EMPLOYER_MANAGED_STATUSES:
        raise InvalidStateError(f"Status '{status}' cannot be set by an employer.")

    await applications_repo.update_application_status(application_id, status, employer_notes)
    await notifications_repo.create_notification(
        application.applicant_id,
        title="Application status updated",
        message=f"Your application for {application.job_title} is now '{status}'.",
        type="APPLICATION_STATUS_UPDATE",
        link=f"/jobs/{application.job_id}",
    )
    update: Dict[str, Any] = {"status": status, "updated_at": now()}
    if employer_notes is not None:
        update["employer_notes"] = employer_notes
    return application.model_copy(update=update)


async def save_candidate_search(user: UserProfile, name: str, filters: CandidateFilters) -> SavedCandidateSearch:
    await get_active_company(user)
    if not name.strip():
        raise InvalidStateError("Search name is required.")
    search = SavedCandidateSearch(id=new_id(), name=name.strip(), filters=filters, created_at=now())
    await users_repo.add_to_set(user.uid, "saved_candidate_searches", search.model_dump())
    return search


async def delete_candidate_search(user: UserProfile, search_id: str) -> None:
    await get_active_company(user)
    await users_repo.pull(user.uid, "saved_candidate_searches", {"id": search_id})


def _job_payload(content: JobContent, company: Company) -> Dict[str, Any]:
    payload = content.model_dump()
    payload["company"] = company.name
    payload["company_id"] = company.id
    payload["company_logo_url"] = company.logo_url
    return payload


async def post_job(user: UserProfile, content: JobContent) -> str:
    company = await get_active_company(user)
    payload = _job_payload(content, company)
    payload["posted_by_id"] = user.uid
    job_id = await jobs_repo.save_job(payload)
    logger.info("Job %s posted by %s for company %s (pending review)", job_id, user.uid, company.id)
    return job_id


async def edit_job(user: UserProfile, job_id: str, content: JobContent) -> str:
    company = await get_active_company(user)
    job = await jobs_repo.get_job(job_id)
    if job is None:
        raise NotFoundError("Job not found.")
    if job.company_id != company.id:
        raise PermissionDeniedError("This job belongs to another company.")
    # edits go back to moderation
    payload = _job_payload(content, company)
    payload["status"] = "pending"
    payload["moderation_reason"] = None
    return await jobs_repo.save_job(payload, job_id=job_id)


async def invite_recruiter(user: UserProfile, email: str, name: str = "") -> RecruiterInvitation:
    company = await _get_company_admin(user)
    if await invitations_repo.find_pending_invitation(email, company.id):
        raise ConflictError(f"An invitation for {email} is already pending.")
    invitation = await invitations_repo.create_invitation(company.id, company.name, email, name)
    logger.info("Company %s invited %s", company.id, invitation.recruiter_email)
    return invitation


async def update_company(user: UserProfile, data: Dict[str, Any]) -> Company:
    company = await _get_company_admin(user)
    await companies_repo.update_company_profile(company.id, data)
    return await companies_repo.get_company(company.id)
