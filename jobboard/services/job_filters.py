# jobboard/services/job_filters.py
"""
In-memory filtering of job listings and candidate profiles.

Both filters are conjunctive: an item is kept iff every active criterion
holds. Input order is preserved; callers sort before filtering.
"""
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from jobboard.models.filters import CandidateFilters, JobFilters
from jobboard.models.job import Job
from jobboard.models.user import UserProfile
from jobboard.repositories.common import now as utc_now

RECENT_ACTIVITY_DAYS = {"24h": 1, "7d": 7, "30d": 30}


def _contains(value: Optional[str], needle: str) -> bool:
    return bool(value) and needle in value.lower()


def _recent_cutoff(recent_activity: Optional[str], now: Optional[datetime]) -> Optional[datetime]:
    days = RECENT_ACTIVITY_DAYS.get(recent_activity or "any")
    if days is None:
        return None
    return (now or utc_now()) - timedelta(days=days)


def _matches_search(job: Job, term: str) -> bool:
    if not term:
        return True
    if any(_contains(s, term) for s in job.skills):
        return True
    return any(
        _contains(value, term)
        for value in (
            job.title,
            job.company,
            job.responsibilities,
            job.requirements,
            job.industry,
            job.department,
            job.role_designation,
            job.education_qualification,
            job.benefits,
        )
    )


def _matches_salary(job: Job, filters: JobFilters) -> bool:
    if filters.salary_min is None and filters.salary_max is None:
        return True
    if job.pay_transparency is False:
        return False
    if job.salary_min is None and job.salary_max is None:
        return False
    if filters.salary_min is not None and (job.salary_max is None or job.salary_max < filters.salary_min):
        return False
    if filters.salary_max is not None and (job.salary_min is None or job.salary_min > filters.salary_max):
        return False
    return True


def job_matches(job: Job, filters: JobFilters, now: Optional[datetime] = None) -> bool:
    term = filters.search_term.lower()
    if not _matches_search(job, term):
        return False

    location = filters.location.lower()
    if location and not _contains(job.location, location):
        return False

    role_type = (filters.role_type or "all").lower()
    if role_type != "all" and (job.type or "").lower() != role_type:
        return False

    if filters.is_remote and not job.is_remote:
        return False

    cutoff = _recent_cutoff(filters.recent_activity, now)
    if cutoff is not None:
        activity = job.updated_at or job.created_at or job.posted_date
        if activity is None or activity < cutoff:
            return False

    if filters.industry and not _contains(job.industry, filters.industry.lower()):
        return False

    level = (filters.experience_level or "all").lower()
    if level != "all" and (job.experience_level or "").lower() != level:
        return False

    if filters.min_experience_years is not None:
        if job.min_experience_years is None or job.min_experience_years < filters.min_experience_years:
            return False

    return _matches_salary(job, filters)


def filter_jobs(jobs: Iterable[Job], filters: JobFilters, now: Optional[datetime] = None) -> List[Job]:
    now = now or utc_now()
    return [job for job in jobs if job_matches(job, filters, now)]


def candidate_matches(candidate: UserProfile, filters: CandidateFilters, now: Optional[datetime] = None) -> bool:
    term = filters.search_term.lower()
    if term:
        texts = [candidate.name, candidate.headline, candidate.parsed_resume_text]
        texts += [e.description for e in candidate.experiences or []]
        texts += [e.job_role for e in candidate.experiences or []]
        if not (any(_contains(t, term) for t in texts) or any(_contains(s, term) for s in candidate.skills or [])):
            return False

    location = filters.location.lower()
    if location:
        places = list(candidate.preferred_locations or []) + [candidate.home_city]
        if not any(_contains(p, location) for p in places):
            return False

    if filters.notice_period and filters.notice_period != "all":
        if (candidate.notice_period or "").lower() != filters.notice_period.lower():
            return False

    if filters.job_search_status and filters.job_search_status != "all":
        if candidate.job_search_status != filters.job_search_status:
            return False

    expected = candidate.expected_ctc_value
    if filters.desired_salary_min is not None and (expected is None or expected < filters.desired_salary_min):
        return False
    if filters.desired_salary_max is not None and (expected is None or expected > filters.desired_salary_max):
        return False

    cutoff = _recent_cutoff(filters.recent_activity, now)
    if cutoff is not None:
        activity = candidate.last_active or candidate.updated_at
        if activity is None or activity < cutoff:
            return False

    if filters.min_experience_years is not None:
        years = candidate.total_years_experience
        if years is None or years < filters.min_experience_years:
            return False

    return True


def filter_candidates(
    candidates: Iterable[UserProfile], filters: CandidateFilters, now: Optional[datetime] = None
) -> List[UserProfile]:
    now = now or utc_now()
    return [c for c in candidates if candidate_matches(c, filters, now)]
