# jobboard/services/formatting.py
"""
Display formatting and the plain-text renderings of profiles and jobs that
are handed to the AI flows as prompt input.
"""
import re
from typing import Iterable, List, Optional

from jobboard.models.job import Job
from jobboard.models.user import EducationEntry, ExperienceEntry, LanguageEntry, UserProfile


def _trim(number: str) -> str:
    if "." in number:
        number = number.rstrip("0").rstrip(".")
    return number


def format_currency_inr(amount: Optional[float]) -> str:
    """Indian short form: 4500 -> ₹4.5k, 750000 -> ₹7.5L, 25000000 -> ₹2.5 Cr."""
    if amount is None:
        return "N/A"
    try:
        value = float(amount)
    except (TypeError, ValueError):
        return "N/A"
    if value != value:  # NaN
        return "N/A"

    magnitude = abs(value)
    if magnitude >= 10_000_000:
        text = _trim(f"{value / 10_000_000:.2f}") + " Cr"
    elif magnitude >= 100_000:
        text = _trim(f"{value / 100_000:.2f}") + "L"
    elif magnitude >= 1000:
        text = _trim(f"{value / 1000:.1f}") + "k"
    else:
        text = str(int(value)) if value.is_integer() else str(value)
    return f"₹{text}"


def _or_na(value) -> str:
    return str(value) if value not in (None, "") else "N/A"


def format_experiences_for_ai(experiences: Optional[List[ExperienceEntry]]) -> str:
    if not experiences:
        return "No work experience listed."
    parts = []
    for exp in experiences:
        end = "Present" if exp.currently_working else _or_na(exp.end_date)
        ctc = f", Annual CTC: {format_currency_inr(exp.annual_ctc)}" if exp.annual_ctc else ""
        parts.append(
            f"Company: {_or_na(exp.company_name)}, Role: {_or_na(exp.job_role)}, "
            f"Duration: {_or_na(exp.start_date)} to {end}{ctc}. Description: {_or_na(exp.description)}"
        )
    return "; ".join(parts)


def format_educations_for_ai(educations: Optional[List[EducationEntry]]) -> str:
    if not educations:
        return "No education listed."
    return "; ".join(
        f"Level: {_or_na(edu.level)}, Degree: {_or_na(edu.degree_name)}, Institute: {_or_na(edu.institute_name)}, "
        f"Batch: {_or_na(edu.start_year)}-{_or_na(edu.end_year)}, Specialization: {_or_na(edu.specialization)}, "
        f"Course Type: {_or_na(edu.course_type)}. Description: {_or_na(edu.description)}"
        for edu in educations
    )


def format_languages_for_ai(languages: Optional[List[LanguageEntry]]) -> str:
    if not languages:
        return "No languages listed."

    def yn(flag: bool) -> str:
        return "Yes" if flag else "No"

    return ", ".join(
        f"{lang.language_name} (Proficiency: {lang.proficiency}, Read: {yn(lang.can_read)}, "
        f"Write: {yn(lang.can_write)}, Speak: {yn(lang.can_speak)})"
        for lang in languages
    )


def _humanize_status(status: str) -> str:
    # activelyLooking -> Actively Looking
    spaced = re.sub(r"([A-Z])", r" \1", status)
    return spaced[:1].upper() + spaced[1:]


def format_candidate_for_ai(c: UserProfile) -> str:
    lines = [f"Candidate UID: {c.uid}", f"Name: {c.name or 'N/A'}"]
    for label, value in (
        ("Email", c.email),
        ("Mobile", c.mobile_number),
        ("Headline", c.headline),
        ("Gender", c.gender),
        ("Date of Birth", c.date_of_birth),
        ("Home State", c.home_state),
        ("Home City", c.home_city),
    ):
        if value:
            lines.append(f"{label}: {value}")

    if c.total_years_experience is not None or c.total_months_experience is not None:
        lines.append(
            f"Total Experience: {c.total_years_experience or 0} years, {c.total_months_experience or 0} months"
        )
    if c.current_ctc_value is not None:
        suffix = "(Confidential)" if c.current_ctc_confidential else ""
        lines.append(f"Current Annual CTC (INR): {format_currency_inr(c.current_ctc_value)} {suffix}")
    if c.expected_ctc_value is not None:
        suffix = "(Negotiable)" if c.expected_ctc_negotiable else ""
        lines.append(f"Expected Annual CTC (INR): {format_currency_inr(c.expected_ctc_value)} {suffix}")
    if c.skills:
        lines.append(f"Skills: {', '.join(c.skills)}")
    if c.languages:
        lines.append(f"Languages: {format_languages_for_ai(c.languages)}")

    lines.append(f"Work Experience Summary:\n{format_experiences_for_ai(c.experiences)}")
    lines.append(f"Education Summary:\n{format_educations_for_ai(c.educations)}")

    if c.portfolio_url:
        lines.append(f"Portfolio URL: {c.portfolio_url}")
    if c.linkedin_url:
        lines.append(f"LinkedIn URL: {c.linkedin_url}")
    if c.preferred_locations:
        lines.append(f"Preferred Locations: {', '.join(c.preferred_locations)}")
    if c.job_search_status:
        lines.append(f"Current Job Search Status: {_humanize_status(c.job_search_status)}")
    if c.notice_period:
        lines.append(f"Notice Period: {c.notice_period}")
    if c.parsed_resume_text:
        lines.append(f"\n--- Additional Resume Summary (from parsed document) ---\n{c.parsed_resume_text}")
    return "\n".join(lines).strip()


def format_candidates_for_ai(candidates: Iterable[UserProfile]) -> str:
    return "\n\n---\n\n".join(format_candidate_for_ai(c) for c in candidates)


def format_job_seeker_profile(user: UserProfile) -> str:
    """Profile text the job matcher reads for the signed-in job seeker."""
    lines = [f"Name: {user.name}", f"Email: {user.email or 'N/A'}"]
    if user.headline:
        lines.append(f"Headline: {user.headline}")
    if user.skills:
        lines.append(f"Skills: {', '.join(user.skills)}")
    if user.experiences:
        lines.append(f"Experience:\n{format_experiences_for_ai(user.experiences)}")
    if user.educations:
        lines.append(f"Education:\n{format_educations_for_ai(user.educations)}")
    if user.portfolio_url:
        lines.append(f"Portfolio: {user.portfolio_url}")
    if user.linkedin_url:
        lines.append(f"LinkedIn: {user.linkedin_url}")
    if user.preferred_locations:
        lines.append(f"Preferred Locations: {', '.join(user.preferred_locations)}")
    if user.job_search_status:
        lines.append(f"Job Search Status: {user.job_search_status}")
    if user.expected_ctc_value is not None:
        lines.append(f"Expected Salary: {format_currency_inr(user.expected_ctc_value)}")
    if user.parsed_resume_text:
        lines.append(f"\n--- Resume Summary (additional context) ---\n{user.parsed_resume_text}")
    return "\n".join(lines).strip()


def _salary_range(job: Job) -> str:
    if job.pay_transparency is False or (job.salary_min is None and job.salary_max is None):
        return "N/A"
    low = format_currency_inr(job.salary_min) if job.salary_min is not None else ""
    high = format_currency_inr(job.salary_max) if job.salary_max is not None else ""
    return f"{low} - {high}".strip(" -")


def format_jobs_for_ai(jobs: Iterable[Job]) -> str:
    blocks = []
    for job in jobs:
        description = "\n".join(p for p in (job.responsibilities, job.requirements) if p)
        blocks.append(
            f"Job ID: {job.id}\n"
            f"Title: {job.title}\n"
            f"Company: {job.company}\n"
            f"Description: {description or 'N/A'}\n"
            f"Skills: {', '.join(job.skills)}\n"
            f"Location: {job.location}\n"
            f"Type: {job.type}\n"
            f"Remote: {'true' if job.is_remote else 'false'}\n"
            f"Experience Level: {job.experience_level}\n"
            f"Salary: {_salary_range(job)}"
        )
    return "\n---\n".join(blocks)


def format_job_for_candidate_matching(job: Job) -> str:
    """Job description text the candidate matcher compares profiles against."""
    parts = [f"Title: {job.title}", f"Company: {job.company}", f"Location: {job.location}"]
    if job.responsibilities:
        parts.append(f"Responsibilities:\n{job.responsibilities}")
    if job.requirements:
        parts.append(f"Requirements:\n{job.requirements}")
    if job.skills:
        parts.append(f"Skills: {', '.join(job.skills)}")
    if job.min_experience_years is not None:
        parts.append(f"Minimum Experience: {job.min_experience_years:g} years")
    if job.education_qualification:
        parts.append(f"Education: {job.education_qualification}")
    return "\n".join(parts)


def format_profile_for_summary(user: UserProfile) -> str:
    experiences = "; ".join(
        f"{e.job_role} at {e.company_name} ({e.start_date} - {'Present' if e.currently_working else e.end_date}): "
        f"{e.description}"
        for e in user.experiences or []
    )
    educations = "; ".join(
        f"{e.degree_name} in {e.specialization} from {e.institute_name}" for e in user.educations or []
    )
    return "\n".join(
        [
            f"Name: {user.name or 'N/A'}",
            f"Headline: {user.headline or 'N/A'}",
            f"Skills: {', '.join(user.skills or []) or 'N/A'}",
            f"Experiences: {experiences or 'N/A'}",
            f"Education: {educations or 'N/A'}",
            f"Total Experience: {user.total_years_experience or 0} years, {user.total_months_experience or 0} months",
        ]
    )
