# jobboard/models/user.py
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from jobboard.models.filters import CandidateFilters, JobFilters, JobSearchStatus, NoticePeriod

UserRole = Literal[
    "jobSeeker",
    "employer",
    "admin",
    "superAdmin",
    "moderator",
    "supportAgent",
    "dataAnalyst",
    "complianceOfficer",
    "systemMonitor",
]

ADMIN_LIKE_ROLES = [
    "admin",
    "superAdmin",
    "moderator",
    "supportAgent",
    "dataAnalyst",
    "complianceOfficer",
    "systemMonitor",
]
# roles allowed to change moderation status of jobs, companies and users
MODERATOR_ROLES = ["admin", "superAdmin", "moderator"]
LEGAL_EDITOR_ROLES = ["admin", "superAdmin"]

UserStatus = Literal["active", "suspended", "deleted"]


class LanguageEntry(BaseModel):
    id: str
    language_name: str
    proficiency: Literal["Beginner", "Intermediate", "Advanced", "Native"] = "Intermediate"
    can_read: bool = False
    can_write: bool = False
    can_speak: bool = False


class ExperienceEntry(BaseModel):
    id: str
    company_name: str = ""
    job_role: str = ""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    currently_working: bool = False
    description: Optional[str] = None
    annual_ctc: Optional[float] = None


class EducationEntry(BaseModel):
    id: str
    level: Literal[
        "Post Graduate",
        "Graduate",
        "Schooling (XII)",
        "Schooling (X)",
        "Certification / Other",
    ] = "Graduate"
    degree_name: str = ""
    institute_name: str = ""
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    specialization: Optional[str] = None
    course_type: Optional[Literal["Full Time", "Part Time", "Distance Learning"]] = None
    is_most_relevant: Optional[bool] = None
    description: Optional[str] = None


class SavedSearch(BaseModel):
    id: str
    name: str
    filters: JobFilters
    created_at: datetime


class SavedCandidateSearch(BaseModel):
    id: str
    name: str
    filters: CandidateFilters
    created_at: datetime


class ProfileFields(BaseModel):
    """Fields a user may edit on their own profile."""
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    headline: Optional[str] = None
    skills: Optional[List[str]] = None
    parsed_resume_text: Optional[str] = None
    gender: Optional[Literal["Male", "Female", "Other", "Prefer not to say"]] = None
    date_of_birth: Optional[str] = None
    current_ctc_value: Optional[float] = None
    current_ctc_confidential: Optional[bool] = None
    expected_ctc_value: Optional[float] = None
    expected_ctc_negotiable: Optional[bool] = None
    home_state: Optional[str] = None
    home_city: Optional[str] = None
    total_years_experience: Optional[int] = None
    total_months_experience: Optional[int] = None
    experiences: Optional[List[ExperienceEntry]] = None
    educations: Optional[List[EducationEntry]] = None
    languages: Optional[List[LanguageEntry]] = None
    mobile_number: Optional[str] = None
    notice_period: Optional[NoticePeriod] = None
    portfolio_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    preferred_locations: Optional[List[str]] = None
    job_search_status: Optional[JobSearchStatus] = None
    is_profile_searchable: Optional[bool] = None


class UserProfile(ProfileFields):
    uid: str
    role: UserRole
    email: Optional[str] = None
    name: str = ""
    status: UserStatus = "active"
    applied_job_ids: List[str] = Field(default_factory=list)
    saved_job_ids: List[str] = Field(default_factory=list)
    saved_searches: List[SavedSearch] = Field(default_factory=list)
    saved_candidate_searches: List[SavedCandidateSearch] = Field(default_factory=list)
    company_id: Optional[str] = None
    is_company_admin: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_active: Optional[datetime] = None
    # read-time aggregate for admin listings
    jobs_applied_count: Optional[int] = None

    @property
    def is_admin_like(self) -> bool:
        return self.role in ADMIN_LIKE_ROLES


class UserProfileCreate(BaseModel):
    email: str
    name: str = ""
    role: UserRole = "jobSeeker"
    # employers registering a new company
    company_name: Optional[str] = None
