# jobboard/models/filters.py
from typing import Literal, Optional
from pydantic import BaseModel

RecentActivity = Literal["any", "24h", "7d", "30d"]

NoticePeriod = Literal[
    "Immediately Available",
    "1 Month",
    "2 Months",
    "3 Months",
    "4 Months",
    "5 Months",
    "6 Months",
    "More than 6 Months",
    "Flexible",
]

JobSearchStatus = Literal["activelyLooking", "openToOpportunities", "notLooking"]


class JobFilters(BaseModel):
    search_term: str = ""
    location: str = ""
    role_type: str = "all"
    is_remote: bool = False
    recent_activity: Optional[RecentActivity] = None
    industry: Optional[str] = None
    # a JobExperienceLevel or "all"
    experience_level: Optional[str] = None
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    min_experience_years: Optional[float] = None


class CandidateFilters(BaseModel):
    search_term: str = ""
    location: str = ""
    notice_period: Optional[str] = None
    job_search_status: Optional[str] = None
    desired_salary_min: Optional[float] = None
    desired_salary_max: Optional[float] = None
    recent_activity: Optional[RecentActivity] = None
    min_experience_years: Optional[float] = None
