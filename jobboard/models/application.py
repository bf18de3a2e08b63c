# jobboard/models/application.py
from datetime import datetime
from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field

ApplicationStatus = Literal[
    "Applied",
    "Reviewed",
    "Interviewing",
    "Offer Made",
    "Hired",
    "Rejected By Company",
    "Withdrawn by Applicant",
]

EMPLOYER_MANAGED_STATUSES = [
    "Applied",
    "Reviewed",
    "Interviewing",
    "Offer Made",
    "Hired",
    "Rejected By Company",
]


class ApplicationAnswer(BaseModel):
    question_id: str
    question_text: str = ""
    answer: Union[bool, str, List[str]]


class Application(BaseModel):
    id: str
    job_id: str
    job_title: str = ""
    applicant_id: str
    applicant_name: str = ""
    applicant_avatar_url: Optional[str] = None
    applicant_headline: Optional[str] = None
    company_id: Optional[str] = None
    posted_by_id: Optional[str] = None
    status: ApplicationStatus = "Applied"
    applied_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    employer_notes: Optional[str] = None
    answers: List[ApplicationAnswer] = Field(default_factory=list)


class ApplicationStats(BaseModel):
    total_applications: int = 0
    new_applications_last_7_days: int = 0
    applications_by_status: Dict[str, int] = Field(default_factory=dict)
