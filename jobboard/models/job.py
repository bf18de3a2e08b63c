# jobboard/models/job.py
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

JobType = Literal["Full-time", "Part-time", "Contract", "Internship"]
JOB_TYPES = ["Full-time", "Part-time", "Contract", "Internship"]

JobExperienceLevel = Literal[
    "Entry-Level",
    "Mid-Level",
    "Senior-Level",
    "Lead",
    "Manager",
    "Executive",
]

JobStatus = Literal["pending", "approved", "rejected", "suspended"]

ScreeningQuestionType = Literal["text", "yesNo", "multipleChoice", "checkboxGroup"]


class ScreeningQuestion(BaseModel):
    id: str
    question_text: str
    type: ScreeningQuestionType = "text"
    options: Optional[List[str]] = None
    is_required: bool = False


class JobContent(BaseModel):
    """Posting content an employer writes."""
    title: str
    location: str = ""
    type: JobType = "Full-time"
    responsibilities: Optional[str] = None
    requirements: Optional[str] = None
    is_remote: bool = False
    skills: List[str] = Field(default_factory=list)
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    pay_transparency: Optional[bool] = None
    benefits: Optional[str] = None
    industry: str = ""
    department: str = ""
    role_designation: Optional[str] = None
    experience_level: JobExperienceLevel = "Entry-Level"
    min_experience_years: Optional[float] = None
    max_experience_years: Optional[float] = None
    education_qualification: Optional[str] = None
    application_deadline: Optional[datetime] = None
    screening_questions: List[ScreeningQuestion] = Field(default_factory=list)


class Job(JobContent):
    id: str
    company: str = ""
    company_id: Optional[str] = None
    company_logo_url: Optional[str] = None
    posted_by_id: Optional[str] = None
    posted_date: Optional[datetime] = None
    status: JobStatus = "pending"
    moderation_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JobWithApplicantCount(Job):
    applicant_count: int = 0
