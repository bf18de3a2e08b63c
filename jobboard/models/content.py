# jobboard/models/content.py
from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel

LegalDocumentId = Literal["privacyPolicy", "termsOfService"]

NotificationType = Literal[
    "NEW_APPLICATION",
    "APPLICATION_STATUS_UPDATE",
    "JOB_APPROVED",
    "JOB_REJECTED",
    "COMPANY_APPROVED",
    "COMPANY_REJECTED",
    "ADMIN_CONTENT_PENDING",
    "GENERIC_INFO",
]


class LegalDocument(BaseModel):
    id: str
    content: str = ""
    last_updated: Optional[datetime] = None


class Notification(BaseModel):
    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType = "GENERIC_INFO"
    link: Optional[str] = None
    is_read: bool = False
    created_at: Optional[datetime] = None


class PlatformStats(BaseModel):
    total_job_seekers: int = 0
    total_companies: int = 0
    total_jobs: int = 0
    approved_jobs: int = 0
    total_applications: int = 0
