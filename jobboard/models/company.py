# jobboard/models/company.py
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

CompanyStatus = Literal["pending", "approved", "rejected", "suspended", "deleted"]
# statuses that block employer actions
RESTRICTED_COMPANY_STATUSES = ("suspended", "deleted")

InvitationStatus = Literal["pending", "accepted", "declined"]


class CompanyProfileFields(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    banner_image_url: Optional[str] = None


class Company(CompanyProfileFields):
    id: str
    name: str
    admin_uids: List[str] = Field(default_factory=list)
    recruiter_uids: List[str] = Field(default_factory=list)
    status: CompanyStatus = "pending"
    moderation_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    # read-time aggregates for admin listings
    job_count: Optional[int] = None
    application_count: Optional[int] = None


class RecruiterInvitation(BaseModel):
    id: str
    company_id: str
    company_name: str = ""
    recruiter_email: str
    recruiter_name: str = ""
    status: InvitationStatus = "pending"
    created_at: Optional[datetime] = None
    accepted_at: Optional[datetime] = None
    user_id: Optional[str] = None
