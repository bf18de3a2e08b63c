# jobboard/api/v1/companies.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr

from jobboard.api.deps import require_employer
from jobboard.models.company import Company, CompanyProfileFields, RecruiterInvitation
from jobboard.models.user import UserProfile
from jobboard.repositories import companies as companies_repo
from jobboard.repositories import invitations as invitations_repo
from jobboard.services import employer_actions

router = APIRouter()


class InviteRecruiterIn(BaseModel):
    email: EmailStr
    name: str = ""


@router.get("/companies", response_model=List[Company])
async def list_companies():
    return await companies_repo.get_approved_companies()


@router.put("/companies/me", response_model=Company)
async def update_my_company(payload: CompanyProfileFields, user: UserProfile = Depends(require_employer)):
    data = payload.model_dump(exclude_unset=True)
    if "name" in data and not (data["name"] or "").strip():
        raise HTTPException(status_code=422, detail="Company name cannot be empty")
    return await employer_actions.update_company(user, data)


@router.get("/companies/me/recruiters", response_model=List[UserProfile])
async def my_company_recruiters(user: UserProfile = Depends(require_employer)):
    if not user.company_id:
        raise HTTPException(status_code=404, detail="No company associated with this account")
    company = await companies_repo.get_company(user.company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return await companies_repo.get_company_recruiters(company.recruiter_uids)


@router.post("/companies/me/invitations", response_model=RecruiterInvitation, status_code=201)
async def invite_recruiter_route(payload: InviteRecruiterIn, user: UserProfile = Depends(require_employer)):
    return await employer_actions.invite_recruiter(user, payload.email, payload.name)


@router.get("/companies/me/invitations", response_model=List[RecruiterInvitation])
async def my_company_invitations(user: UserProfile = Depends(require_employer)):
    if not user.company_id:
        raise HTTPException(status_code=404, detail="No company associated with this account")
    return await invitations_repo.list_company_invitations(user.company_id)


@router.get("/companies/{company_id}", response_model=Company)
async def get_company_route(company_id: str):
    company = await companies_repo.get_company(company_id)
    if not company or company.status != "approved":
        raise HTTPException(status_code=404, detail="Company not found")
    return company
