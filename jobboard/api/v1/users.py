# jobboard/api/v1/users.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from jobboard.api.deps import get_current_user, get_token_data
from jobboard.core.security import TokenData
from jobboard.models.content import Notification
from jobboard.models.filters import JobFilters
from jobboard.models.user import ProfileFields, SavedSearch, UserProfile, UserProfileCreate
from jobboard.repositories import notifications as notifications_repo
from jobboard.repositories import users as users_repo
from jobboard.services import job_seeker_actions

router = APIRouter()

# roles a user may pick for themselves; staff accounts are provisioned by admins
SELF_SERVICE_ROLES = ("jobSeeker", "employer")


class SaveSearchIn(BaseModel):
    name: str
    filters: JobFilters


@router.post("/users/me", response_model=UserProfile, status_code=201)
async def create_profile(payload: UserProfileCreate, td: TokenData = Depends(get_token_data)):
    if payload.role not in SELF_SERVICE_ROLES:
        raise HTTPException(status_code=403, detail="This role cannot be self-assigned")
    if await users_repo.get_user_profile(td.sub):
        raise HTTPException(status_code=409, detail="Profile already exists")
    return await users_repo.create_user_profile(td.sub, payload)


@router.get("/users/me", response_model=UserProfile)
async def get_me(user: UserProfile = Depends(get_current_user)):
    await users_repo.touch_last_active(user.uid)
    return user


@router.patch("/users/me", response_model=UserProfile)
async def update_me(payload: ProfileFields, user: UserProfile = Depends(get_current_user)):
    data = payload.model_dump(exclude_unset=True)
    if data:
        await users_repo.update_user_profile(user.uid, data)
    return await users_repo.get_user_profile(user.uid)


@router.put("/users/me/saved-jobs/{job_id}", status_code=204)
async def save_job_route(job_id: str, user: UserProfile = Depends(get_current_user)):
    await job_seeker_actions.save_job(user, job_id)


@router.delete("/users/me/saved-jobs/{job_id}", status_code=204)
async def unsave_job_route(job_id: str, user: UserProfile = Depends(get_current_user)):
    await job_seeker_actions.unsave_job(user, job_id)


@router.post("/users/me/saved-searches", response_model=SavedSearch, status_code=201)
async def save_search_route(payload: SaveSearchIn, user: UserProfile = Depends(get_current_user)):
    return await job_seeker_actions.save_search(user, payload.name, payload.filters)


@router.delete("/users/me/saved-searches/{search_id}", status_code=204)
async def delete_search_route(search_id: str, user: UserProfile = Depends(get_current_user)):
    await job_seeker_actions.delete_search(user, search_id)


@router.get("/users/me/notifications", response_model=List[Notification])
async def my_notifications(user: UserProfile = Depends(get_current_user)):
    return await notifications_repo.list_notifications(user.uid)


@router.post("/users/me/notifications/{notification_id}/read")
async def mark_notification_read(notification_id: str, user: UserProfile = Depends(get_current_user)):
    ok = await notifications_repo.mark_read(notification_id, user.uid)
    if not ok:
        raise HTTPException(status_code=404, detail="Notification not found")
    return {"read": True}
