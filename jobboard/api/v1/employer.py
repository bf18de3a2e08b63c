# jobboard/api/v1/employer.py
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from jobboard.api.deps import require_employer
from jobboard.models.filters import CandidateFilters
from jobboard.models.user import SavedCandidateSearch, UserProfile
from jobboard.repositories import users as users_repo
from jobboard.services import employer_actions
from jobboard.services.job_filters import filter_candidates

router = APIRouter()


class SaveCandidateSearchIn(BaseModel):
    name: str
    filters: CandidateFilters


@router.get("/employer/candidates", response_model=List[UserProfile])
async def find_candidates(filters: CandidateFilters = Depends(), user: UserProfile = Depends(require_employer)):
    """Searchable job seekers, most recently updated first."""
    await employer_actions.get_active_company(user)
    candidates = await users_repo.get_searchable_candidates()
    return filter_candidates(candidates, filters)


@router.post("/employer/saved-searches", response_model=SavedCandidateSearch, status_code=201)
async def save_candidate_search_route(payload: SaveCandidateSearchIn, user: UserProfile = Depends(require_employer)):
    return await employer_actions.save_candidate_search(user, payload.name, payload.filters)


@router.delete("/employer/saved-searches/{search_id}", status_code=204)
async def delete_candidate_search_route(search_id: str, user: UserProfile = Depends(require_employer)):
    await employer_actions.delete_candidate_search(user, search_id)
