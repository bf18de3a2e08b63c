# jobboard/api/deps.py
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobboard.core.security import JWTError, TokenData, decode_access_token
from jobboard.models.user import ADMIN_LIKE_ROLES, LEGAL_EDITOR_ROLES, MODERATOR_ROLES, UserProfile
from jobboard.repositories import users as users_repo

security = HTTPBearer()


async def get_token_data(credentials: HTTPAuthorizationCredentials = Depends(security)) -> TokenData:
    try:
        td = decode_access_token(credentials.credentials)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
    if not td.sub:
        raise HTTPException(status_code=401, detail="Invalid token")
    return td


async def get_current_user(td: TokenData = Depends(get_token_data)) -> UserProfile:
    user = await users_repo.get_user_profile(td.sub)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    if user.status == "deleted":
        raise HTTPException(status_code=403, detail="Account deleted")
    return user


def require_roles(*roles: str):
    async def _dep(user: UserProfile = Depends(get_current_user)) -> UserProfile:
        if user.role not in roles:
            raise HTTPException(status_code=403, detail="Insufficient permissions")
        return user
    return _dep


require_job_seeker = require_roles("jobSeeker")
require_employer = require_roles("employer")
require_admin = require_roles(*ADMIN_LIKE_ROLES)
require_moderator = require_roles(*MODERATOR_ROLES)
require_legal_editor = require_roles(*LEGAL_EDITOR_ROLES)
