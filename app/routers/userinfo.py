"""
Userinfo router - profile of the Google account behind the bearer token.
"""

from fastapi import APIRouter, Depends

from app.deps import get_userinfo
from app.environments.base import ProviderError, UserinfoService
from app.routers.errors import build_http_error
from app.schemas.user import User

router = APIRouter(prefix="/api/v1/signin", tags=["userinfo"])


@router.get("/userinfo", response_model=User)
async def get_user(userinfo: UserinfoService = Depends(get_userinfo)):
    try:
        return await userinfo.get()
    except ProviderError as e:
        raise build_http_error(e, "error occurred while fetching user")
