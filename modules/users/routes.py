"""
User API endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import (
    User,
    UserProfile,
    SyncUserRequest,
    UpdateUserRequest,
    UpdateUserResponse,
)

router = APIRouter()

# Mounted at /api; keeps the path the frontend already calls.
update_router = APIRouter()


@router.get("/me", response_model=UserProfile)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """
    Get the signed-in user's profile, tier and company quota.
    """
    return await service.get_profile(user.id)


@router.post("/sync", response_model=User)
async def sync_user(
    request: SyncUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> User:
    """
    Create the local user record after the first Clerk sign-in.

    Calling it again returns the existing record.
    """
    return await service.sync_user(user, request)


@update_router.post("/updateUser", response_model=UpdateUserResponse)
async def update_user(
    request: UpdateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UpdateUserResponse:
    """
    Update the signed-in user's name, email and (via Clerk) password.
    """
    updated = await service.update_user(user.id, request)
    return UpdateUserResponse(user=updated)
