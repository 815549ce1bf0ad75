"""Profile API routes."""

from fastapi import APIRouter, Depends, Request, Response

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.profile import ProfileResponse, ProfileUpdate
from core.config import settings
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get(
    "",
    response_model=ProfileResponse,
    summary="Get the current user's profile",
    responses={
        401: {"model": ErrorResponse, "description": "No valid session"},
        404: {"model": ErrorResponse, "description": "Account no longer exists"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Return id, name, email and avatar of the signed-in user."""
    profile = await service.get_profile(user.id)
    return ProfileResponse.model_validate(profile)


@router.put(
    "",
    response_model=MessageResponse,
    summary="Update the current user's profile",
    responses={
        400: {"model": ErrorResponse, "description": "Missing name or unusable password"},
        401: {"model": ErrorResponse, "description": "No valid session"},
        404: {"model": ErrorResponse, "description": "Account no longer exists"},
        500: {"model": ErrorResponse, "description": "Database error; nothing was changed"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    body: ProfileUpdate,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Replace name and avatar; rotate the password when one is supplied.

    A password change and the profile change are applied atomically.
    """
    await service.update_profile(
        user.id,
        name=body.name,
        password=body.password,
        image=body.image,
    )
    return MessageResponse(message="Profile updated successfully")


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete the current user's account",
    responses={
        401: {"model": ErrorResponse, "description": "No valid session"},
        500: {"model": ErrorResponse, "description": "Database error"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def delete_profile(
    request: Request,
    response: Response,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    """Irreversibly delete the account with its credentials and sessions."""
    await service.delete_profile(user.id)
    response.delete_cookie(settings.session_cookie_name)
    return MessageResponse(message="Account deleted successfully")
