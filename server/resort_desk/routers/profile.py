"""Profile router for staff account management."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.dependencies import AdminProfile, CurrentProfile, CurrentUser
from ..core.exceptions import ProblemDetailsException
from ..models.profile import Profile as ProfileModel
from ..schemas.common import DeleteResponse, IdRequest
from ..schemas.profile import (
    CreateProfileRequest,
    CurrentProfile as CurrentProfileSchema,
    Profile,
    ProfileListResponse,
    UpdateProfileRequest,
)
from ..services.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/profile", tags=["profile"])

DB_DEPENDENCY = Depends(get_db)


def _convert_profile_to_schema(profile_model) -> Profile:
    """Convert profile model to schema."""
    return Profile(
        id=str(profile_model.id),
        email=profile_model.email,
        name=profile_model.name,
        phone=profile_model.phone,
        role=profile_model.role,
        created_at=profile_model.created_at
    )


@router.post("/list", response_model=ProfileListResponse)
async def list_profiles(
    db: AsyncSession = DB_DEPENDENCY,
    user: dict = CurrentUser
) -> JSONResponse:
    """List staff profiles, newest first."""
    profile_service = ProfileService(db)

    try:
        profiles = await profile_service.list_profiles()
        response_data = ProfileListResponse(items=[_convert_profile_to_schema(p) for p in profiles])
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error("Unexpected error listing profiles", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/me", response_model=CurrentProfileSchema)
async def get_me(
    user: dict = CurrentUser,
    profile: Optional[ProfileModel] = CurrentProfile,
    db: AsyncSession = DB_DEPENDENCY
) -> JSONResponse:
    """
    Return the caller's identity and role.

    Callers without a profile row are treated as employees.
    """
    try:
        role = await ProfileService(db).get_role(user["user_id"])
    except ProblemDetailsException:
        raise
    except Exception as e:
        logger.error("Unexpected error resolving role", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(status_code=500, detail="Internal server error") from e

    response_data = CurrentProfileSchema(
        id=str(profile.id) if profile else str(user["user_id"]),
        email=profile.email if profile else user.get("email"),
        name=profile.name if profile else None,
        role=role
    )

    return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))


@router.post("/create", response_model=Profile)
async def create_profile(
    request: CreateProfileRequest,
    db: AsyncSession = DB_DEPENDENCY,
    admin: ProfileModel = AdminProfile
) -> JSONResponse:
    """Register a staff profile. Admin only."""
    profile_service = ProfileService(db)

    try:
        profile = await profile_service.create_profile(request)
        response_data = _convert_profile_to_schema(profile)

        logger.info(
            "Staff profile registered",
            extra={"profile_id": str(profile.id), "registered_by": str(admin.id)}
        )

        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in profile creation",
            extra={"email": request.email, "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/update", response_model=Profile)
async def update_profile(
    request: UpdateProfileRequest,
    db: AsyncSession = DB_DEPENDENCY,
    admin: ProfileModel = AdminProfile
) -> JSONResponse:
    """Update a staff profile. Admin only."""
    profile_service = ProfileService(db)

    try:
        profile = await profile_service.update_profile(request)
        response_data = _convert_profile_to_schema(profile)
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in profile update",
            extra={"profile_id": str(request.id), "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e


@router.post("/delete", response_model=DeleteResponse)
async def delete_profile(
    request: IdRequest,
    db: AsyncSession = DB_DEPENDENCY,
    admin: ProfileModel = AdminProfile
) -> JSONResponse:
    """Delete a staff profile. Admin only."""
    profile_service = ProfileService(db)

    try:
        await profile_service.delete_profile(request.id)
        response_data = DeleteResponse(id=str(request.id))
        return JSONResponse(status_code=200, content=response_data.model_dump(mode="json"))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in profile deletion",
            extra={"profile_id": str(request.id), "error": str(e)},
            exc_info=True
        )
        raise HTTPException(status_code=500, detail="Internal server error") from e
