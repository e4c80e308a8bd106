"""Profile service for staff account records."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import ConflictError, NotFoundError
from ..models.profile import Profile, ProfileRole
from ..schemas.profile import CreateProfileRequest, UpdateProfileRequest

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for staff profile operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_profiles(self) -> list[Profile]:
        """List all staff profiles, newest first."""
        stmt = select(Profile).order_by(Profile.created_at.desc(), Profile.email)
        result = await self.db.execute(stmt)
        return list(result.scalars())

    async def get_profile_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID, None when missing."""
        return await self.db.get(Profile, profile_id)

    async def get_profile_by_email(self, email: str) -> Optional[Profile]:
        """Get profile by email (case-insensitive), None when missing."""
        stmt = select(Profile).where(Profile.email == email.lower())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_profile_by_id_or_raise(self, profile_id: UUID) -> Profile:
        """
        Get profile by ID or raise NotFoundError.

        Raises:
            NotFoundError: If profile not found
        """
        profile = await self.get_profile_by_id(profile_id)
        if not profile:
            logger.warning("Profile not found", extra={"profile_id": str(profile_id)})
            raise NotFoundError(resource_type="profile", resource_id=str(profile_id))
        return profile

    async def get_role(self, profile_id: UUID) -> str:
        """Return the caller's role; callers without a profile row are employees."""
        profile = await self.get_profile_by_id(profile_id)
        if profile is None:
            return ProfileRole.EMPLOYEE.value
        return profile.role

    async def create_profile(self, request: CreateProfileRequest) -> Profile:
        """
        Register a staff profile.

        Args:
            request: Profile creation request

        Returns:
            Created profile entity

        Raises:
            ConflictError: If a profile with the same email or ID already exists
        """
        email = request.email.lower()
        existing = await self.get_profile_by_email(email)
        if existing:
            logger.warning(
                "Profile creation failed - email already registered",
                extra={"email": email, "existing_profile_id": str(existing.id)}
            )
            raise ConflictError(
                detail=f"A staff account for '{email}' already exists",
                conflicting_resource={"id": str(existing.id), "email": existing.email}
            )

        profile = Profile(
            email=email,
            name=request.name,
            phone=request.phone,
            role=request.role.value,
        )
        if request.id is not None:
            profile.id = request.id

        try:
            self.db.add(profile)
            await self.db.commit()
            await self.db.refresh(profile)
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(
                "Profile creation failed due to integrity constraint",
                extra={"email": email, "error": str(e)}
            )
            raise ConflictError(detail="Profile creation failed due to constraint violation")

        logger.info(
            "Profile created successfully",
            extra={"profile_id": str(profile.id), "email": profile.email, "role": profile.role}
        )

        return profile

    async def update_profile(self, request: UpdateProfileRequest) -> Profile:
        """
        Apply a partial update to a profile.

        Raises:
            NotFoundError: If profile not found
        """
        profile = await self.get_profile_by_id_or_raise(request.id)

        if request.name is not None:
            profile.name = request.name
        if "phone" in request.model_fields_set:
            profile.phone = request.phone
        if request.role is not None:
            profile.role = request.role.value

        await self.db.commit()
        await self.db.refresh(profile)

        logger.info(
            "Profile updated",
            extra={"profile_id": str(profile.id), "role": profile.role}
        )

        return profile

    async def delete_profile(self, profile_id: UUID) -> None:
        """
        Delete a staff profile.

        Raises:
            NotFoundError: If profile not found
        """
        profile = await self.get_profile_by_id_or_raise(profile_id)
        await self.db.delete(profile)
        await self.db.commit()

        logger.info("Profile deleted", extra={"profile_id": str(profile_id)})
