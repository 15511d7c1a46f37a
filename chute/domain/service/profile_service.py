"""Profile domain service."""

from typing import Optional

import logfire

from chute.domain.error import ValidationError
from chute.domain.model.profile import Flag, Profile, Utype
from chute.domain.repository import ProfileRepository
from chute.domain.value import FlagId, ProfileId, UtypeId, utcnow

from .base import Service


class ProfileService(Service):
    """Domain service for the profile directory and tag catalogs."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_id(self, profile_id: ProfileId) -> Profile:
        """Get profile by ID.

        Args:
            profile_id: Profile ID

        Returns:
            Profile with its utypes and flags

        Raises:
            NotFoundError: If profile not found
        """
        with logfire.span("profile_service.get_by_id", profile_id=profile_id):
            profile = await self.profile_repository.find_by_id(profile_id)
            return self._require(profile, "Profile", profile_id)

    async def list_utypes(self) -> list[Utype]:
        return await self.profile_repository.list_utypes()

    async def list_flags(self) -> list[Flag]:
        return await self.profile_repository.list_flags()

    async def update_profile(
        self,
        profile_id: ProfileId,
        name: Optional[str],
        email: Optional[str],
        phone: Optional[str],
        utype_ids: list[UtypeId],
        flag_ids: list[FlagId],
    ) -> Profile:
        """Replace the editable fields of a profile.

        Args:
            profile_id: Profile to update
            name: Display name
            email: Contact email
            phone: Contact phone
            utype_ids: At least one utype id
            flag_ids: Flag ids (may be empty)

        Returns:
            Updated profile

        Raises:
            NotFoundError: If profile not found
            ValidationError: If no utype is given or a tag id is unknown
        """
        with logfire.span("profile_service.update_profile", profile_id=profile_id):
            profile = await self.get_by_id(profile_id)

            utype_ids = list(dict.fromkeys(utype_ids))
            flag_ids = list(dict.fromkeys(flag_ids))
            if not utype_ids:
                raise ValidationError("A profile needs at least one utype.")
            utypes = await self.profile_repository.find_utypes(utype_ids)
            if len(utypes) != len(utype_ids):
                unknown = set(utype_ids) - {u.id for u in utypes}
                raise ValidationError(f"Unknown utype ids: {sorted(unknown)}")
            flags = await self.profile_repository.find_flags(flag_ids)
            if len(flags) != len(flag_ids):
                unknown = set(flag_ids) - {f.id for f in flags}
                raise ValidationError(f"Unknown flag ids: {sorted(unknown)}")

            updated = profile.evolve(
                name=name,
                email=email,
                phone=phone,
                utypes=utypes,
                flags=flags,
                updated_at=utcnow(),
            )
            saved = await self.profile_repository.save(updated)
            logfire.info(
                "Profile updated",
                profile_id=profile_id,
                utypes=len(utypes),
                flags=len(flags),
            )
            return saved
