"""Invitation domain service."""

from datetime import datetime
from typing import Iterable

import logfire

from chute.domain.error import (
    ForbiddenError,
    InternalError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from chute.domain.model.invite import (
    AttendeeView,
    Invite,
    InviteAggregate,
    Message,
    MessageView,
)
from chute.domain.model.profile import Profile
from chute.domain.repository import (
    InviteRepository,
    PhotoRepository,
    ProfileRepository,
    TransactionManager,
)
from chute.domain.value import (
    AttendeeStatus,
    InviteId,
    PhotoId,
    ProfileId,
    to_naive_utc,
    utcnow,
)

from .base import Service


class InvitationService(Service):
    """Domain service for the invite workflow.

    Invite: active -> cancelled (terminal, idempotent).
    Attendee: Pending -> Accepted | Declined (both terminal).
    """

    def __init__(
        self,
        invite_repository: InviteRepository,
        profile_repository: ProfileRepository,
        photo_repository: PhotoRepository,
        transactions: TransactionManager,
    ) -> None:
        """Initialize invitation service.

        Args:
            invite_repository: Invite repository
            profile_repository: Profile repository
            photo_repository: Photo repository (ownership checks)
            transactions: Transaction scope for multi-row writes
        """
        self.invite_repository = invite_repository
        self.profile_repository = profile_repository
        self.photo_repository = photo_repository
        self.transactions = transactions

    async def create_invite(
        self,
        organizer_id: ProfileId,
        attendee_ids: list[ProfileId],
        start: datetime,
        end: datetime | None = None,
        place: str = "",
        message_body: str | None = None,
        message_photo_id: PhotoId | None = None,
    ) -> InviteAggregate:
        """Create an invite with Pending attendees and an optional first message.

        Everything is validated before the first write, and the writes share one
        transactional scope.

        Args:
            organizer_id: Profile sending the invite
            attendee_ids: Profiles invited (at least one)
            start: Start of the shoot
            end: Optional end, strictly after start
            place: Where to meet
            message_body: Optional first message
            message_photo_id: Optional photo for the first message

        Returns:
            The assembled invite

        Raises:
            ValidationError: For bad times, no attendees, the organizer listed
                as attendee, or a photo the organizer does not own
            NotFoundError: If an attendee id is not a profile
        """
        start = to_naive_utc(start)
        end = to_naive_utc(end) if end is not None else None
        if end is not None and not start < end:
            raise ValidationError(f"{end} is not after {start}")
        unique_ids = list(dict.fromkeys(attendee_ids))
        if not unique_ids:
            raise ValidationError("There must be at least one attendee for an invite.")
        if organizer_id in unique_ids:
            raise ValidationError("The organizer cannot attend their own invite.")

        with logfire.span(
            "invitation_service.create_invite",
            organizer_id=organizer_id,
            attendee_count=len(unique_ids),
        ):
            missing = await self._missing_profiles(unique_ids)
            if missing:
                logfire.warn("Unknown attendee", profile_id=missing[0])
                raise NotFoundError("Profile", str(missing[0]))
            has_message = message_body is not None or message_photo_id is not None
            if has_message:
                await self._check_message(organizer_id, message_body or "", message_photo_id)

            now = utcnow()
            async with self.transactions.atomic():
                invite = Invite(
                    id=await self.invite_repository.next_invite_id(),
                    organizer_id=organizer_id,
                    active=True,
                    start=start,
                    end=end,
                    place=place,
                    created_at=now,
                )
                await self.invite_repository.save(invite)
                await self.invite_repository.add_attendees(invite.id, unique_ids)
                if has_message:
                    await self._append_message(
                        invite.id, organizer_id, message_body or "", message_photo_id
                    )

            logfire.info(
                "Invite created",
                invite_id=invite.id,
                organizer_id=organizer_id,
                attendee_count=len(unique_ids),
            )
            return await self.assemble(invite)

    async def get_invite(self, invite_id: InviteId) -> InviteAggregate:
        """Assemble an invite fresh from the store.

        Raises:
            NotFoundError: If the invite does not exist
        """
        return await self.assemble(await self._get(invite_id))

    async def get_invite_row(self, invite_id: InviteId) -> Invite:
        """Load the invite row alone.

        Raises:
            NotFoundError: If the invite does not exist
        """
        return await self._get(invite_id)

    async def cancel(self, invite_id: InviteId) -> InviteAggregate:
        """Mark an invite cancelled. Cancelling again changes nothing.

        The caller is responsible for checking that the actor organizes it.

        Raises:
            NotFoundError: If the invite does not exist
        """
        with logfire.span("invitation_service.cancel", invite_id=invite_id):
            invite = await self._get(invite_id)
            if invite.active:
                await self.invite_repository.deactivate(invite_id)
                logfire.info("Invite cancelled", invite_id=invite_id)
            else:
                logfire.info("Invite already cancelled", invite_id=invite_id)
            return await self.assemble(invite.evolve(active=False))

    async def change_status(
        self, invite_id: InviteId, actor_id: ProfileId, status: AttendeeStatus
    ) -> InviteAggregate:
        """Answer an invite on the actor's own behalf.

        An actor who is not an attendee matches no row; that is accepted
        silently and the invite is returned unchanged.

        Raises:
            NotFoundError: If the invite does not exist
            InvalidTransitionError: If the target is Pending or the actor
                already gave a different answer
        """
        with logfire.span(
            "invitation_service.change_status",
            invite_id=invite_id,
            actor_id=actor_id,
            status=status.value,
        ):
            invite = await self._get(invite_id)
            if status is AttendeeStatus.PENDING:
                raise InvalidTransitionError("attendee", "answered", status.value)

            attendees = await self.invite_repository.find_attendees(invite_id)
            current = next(
                (a.status for a in attendees if a.profile_id == actor_id), None
            )
            if current is None:
                logfire.warn(
                    "Status change by non-attendee ignored",
                    invite_id=invite_id,
                    actor_id=actor_id,
                )
                return await self.assemble(invite)
            if current is status:
                return await self.assemble(invite)
            if current.is_terminal:
                raise InvalidTransitionError("attendee", current.value, status.value)

            updated = await self.invite_repository.update_attendee_status(
                invite_id, actor_id, status, expected=AttendeeStatus.PENDING
            )
            if updated == 0:
                # Answered by a concurrent request
                raise InvalidTransitionError("attendee", "answered", status.value)

            logfire.info(
                "Attendee status changed",
                invite_id=invite_id,
                actor_id=actor_id,
                status=status.value,
            )
            return await self.assemble(invite)

    async def add_attendees(
        self, invite_id: InviteId, actor_id: ProfileId, profile_ids: list[ProfileId]
    ) -> InviteAggregate:
        """Add attendees to an invite; profiles already attending are skipped.

        Raises:
            NotFoundError: If the invite does not exist
            ForbiddenError: If the actor is not the organizer
            ValidationError: If an id is not a profile or is the organizer
        """
        with logfire.span(
            "invitation_service.add_attendees",
            invite_id=invite_id,
            actor_id=actor_id,
            count=len(profile_ids),
        ):
            invite = await self._get(invite_id)
            if invite.organizer_id != actor_id:
                logfire.warn("Not the organizer", invite_id=invite_id, actor_id=actor_id)
                raise ForbiddenError("invite", str(invite_id), str(actor_id))

            unique_ids = list(dict.fromkeys(profile_ids))
            if invite.organizer_id in unique_ids:
                raise ValidationError("The organizer cannot attend their own invite.")
            missing = await self._missing_profiles(unique_ids)
            if missing:
                raise ValidationError(f"'{missing[0]}' is not a valid Profile id.")

            async with self.transactions.atomic():
                added = await self.invite_repository.add_attendees(invite_id, unique_ids)

            logfire.info(
                "Attendees added",
                invite_id=invite_id,
                requested=len(unique_ids),
                added=len(added),
            )
            return await self.assemble(invite)

    async def add_message(
        self,
        invite_id: InviteId,
        author_id: ProfileId,
        body: str,
        photo_id: PhotoId | None = None,
    ) -> InviteAggregate:
        """Append a message to an invite.

        Raises:
            NotFoundError: If the invite does not exist
            ValidationError: If the message is empty or the photo is not the
                author's own
        """
        with logfire.span(
            "invitation_service.add_message", invite_id=invite_id, author_id=author_id
        ):
            invite = await self._get(invite_id)
            await self._check_message(author_id, body, photo_id)
            message = await self._append_message(invite_id, author_id, body, photo_id)
            logfire.info(
                "Message added", invite_id=invite_id, message_id=message.id
            )
            return await self.assemble(invite)

    async def list_invites(
        self,
        profile_id: ProfileId,
        status: AttendeeStatus | None = None,
        since: datetime | None = None,
    ) -> list[InviteAggregate]:
        """List a profile's invites starting after ``since`` (date only).

        Without a status, the invites the profile organizes; with one, the
        invites where it attends with that status.
        """
        day = to_naive_utc(since or utcnow()).date()
        since = datetime.combine(day, datetime.min.time())
        if status is None:
            invites = await self.invite_repository.find_by_organizer(profile_id, since)
        else:
            invites = await self.invite_repository.find_by_attendee(
                profile_id, status, since
            )
        return [await self.assemble(invite) for invite in invites]

    async def assemble(self, invite: Invite) -> InviteAggregate:
        """Compose an invite with its attendees, messages and their profiles.

        All profiles are fetched in one batch.
        """
        attendees = await self.invite_repository.find_attendees(invite.id)
        messages = await self.invite_repository.find_messages(invite.id)

        wanted = {invite.organizer_id}
        wanted.update(a.profile_id for a in attendees)
        wanted.update(m.author_id for m in messages)
        profiles = {p.id: p for p in await self.profile_repository.find_by_ids(wanted)}

        def profile(profile_id: ProfileId) -> Profile:
            if profile_id not in profiles:
                raise InternalError(
                    f"invite {invite.id} references missing profile {profile_id}"
                )
            return profiles[profile_id]

        return InviteAggregate(
            invite=invite,
            organizer=profile(invite.organizer_id),
            attendees=[
                AttendeeView(profile=profile(a.profile_id), status=a.status)
                for a in attendees
            ],
            messages=[
                MessageView(message=m, author=profile(m.author_id)) for m in messages
            ],
        )

    async def _get(self, invite_id: InviteId) -> Invite:
        invite = await self.invite_repository.find_by_id(invite_id)
        return self._require(invite, "Invite", invite_id)

    async def _missing_profiles(self, profile_ids: Iterable[ProfileId]) -> list[ProfileId]:
        profile_ids = list(profile_ids)
        found = {p.id for p in await self.profile_repository.find_by_ids(profile_ids)}
        return [pid for pid in profile_ids if pid not in found]

    async def _check_message(
        self, author_id: ProfileId, body: str, photo_id: PhotoId | None
    ) -> None:
        if photo_id is None:
            if not body.strip():
                raise ValidationError("A message needs a body or a photo.")
            return
        photo = await self.photo_repository.find_owned(photo_id, author_id)
        if photo is None:
            raise ValidationError(f"'{photo_id}' is not a valid Photo Id.")

    async def _append_message(
        self,
        invite_id: InviteId,
        author_id: ProfileId,
        body: str,
        photo_id: PhotoId | None,
    ) -> Message:
        message = Message(
            id=await self.invite_repository.next_message_id(),
            invite_id=invite_id,
            author_id=author_id,
            body=body,
            photo_id=photo_id,
            sent_at=utcnow(),
        )
        return await self.invite_repository.add_message(message)
