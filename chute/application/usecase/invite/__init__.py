"""Invite use cases."""

from .add_attendees import AddAttendeesRequest, AddAttendeesUseCase
from .add_message import AddMessageRequest, AddMessageUseCase
from .cancel_invite import CancelInviteRequest, CancelInviteUseCase
from .change_status import ChangeStatusRequest, ChangeStatusUseCase
from .create_invite import CreateInviteRequest, CreateInviteUseCase, FirstMessage
from .get_invite import GetInviteRequest, GetInviteUseCase
from .list_invites import ListInvitesRequest, ListInvitesResponse, ListInvitesUseCase

__all__ = [
    "AddAttendeesRequest",
    "AddAttendeesUseCase",
    "AddMessageRequest",
    "AddMessageUseCase",
    "CancelInviteRequest",
    "CancelInviteUseCase",
    "ChangeStatusRequest",
    "ChangeStatusUseCase",
    "CreateInviteRequest",
    "CreateInviteUseCase",
    "FirstMessage",
    "GetInviteRequest",
    "GetInviteUseCase",
    "ListInvitesRequest",
    "ListInvitesResponse",
    "ListInvitesUseCase",
]
