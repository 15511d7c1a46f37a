"""Strongly typed identifiers for chute domain entities.

Rows are keyed by database sequences, so identifiers are integers and sort in
creation order.
"""

from typing import NewType

ProfileId = NewType("ProfileId", int)
CredentialId = NewType("CredentialId", int)
FreetimeId = NewType("FreetimeId", int)
PhotoId = NewType("PhotoId", int)
InviteId = NewType("InviteId", int)
MessageId = NewType("MessageId", int)
UtypeId = NewType("UtypeId", int)
FlagId = NewType("FlagId", int)
