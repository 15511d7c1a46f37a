"""Photo metadata.

Binary data lives in external blob storage; only the row used for ownership
checks is modelled here.
"""

from datetime import datetime

from pydantic import Field

from chute.domain.model.common import DomainModel
from chute.domain.value import PhotoId, ProfileId, utcnow


class Photo(DomainModel):
    """Uploaded photo owned by a profile."""

    id: PhotoId
    profile_id: ProfileId
    href: str
    caption: str = ""
    created_at: datetime = Field(default_factory=utcnow)
