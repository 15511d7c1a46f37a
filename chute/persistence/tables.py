"""SQLAlchemy table definitions for chute.

These table definitions are used with SQLAlchemy Core and the manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Sequence,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

profiles_id_seq = Sequence("profiles_id_seq", metadata=metadata)
credentials_id_seq = Sequence("credentials_id_seq", metadata=metadata)
freetimes_id_seq = Sequence("freetimes_id_seq", metadata=metadata)
photos_id_seq = Sequence("photos_id_seq", metadata=metadata)
invites_id_seq = Sequence("invites_id_seq", metadata=metadata)
messages_id_seq = Sequence("messages_id_seq", metadata=metadata)

# ============================================================================
# PROFILES TABLE (account root)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", Integer, profiles_id_seq, primary_key=True),
    Column("folder", String(255), nullable=False, unique=True),  # Photo area
    Column("name", String(255), nullable=True),
    Column("email", String(255), nullable=True),
    Column("phone", String(64), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TAG CATALOGS (seeded by migration)
# ============================================================================
utypes_table = Table(
    "utypes",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(64), nullable=False, unique=True),
)

flags_table = Table(
    "flags",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(64), nullable=False, unique=True),
)

profile_utypes_table = Table(
    "profile_utypes",
    metadata,
    Column(
        "profile_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "utype_id", Integer, ForeignKey("utypes.id", ondelete="RESTRICT"), primary_key=True
    ),
)

profile_flags_table = Table(
    "profile_flags",
    metadata,
    Column(
        "profile_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "flag_id", Integer, ForeignKey("flags.id", ondelete="RESTRICT"), primary_key=True
    ),
)

Index("idx_profile_utypes_utype_id", profile_utypes_table.c.utype_id)
Index("idx_profile_flags_flag_id", profile_flags_table.c.flag_id)

# ============================================================================
# CREDENTIALS TABLE
# ============================================================================
credentials_table = Table(
    "credentials",
    metadata,
    Column("id", Integer, credentials_id_seq, primary_key=True),
    Column(
        "profile_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("kind", String(16), nullable=False),  # 'named', 'anonymous'
    Column("username", String(64), nullable=True, unique=True),
    Column("digest", String(255), nullable=False),
    Column("display_name", String(255), nullable=False, server_default=""),
    Column("token", String(255), nullable=True, unique=True),
    Column("authorized", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    Column("last_auth_at", TIMESTAMP(timezone=False), nullable=True),
    CheckConstraint(
        "(kind = 'named') = (username IS NOT NULL)",
        name="username_matches_kind",
    ),
)

Index("idx_credentials_profile_id", credentials_table.c.profile_id)
# Anonymous digests double as the lookup key
Index(
    "uq_credentials_anonymous_digest",
    credentials_table.c.digest,
    unique=True,
    postgresql_where=credentials_table.c.kind == "anonymous",
)

# ============================================================================
# FREETIMES TABLE
# ============================================================================
freetimes_table = Table(
    "freetimes",
    metadata,
    Column("id", Integer, freetimes_id_seq, primary_key=True),
    Column(
        "profile_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("freestart", TIMESTAMP(timezone=False), nullable=False),
    Column("freeend", TIMESTAMP(timezone=False), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("profile_id", "freestart", name="uq_freetime_profile_start"),
    CheckConstraint("freeend > freestart", name="freeend_after_freestart"),
)

Index(
    "idx_freetimes_span", freetimes_table.c.freestart, freetimes_table.c.freeend
)

# ============================================================================
# PHOTOS TABLE (metadata only, blobs live elsewhere)
# ============================================================================
photos_table = Table(
    "photos",
    metadata,
    Column("id", Integer, photos_id_seq, primary_key=True),
    Column(
        "profile_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("href", Text, nullable=False),
    Column("caption", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
)

Index("idx_photos_profile_id", photos_table.c.profile_id)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", Integer, invites_id_seq, primary_key=True),
    Column(
        "organizer_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column("invitestart", TIMESTAMP(timezone=False), nullable=False),
    Column("inviteend", TIMESTAMP(timezone=False), nullable=True),
    Column("place", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "inviteend IS NULL OR inviteend > invitestart",
        name="inviteend_after_invitestart",
    ),
)

Index("idx_invites_organizer_id", invites_table.c.organizer_id)
Index("idx_invites_invitestart", invites_table.c.invitestart)

# ============================================================================
# ATTENDEES TABLE
# ============================================================================
attendees_table = Table(
    "attendees",
    metadata,
    Column(
        "invite_id", Integer, ForeignKey("invites.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "profile_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("status", String(16), nullable=False, server_default="Pending"),
    Column("position", Integer, nullable=False),  # Insertion order within the invite
    UniqueConstraint("invite_id", "profile_id", name="uq_attendee_invite_profile"),
    CheckConstraint(
        "status IN ('Pending', 'Accepted', 'Declined')", name="attendee_status_valid"
    ),
)

Index("idx_attendees_profile_id", attendees_table.c.profile_id)

# ============================================================================
# MESSAGES TABLE
# ============================================================================
messages_table = Table(
    "messages",
    metadata,
    Column("id", Integer, messages_id_seq, primary_key=True),
    Column(
        "invite_id", Integer, ForeignKey("invites.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id",
        Integer,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("body", Text, nullable=False, server_default=""),
    Column(
        "photo_id", Integer, ForeignKey("photos.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "sent_at", TIMESTAMP(timezone=False), nullable=False, server_default="NOW()"
    ),
)

Index("idx_messages_invite_id", messages_table.c.invite_id)
