"""initial_schema

Create the schema for Chute:
- Profiles with utype/flag catalogs and their link tables
- Credentials (named and anonymous) with session tokens
- Freetimes (availability intervals)
- Photos (metadata only)
- Invites with attendees and messages

Revision ID: 3c1f9a0d2b7e
Revises:
Create Date: 2026-10-12 10:14:03.512904

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a0d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SEQUENCES = [
    "profiles_id_seq",
    "credentials_id_seq",
    "freetimes_id_seq",
    "photos_id_seq",
    "invites_id_seq",
    "messages_id_seq",
]


def _id_column(sequence: str) -> sa.Column:
    return sa.Column(
        "id",
        sa.Integer(),
        server_default=sa.text(f"nextval('{sequence}')"),
        nullable=False,
    )


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=False),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    for sequence in SEQUENCES:
        op.execute(sa.schema.CreateSequence(sa.Sequence(sequence)))

    # ========================================================================
    # PROFILES table (account root)
    # ========================================================================
    op.create_table(
        "profiles",
        _id_column("profiles_id_seq"),
        sa.Column("folder", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(64), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("folder"),
    )

    # ========================================================================
    # TAG CATALOGS and link tables
    # ========================================================================
    op.create_table(
        "utypes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "flags",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_table(
        "profile_utypes",
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("utype_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["utype_id"], ["utypes.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("profile_id", "utype_id"),
    )
    op.create_index("idx_profile_utypes_utype_id", "profile_utypes", ["utype_id"])
    op.create_table(
        "profile_flags",
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("flag_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["flag_id"], ["flags.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("profile_id", "flag_id"),
    )
    op.create_index("idx_profile_flags_flag_id", "profile_flags", ["flag_id"])

    # ========================================================================
    # CREDENTIALS table
    # ========================================================================
    op.create_table(
        "credentials",
        _id_column("credentials_id_seq"),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("kind", sa.String(16), nullable=False),  # 'named', 'anonymous'
        sa.Column("username", sa.String(64), nullable=True),
        sa.Column("digest", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False, server_default=""),
        sa.Column("token", sa.String(255), nullable=True),
        sa.Column("authorized", sa.Boolean(), nullable=False, server_default="true"),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.Column("last_auth_at", sa.TIMESTAMP(timezone=False), nullable=True),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("token"),
        sa.CheckConstraint(
            "(kind = 'named') = (username IS NOT NULL)", name="username_matches_kind"
        ),
    )
    op.create_index("idx_credentials_profile_id", "credentials", ["profile_id"])
    op.create_index(
        "uq_credentials_anonymous_digest",
        "credentials",
        ["digest"],
        unique=True,
        postgresql_where=sa.text("kind = 'anonymous'"),
    )

    # ========================================================================
    # FREETIMES table
    # ========================================================================
    op.create_table(
        "freetimes",
        _id_column("freetimes_id_seq"),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("freestart", sa.TIMESTAMP(timezone=False), nullable=False),
        sa.Column("freeend", sa.TIMESTAMP(timezone=False), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("profile_id", "freestart", name="uq_freetime_profile_start"),
        sa.CheckConstraint("freeend > freestart", name="freeend_after_freestart"),
    )
    op.create_index("idx_freetimes_span", "freetimes", ["freestart", "freeend"])

    # ========================================================================
    # PHOTOS table
    # ========================================================================
    op.create_table(
        "photos",
        _id_column("photos_id_seq"),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("href", sa.Text(), nullable=False),
        sa.Column("caption", sa.Text(), nullable=False, server_default=""),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_photos_profile_id", "photos", ["profile_id"])

    # ========================================================================
    # INVITES, ATTENDEES and MESSAGES tables
    # ========================================================================
    op.create_table(
        "invites",
        _id_column("invites_id_seq"),
        sa.Column("organizer_id", sa.Integer(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("invitestart", sa.TIMESTAMP(timezone=False), nullable=False),
        sa.Column("inviteend", sa.TIMESTAMP(timezone=False), nullable=True),
        sa.Column("place", sa.Text(), nullable=False, server_default=""),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["organizer_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "inviteend IS NULL OR inviteend > invitestart",
            name="inviteend_after_invitestart",
        ),
    )
    op.create_index("idx_invites_organizer_id", "invites", ["organizer_id"])
    op.create_index("idx_invites_invitestart", "invites", ["invitestart"])

    op.create_table(
        "attendees",
        sa.Column("invite_id", sa.Integer(), nullable=False),
        sa.Column("profile_id", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="Pending"),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["invite_id"], ["invites.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("invite_id", "profile_id", name="uq_attendee_invite_profile"),
        sa.CheckConstraint(
            "status IN ('Pending', 'Accepted', 'Declined')",
            name="attendee_status_valid",
        ),
    )
    op.create_index("idx_attendees_profile_id", "attendees", ["profile_id"])

    op.create_table(
        "messages",
        _id_column("messages_id_seq"),
        sa.Column("invite_id", sa.Integer(), nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False, server_default=""),
        sa.Column("photo_id", sa.Integer(), nullable=True),
        _timestamp("sent_at"),
        sa.ForeignKeyConstraint(["invite_id"], ["invites.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["photo_id"], ["photos.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_messages_invite_id", "messages", ["invite_id"])


def downgrade() -> None:
    """Downgrade schema."""
    for table in [
        "messages",
        "attendees",
        "invites",
        "photos",
        "freetimes",
        "credentials",
        "profile_flags",
        "profile_utypes",
        "flags",
        "utypes",
        "profiles",
    ]:
        op.drop_table(table)

    for sequence in reversed(SEQUENCES):
        op.execute(sa.schema.DropSequence(sa.Sequence(sequence)))
