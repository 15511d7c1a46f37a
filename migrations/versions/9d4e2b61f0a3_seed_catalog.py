"""seed_catalog

Revision ID: 9d4e2b61f0a3
Revises: 3c1f9a0d2b7e
Create Date: 2026-10-12 10:31:47.208113

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9d4e2b61f0a3"
down_revision: Union[str, Sequence[str], None] = "3c1f9a0d2b7e"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Utype 1 is assigned to every new profile
UTYPES = [
    (1, "Model"),
    (2, "Photographer"),
    (3, "Makeup Artist"),
    (4, "Stylist"),
]

FLAGS = [
    (1, "Nude"),
    (2, "Paid only"),
    (3, "Time for prints"),
    (4, "Will travel"),
]


def upgrade() -> None:
    """Seed the utype and flag catalogs."""
    utypes_table = sa.table(
        "utypes", sa.column("id", sa.Integer), sa.column("name", sa.String)
    )
    flags_table = sa.table(
        "flags", sa.column("id", sa.Integer), sa.column("name", sa.String)
    )

    op.bulk_insert(utypes_table, [{"id": i, "name": name} for i, name in UTYPES])
    op.bulk_insert(flags_table, [{"id": i, "name": name} for i, name in FLAGS])


def downgrade() -> None:
    """Remove seeded catalogs."""
    op.execute("DELETE FROM flags WHERE id IN (1, 2, 3, 4)")
    op.execute("DELETE FROM utypes WHERE id IN (1, 2, 3, 4)")
