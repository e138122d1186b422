"""create movement table

Revision ID: 5d1e7a3c9b20
Revises:
Create Date: 2025-10-02 18:20:41.118402

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5d1e7a3c9b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "movement",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("amount", sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column("type", sa.Enum("expense", "income", name="movementtype"), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("ix_movement_date", "movement", ["date"])
    op.create_index("ix_movement_category", "movement", ["category"])

def downgrade():
    op.drop_index("ix_movement_category", table_name="movement")
    op.drop_index("ix_movement_date", table_name="movement")
    op.drop_table("movement")
    sa.Enum(name="movementtype").drop(op.get_bind(), checkfirst=True)
