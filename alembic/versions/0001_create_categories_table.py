"""create categories table

Revision ID: 0001
Revises:
Create Date: 2026-10-17 09:12:44.104512

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=100), nullable=False),
    )
    op.create_index('ix_categories_name', 'categories', ['name'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_categories_name', table_name='categories')
    op.drop_table('categories')
