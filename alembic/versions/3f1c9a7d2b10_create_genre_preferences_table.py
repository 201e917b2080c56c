"""create genre preferences table

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-10-17 10:12:44.518203
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'genre_preferences',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.BigInteger(), nullable=False),
        sa.Column('genre_id', sa.BigInteger(), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.UniqueConstraint('user_id', 'genre_id', name='uq_genre_preference_user_genre'),
    )
    op.create_index('ix_genre_preferences_user_id', 'genre_preferences', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_genre_preferences_user_id', table_name='genre_preferences')
    op.drop_table('genre_preferences')
