"""Add baselines table

Revision ID: 002
Revises: 001
Create Date: 2026-10-18 14:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create baselines, one row per user and region."""
    op.create_table('baselines',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('region_id', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('pain_level', sa.Float(), nullable=False),
        sa.Column('function_level', sa.Float(), nullable=False),
        sa.Column('confidence_level', sa.Float(), nullable=False),
        sa.Column('recorded_date', sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'region_id', name='uq_baseline_user_region'))
    op.create_index(op.f('ix_baselines_user_id'), 'baselines', ['user_id'], unique=False)
    op.create_index(op.f('ix_baselines_region_id'), 'baselines', ['region_id'], unique=False)


def downgrade() -> None:
    """Drop baselines."""
    op.drop_index(op.f('ix_baselines_region_id'), table_name='baselines')
    op.drop_index(op.f('ix_baselines_user_id'), table_name='baselines')
    op.drop_table('baselines')
