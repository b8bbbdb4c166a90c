"""Add history tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

AutoString = sqlmodel.sql.sqltypes.AutoString


def _owner_columns() -> list[sa.Column]:
    return [
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', AutoString(length=64), nullable=False),
        sa.Column('region_id', AutoString(length=32), nullable=False),
    ]


def _owner_indexes(table: str) -> None:
    op.create_index(op.f(f'ix_{table}_user_id'), table, ['user_id'], unique=False)
    op.create_index(op.f(f'ix_{table}_region_id'), table, ['region_id'], unique=False)


def upgrade() -> None:
    """Create check_ins, exercise_sessions and milestones."""
    op.create_table('check_ins', *_owner_columns(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('pain_level', sa.Integer(), nullable=False),
        sa.Column('function_level', sa.Integer(), nullable=False),
        sa.Column('confidence_level', sa.Integer(), nullable=False),
        sa.Column('sensations', sa.JSON(), nullable=False),
        sa.Column('mode_assigned', AutoString(length=16), nullable=False),
        sa.Column('notes', AutoString(length=1000), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    _owner_indexes('check_ins')
    op.create_index(op.f('ix_check_ins_date'), 'check_ins', ['date'], unique=False)

    op.create_table('exercise_sessions', *_owner_columns(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('exercises', sa.JSON(), nullable=False),
        sa.Column('total_duration', sa.Integer(), nullable=False),
        sa.Column('overall_difficulty', AutoString(length=16), nullable=False),
        sa.Column('pain_after', sa.Integer(), nullable=True),
        sa.Column('feeling_after', AutoString(length=16), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    _owner_indexes('exercise_sessions')
    op.create_index(op.f('ix_exercise_sessions_date'), 'exercise_sessions', ['date'], unique=False)

    op.create_table('milestones', *_owner_columns(),
        sa.Column('milestone_id', AutoString(length=32), nullable=False),
        sa.Column('type', AutoString(length=32), nullable=False),
        sa.Column('title', AutoString(length=100), nullable=False),
        sa.Column('description', AutoString(length=255), nullable=False),
        sa.Column('achieved_date', sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'region_id', 'milestone_id',
                            name='uq_milestone_user_region_id'))
    _owner_indexes('milestones')


def downgrade() -> None:
    """Drop the history tables."""
    for table in ('milestones', 'exercise_sessions', 'check_ins'):
        op.drop_table(table)
