"""Initial praxis tables

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

_ID = sqlmodel.sql.sqltypes.AutoString(length=64)


def upgrade() -> None:
    """Create history, plan and athlete tables."""
    op.create_table('workout_records', sa.Column('row_id', sa.Integer(), nullable=False),
                    sa.Column('id', _ID, nullable=False), sa.Column('user_id', _ID, nullable=False),
                    sa.Column('plan_day_id', _ID, nullable=False), sa.Column('date', sa.Date(), nullable=False),
                    sa.Column('payload', sa.JSON(), nullable=False),
                    sa.Column('created_at', sa.DateTime(), nullable=False), sa.PrimaryKeyConstraint('row_id'))
    op.create_index(op.f('ix_workout_records_id'), 'workout_records', ['id'], unique=True)
    op.create_index(op.f('ix_workout_records_user_id'), 'workout_records', ['user_id'], unique=False)
    op.create_index(op.f('ix_workout_records_date'), 'workout_records', ['date'], unique=False)

    op.create_table('progression_entries', sa.Column('id', sa.Integer(), nullable=False),
                    sa.Column('user_id', _ID, nullable=False), sa.Column('exercise_id', _ID, nullable=False),
                    sa.Column('session_id', _ID, nullable=False), sa.Column('block_id', _ID, nullable=False),
                    sa.Column('date', sa.Date(), nullable=False), sa.Column('weight', sa.Float(), nullable=False),
                    sa.Column('reps', sa.Integer(), nullable=False), sa.Column('sets', sa.Integer(), nullable=False),
                    sa.Column('rpe', sa.Float(), nullable=False), sa.Column('volume', sa.Float(), nullable=False),
                    sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_progression_entries_user_id'), 'progression_entries', ['user_id'], unique=False)
    op.create_index(op.f('ix_progression_entries_exercise_id'), 'progression_entries', ['exercise_id'],
                    unique=False)
    op.create_index(op.f('ix_progression_entries_date'), 'progression_entries', ['date'], unique=False)

    op.create_table('weekly_structures', sa.Column('id', sa.Integer(), nullable=False),
                    sa.Column('user_id', _ID, nullable=False), sa.Column('week_start', sa.Date(), nullable=False),
                    sa.Column('block_type', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
                    sa.Column('payload', sa.JSON(), nullable=False),
                    sa.Column('generated_at', sa.DateTime(), nullable=False), sa.PrimaryKeyConstraint('id'),
                    sa.UniqueConstraint('user_id', 'week_start', name='uq_weekly_structure_user_week'))
    op.create_index(op.f('ix_weekly_structures_user_id'), 'weekly_structures', ['user_id'], unique=False)
    op.create_index(op.f('ix_weekly_structures_week_start'), 'weekly_structures', ['week_start'], unique=False)

    op.create_table('plan_days', sa.Column('id', _ID, nullable=False), sa.Column('user_id', _ID, nullable=False),
                    sa.Column('date', sa.Date(), nullable=False), sa.Column('payload', sa.JSON(), nullable=False),
                    sa.Column('created_at', sa.DateTime(), nullable=False), sa.PrimaryKeyConstraint('id'),
                    sa.UniqueConstraint('user_id', 'date', name='uq_plan_day_user_date'))
    op.create_index(op.f('ix_plan_days_user_id'), 'plan_days', ['user_id'], unique=False)
    op.create_index(op.f('ix_plan_days_date'), 'plan_days', ['date'], unique=False)

    op.create_table('preferences', sa.Column('user_id', _ID, nullable=False),
                    sa.Column('payload', sa.JSON(), nullable=False),
                    sa.Column('updated_at', sa.DateTime(), nullable=False), sa.PrimaryKeyConstraint('user_id'))

    op.create_table('recovery_snapshots', sa.Column('id', sa.Integer(), nullable=False),
                    sa.Column('user_id', _ID, nullable=False), sa.Column('date', sa.Date(), nullable=False),
                    sa.Column('score', sa.Integer(), nullable=False), sa.Column('breakdown', sa.JSON(), nullable=False),
                    sa.Column('created_at', sa.DateTime(), nullable=False), sa.PrimaryKeyConstraint('id'),
                    sa.UniqueConstraint('user_id', 'date', name='uq_recovery_user_date'))
    op.create_index(op.f('ix_recovery_snapshots_user_id'), 'recovery_snapshots', ['user_id'], unique=False)
    op.create_index(op.f('ix_recovery_snapshots_date'), 'recovery_snapshots', ['date'], unique=False)


def downgrade() -> None:
    """Drop all praxis tables."""
    for table in ('recovery_snapshots', 'preferences', 'plan_days', 'weekly_structures', 'progression_entries',
                  'workout_records'):
        op.drop_table(table)
