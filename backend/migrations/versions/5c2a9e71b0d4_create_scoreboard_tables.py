"""create teacher, team and score_entry tables

Revision ID: 5c2a9e71b0d4
Revises:
Create Date: 2025-09-15 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2a9e71b0d4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'teacher' not in existing_tables:
        op.create_table(
            'teacher',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('teacher_id', sa.String(length=64), nullable=False),
            sa.Column('password_hash', sa.String(length=256), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_teacher_teacher_id', 'teacher', ['teacher_id'], unique=True)

    if 'team' not in existing_tables:
        op.create_table(
            'team',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(length=128), nullable=False),
            sa.Column('members', sa.Text(), nullable=False),
            sa.Column('icon', sa.String(length=64), nullable=False),
            sa.Column('color', sa.String(length=32), nullable=False),
            sa.Column('total_score', sa.Integer(), nullable=False, server_default='0'),
            sa.PrimaryKeyConstraint('id'),
        )

    if 'score_entry' not in existing_tables:
        op.create_table(
            'score_entry',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('team_id', sa.Integer(), nullable=False),
            sa.Column('teacher_id', sa.Integer(), nullable=False),
            sa.Column('action', sa.Text(), nullable=False),
            sa.Column('points', sa.Integer(), nullable=False),
            sa.Column('timestamp', sa.DateTime(), nullable=False),
            sa.ForeignKeyConstraint(['team_id'], ['team.id']),
            sa.ForeignKeyConstraint(['teacher_id'], ['teacher.id']),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_score_entry_team_id', 'score_entry', ['team_id'])
        op.create_index('ix_score_entry_timestamp', 'score_entry', ['timestamp'])


def downgrade():
    op.drop_index('ix_score_entry_timestamp', table_name='score_entry')
    op.drop_index('ix_score_entry_team_id', table_name='score_entry')
    op.drop_table('score_entry')
    op.drop_index('ix_teacher_teacher_id', table_name='teacher')
    op.drop_table('teacher')
    op.drop_table('team')
