"""create member, semester, event, attendance and absence_request tables

Revision ID: 5c1d2e7f9a10
Revises:
Create Date: 2026-10-19 13:40:12.418205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5c1d2e7f9a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'member',
        sa.Column('email', sa.String(length=128), primary_key=True),
        sa.Column('first_name', sa.String(length=64), nullable=False),
        sa.Column('last_name', sa.String(length=64), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('member', 'officer', name='member_role'), nullable=False),
    )
    op.create_index('ix_member_email', 'member', ['email'])

    op.create_table(
        'semester',
        sa.Column('name', sa.String(length=32), primary_key=True),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('gig_requirement', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('current', sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        'active_semester',
        sa.Column('member', sa.String(length=128), sa.ForeignKey('member.email'), primary_key=True),
        sa.Column('semester', sa.String(length=32), sa.ForeignKey('semester.name'), primary_key=True),
        sa.Column('enrollment', sa.Enum('class', 'club', name='enrollment'), nullable=False),
        sa.Column('section', sa.String(length=16), nullable=True),
    )

    # type stays a plain string; unknown values are rejected when graded
    op.create_table(
        'event',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('semester', sa.String(length=32), sa.ForeignKey('semester.name'), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('call_time', sa.DateTime(), nullable=False),
        sa.Column('release_time', sa.DateTime(), nullable=True),
        sa.Column('points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('comments', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('gig_count', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('default_attend', sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index('ix_event_id', 'event', ['id'])
    op.create_index('ix_event_semester', 'event', ['semester'])
    op.create_index('ix_event_call_time', 'event', ['call_time'])

    op.create_table(
        'attendance',
        sa.Column('member', sa.String(length=128), sa.ForeignKey('member.email'), primary_key=True),
        sa.Column('event', sa.Integer(), sa.ForeignKey('event.id'), primary_key=True),
        sa.Column('should_attend', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('did_attend', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('confirmed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('minutes_late', sa.Integer(), nullable=False, server_default='0'),
    )

    op.create_table(
        'absence_request',
        sa.Column('member', sa.String(length=128), sa.ForeignKey('member.email'), primary_key=True),
        sa.Column('event', sa.Integer(), sa.ForeignKey('event.id'), primary_key=True),
        sa.Column('time', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('state', sa.Enum('pending', 'approved', 'denied', name='absence_request_state'),
                  nullable=False, server_default='pending'),
    )


def downgrade() -> None:
    op.drop_table('absence_request')
    op.drop_table('attendance')
    op.drop_index('ix_event_call_time', table_name='event')
    op.drop_index('ix_event_semester', table_name='event')
    op.drop_index('ix_event_id', table_name='event')
    op.drop_table('event')
    op.drop_table('active_semester')
    op.drop_table('semester')
    op.drop_index('ix_member_email', table_name='member')
    op.drop_table('member')
