"""initial schema: users, categories, events, participation requests, hits

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=250), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=254), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_categories_name'), 'categories', ['name'], unique=True)

    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=120), nullable=False),
        sa.Column('annotation', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=7000), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('initiator_id', sa.Integer(), nullable=False),
        sa.Column('event_date', sa.DateTime(), nullable=False),
        sa.Column('created_on', sa.DateTime(), nullable=False),
        sa.Column('published_on', sa.DateTime(), nullable=True),
        sa.Column('lat', sa.Float(), nullable=False),
        sa.Column('lon', sa.Float(), nullable=False),
        sa.Column('paid', sa.Boolean(), nullable=False),
        sa.Column('participant_limit', sa.Integer(), nullable=False),
        sa.Column('request_moderation', sa.Boolean(), nullable=False),
        sa.Column('state', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ),
        sa.ForeignKeyConstraint(['initiator_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_events_category_id'), 'events', ['category_id'], unique=False)
    op.create_index(op.f('ix_events_initiator_id'), 'events', ['initiator_id'], unique=False)
    op.create_index(op.f('ix_events_event_date'), 'events', ['event_date'], unique=False)
    op.create_index(op.f('ix_events_state'), 'events', ['state'], unique=False)

    op.create_table(
        'participation_requests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('requester_id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('created', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ),
        sa.ForeignKeyConstraint(['requester_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('requester_id', 'event_id', name='uq_requests_requester_event')
    )
    op.create_index(op.f('ix_participation_requests_requester_id'), 'participation_requests', ['requester_id'], unique=False)
    op.create_index(op.f('ix_participation_requests_event_id'), 'participation_requests', ['event_id'], unique=False)
    op.create_index(op.f('ix_participation_requests_status'), 'participation_requests', ['status'], unique=False)

    op.create_table(
        'hits',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('app', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('uri', sqlmodel.sql.sqltypes.AutoString(length=512), nullable=False),
        sa.Column('ip', sqlmodel.sql.sqltypes.AutoString(length=45), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_hits_uri'), 'hits', ['uri'], unique=False)
    op.create_index(op.f('ix_hits_timestamp'), 'hits', ['timestamp'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_hits_timestamp'), table_name='hits')
    op.drop_index(op.f('ix_hits_uri'), table_name='hits')
    op.drop_table('hits')
    op.drop_index(op.f('ix_participation_requests_status'), table_name='participation_requests')
    op.drop_index(op.f('ix_participation_requests_event_id'), table_name='participation_requests')
    op.drop_index(op.f('ix_participation_requests_requester_id'), table_name='participation_requests')
    op.drop_table('participation_requests')
    op.drop_index(op.f('ix_events_state'), table_name='events')
    op.drop_index(op.f('ix_events_event_date'), table_name='events')
    op.drop_index(op.f('ix_events_initiator_id'), table_name='events')
    op.drop_index(op.f('ix_events_category_id'), table_name='events')
    op.drop_table('events')
    op.drop_index(op.f('ix_categories_name'), table_name='categories')
    op.drop_table('categories')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
