"""Create users, accommodations, leases and events tables

Revision ID: 20261018_000001
Revises: None
Create Date: 2026-10-18

The users table is normally owned by the user service; it is created here
so the service can run against a fresh database.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261018_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column(
            'role',
            sa.Enum('OWNER', 'TENANT', 'ADMIN', name='user_role', create_constraint=True),
            nullable=False
        ),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])

    op.create_table(
        'accommodations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('availability', sa.Boolean(), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id'], name='fk_accommodations_owner_id'),
    )
    op.create_index('ix_accommodations_owner_id', 'accommodations', ['owner_id'])
    op.create_index('ix_accommodations_availability', 'accommodations', ['availability'])

    op.create_table(
        'leases',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('accommodation_id', sa.Integer(), nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['accommodation_id'],
            ['accommodations.id'],
            name='fk_leases_accommodation_id'
        ),
        sa.ForeignKeyConstraint(['tenant_id'], ['users.id'], name='fk_leases_tenant_id'),
    )
    op.create_index('ix_leases_accommodation_id', 'leases', ['accommodation_id'])
    op.create_index('ix_leases_active', 'leases', ['active'])

    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('accommodation_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('starts_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['accommodation_id'],
            ['accommodations.id'],
            name='fk_events_accommodation_id'
        ),
    )
    op.create_index('ix_events_accommodation_id', 'events', ['accommodation_id'])


def downgrade() -> None:
    """Drop the tables."""
    op.drop_index('ix_events_accommodation_id', table_name='events')
    op.drop_table('events')
    op.drop_index('ix_leases_active', table_name='leases')
    op.drop_index('ix_leases_accommodation_id', table_name='leases')
    op.drop_table('leases')
    op.drop_index('ix_accommodations_availability', table_name='accommodations')
    op.drop_index('ix_accommodations_owner_id', table_name='accommodations')
    op.drop_table('accommodations')
    op.drop_index('ix_users_role', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
