"""Initial marketplace schema

Revision ID: 3f1c2a9d7e01
Revises:
Create Date: 2026-10-18 10:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e01'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# SQLAlchemy Enum columns store member names
userrole_enum = sa.Enum('SELLER', 'BUYER', 'ADMIN', name='userrole')
useractivitystatus_enum = sa.Enum('NEW', 'BOOKED_VIEWING', 'BOOKED_WORKSPACE', name='useractivitystatus')
viewingstatus_enum = sa.Enum('PENDING', 'ACCEPTED', 'DECLINED', 'CANCELED', name='viewingstatus')
bookingstatus_enum = sa.Enum('PENDING', 'CONFIRMED', 'CANCELED', name='bookingstatus')
internalnotificationstatus_enum = sa.Enum(
    'VIEWING_REQUEST', 'VIEWING_ACCEPTED', 'VIEWING_DECLINED', name='internalnotificationstatus'
)


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('role', userrole_enum, nullable=False),
        sa.Column('activity_status', useractivitystatus_enum, nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_full_name'), 'users', ['full_name'], unique=False)

    op.create_table(
        'areas',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_areas_id'), 'areas', ['id'], unique=False)
    op.create_index(op.f('ix_areas_slug'), 'areas', ['slug'], unique=True)

    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('area_id', sa.Integer(), nullable=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=False),
        sa.Column('optional_address', sa.String(), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('town', sa.String(), nullable=False),
        sa.Column('postcode', sa.String(length=10), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('nearby', sa.JSON(), nullable=True),
        sa.Column('work_space_types', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['area_id'], ['areas.id']),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_locations_id'), 'locations', ['id'], unique=False)
    op.create_index(op.f('ix_locations_user_id'), 'locations', ['user_id'], unique=False)
    op.create_index(op.f('ix_locations_name'), 'locations', ['name'], unique=False)

    op.create_table(
        'workspaces',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=False),
        sa.Column('desk_type', sa.String(length=32), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('size', sa.Integer(), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('opens_from', sa.String(length=5), nullable=True),
        sa.Column('closes_at', sa.String(length=5), nullable=True),
        sa.Column('min_contract_length', sa.Integer(), nullable=True),
        sa.Column('available_from', sa.DateTime(), nullable=True),
        sa.Column('facilities', sa.JSON(), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_workspaces_id'), 'workspaces', ['id'], unique=False)
    op.create_index(op.f('ix_workspaces_location_id'), 'workspaces', ['location_id'], unique=False)

    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('workspace_id', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=False),
        sa.Column('status', bookingstatus_enum, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['workspace_id'], ['workspaces.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_bookings_id'), 'bookings', ['id'], unique=False)

    op.create_table(
        'viewings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.Column('workspace_id', sa.Integer(), nullable=True),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('end_time', sa.DateTime(), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('status', viewingstatus_enum, nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['workspace_id'], ['workspaces.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_viewings_id'), 'viewings', ['id'], unique=False)
    op.create_index(op.f('ix_viewings_user_id'), 'viewings', ['user_id'], unique=False)
    op.create_index(op.f('ix_viewings_workspace_id'), 'viewings', ['workspace_id'], unique=False)

    op.create_table(
        'internal_notifications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('viewing_id', sa.Integer(), nullable=False),
        sa.Column('status', internalnotificationstatus_enum, nullable=False),
        sa.Column('params', sa.JSON(), nullable=True),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('is_actioned', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['viewing_id'], ['viewings.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('viewing_id'),
    )
    op.create_index(op.f('ix_internal_notifications_id'), 'internal_notifications', ['id'], unique=False)
    op.create_index(op.f('ix_internal_notifications_user_id'), 'internal_notifications', ['user_id'], unique=False)

    op.create_table(
        'push_notifications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('params', sa.JSON(), nullable=True),
        sa.Column('related_id', sa.Integer(), nullable=True),
        sa.Column('is_read', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_push_notifications_id'), 'push_notifications', ['id'], unique=False)
    op.create_index(op.f('ix_push_notifications_user_id'), 'push_notifications', ['user_id'], unique=False)
    op.create_index(op.f('ix_push_notifications_type'), 'push_notifications', ['type'], unique=False)
    op.create_index(op.f('ix_push_notifications_related_id'), 'push_notifications', ['related_id'], unique=False)


def downgrade() -> None:
    op.drop_table('push_notifications')
    op.drop_table('internal_notifications')
    op.drop_table('viewings')
    op.drop_table('bookings')
    op.drop_table('workspaces')
    op.drop_table('locations')
    op.drop_table('areas')
    op.drop_table('users')

    bind = op.get_bind()
    for enum_type in (
        internalnotificationstatus_enum,
        bookingstatus_enum,
        viewingstatus_enum,
        useractivitystatus_enum,
        userrole_enum,
    ):
        enum_type.drop(bind, checkfirst=True)
