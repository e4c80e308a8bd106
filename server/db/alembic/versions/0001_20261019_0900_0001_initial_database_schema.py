"""Initial database schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    # Create accommodations table
    op.create_table('accommodations',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('contact', sa.String(length=64), nullable=True),
        sa.Column('details', sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('length(name) >= 2', name='ck_accommodation_name_length'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_accommodations_name'), 'accommodations', ['name'], unique=False)

    # Create rooms table
    op.create_table('rooms',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('accommodation_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('capacity', sa.Integer(), server_default=sa.text('2'), nullable=False),
        sa.Column('price', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint('capacity > 0', name='ck_room_capacity_positive'),
        sa.CheckConstraint('price >= 0', name='ck_room_price_non_negative'),
        sa.ForeignKeyConstraint(['accommodation_id'], ['accommodations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_rooms_accommodation_id'), 'rooms', ['accommodation_id'], unique=False)

    # Create tickets table
    op.create_table('tickets',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('price', sa.Integer(), server_default=sa.text('0'), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(name) >= 2', name='ck_ticket_name_length'),
        sa.CheckConstraint('price >= 0', name='ck_ticket_price_non_negative'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_tickets_name'), 'tickets', ['name'], unique=False)

    # Create reservations table
    op.create_table('reservations',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('reservation_type', sa.String(length=20), server_default='accommodation', nullable=False),
        sa.Column('customer_name', sa.String(length=128), nullable=False),
        sa.Column('phone', sa.String(length=32), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('headcount', sa.Integer(), server_default=sa.text('1'), nullable=False),
        sa.Column('accommodation_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('ticket_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('pickup_location', sa.String(length=255), nullable=True),
        sa.Column('pickup_time', sa.String(length=32), nullable=True),
        sa.Column('total_amount', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('deposit', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('balance', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), server_default='booked', nullable=False),
        *_timestamps(),
        sa.CheckConstraint('headcount > 0', name='ck_reservation_headcount_positive'),
        sa.CheckConstraint('total_amount >= 0', name='ck_reservation_total_non_negative'),
        sa.CheckConstraint('deposit >= 0', name='ck_reservation_deposit_non_negative'),
        sa.CheckConstraint('balance = total_amount - deposit', name='ck_reservation_balance'),
        sa.CheckConstraint("reservation_type IN ('accommodation', 'day')", name='ck_reservation_type_valid'),
        sa.CheckConstraint("status IN ('booked', 'completed', 'cancelled')", name='ck_reservation_status_valid'),
        sa.ForeignKeyConstraint(['accommodation_id'], ['accommodations.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['ticket_id'], ['tickets.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_reservations_reservation_type'), 'reservations', ['reservation_type'], unique=False)
    op.create_index(op.f('ix_reservations_customer_name'), 'reservations', ['customer_name'], unique=False)
    op.create_index(op.f('ix_reservations_date'), 'reservations', ['date'], unique=False)
    op.create_index(op.f('ix_reservations_accommodation_id'), 'reservations', ['accommodation_id'], unique=False)
    op.create_index(op.f('ix_reservations_ticket_id'), 'reservations', ['ticket_id'], unique=False)
    op.create_index(op.f('ix_reservations_status'), 'reservations', ['status'], unique=False)

    # Create sales table
    op.create_table('sales',
        sa.Column('id', postgresql.UUID(as_uuid=True), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('reservation_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('item_name', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('category', sa.String(length=20), server_default='other', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text("timezone('utc', now())"), nullable=False),
        sa.CheckConstraint('amount >= 0', name='ck_sale_amount_non_negative'),
        sa.CheckConstraint('length(item_name) >= 2', name='ck_sale_item_name_length'),
        sa.CheckConstraint("category IN ('ski', 'room', 'food', 'other')", name='ck_sale_category_valid'),
        sa.ForeignKeyConstraint(['reservation_id'], ['reservations.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_sales_reservation_id'), 'sales', ['reservation_id'], unique=False)
    op.create_index(op.f('ix_sales_category'), 'sales', ['category'], unique=False)
    op.create_index(op.f('ix_sales_created_at'), 'sales', ['created_at'], unique=False)

    # Create profiles table; ids are shared with the identity provider
    op.create_table('profiles',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=True),
        sa.Column('phone', sa.String(length=32), nullable=True),
        sa.Column('role', sa.String(length=20), server_default='employee', nullable=False),
        *_timestamps(),
        sa.CheckConstraint("role IN ('admin', 'employee')", name='ck_profile_role_valid'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email')
    )
    op.create_index(op.f('ix_profiles_email'), 'profiles', ['email'], unique=False)
    op.create_index(op.f('ix_profiles_role'), 'profiles', ['role'], unique=False)


def downgrade() -> None:
    """Downgrade database schema."""
    op.drop_table('profiles')
    op.drop_table('sales')
    op.drop_table('reservations')
    op.drop_table('tickets')
    op.drop_table('rooms')
    op.drop_table('accommodations')
