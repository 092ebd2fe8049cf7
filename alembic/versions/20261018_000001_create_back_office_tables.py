"""Create back office tables

Revision ID: 20261018_000001
Revises: None
Create Date: 2026-10-18

This migration creates tenants, rooms, bills, payments, expenses and
electricity_readings.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261018_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PAYMENT_METHODS = ('cash', 'online', 'upi', 'bank_transfer', 'cheque')


def _payment_method(name: str) -> sa.Enum:
    return sa.Enum(*PAYMENT_METHODS, name=name, create_constraint=True)


def upgrade() -> None:
    """Create all back office tables."""
    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('mobile', sa.String(length=20), nullable=False),
        sa.Column('room_number', sa.String(length=20), nullable=False),
        sa.Column('joining_date', sa.Date(), nullable=False),
        sa.Column('monthly_rent', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('security_deposit', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('security_adjustment', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('electricity_joining_reading', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('last_electricity_reading', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column(
            'status',
            sa.Enum(
                'active', 'paid', 'due', 'adjust', 'departing', 'left', 'pending',
                'terminated', 'inactive', 'hold', 'prospective',
                name='tenant_status', create_constraint=True
            ),
            nullable=False,
            server_default='active'
        ),
        sa.Column('has_food', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            'category',
            sa.Enum('new', 'existing', 'no_security', name='tenant_category', create_constraint=True),
            nullable=True
        ),
        sa.Column('departure_date', sa.Date(), nullable=True),
        sa.Column(
            'stay_duration',
            sa.Enum('1', '2', '3', 'unknown', name='stay_duration', create_constraint=True),
            nullable=True
        ),
        sa.Column('notice_given', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notice_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_tenants_room_number', 'tenants', ['room_number'])
    op.create_index('ix_tenants_status', 'tenants', ['status'])

    op.create_table(
        'rooms',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('room_number', sa.String(length=20), nullable=False),
        sa.Column('floor', sa.Integer(), nullable=True),
        sa.Column(
            'room_type',
            sa.Enum('single', 'double', 'triple', 'quad', name='room_type', create_constraint=True),
            nullable=False,
            server_default='single'
        ),
        sa.Column('capacity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column(
            'status',
            sa.Enum('occupied', 'vacant', 'maintenance', name='room_status', create_constraint=True),
            nullable=False,
            server_default='vacant'
        ),
        sa.Column('tenant_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['tenant_id'],
            ['tenants.id'],
            name='fk_rooms_tenant_id',
            ondelete='SET NULL'
        ),
    )
    op.create_index('ix_rooms_room_number', 'rooms', ['room_number'], unique=True)
    op.create_index('ix_rooms_status', 'rooms', ['status'])

    op.create_table(
        'bills',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('billing_period', sa.String(length=7), nullable=False),
        sa.Column('electricity_reading', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('electricity_charges', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('adjustments', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('bill_date', sa.Date(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column(
            'payment_status',
            sa.Enum('unpaid', 'partial', 'paid', name='bill_status', create_constraint=True),
            nullable=False,
            server_default='unpaid'
        ),
        sa.Column('payment_date', sa.Date(), nullable=True),
        sa.Column('payment_method', _payment_method('bill_payment_method'), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['tenant_id'],
            ['tenants.id'],
            name='fk_bills_tenant_id',
            ondelete='CASCADE'
        ),
    )
    op.create_index('ix_bills_tenant_id', 'bills', ['tenant_id'])
    op.create_index('ix_bills_billing_period', 'bills', ['billing_period'])
    op.create_index('ix_bills_due_date', 'bills', ['due_date'])
    op.create_index('ix_bills_payment_status', 'bills', ['payment_status'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('bill_id', sa.Integer(), nullable=True),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('payment_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column('payment_method', _payment_method('payment_method'), nullable=False),
        sa.Column(
            'payment_status',
            sa.Enum('completed', 'pending', name='payment_record_status', create_constraint=True),
            nullable=False,
            server_default='completed'
        ),
        sa.Column('receipt_sent', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['bill_id'],
            ['bills.id'],
            name='fk_payments_bill_id',
            ondelete='NO ACTION'
        ),
        sa.ForeignKeyConstraint(
            ['tenant_id'],
            ['tenants.id'],
            name='fk_payments_tenant_id',
            ondelete='NO ACTION'
        ),
    )
    op.create_index('ix_payments_bill_id', 'payments', ['bill_id'])
    op.create_index('ix_payments_tenant_id', 'payments', ['tenant_id'])

    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column(
            'category',
            sa.Enum(
                'Maintenance & Repairs', 'Utilities', 'Cleaning Supplies', 'Security Services',
                'Food & Groceries', 'Staff Salaries', 'Other Expenses',
                name='expense_category', create_constraint=True
            ),
            nullable=False
        ),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('payment_method', _payment_method('expense_payment_method'), nullable=False),
        sa.Column('receipt_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_expenses_date', 'expenses', ['date'])
    op.create_index('ix_expenses_category', 'expenses', ['category'])

    op.create_table(
        'electricity_readings',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('room_number', sa.String(length=20), nullable=False),
        sa.Column('tenant_name', sa.String(length=200), nullable=True),
        sa.Column('current_reading', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('last_reading', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('reading_date', sa.Date(), nullable=False),
        sa.Column('units_consumed', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('is_billed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_electricity_readings_room_number', 'electricity_readings', ['room_number'])
    op.create_index('ix_electricity_readings_reading_date', 'electricity_readings', ['reading_date'])


def downgrade() -> None:
    """Drop all back office tables."""
    op.drop_table('electricity_readings')
    op.drop_table('expenses')
    op.drop_table('payments')
    op.drop_table('bills')
    op.drop_table('rooms')
    op.drop_table('tenants')
