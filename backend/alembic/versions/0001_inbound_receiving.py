"""inbound receiving and putaway

Revision ID: 0001
Revises:
Create Date: 2026-10-16 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('skus',
    sa.Column('sku', sa.String(length=50), nullable=False),
    sa.Column('name', sa.String(length=255), nullable=False),
    sa.Column('bin_locations', postgresql.JSONB(astext_type=sa.Text()), server_default=sa.text("'[]'::jsonb"), nullable=False),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.PrimaryKeyConstraint('sku')
    )
    op.create_table('asns',
    sa.Column('asn_id', sa.String(length=50), nullable=False),
    sa.Column('supplier_id', sa.String(length=50), nullable=False),
    sa.Column('purchase_order_number', sa.String(length=100), nullable=False),
    sa.Column('status', sa.String(length=20), server_default='PENDING', nullable=False),
    sa.Column('expected_arrival_date', sa.Date(), nullable=False),
    sa.Column('actual_arrival_date', sa.Date(), nullable=True),
    sa.Column('carrier', sa.String(length=100), nullable=True),
    sa.Column('tracking_number', sa.String(length=100), nullable=True),
    sa.Column('shipment_notes', sa.Text(), nullable=True),
    sa.Column('created_by', sa.String(length=50), nullable=False),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.Column('received_at', sa.DateTime(timezone=True), nullable=True),
    sa.CheckConstraint(
        "status IN ('PENDING', 'IN_TRANSIT', 'PARTIALLY_RECEIVED', 'RECEIVED', 'CANCELLED')",
        name='ck_asns_status',
    ),
    sa.PrimaryKeyConstraint('asn_id'),
    sa.UniqueConstraint('supplier_id', 'purchase_order_number', name='asn_unique_po')
    )
    op.create_index('ix_asns_supplier_id', 'asns', ['supplier_id'])
    op.create_index('ix_asns_purchase_order_number', 'asns', ['purchase_order_number'])
    op.create_index('ix_asns_status', 'asns', ['status'])

    op.create_table('asn_line_items',
    sa.Column('line_item_id', sa.String(length=50), nullable=False),
    sa.Column('asn_id', sa.String(length=50), nullable=False),
    sa.Column('sku', sa.String(length=50), nullable=False),
    sa.Column('expected_quantity', sa.Integer(), nullable=False),
    sa.Column('received_quantity', sa.Integer(), server_default='0', nullable=False),
    sa.Column('unit_cost', sa.Numeric(precision=12, scale=2), nullable=False),
    sa.Column('lot_number', sa.String(length=100), nullable=True),
    sa.Column('expiration_date', sa.Date(), nullable=True),
    sa.Column('receiving_status', sa.String(length=20), server_default='PENDING', nullable=False),
    sa.Column('line_notes', sa.Text(), nullable=True),
    sa.CheckConstraint('expected_quantity > 0', name='ck_asn_line_expected_positive'),
    sa.CheckConstraint('received_quantity >= 0', name='ck_asn_line_received_non_negative'),
    sa.ForeignKeyConstraint(['asn_id'], ['asns.asn_id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('line_item_id'),
    sa.UniqueConstraint('asn_id', 'sku', name='asn_line_unique')
    )
    op.create_index('ix_asn_line_items_asn_id', 'asn_line_items', ['asn_id'])
    op.create_index('ix_asn_line_items_sku', 'asn_line_items', ['sku'])

    op.create_table('receipts',
    sa.Column('receipt_id', sa.String(length=50), nullable=False),
    sa.Column('asn_id', sa.String(length=50), nullable=True),
    sa.Column('receipt_date', sa.Date(), server_default=sa.text('CURRENT_DATE'), nullable=False),
    sa.Column('receipt_type', sa.String(length=20), server_default='PO', nullable=False),
    sa.Column('status', sa.String(length=20), server_default='RECEIVING', nullable=False),
    sa.Column('received_by', sa.String(length=50), nullable=False),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
    sa.ForeignKeyConstraint(['asn_id'], ['asns.asn_id'], ondelete='SET NULL'),
    sa.PrimaryKeyConstraint('receipt_id')
    )
    op.create_index('ix_receipts_asn_id', 'receipts', ['asn_id'])
    op.create_index('ix_receipts_receipt_type', 'receipts', ['receipt_type'])
    op.create_index('ix_receipts_status', 'receipts', ['status'])

    op.create_table('receipt_line_items',
    sa.Column('receipt_line_id', sa.String(length=50), nullable=False),
    sa.Column('receipt_id', sa.String(length=50), nullable=False),
    sa.Column('asn_line_item_id', sa.String(length=50), nullable=True),
    sa.Column('sku', sa.String(length=50), nullable=False),
    sa.Column('quantity_ordered', sa.Integer(), nullable=False),
    sa.Column('quantity_received', sa.Integer(), nullable=False),
    sa.Column('quantity_damaged', sa.Integer(), server_default='0', nullable=False),
    sa.Column('unit_cost', sa.Numeric(precision=12, scale=2), server_default='0', nullable=False),
    sa.Column('total_cost', sa.Numeric(precision=14, scale=2), server_default='0', nullable=False),
    sa.Column('quality_status', sa.String(length=20), server_default='PENDING', nullable=False),
    sa.Column('putaway_status', sa.String(length=20), server_default='PENDING', nullable=False),
    sa.Column('lot_number', sa.String(length=100), nullable=True),
    sa.Column('expiration_date', sa.Date(), nullable=True),
    sa.Column('notes', sa.Text(), nullable=True),
    sa.CheckConstraint('quantity_received > 0', name='ck_receipt_line_received_positive'),
    sa.CheckConstraint('quantity_damaged >= 0', name='ck_receipt_line_damaged_non_negative'),
    sa.ForeignKeyConstraint(['asn_line_item_id'], ['asn_line_items.line_item_id'], ondelete='SET NULL'),
    sa.ForeignKeyConstraint(['receipt_id'], ['receipts.receipt_id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('receipt_line_id')
    )
    op.create_index('ix_receipt_line_items_receipt_id', 'receipt_line_items', ['receipt_id'])
    op.create_index('ix_receipt_line_items_sku', 'receipt_line_items', ['sku'])
    op.create_index('ix_receipt_line_items_putaway_status', 'receipt_line_items', ['putaway_status'])

    op.create_table('putaway_tasks',
    sa.Column('putaway_task_id', sa.String(length=50), nullable=False),
    sa.Column('receipt_line_id', sa.String(length=50), nullable=False),
    sa.Column('sku', sa.String(length=50), nullable=False),
    sa.Column('quantity_to_putaway', sa.Integer(), nullable=False),
    sa.Column('quantity_putaway', sa.Integer(), server_default='0', nullable=False),
    sa.Column('target_bin_location', sa.String(length=50), nullable=False),
    sa.Column('status', sa.String(length=20), server_default='PENDING', nullable=False),
    sa.Column('assigned_to', sa.String(length=50), nullable=True),
    sa.Column('assigned_at', sa.DateTime(timezone=True), nullable=True),
    sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
    sa.Column('completed_by', sa.String(length=50), nullable=True),
    sa.Column('priority', sa.String(length=20), server_default='NORMAL', nullable=False),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.Column('notes', sa.Text(), nullable=True),
    sa.CheckConstraint('quantity_to_putaway > 0', name='ck_putaway_quantity_positive'),
    sa.CheckConstraint(
        'quantity_putaway >= 0 AND quantity_putaway <= quantity_to_putaway',
        name='ck_putaway_quantity_bounds',
    ),
    sa.ForeignKeyConstraint(['receipt_line_id'], ['receipt_line_items.receipt_line_id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('putaway_task_id')
    )
    op.create_index('ix_putaway_tasks_receipt_line_id', 'putaway_tasks', ['receipt_line_id'])
    op.create_index('ix_putaway_tasks_sku', 'putaway_tasks', ['sku'])
    op.create_index('ix_putaway_tasks_status', 'putaway_tasks', ['status'])
    op.create_index('ix_putaway_tasks_assigned_to', 'putaway_tasks', ['assigned_to'])
    op.create_index('ix_putaway_tasks_target_bin_location', 'putaway_tasks', ['target_bin_location'])


def downgrade() -> None:
    op.drop_table('putaway_tasks')
    op.drop_table('receipt_line_items')
    op.drop_table('receipts')
    op.drop_table('asn_line_items')
    op.drop_table('asns')
    op.drop_table('skus')
