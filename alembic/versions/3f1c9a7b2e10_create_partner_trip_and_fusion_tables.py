"""Create partner, transaction, trip and fusion record tables

Revision ID: 3f1c9a7b2e10
Revises:
Create Date: 2026-10-18

Tables Created:
- sites, buyers, haulers: the three partner kinds
- transactions: monetary movements with (kind, id) counterparties
- trips: loads linked to a site and buyer, attributed to a hauler by name
- fusion_records: merge ledger with the snapshot needed to revert
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '3f1c9a7b2e10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PARTNER_TABLES = ('sites', 'buyers', 'haulers')

json_document = sa.JSON().with_variant(postgresql.JSONB(astext_type=sa.Text()), 'postgresql')

partner_kind_enum = sa.Enum('site', 'buyer', 'hauler', name='partner_kind_enum')


def _partner_columns() -> list[sa.Column]:
    return [
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('balance', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('balance_stale', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('last_recalculated_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('defaults', json_document, nullable=False),
        sa.Column('owner_id', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # =========================================================================
    # STEP 1: Partner tables
    # =========================================================================
    for table in PARTNER_TABLES:
        columns = _partner_columns()
        if table == 'haulers':
            columns.append(sa.Column('plate', sa.String(length=20), nullable=True))
        op.create_table(
            table,
            *columns,
            sa.PrimaryKeyConstraint('id', name=op.f(f'pk_{table}')),
            sqlite_autoincrement=True,
        )
        op.create_index(op.f(f'ix_{table}_name'), table, ['name'], unique=False)
        op.create_index(op.f(f'ix_{table}_owner_id'), table, ['owner_id'], unique=False)

    # =========================================================================
    # STEP 2: Transactions and trips
    # =========================================================================
    op.create_table(
        'transactions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('value', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('concept', sa.Text(), nullable=False),
        sa.Column('occurred_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('from_kind', sa.String(length=20), nullable=True),
        sa.Column('from_id', sa.String(length=50), nullable=True),
        sa.Column('to_kind', sa.String(length=20), nullable=True),
        sa.Column('to_id', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_transactions')),
    )
    op.create_index('ix_transactions_from_ref', 'transactions', ['from_kind', 'from_id'], unique=False)
    op.create_index('ix_transactions_to_ref', 'transactions', ['to_kind', 'to_id'], unique=False)

    op.create_table(
        'trips',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('site_id', sa.Integer(), nullable=True),
        sa.Column('buyer_id', sa.Integer(), nullable=True),
        sa.Column('conductor', sa.String(length=200), nullable=True),
        sa.Column('plate', sa.String(length=20), nullable=True),
        sa.Column('vehicle_type', sa.String(length=50), nullable=True),
        sa.Column('weight', sa.Numeric(precision=12, scale=3), nullable=True),
        sa.Column('loaded_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ['site_id'], ['sites.id'],
            name=op.f('fk_trips_site_id_sites'),
            ondelete='RESTRICT',
        ),
        sa.ForeignKeyConstraint(
            ['buyer_id'], ['buyers.id'],
            name=op.f('fk_trips_buyer_id_buyers'),
            ondelete='RESTRICT',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_trips')),
    )
    op.create_index(op.f('ix_trips_site_id'), 'trips', ['site_id'], unique=False)
    op.create_index(op.f('ix_trips_buyer_id'), 'trips', ['buyer_id'], unique=False)
    op.create_index(op.f('ix_trips_conductor'), 'trips', ['conductor'], unique=False)

    # =========================================================================
    # STEP 3: Fusion ledger
    # =========================================================================
    op.create_table(
        'fusion_records',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('partner_kind', partner_kind_enum, nullable=False),
        sa.Column('origin_id', sa.Integer(), nullable=False),
        sa.Column('destination_id', sa.Integer(), nullable=False),
        sa.Column('origin_name', sa.String(length=200), nullable=False),
        sa.Column('destination_name', sa.String(length=200), nullable=False),
        sa.Column('snapshot', json_document, nullable=False),
        sa.Column('transactions_affected', sa.Integer(), nullable=False),
        sa.Column('trips_affected', sa.Integer(), nullable=False),
        sa.Column('performed_by', sa.String(length=100), nullable=True),
        sa.Column('fused_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('reverted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('reverted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_fusion_records')),
    )
    op.create_index(op.f('ix_fusion_records_partner_kind'), 'fusion_records', ['partner_kind'], unique=False)
    op.create_index(op.f('ix_fusion_records_performed_by'), 'fusion_records', ['performed_by'], unique=False)
    op.create_index(op.f('ix_fusion_records_fused_at'), 'fusion_records', ['fused_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_fusion_records_fused_at'), table_name='fusion_records')
    op.drop_index(op.f('ix_fusion_records_performed_by'), table_name='fusion_records')
    op.drop_index(op.f('ix_fusion_records_partner_kind'), table_name='fusion_records')
    op.drop_table('fusion_records')
    partner_kind_enum.drop(op.get_bind(), checkfirst=True)

    op.drop_index(op.f('ix_trips_conductor'), table_name='trips')
    op.drop_index(op.f('ix_trips_buyer_id'), table_name='trips')
    op.drop_index(op.f('ix_trips_site_id'), table_name='trips')
    op.drop_table('trips')

    op.drop_index('ix_transactions_to_ref', table_name='transactions')
    op.drop_index('ix_transactions_from_ref', table_name='transactions')
    op.drop_table('transactions')

    for table in reversed(PARTNER_TABLES):
        op.drop_index(op.f(f'ix_{table}_owner_id'), table_name=table)
        op.drop_index(op.f(f'ix_{table}_name'), table_name=table)
        op.drop_table(table)
