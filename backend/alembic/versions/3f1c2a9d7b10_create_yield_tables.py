"""create_yield_tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-17 10:12:44.183502

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create protocols table
    op.create_table(
        'protocols',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('display_name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('apy', sa.Float(), nullable=False),
        sa.Column('tvl', sa.Float(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_protocols_id'), 'protocols', ['id'], unique=False)
    op.create_index(op.f('ix_protocols_name'), 'protocols', ['name'], unique=True)
    op.create_index(op.f('ix_protocols_category'), 'protocols', ['category'], unique=False)

    # Create strategies table
    op.create_table(
        'strategies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('display_name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('apy_current', sa.Float(), nullable=False),
        sa.Column('risk_level', sa.Enum('Low', 'Medium', 'Higher', name='risk_level'), nullable=False),
        sa.Column('lock_period', sa.Integer(), nullable=False),
        sa.Column('min_deposit', sa.Float(), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('is_featured', sa.Boolean(), nullable=False),
        sa.Column('is_hot', sa.Boolean(), nullable=False),
        sa.Column('tvl', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_strategies_id'), 'strategies', ['id'], unique=False)
    op.create_index(op.f('ix_strategies_name'), 'strategies', ['name'], unique=True)

    # Create strategy_protocols join table
    op.create_table(
        'strategy_protocols',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('strategy_id', sa.Integer(), nullable=False),
        sa.Column('protocol_id', sa.Integer(), nullable=False),
        sa.Column('allocation', sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(['strategy_id'], ['strategies.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['protocol_id'], ['protocols.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('strategy_id', 'protocol_id', name='uq_strategy_protocols_strategy_protocol'),
    )
    op.create_index(op.f('ix_strategy_protocols_id'), 'strategy_protocols', ['id'], unique=False)
    op.create_index(op.f('ix_strategy_protocols_strategy_id'), 'strategy_protocols', ['strategy_id'], unique=False)
    op.create_index(op.f('ix_strategy_protocols_protocol_id'), 'strategy_protocols', ['protocol_id'], unique=False)

    # Create faucet_requests table
    op.create_table(
        'faucet_requests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('wallet_address', sa.String(length=42), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('tx_hash', sa.String(length=66), nullable=False),
        sa.Column('requested_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('request_day', sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('tx_hash'),
        sa.UniqueConstraint('wallet_address', 'request_day', name='uq_faucet_requests_wallet_day'),
    )
    op.create_index(op.f('ix_faucet_requests_id'), 'faucet_requests', ['id'], unique=False)
    op.create_index(op.f('ix_faucet_requests_wallet_address'), 'faucet_requests', ['wallet_address'], unique=False)
    op.create_index(op.f('ix_faucet_requests_requested_at'), 'faucet_requests', ['requested_at'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_faucet_requests_requested_at'), table_name='faucet_requests')
    op.drop_index(op.f('ix_faucet_requests_wallet_address'), table_name='faucet_requests')
    op.drop_index(op.f('ix_faucet_requests_id'), table_name='faucet_requests')
    op.drop_table('faucet_requests')

    op.drop_index(op.f('ix_strategy_protocols_protocol_id'), table_name='strategy_protocols')
    op.drop_index(op.f('ix_strategy_protocols_strategy_id'), table_name='strategy_protocols')
    op.drop_index(op.f('ix_strategy_protocols_id'), table_name='strategy_protocols')
    op.drop_table('strategy_protocols')

    op.drop_index(op.f('ix_strategies_name'), table_name='strategies')
    op.drop_index(op.f('ix_strategies_id'), table_name='strategies')
    op.drop_table('strategies')

    op.drop_index(op.f('ix_protocols_category'), table_name='protocols')
    op.drop_index(op.f('ix_protocols_name'), table_name='protocols')
    op.drop_index(op.f('ix_protocols_id'), table_name='protocols')
    op.drop_table('protocols')
    sa.Enum(name='risk_level').drop(op.get_bind(), checkfirst=True)
