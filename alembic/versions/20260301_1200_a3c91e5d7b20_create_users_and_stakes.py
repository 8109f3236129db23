"""Create users and stakes tables

Revision ID: a3c91e5d7b20
Revises:
Create Date: 2026-03-01 12:00:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a3c91e5d7b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and stakes with constraints and indexes."""

    # =================================================================
    # TABLE: users
    # =================================================================
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('wallet_address', sa.String(length=42), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('is_email_verified', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "role IN ('user', 'admin')",
            name='valid_user_role'
        ),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(
        op.f('ix_users_wallet_address'),
        'users',
        ['wallet_address'],
        unique=True
    )

    # =================================================================
    # TABLE: stakes
    # =================================================================
    op.create_table(
        'stakes',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('wallet_address', sa.String(length=42), nullable=False),
        sa.Column('amount', sa.DECIMAL(precision=18, scale=6), nullable=False),
        sa.Column('duration_days', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('apy', sa.DECIMAL(precision=10, scale=6), nullable=False),
        sa.Column(
            'estimated_rewards',
            sa.DECIMAL(precision=18, scale=6),
            nullable=False
        ),
        sa.Column(
            'actual_rewards',
            sa.DECIMAL(precision=18, scale=6),
            nullable=False
        ),
        sa.Column('penalties', sa.DECIMAL(precision=18, scale=6), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('transaction_hash', sa.String(length=66), nullable=True),
        sa.Column('cancelled_at', sa.DateTime(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('amount > 0', name='positive_stake_amount'),
        sa.CheckConstraint('duration_days >= 1', name='positive_stake_duration'),
        sa.CheckConstraint(
            "status IN ('active', 'completed', 'cancelled')",
            name='valid_stake_status'
        ),
    )
    op.create_index(op.f('ix_stakes_user_id'), 'stakes', ['user_id'], unique=False)
    op.create_index(op.f('ix_stakes_status'), 'stakes', ['status'], unique=False)
    op.create_index(
        op.f('ix_stakes_created_at'),
        'stakes',
        ['created_at'],
        unique=False
    )


def downgrade() -> None:
    """Drop stakes then users."""
    op.drop_index(op.f('ix_stakes_created_at'), table_name='stakes')
    op.drop_index(op.f('ix_stakes_status'), table_name='stakes')
    op.drop_index(op.f('ix_stakes_user_id'), table_name='stakes')
    op.drop_table('stakes')

    op.drop_index(op.f('ix_users_wallet_address'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
