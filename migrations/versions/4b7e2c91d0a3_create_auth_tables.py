"""create_auth_tables

Revision ID: 4b7e2c91d0a3
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b7e2c91d0a3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create user, account and session tables (auth library layout)."""
    op.create_table('user',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('emailVerified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('image', sa.Text(), nullable=True),
        sa.Column('createdAt', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_table('account',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('accountId', sa.Text(), nullable=False),
        sa.Column('providerId', sa.String(length=50), nullable=False),
        sa.Column('userId', sa.Text(), nullable=False),
        sa.Column('password', sa.Text(), nullable=True),
        sa.Column('createdAt', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        # Credentials go with their user
        sa.ForeignKeyConstraint(['userId'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('providerId', 'accountId', name='uq_account_provider_account'),
    )
    op.create_index('ix_account_user_provider', 'account', ['userId', 'providerId'], unique=False)
    op.create_table('session',
        sa.Column('id', sa.Text(), nullable=False),
        sa.Column('token', sa.String(length=255), nullable=False),
        sa.Column('userId', sa.Text(), nullable=False),
        sa.Column('expiresAt', sa.DateTime(), nullable=False),
        sa.Column('ipAddress', sa.String(length=64), nullable=True),
        sa.Column('userAgent', sa.Text(), nullable=True),
        sa.Column('createdAt', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['userId'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('token'),
    )
    op.create_index('ix_session_userId', 'session', ['userId'], unique=False)


def downgrade() -> None:
    """Drop auth tables."""
    op.drop_index('ix_session_userId', table_name='session')
    op.drop_table('session')
    op.drop_index('ix_account_user_provider', table_name='account')
    op.drop_table('account')
    op.drop_table('user')
