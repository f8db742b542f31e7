"""add auth fields to users

Revision ID: 0002_add_auth_fields
Revises: 0001_init
Create Date: 2025-12-10

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0002_add_auth_fields'
down_revision = '0001_init'
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Nullable: users created while AUTH_ENABLED=false have neither
    op.add_column('users', sa.Column('email', sa.String, nullable=True))
    op.add_column('users', sa.Column('password_hash', sa.String, nullable=True))
    op.create_index('ix_users_email', 'users', ['email'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_users_email', table_name='users')
    op.drop_column('users', 'password_hash')
    op.drop_column('users', 'email')
