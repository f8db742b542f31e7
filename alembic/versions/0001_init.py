"""init: users, categories, currencies, records

Revision ID: 0001_init
Revises:
Create Date: 2025-12-09

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001_init'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'currencies',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('code', sa.String, nullable=False),
        sa.Column('name', sa.String, nullable=False),
    )
    op.create_index('ix_currencies_code', 'currencies', ['code'], unique=True)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String, nullable=False),
        sa.Column('default_currency_id', sa.Integer, sa.ForeignKey('currencies.id', ondelete='SET NULL'), nullable=True),
    )

    op.create_table(
        'categories',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String, nullable=False),
    )

    op.create_table(
        'records',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer, sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('category_id', sa.Integer, sa.ForeignKey('categories.id', ondelete='CASCADE'), nullable=False),
        sa.Column('currency_id', sa.Integer, sa.ForeignKey('currencies.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('amount', sa.Float, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_records_user_id', 'records', ['user_id'])
    op.create_index('ix_records_category_id', 'records', ['category_id'])


def downgrade() -> None:
    op.drop_index('ix_records_category_id', table_name='records')
    op.drop_index('ix_records_user_id', table_name='records')
    op.drop_table('records')
    op.drop_table('categories')
    op.drop_table('users')
    op.drop_index('ix_currencies_code', table_name='currencies')
    op.drop_table('currencies')
