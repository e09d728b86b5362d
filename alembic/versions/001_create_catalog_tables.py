"""Create categories and products tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create categories and products tables."""
    # Categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.String(1000), nullable=False, server_default=''),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index('ix_categories_is_active', 'categories', ['is_active'])

    # Products table
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.String(1000), nullable=False, server_default=''),
        sa.Column('price', sa.Numeric(18, 2), nullable=False),
        sa.Column('category_id', sa.Integer(),
                  sa.ForeignKey('categories.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_date', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.func.now()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.CheckConstraint('price >= 0', name='ck_products_price_non_negative'),
        sa.CheckConstraint('stock_quantity >= 0', name='ck_products_stock_non_negative'),
    )

    # Indexes for filtering and sorting
    op.create_index('ix_products_name', 'products', ['name'])
    op.create_index('ix_products_price', 'products', ['price'])
    op.create_index('ix_products_category_id', 'products', ['category_id'])
    op.create_index('ix_products_stock_quantity', 'products', ['stock_quantity'])
    op.create_index('ix_products_created_date', 'products', ['created_date'])
    op.create_index('ix_products_is_active', 'products', ['is_active'])
    op.create_index(
        'ix_products_active_category_price',
        'products',
        ['is_active', 'category_id', 'price'],
    )


def downgrade() -> None:
    """Drop products and categories tables."""
    op.drop_table('products')
    op.drop_table('categories')
