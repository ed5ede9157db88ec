"""initial tables

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op  # type: ignore
import sqlalchemy as sa  # type: ignore

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # The app factory may already have created these tables on startup
    existing = set(sa.inspect(op.get_bind()).get_table_names())
    if 'products' not in existing:
        op.create_table('products',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('brand', sa.Text(), nullable=True),
            sa.Column('name', sa.Text(), nullable=True),
            sa.Column('origin', sa.Text(), nullable=True),
            sa.Column('type', sa.Text(), nullable=True),
            sa.Column('tar', sa.Text(), nullable=True),
            sa.Column('price', sa.Text(), nullable=True),
            sa.Column('stock', sa.Integer(), nullable=True),
            sqlite_autoincrement=True,
        )
    if 'users' not in existing:
        op.create_table('users',
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('username', sa.Text(), nullable=True, unique=True),
            sa.Column('password', sa.Text(), nullable=True),
            sa.Column('role', sa.Text(), nullable=True),
            sqlite_autoincrement=True,
        )


def downgrade():
    op.drop_table('users')
    op.drop_table('products')
