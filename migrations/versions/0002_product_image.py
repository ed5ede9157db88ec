"""product image column

Revision ID: 0002_product_image
Revises: 0001_initial
Create Date: 2026-10-18 00:00:01.000000
"""
from alembic import op  # type: ignore
import sqlalchemy as sa  # type: ignore

# revision identifiers, used by Alembic.
revision = '0002_product_image'
down_revision = '0001_initial'
branch_labels = None
depends_on = None


def upgrade():
    columns = {c['name'] for c in sa.inspect(op.get_bind()).get_columns('products')}
    if 'image' not in columns:
        op.add_column('products', sa.Column('image', sa.Text(), nullable=True))


def downgrade():
    with op.batch_alter_table('products') as batch_op:
        batch_op.drop_column('image')
