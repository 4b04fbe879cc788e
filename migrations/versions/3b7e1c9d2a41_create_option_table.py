"""Create option table

Revision ID: 3b7e1c9d2a41
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e1c9d2a41'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'option',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=64), nullable=False),
        sa.Column('value', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('option', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_option_name'), ['name'], unique=True)


def downgrade():
    with op.batch_alter_table('option', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_option_name'))

    op.drop_table('option')
