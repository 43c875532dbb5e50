"""Create records table

Revision ID: 20261019_create_records
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261019_create_records'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'records',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('surname', sa.String(length=200), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('phone_number', sa.String(length=200), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade():
    op.drop_table('records')
