"""create person and address tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-17 10:12:00.000000

"""
from alembic import op
import sqlalchemy as sa
import sqlmodel.sql.sqltypes


# revision identifiers, used by Alembic.
revision = '3f1c2a9b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """Add person table and the address table it owns."""
    op.create_table(
        'person',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_person_name', 'person', ['name'], unique=True)

    op.create_table(
        'address',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('street', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('person_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['person_id'], ['person.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_address_person_id', 'address', ['person_id'], unique=False)


def downgrade():
    """Remove address and person tables."""
    op.drop_index('ix_address_person_id', table_name='address')
    op.drop_table('address')
    op.drop_index('ix_person_name', table_name='person')
    op.drop_table('person')
