"""create file_extensions table

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Extensões fixas são inseridas pelo seed (python -m app.seed)
    op.create_table(
        'file_extensions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('ext_type', sa.String(10), nullable=False),
        sa.Column('ext_name', sa.String(20), nullable=False),
        sa.Column('is_blocked', sa.String(1), server_default='N', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('ext_name'),
        sa.CheckConstraint("ext_type IN ('FIXED', 'CUSTOM')", name='ck_file_extensions_ext_type'),
        sa.CheckConstraint("is_blocked IN ('Y', 'N')", name='ck_file_extensions_is_blocked'),
    )
    op.create_index(op.f('ix_file_extensions_id'), 'file_extensions', ['id'], unique=False)
    op.create_index(op.f('ix_file_extensions_ext_type'), 'file_extensions', ['ext_type'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_file_extensions_ext_type'), table_name='file_extensions')
    op.drop_index(op.f('ix_file_extensions_id'), table_name='file_extensions')
    op.drop_table('file_extensions')
