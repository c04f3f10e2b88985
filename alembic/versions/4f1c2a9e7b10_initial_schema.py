"""initial schema: user, journal, revoked_token

Revision ID: 4f1c2a9e7b10
Revises:
Create Date: 2026-10-12 09:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f1c2a9e7b10'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_user_id', 'user', ['id'])
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    op.create_table(
        'journal',
        sa.Column('id', sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_journal_id', 'journal', ['id'])
    op.create_index('ix_journal_user_id', 'journal', ['user_id'])
    op.create_index('idx_journal_user_created', 'journal', ['user_id', 'created_at'])

    op.create_table(
        'revoked_token',
        sa.Column('id', sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column('token', sa.Text(), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('token'),
    )
    op.create_index('ix_revoked_token_id', 'revoked_token', ['id'])
    op.create_index('ix_revoked_token_expires_at', 'revoked_token', ['expires_at'])


def downgrade() -> None:
    op.drop_table('revoked_token')
    op.drop_table('journal')
    op.drop_table('user')
