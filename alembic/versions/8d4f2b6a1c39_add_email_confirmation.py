"""add_email_confirmation

Revision ID: 8d4f2b6a1c39
Revises: 3c1a9e5d7b20
Create Date: 2026-10-19 09:41:07.215830

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8d4f2b6a1c39'
down_revision: Union[str, None] = '3c1a9e5d7b20'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add e-mail confirmation columns to users; existing accounts count as confirmed."""
    from sqlalchemy import inspect

    bind = op.get_bind()
    inspector = inspect(bind)
    columns = [col['name'] for col in inspector.get_columns('users')]

    if 'email_confirmed' not in columns:
        op.add_column('users', sa.Column('email_confirmed', sa.Boolean(), nullable=False, server_default=sa.false()))
        users = sa.table('users', sa.column('email_confirmed', sa.Boolean()))
        op.execute(users.update().values(email_confirmed=True))

    if 'email_confirmation_code' not in columns:
        op.add_column('users', sa.Column('email_confirmation_code', sa.String(), nullable=True))

    if 'email_confirmation_expires_at' not in columns:
        op.add_column('users', sa.Column('email_confirmation_expires_at', sa.DateTime(), nullable=True))


def downgrade() -> None:
    """Remove e-mail confirmation columns from users."""
    op.drop_column('users', 'email_confirmation_expires_at')
    op.drop_column('users', 'email_confirmation_code')
    op.drop_column('users', 'email_confirmed')
