"""create character, alt, admin, badge and fleet activity tables

Revision ID: 3f1c9a7e2b40
Revises: 
Create Date: 2026-10-19 10:12:41.508211

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7e2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'character',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('corporation_id', sa.BigInteger(), nullable=True),
    )
    op.create_table(
        'alt_character',
        sa.Column('account_id', sa.BigInteger(), primary_key=True),
        sa.Column('alt_id', sa.BigInteger(), primary_key=True),
    )
    op.create_table(
        'admin',
        sa.Column('character_id', sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column('role', sa.String(), nullable=False),
        sa.Column('granted_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('granted_by_id', sa.BigInteger(), nullable=True),
    )
    op.create_table(
        'badge',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
    )
    op.create_table(
        'badge_assignment',
        sa.Column('CharacterId', sa.BigInteger(), primary_key=True),
        sa.Column('BadgeId', sa.Integer(), primary_key=True),
        sa.Column('GrantedById', sa.BigInteger(), nullable=True),
        sa.Column('GrantedAt', sa.DateTime(), server_default=sa.func.now(), nullable=True),
    )
    op.create_table(
        'fleet_activity',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('character_id', sa.BigInteger(), nullable=False),
        sa.Column('fleet_id', sa.BigInteger(), nullable=True),
        sa.Column('hull', sa.Integer(), nullable=False),
        sa.Column('first_seen', sa.BigInteger(), nullable=False),
        sa.Column('last_seen', sa.BigInteger(), nullable=False),
        sa.Column('is_boss', sa.Boolean(), nullable=True),
    )
    op.create_index('ix_fleet_activity_character_id', 'fleet_activity', ['character_id'])


def downgrade() -> None:
    op.drop_index('ix_fleet_activity_character_id', table_name='fleet_activity')
    op.drop_table('fleet_activity')
    op.drop_table('badge_assignment')
    op.drop_table('badge')
    op.drop_table('admin')
    op.drop_table('alt_character')
    op.drop_table('character')
