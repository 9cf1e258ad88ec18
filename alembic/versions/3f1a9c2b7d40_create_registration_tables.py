"""create_registration_tables

Revision ID: 3f1a9c2b7d40
Revises:
Create Date: 2026-10-19 10:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1a9c2b7d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _enum(*values, name):
    return sa.Enum(*values, name=name, native_enum=False, length=20)


def upgrade() -> None:
    op.create_table(
        'tournaments',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('game_type', _enum('bgmi', 'freefire', name='gametype'), nullable=False),
        sa.Column('tournament_type', _enum('solo', 'duo', 'squad', name='tournamenttype'), nullable=False),
        sa.Column('registered_count', sa.Integer(), nullable=False),
        sa.Column('max_slots', sa.Integer(), nullable=False),
        sa.Column('qr_code_url', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('game_type', 'tournament_type', name='unique_tournament_variant')
    )
    op.create_index(op.f('ix_tournaments_game_type'), 'tournaments', ['game_type'], unique=False)
    op.create_index(op.f('ix_tournaments_tournament_type'), 'tournaments', ['tournament_type'], unique=False)

    op.create_table(
        'registrations',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('game_type', _enum('bgmi', 'freefire', name='gametype'), nullable=False),
        sa.Column('tournament_type', _enum('solo', 'duo', 'squad', name='tournamenttype'), nullable=False),
        sa.Column('team_name', sa.String(), nullable=True),
        sa.Column('player_name', sa.String(), nullable=False),
        sa.Column('game_id', sa.String(), nullable=False),
        sa.Column('whatsapp', sa.String(), nullable=False),
        sa.Column('player2_name', sa.String(), nullable=True),
        sa.Column('player2_game_id', sa.String(), nullable=True),
        sa.Column('player3_name', sa.String(), nullable=True),
        sa.Column('player3_game_id', sa.String(), nullable=True),
        sa.Column('player4_name', sa.String(), nullable=True),
        sa.Column('player4_game_id', sa.String(), nullable=True),
        sa.Column('payment_screenshot', sa.Text(), nullable=True),
        sa.Column('transaction_id', sa.String(), nullable=False),
        sa.Column('payment_verified', sa.Boolean(), nullable=False),
        sa.Column('admin_notes', sa.Text(), nullable=True),
        sa.Column('is_flagged', sa.Boolean(), nullable=False),
        sa.Column('status', _enum('pending', 'approved', 'rejected', name='registrationstatus'), nullable=False),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_modified_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_modified_by', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_registrations_status'), 'registrations', ['status'], unique=False)
    op.create_index('ix_registrations_tournament', 'registrations', ['game_type', 'tournament_type'], unique=False)

    op.create_table(
        'admins',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_admins_username'), 'admins', ['username'], unique=True)

    op.create_table(
        'activity_logs',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('admin_username', sa.String(), nullable=False),
        sa.Column('action', sa.String(length=50), nullable=False),
        sa.Column('target_type', sa.String(length=50), nullable=False),
        sa.Column('target_id', sa.String(), nullable=False),
        sa.Column('details', sa.Text(), nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_activity_logs_action'), 'activity_logs', ['action'], unique=False)
    op.create_index(op.f('ix_activity_logs_target_id'), 'activity_logs', ['target_id'], unique=False)
    op.create_index(op.f('ix_activity_logs_timestamp'), 'activity_logs', ['timestamp'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_activity_logs_timestamp'), table_name='activity_logs')
    op.drop_index(op.f('ix_activity_logs_target_id'), table_name='activity_logs')
    op.drop_index(op.f('ix_activity_logs_action'), table_name='activity_logs')
    op.drop_table('activity_logs')
    op.drop_index(op.f('ix_admins_username'), table_name='admins')
    op.drop_table('admins')
    op.drop_index('ix_registrations_tournament', table_name='registrations')
    op.drop_index(op.f('ix_registrations_status'), table_name='registrations')
    op.drop_table('registrations')
    op.drop_index(op.f('ix_tournaments_tournament_type'), table_name='tournaments')
    op.drop_index(op.f('ix_tournaments_game_type'), table_name='tournaments')
    op.drop_table('tournaments')
