import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Boolean, Text, Index
from db import Base
from core.tournament_config import GameType, TournamentType, RegistrationStatus
from models.tournament import enum_column


def utcnow():
    return datetime.now(timezone.utc)


class Registration(Base):
    __tablename__ = "registrations"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    game_type = Column(enum_column(GameType), nullable=False)
    tournament_type = Column(enum_column(TournamentType), nullable=False)
    team_name = Column(String, nullable=True)

    # Team leader / solo player
    player_name = Column(String, nullable=False)
    game_id = Column(String, nullable=False)
    whatsapp = Column(String, nullable=False)

    # Additional players for duo/squad
    player2_name = Column(String, nullable=True)
    player2_game_id = Column(String, nullable=True)
    player3_name = Column(String, nullable=True)
    player3_game_id = Column(String, nullable=True)
    player4_name = Column(String, nullable=True)
    player4_game_id = Column(String, nullable=True)

    # Payment
    payment_screenshot = Column(Text, nullable=True)
    transaction_id = Column(String, nullable=False)
    payment_verified = Column(Boolean, nullable=False, default=False)

    # Admin fields
    admin_notes = Column(Text, nullable=True)
    is_flagged = Column(Boolean, nullable=False, default=False)
    status = Column(
        enum_column(RegistrationStatus),
        nullable=False,
        default=RegistrationStatus.PENDING,
        index=True,
    )

    submitted_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_modified_at = Column(DateTime(timezone=True), nullable=True)
    last_modified_by = Column(String, nullable=True)

    __table_args__ = (
        Index('ix_registrations_tournament', 'game_type', 'tournament_type'),
    )

    @property
    def holds_slot(self) -> bool:
        return self.status in RegistrationStatus.slot_holding()
