import uuid
from sqlalchemy import Column, Integer, String, DateTime, Boolean, UniqueConstraint
from sqlalchemy.sql import func
from sqlalchemy.types import Enum as SQLEnum
from db import Base
from core.tournament_config import GameType, TournamentType


def enum_column(enum_cls):
    return SQLEnum(
        enum_cls,
        values_callable=lambda obj: [e.value for e in obj],
        native_enum=False,
        length=20,
    )


class Tournament(Base):
    __tablename__ = "tournaments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    game_type = Column(enum_column(GameType), nullable=False, index=True)
    tournament_type = Column(enum_column(TournamentType), nullable=False, index=True)

    # Slot accounting
    registered_count = Column(Integer, nullable=False, default=0)  # pending + approved registrations
    max_slots = Column(Integer, nullable=False)

    qr_code_url = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        UniqueConstraint('game_type', 'tournament_type', name='unique_tournament_variant'),
    )

    @property
    def available_slots(self) -> int:
        return max(0, self.max_slots - (self.registered_count or 0))

    @property
    def is_full(self) -> bool:
        return (self.registered_count or 0) >= self.max_slots
