from pydantic import Field, validator
from typing import Optional, List
from datetime import datetime
from core.tournament_config import GameType, TournamentType
from schemas.common import CamelModel


class Tournament(CamelModel):
    """Response schema for a tournament variant with its live slot count"""
    id: str
    game_type: GameType
    tournament_type: TournamentType
    registered_count: int
    max_slots: int
    available_slots: int
    qr_code_url: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TournamentReset(CamelModel):
    game_type: GameType
    tournament_type: TournamentType


class QrCodeUpdate(CamelModel):
    qr_code_url: str = Field(..., description="Payment QR code image URL")

    @validator('qr_code_url')
    def validate_qr_code_url(cls, v):
        if not v or not v.strip():
            raise ValueError('qrCodeUrl is required')
        return v.strip()


class TournamentActiveUpdate(CamelModel):
    is_active: bool


class TournamentVariantInfo(CamelModel):
    game_type: GameType
    tournament_type: TournamentType
    max_slots: int
    entry_fee: int
    winner: int
    runner_up: int
    per_kill: int
    max_players: int


class TournamentConfig(CamelModel):
    variants: List[TournamentVariantInfo]
