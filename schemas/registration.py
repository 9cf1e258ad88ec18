from pydantic import Field, validator
from typing import Optional, List
from datetime import datetime
from core.tournament_config import GameType, TournamentType, RegistrationStatus
from schemas.common import CamelModel

OPTIONAL_TEXT_FIELDS = (
    'team_name',
    'player2_name', 'player2_game_id',
    'player3_name', 'player3_game_id',
    'player4_name', 'player4_game_id',
    'payment_screenshot',
)


def _blank_to_none(v):
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


def _required(v, message):
    if v is None or not str(v).strip():
        raise ValueError(message)
    return str(v).strip()


class RegistrationCreate(CamelModel):
    """Public registration form payload"""
    game_type: GameType
    tournament_type: TournamentType
    team_name: Optional[str] = Field(None, max_length=100)

    player_name: str
    game_id: str
    whatsapp: str

    player2_name: Optional[str] = None
    player2_game_id: Optional[str] = None
    player3_name: Optional[str] = None
    player3_game_id: Optional[str] = None
    player4_name: Optional[str] = None
    player4_game_id: Optional[str] = None

    payment_screenshot: Optional[str] = None
    transaction_id: str

    @validator(*OPTIONAL_TEXT_FIELDS, pre=True)
    def blank_optional_fields(cls, v):
        return _blank_to_none(v)

    @validator('player_name')
    def validate_player_name(cls, v):
        return _required(v, 'Player name is required')

    @validator('game_id')
    def validate_game_id(cls, v):
        return _required(v, 'Game ID is required')

    @validator('whatsapp')
    def validate_whatsapp(cls, v):
        v = _required(v, 'Valid WhatsApp number required')
        if len(v) < 10:
            raise ValueError('Valid WhatsApp number required')
        return v

    @validator('transaction_id')
    def validate_transaction_id(cls, v):
        return _required(v, 'Transaction ID is required')


class RegistrationDetailsUpdate(CamelModel):
    """Admin edit of player, team and payment fields. Unknown fields are rejected."""
    player_name: Optional[str] = None
    game_id: Optional[str] = None
    whatsapp: Optional[str] = None
    team_name: Optional[str] = None
    transaction_id: Optional[str] = None
    player2_name: Optional[str] = None
    player2_game_id: Optional[str] = None
    player3_name: Optional[str] = None
    player3_game_id: Optional[str] = None
    player4_name: Optional[str] = None
    player4_game_id: Optional[str] = None
    payment_screenshot: Optional[str] = None

    class Config:
        extra = "forbid"

    # Omitted fields skip these; an explicit null for a required column does not
    @validator('player_name', 'game_id', 'transaction_id')
    def validate_not_blank(cls, v):
        return _required(v, 'Field cannot be empty')

    @validator('whatsapp')
    def validate_whatsapp(cls, v):
        v = _required(v, 'Valid WhatsApp number required')
        if len(v) < 10:
            raise ValueError('Valid WhatsApp number required')
        return v


class RegistrationStatusUpdate(CamelModel):
    status: RegistrationStatus


class RegistrationNotesUpdate(CamelModel):
    notes: str = Field(..., max_length=2000)


class Registration(CamelModel):
    id: str
    game_type: GameType
    tournament_type: TournamentType
    team_name: Optional[str] = None
    player_name: str
    game_id: str
    whatsapp: str
    player2_name: Optional[str] = None
    player2_game_id: Optional[str] = None
    player3_name: Optional[str] = None
    player3_game_id: Optional[str] = None
    player4_name: Optional[str] = None
    player4_game_id: Optional[str] = None
    payment_screenshot: Optional[str] = None
    transaction_id: str
    payment_verified: bool
    admin_notes: Optional[str] = None
    is_flagged: bool
    status: RegistrationStatus
    submitted_at: datetime
    last_modified_at: Optional[datetime] = None
    last_modified_by: Optional[str] = None


class BulkRequest(CamelModel):
    ids: List[str]


class BulkResult(CamelModel):
    success: bool = True
    processed: int
    failed: int
    total: int


class DeleteResult(CamelModel):
    success: bool
