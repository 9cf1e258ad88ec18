from enum import Enum
from typing import Dict, List, NamedTuple


class GameType(str, Enum):
    """Supported games"""
    BGMI = "bgmi"
    FREEFIRE = "freefire"


class TournamentType(str, Enum):
    """Team size variants"""
    SOLO = "solo"
    DUO = "duo"
    SQUAD = "squad"

    @property
    def players(self) -> int:
        return {TournamentType.SOLO: 1, TournamentType.DUO: 2, TournamentType.SQUAD: 4}[self]


class RegistrationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def slot_holding(cls) -> List["RegistrationStatus"]:
        """Statuses that occupy a tournament slot"""
        return [cls.PENDING, cls.APPROVED]


class TournamentVariant(NamedTuple):
    max_slots: int
    entry_fee: int
    winner: int
    runner_up: int
    per_kill: int
    max_players: int


TOURNAMENT_CONFIG: Dict[GameType, Dict[TournamentType, TournamentVariant]] = {
    GameType.BGMI: {
        TournamentType.SOLO: TournamentVariant(max_slots=100, entry_fee=20, winner=350, runner_up=250, per_kill=9, max_players=1),
        TournamentType.DUO: TournamentVariant(max_slots=50, entry_fee=40, winner=350, runner_up=250, per_kill=9, max_players=2),
        TournamentType.SQUAD: TournamentVariant(max_slots=25, entry_fee=80, winner=350, runner_up=250, per_kill=9, max_players=4),
    },
    GameType.FREEFIRE: {
        TournamentType.SOLO: TournamentVariant(max_slots=48, entry_fee=20, winner=350, runner_up=150, per_kill=5, max_players=1),
        TournamentType.DUO: TournamentVariant(max_slots=24, entry_fee=40, winner=350, runner_up=150, per_kill=5, max_players=2),
        TournamentType.SQUAD: TournamentVariant(max_slots=12, entry_fee=80, winner=350, runner_up=150, per_kill=5, max_players=4),
    },
}

# Maximum ids accepted by one bulk request
BULK_MAX_IDS = 100
