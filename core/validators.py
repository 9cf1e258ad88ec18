from typing import List
from sqlalchemy.orm import Session
from models.tournament import Tournament
from core.exceptions import (
    TournamentNotFound, TournamentFull, TournamentClosed,
    ValidationFailed, BulkLimitExceeded
)
from core.tournament_config import GameType, TournamentType, BULK_MAX_IDS
from schemas.registration import RegistrationCreate


def validate_tournament_exists(db: Session, game_type: GameType, tournament_type: TournamentType) -> Tournament:
    """Validate tournament exists and return it"""
    tournament = db.query(Tournament).filter(
        Tournament.game_type == game_type,
        Tournament.tournament_type == tournament_type
    ).first()
    if not tournament:
        raise TournamentNotFound()
    return tournament


def validate_tournament_registration_open(tournament: Tournament):
    """Validate tournament accepts registrations"""
    if not tournament.is_active:
        raise TournamentClosed()


def validate_tournament_not_full(tournament: Tournament):
    """Validate tournament has a free slot (pre-check; the increment itself is conditional)"""
    if tournament.is_full:
        raise TournamentFull()


def validate_team_players(data: RegistrationCreate):
    """Duo needs player 2, squad needs players 2-4"""
    players = data.tournament_type.players
    if players < 2:
        return

    if players == 2:
        if not data.player2_name or not data.player2_game_id:
            raise ValidationFailed("Player 2 details are required for duo tournaments")
        return

    for n in range(2, players + 1):
        if not getattr(data, f"player{n}_name") or not getattr(data, f"player{n}_game_id"):
            raise ValidationFailed("All player details are required for squad tournaments")


def validate_bulk_ids(ids: List[str], limit: int = BULK_MAX_IDS):
    """Validate a bulk id list is non-empty and within the limit"""
    if not ids:
        raise ValidationFailed("ids array is required and must not be empty")
    if len(ids) > limit:
        raise BulkLimitExceeded(limit)


def validate_search_query(query: str) -> str:
    query = (query or "").strip()
    if len(query) < 2:
        raise ValidationFailed("Search query must be at least 2 characters")
    return query
