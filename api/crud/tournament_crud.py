from typing import Dict, List, Tuple
from sqlalchemy import case, func, update
from sqlalchemy.orm import Session
from models.tournament import Tournament
from models.registration import Registration
from core.tournament_config import (
    GameType, TournamentType, RegistrationStatus, TOURNAMENT_CONFIG
)
from core.exceptions import TournamentNotFound
from core.logging import logger


def _variant_filter(game_type: GameType, tournament_type: TournamentType):
    return (
        Tournament.game_type == game_type,
        Tournament.tournament_type == tournament_type,
    )


def seed_tournaments(db: Session, qr_code_url: str = None) -> List[Tournament]:
    """
    Create any configured tournament variant that does not exist yet.
    Existing rows are left untouched, so this is safe to run on every startup.
    """
    created = []
    for game_type, variants in TOURNAMENT_CONFIG.items():
        for tournament_type, variant in variants.items():
            exists = db.query(Tournament.id).filter(*_variant_filter(game_type, tournament_type)).first()
            if exists:
                continue
            tournament = Tournament(
                game_type=game_type,
                tournament_type=tournament_type,
                registered_count=0,
                max_slots=variant.max_slots,
                qr_code_url=qr_code_url,
                is_active=True,
            )
            db.add(tournament)
            created.append(tournament)

    if created:
        db.commit()
        logger.info(f"Seeded {len(created)} tournament(s)")
    return created


def get_tournament(db: Session, game_type: GameType, tournament_type: TournamentType):
    return db.query(Tournament).populate_existing().filter(*_variant_filter(game_type, tournament_type)).first()


def get_actual_counts(db: Session) -> Dict[Tuple[GameType, TournamentType], int]:
    """Count slot-holding registrations per (game_type, tournament_type)"""
    rows = db.query(
        Registration.game_type,
        Registration.tournament_type,
        func.count(Registration.id)
    ).filter(
        Registration.status.in_(RegistrationStatus.slot_holding())
    ).group_by(
        Registration.game_type, Registration.tournament_type
    ).all()
    return {(g, t): c for g, t, c in rows}


def reconcile_counts(db: Session) -> List[Tuple[Tournament, int, int]]:
    """
    Recompute every tournament's registered_count from the registrations table
    and persist corrections. Returns (tournament, stored, actual) for each drift.
    """
    actual_counts = get_actual_counts(db)
    corrections = []
    for tournament in db.query(Tournament).populate_existing().all():
        actual = actual_counts.get((tournament.game_type, tournament.tournament_type), 0)
        stored = tournament.registered_count
        if stored != actual:
            tournament.registered_count = actual
            corrections.append((tournament, stored, actual))

    if corrections:
        db.commit()
        for tournament, stored, actual in corrections:
            logger.warning(
                f"Slot count drift corrected for {tournament.game_type.value}/{tournament.tournament_type.value}: "
                f"{stored} -> {actual}"
            )
    return corrections


def get_tournaments(db: Session) -> List[Tournament]:
    """All tournaments with reconciled counts"""
    reconcile_counts(db)
    return db.query(Tournament).order_by(Tournament.game_type, Tournament.tournament_type).all()


def increment_count(db: Session, game_type: GameType, tournament_type: TournamentType, enforce_capacity: bool = True) -> bool:
    """
    Atomically take one slot. With enforce_capacity the update only applies while
    registered_count < max_slots. Returns False when no row was updated.
    Does not commit.
    """
    stmt = update(Tournament).where(*_variant_filter(game_type, tournament_type))
    if enforce_capacity:
        stmt = stmt.where(Tournament.registered_count < Tournament.max_slots)
    stmt = stmt.values(registered_count=Tournament.registered_count + 1)
    result = db.execute(stmt.execution_options(synchronize_session=False))
    return result.rowcount > 0


def decrement_count(db: Session, game_type: GameType, tournament_type: TournamentType, amount: int = 1) -> bool:
    """Atomically release slots, never going below zero. Does not commit."""
    stmt = update(Tournament).where(*_variant_filter(game_type, tournament_type)).values(
        registered_count=case(
            (Tournament.registered_count > amount, Tournament.registered_count - amount),
            else_=0,
        )
    )
    result = db.execute(stmt.execution_options(synchronize_session=False))
    return result.rowcount > 0


def reset_tournament(db: Session, game_type: GameType, tournament_type: TournamentType) -> Tuple[Tournament, int]:
    """Delete every registration of the tournament and zero its count in one transaction"""
    tournament = get_tournament(db, game_type, tournament_type)
    if not tournament:
        raise TournamentNotFound()

    try:
        deleted = db.query(Registration).filter(
            Registration.game_type == game_type,
            Registration.tournament_type == tournament_type
        ).delete(synchronize_session=False)
        tournament.registered_count = 0
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(tournament)
    logger.info(f"Tournament {game_type.value}/{tournament_type.value} reset, {deleted} registration(s) removed")
    return tournament, deleted


def update_qr_code(db: Session, game_type: GameType, tournament_type: TournamentType, qr_code_url: str) -> Tournament:
    tournament = get_tournament(db, game_type, tournament_type)
    if not tournament:
        raise TournamentNotFound()
    tournament.qr_code_url = qr_code_url
    db.commit()
    db.refresh(tournament)
    return tournament


def set_active(db: Session, game_type: GameType, tournament_type: TournamentType, is_active: bool) -> Tournament:
    tournament = get_tournament(db, game_type, tournament_type)
    if not tournament:
        raise TournamentNotFound()
    tournament.is_active = is_active
    db.commit()
    db.refresh(tournament)
    return tournament
