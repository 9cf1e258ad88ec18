from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from api.deps.db import get_db
from api.crud.tournament_crud import (
    get_tournaments, get_tournament, reset_tournament, update_qr_code, set_active
)
from api.crud.activity_log_crud import create_activity_log
from core.auth import get_current_admin
from core.exceptions import TournamentNotFound
from core.tournament_config import GameType, TournamentType, TOURNAMENT_CONFIG
from models.admin import Admin
from schemas.tournament import (
    Tournament, TournamentReset, QrCodeUpdate, TournamentActiveUpdate,
    TournamentConfig, TournamentVariantInfo
)

router = APIRouter(prefix="/api/tournaments", tags=["Tournaments"])


def _target_id(game_type: GameType, tournament_type: TournamentType) -> str:
    return f"{game_type.value}_{tournament_type.value}"


@router.get("", response_model=List[Tournament])
async def list_tournaments(db: Session = Depends(get_db)):
    """All tournaments with counts reconciled against actual registrations"""
    return get_tournaments(db)


@router.get("/config", response_model=TournamentConfig)
async def get_tournament_config():
    """Static slot, fee and prize configuration"""
    return TournamentConfig(variants=[
        TournamentVariantInfo(game_type=game_type, tournament_type=tournament_type, **variant._asdict())
        for game_type, variants in TOURNAMENT_CONFIG.items()
        for tournament_type, variant in variants.items()
    ])


@router.post("/reset", response_model=Tournament)
async def reset(
    payload: TournamentReset,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    """Delete every registration of a tournament and zero its slot count"""
    tournament, deleted = reset_tournament(db, payload.game_type, payload.tournament_type)
    create_activity_log(
        db, current_admin.username, "reset_tournament", "tournament",
        _target_id(payload.game_type, payload.tournament_type),
        {"gameType": payload.game_type.value, "tournamentType": payload.tournament_type.value, "deleted": deleted}
    )
    db.refresh(tournament)
    return tournament


@router.get("/{game_type}/{tournament_type}", response_model=Tournament)
async def get_tournament_details(
    game_type: GameType,
    tournament_type: TournamentType,
    db: Session = Depends(get_db)
):
    tournament = get_tournament(db, game_type, tournament_type)
    if not tournament:
        raise TournamentNotFound()
    return tournament


@router.patch("/{game_type}/{tournament_type}/qr", response_model=Tournament)
async def update_tournament_qr(
    game_type: GameType,
    tournament_type: TournamentType,
    payload: QrCodeUpdate,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    tournament = update_qr_code(db, game_type, tournament_type, payload.qr_code_url)
    create_activity_log(
        db, current_admin.username, "update_qr", "tournament", _target_id(game_type, tournament_type),
        {"gameType": game_type.value, "tournamentType": tournament_type.value, "qrCodeUrl": payload.qr_code_url}
    )
    db.refresh(tournament)
    return tournament


@router.patch("/{game_type}/{tournament_type}/active", response_model=Tournament)
async def update_tournament_active(
    game_type: GameType,
    tournament_type: TournamentType,
    payload: TournamentActiveUpdate,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    """Open or close registration for a tournament"""
    tournament = set_active(db, game_type, tournament_type, payload.is_active)
    create_activity_log(
        db, current_admin.username, "activate" if payload.is_active else "deactivate", "tournament",
        _target_id(game_type, tournament_type),
        {"gameType": game_type.value, "tournamentType": tournament_type.value}
    )
    db.refresh(tournament)
    return tournament
