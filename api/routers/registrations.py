from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from api.deps.db import get_db
from api.crud.registration_crud import (
    create_registration, get_registration, get_registrations, search_registrations,
    update_registration_status, update_registration_details, update_registration_notes,
    toggle_registration_flag, toggle_payment_verification, delete_registration
)
from services.bulk_operations import BulkOperations
from core.auth import get_current_admin
from core.exceptions import RegistrationNotFound
from core.validators import validate_team_players, validate_search_query
from core.tournament_config import GameType, TournamentType, RegistrationStatus
from models.admin import Admin
from schemas.registration import (
    Registration, RegistrationCreate, RegistrationDetailsUpdate, RegistrationStatusUpdate,
    RegistrationNotesUpdate, BulkRequest, BulkResult, DeleteResult
)

router = APIRouter(prefix="/api/registrations", tags=["Registrations"])


def _found(registration):
    if registration is None:
        raise RegistrationNotFound()
    return registration


@router.post("", response_model=Registration, status_code=status.HTTP_201_CREATED)
async def submit_registration(payload: RegistrationCreate, db: Session = Depends(get_db)):
    """Public registration form submission"""
    validate_team_players(payload)
    return create_registration(db, payload)


@router.get("", response_model=List[Registration])
async def list_registrations(
    game_type: Optional[GameType] = Query(None, alias="gameType"),
    tournament_type: Optional[TournamentType] = Query(None, alias="tournamentType"),
    status: Optional[RegistrationStatus] = None,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return get_registrations(db, game_type=game_type, tournament_type=tournament_type, status=status)


@router.get("/search/{query}", response_model=List[Registration])
async def search(
    query: str,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return search_registrations(db, validate_search_query(query))


# Bulk operations


@router.post("/bulk/approve", response_model=BulkResult)
async def bulk_approve(
    payload: BulkRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return BulkOperations(db, current_admin.username).approve(payload.ids)


@router.post("/bulk/reject", response_model=BulkResult)
async def bulk_reject(
    payload: BulkRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return BulkOperations(db, current_admin.username).reject(payload.ids)


@router.post("/bulk/delete", response_model=BulkResult)
async def bulk_delete(
    payload: BulkRequest,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return BulkOperations(db, current_admin.username).delete(payload.ids)


# Single registration


@router.get("/{registration_id}", response_model=Registration)
async def get_registration_details(
    registration_id: str,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return _found(get_registration(db, registration_id))


@router.patch("/{registration_id}", response_model=Registration)
async def update_status(
    registration_id: str,
    payload: RegistrationStatusUpdate,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    """Approve, reject or return a registration to pending"""
    return _found(update_registration_status(db, registration_id, payload.status, current_admin.username))


@router.put("/{registration_id}/details", response_model=Registration)
async def update_details(
    registration_id: str,
    payload: RegistrationDetailsUpdate,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return _found(update_registration_details(db, registration_id, payload, current_admin.username))


@router.patch("/{registration_id}/notes", response_model=Registration)
async def update_notes(
    registration_id: str,
    payload: RegistrationNotesUpdate,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return _found(update_registration_notes(db, registration_id, payload.notes, current_admin.username))


@router.patch("/{registration_id}/flag", response_model=Registration)
async def toggle_flag(
    registration_id: str,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return _found(toggle_registration_flag(db, registration_id, current_admin.username))


@router.patch("/{registration_id}/verify-payment", response_model=Registration)
async def toggle_payment(
    registration_id: str,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    return _found(toggle_payment_verification(db, registration_id, current_admin.username))


@router.delete("/{registration_id}", response_model=DeleteResult)
async def remove_registration(
    registration_id: str,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin)
):
    if not delete_registration(db, registration_id, current_admin.username):
        raise RegistrationNotFound()
    return DeleteResult(success=True)
