from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from models.registration import Registration
from core.tournament_config import GameType, TournamentType, RegistrationStatus
from core.exceptions import TournamentFull
from core.validators import (
    validate_tournament_exists, validate_tournament_registration_open, validate_tournament_not_full
)
from core.logging import logger
from api.crud.tournament_crud import increment_count, decrement_count
from api.crud.activity_log_crud import create_activity_log
from schemas.registration import RegistrationCreate, RegistrationDetailsUpdate

STATUS_ACTIONS = {
    RegistrationStatus.APPROVED: "approve",
    RegistrationStatus.REJECTED: "reject",
    RegistrationStatus.PENDING: "mark_pending",
}

SEARCH_FIELDS = (
    Registration.player_name,
    Registration.team_name,
    Registration.game_id,
    Registration.whatsapp,
    Registration.transaction_id,
    Registration.player2_name,
    Registration.player3_name,
    Registration.player4_name,
    Registration.admin_notes,
)


def _touch(registration: Registration, admin_username: Optional[str]):
    registration.last_modified_at = datetime.now(timezone.utc)
    registration.last_modified_by = admin_username


def _summary(registration: Registration) -> dict:
    return {
        "playerName": registration.player_name,
        "teamName": registration.team_name,
        "gameType": registration.game_type.value,
        "tournamentType": registration.tournament_type.value,
    }


def create_registration(db: Session, data: RegistrationCreate) -> Registration:
    """
    Create a pending registration and take a slot in the same transaction.
    The slot increment is conditional on registered_count < max_slots, so the
    count cannot pass max_slots even when two submissions race.
    """
    tournament = validate_tournament_exists(db, data.game_type, data.tournament_type)
    validate_tournament_registration_open(tournament)
    validate_tournament_not_full(tournament)

    try:
        if not increment_count(db, data.game_type, data.tournament_type):
            db.rollback()
            logger.warning(f"Registration rejected, {data.game_type.value}/{data.tournament_type.value} is full")
            raise TournamentFull()

        registration = Registration(
            **data.dict(),
            status=RegistrationStatus.PENDING,
            payment_verified=False,
            is_flagged=False,
        )
        db.add(registration)
        db.commit()
    except TournamentFull:
        raise
    except Exception:
        db.rollback()
        raise

    db.refresh(registration)
    logger.info(
        f"Registration {registration.id} created for {data.game_type.value}/{data.tournament_type.value}"
    )
    return registration


def get_registration(db: Session, registration_id: str) -> Optional[Registration]:
    return db.query(Registration).filter(Registration.id == registration_id).first()


def get_registrations(
    db: Session,
    game_type: Optional[GameType] = None,
    tournament_type: Optional[TournamentType] = None,
    status: Optional[RegistrationStatus] = None
) -> List[Registration]:
    """Registrations newest first, optionally filtered"""
    query = db.query(Registration)
    if game_type:
        query = query.filter(Registration.game_type == game_type)
    if tournament_type:
        query = query.filter(Registration.tournament_type == tournament_type)
    if status:
        query = query.filter(Registration.status == status)
    return query.order_by(Registration.submitted_at.desc()).all()


def search_registrations(db: Session, query: str) -> List[Registration]:
    """Case-insensitive substring search over player, team, payment and note fields"""
    # Match % and _ literally
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{escaped}%"
    return db.query(Registration).filter(
        or_(*[field.ilike(pattern, escape="\\") for field in SEARCH_FIELDS])
    ).order_by(Registration.submitted_at.desc()).all()


def update_registration_status(
    db: Session,
    registration_id: str,
    status: RegistrationStatus,
    admin_username: Optional[str] = None
) -> Optional[Registration]:
    """
    Change status and keep the slot count in step: entering 'rejected' frees the
    slot, leaving it takes one back. Capacity is not enforced here.
    """
    registration = get_registration(db, registration_id)
    if not registration:
        return None

    status = RegistrationStatus(status)
    held_slot = registration.holds_slot
    try:
        registration.status = status
        _touch(registration, admin_username)

        if held_slot and not registration.holds_slot:
            decrement_count(db, registration.game_type, registration.tournament_type)
        elif not held_slot and registration.holds_slot:
            increment_count(db, registration.game_type, registration.tournament_type, enforce_capacity=False)

        if admin_username:
            create_activity_log(
                db, admin_username, STATUS_ACTIONS[status], "registration", registration.id,
                _summary(registration), commit=False
            )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(registration)
    return registration


def update_registration_details(
    db: Session,
    registration_id: str,
    updates: RegistrationDetailsUpdate,
    admin_username: Optional[str] = None
) -> Optional[Registration]:
    registration = get_registration(db, registration_id)
    if not registration:
        return None

    update_data = updates.dict(exclude_unset=True)
    try:
        for field, value in update_data.items():
            setattr(registration, field, value)
        _touch(registration, admin_username)

        if admin_username:
            create_activity_log(
                db, admin_username, "edit", "registration", registration.id,
                {"updates": update_data, "playerName": registration.player_name}, commit=False
            )
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(registration)
    return registration


def update_registration_notes(
    db: Session,
    registration_id: str,
    notes: str,
    admin_username: Optional[str] = None
) -> Optional[Registration]:
    registration = get_registration(db, registration_id)
    if not registration:
        return None

    registration.admin_notes = notes
    _touch(registration, admin_username)

    if admin_username:
        create_activity_log(
            db, admin_username, "add_note", "registration", registration.id,
            {"notes": notes, "playerName": registration.player_name}, commit=False
        )
    db.commit()
    db.refresh(registration)
    return registration


def toggle_registration_flag(
    db: Session,
    registration_id: str,
    admin_username: Optional[str] = None
) -> Optional[Registration]:
    registration = get_registration(db, registration_id)
    if not registration:
        return None

    registration.is_flagged = not registration.is_flagged
    _touch(registration, admin_username)

    if admin_username:
        create_activity_log(
            db, admin_username, "flag" if registration.is_flagged else "unflag", "registration",
            registration.id, {"playerName": registration.player_name}, commit=False
        )
    db.commit()
    db.refresh(registration)
    return registration


def toggle_payment_verification(
    db: Session,
    registration_id: str,
    admin_username: Optional[str] = None
) -> Optional[Registration]:
    registration = get_registration(db, registration_id)
    if not registration:
        return None

    registration.payment_verified = not registration.payment_verified
    _touch(registration, admin_username)

    if admin_username:
        create_activity_log(
            db, admin_username,
            "verify_payment" if registration.payment_verified else "unverify_payment",
            "registration", registration.id,
            {"playerName": registration.player_name, "transactionId": registration.transaction_id},
            commit=False
        )
    db.commit()
    db.refresh(registration)
    return registration


def delete_registration(
    db: Session,
    registration_id: str,
    admin_username: Optional[str] = None,
    action: str = "delete"
) -> bool:
    """
    Delete a registration and release its slot (floored at zero).
    Rejected registrations hold no slot, so their deletion leaves the count alone.
    """
    registration = get_registration(db, registration_id)
    if not registration:
        return False

    details = _summary(registration)
    try:
        if registration.holds_slot:
            decrement_count(db, registration.game_type, registration.tournament_type)
        db.delete(registration)
        if admin_username:
            create_activity_log(db, admin_username, action, "registration", registration_id, details, commit=False)
        db.commit()
    except Exception:
        db.rollback()
        raise
    return True
