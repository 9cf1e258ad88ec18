from typing import Optional
from sqlalchemy.orm import Session
from models.admin import Admin
from core.auth import hash_password, verify_password
from core.logging import logger


def get_admin_by_username(db: Session, username: str) -> Optional[Admin]:
    return db.query(Admin).filter(Admin.username == username).first()


def create_admin(db: Session, username: str, password: str) -> Admin:
    admin = Admin(username=username, password_hash=hash_password(password))
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


def seed_default_admin(db: Session, username: str, password: str) -> Optional[Admin]:
    """Create the default admin unless an account with that username exists"""
    if get_admin_by_username(db, username):
        return None
    admin = create_admin(db, username, password)
    logger.info(f"Default admin '{username}' created")
    return admin


def authenticate_admin(db: Session, username: str, password: str) -> Optional[Admin]:
    """Return the admin when the credentials match. There is no lockout on repeated failures."""
    admin = get_admin_by_username(db, username)
    if not admin or not verify_password(password, admin.password_hash):
        return None
    return admin


def update_admin_password(db: Session, admin: Admin, new_password: str) -> Admin:
    admin.password_hash = hash_password(new_password)
    db.commit()
    db.refresh(admin)
    return admin
