from datetime import datetime, timedelta, timezone
from typing import Optional
import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from core.config import settings
from core.exceptions import AuthenticationFailed
from api.deps.db import get_db
from models.admin import Admin
from schemas.auth import TokenData

security = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or password longer than bcrypt accepts
        return False


def create_access_token(admin_id: str, username: str, expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expire_minutes)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"sub": admin_id, "username": username, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        raise AuthenticationFailed("Token expired")
    except JWTError:
        raise AuthenticationFailed("Invalid token")

    admin_id = payload.get("sub")
    if admin_id is None:
        raise AuthenticationFailed("Invalid token")
    return TokenData(admin_id=admin_id, username=payload.get("username"))


def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Admin:
    """Dependency for admin-only endpoints"""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationFailed("No valid authorization token provided")

    token_data = verify_token(credentials.credentials)
    admin = db.query(Admin).filter(Admin.id == token_data.admin_id).first()
    if admin is None:
        raise AuthenticationFailed("Admin not found")
    return admin


def get_current_admin_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Optional[Admin]:
    """Same as get_current_admin but returns None instead of failing"""
    if credentials is None:
        return None
    try:
        return get_current_admin(credentials, db)
    except AuthenticationFailed:
        return None
