from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from api.deps.db import get_db
from api.crud.admin_crud import authenticate_admin
from schemas.auth import LoginRequest, LoginResponse, AdminInfo, TokenValidation, AuthCheck
from core.auth import create_access_token, get_current_admin, get_current_admin_optional
from core.exceptions import ValidationFailed, AuthenticationFailed
from core.logging import logger
from models.admin import Admin

router = APIRouter(prefix="/api/admin")


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Check admin credentials and issue a bearer token"""
    if not credentials.username or not credentials.password:
        raise ValidationFailed("Username and password are required")

    admin = authenticate_admin(db, credentials.username, credentials.password)
    if not admin:
        logger.warning(f"Failed admin login for '{credentials.username}'")
        raise AuthenticationFailed("Invalid credentials")

    logger.info(f"Admin logged in: {admin.username}")
    token = create_access_token(admin.id, admin.username)
    return LoginResponse(admin=AdminInfo.from_orm(admin), token=token)


@router.post("/logout")
async def logout():
    """Tokens are stateless; the client drops its token"""
    return {"success": True}


@router.get("/validate", response_model=TokenValidation)
async def validate_token(current_admin: Admin = Depends(get_current_admin)):
    return TokenValidation(admin=AdminInfo.from_orm(current_admin))


@router.get("/check", response_model=AuthCheck)
async def check_auth(current_admin: Optional[Admin] = Depends(get_current_admin_optional)):
    """Auth state for the frontend; never fails"""
    if not current_admin:
        return AuthCheck(authenticated=False)
    return AuthCheck(authenticated=True, admin=AdminInfo.from_orm(current_admin))
