from typing import Optional
from schemas.common import CamelModel


class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class AdminInfo(CamelModel):
    id: str
    username: str


class LoginResponse(CamelModel):
    success: bool = True
    admin: AdminInfo
    token: str
    token_type: str = "bearer"


class TokenValidation(CamelModel):
    valid: bool = True
    admin: AdminInfo


class AuthCheck(CamelModel):
    authenticated: bool
    admin: Optional[AdminInfo] = None


class TokenData(CamelModel):
    admin_id: Optional[str] = None
    username: Optional[str] = None
