# schemas/user_auth.py
from pydantic import BaseModel, EmailStr, Field
from uuid import UUID

from app.schemas.common import APIModel


# =====================================================================
# AUTH REQUESTS
# =====================================================================

class RegisterRequest(BaseModel):
    """Public registration payload."""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class LoginRequest(BaseModel):
    """User login request."""
    email: EmailStr
    password: str = Field(..., min_length=1)


# =====================================================================
# READ SCHEMAS
# =====================================================================

class UserAuthOut(APIModel):
    """Minimal public profile. Never carries the password hash."""
    id: UUID
    name: str
    email: EmailStr


class TokenResponse(BaseModel):
    """Authentication token response."""
    token: str
    user: UserAuthOut
