# app/api/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.config import get_db
from app.services.user_auth import user_auth_service
from app.schemas.common import MessageResponse
from app.schemas.user_auth import RegisterRequest, LoginRequest, TokenResponse

router = APIRouter(prefix="/api", tags=["User Authentication"])


# =====================================================================
# PUBLIC ENDPOINTS - No authentication required
# =====================================================================

@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user account"
)
def register(
    user_data: RegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account (public endpoint).

    - **name**: Display name (required)
    - **email**: Valid email address (required, unique)
    - **password**: Password (required)

    Nothing about the created user is echoed back.
    """
    user_auth_service.register_user(db=db, user_data=user_data)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login to get access token"
)
def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate user and receive a 7-day access token.

    - **email**: User's email address
    - **password**: User's password

    Unknown email and wrong password fail with the same 401 message.
    """
    return user_auth_service.login(db, login_data)
