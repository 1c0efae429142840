# services/user_auth.py
import logging
from sqlalchemy.orm import Session

from app.core.exceptions import (
    ConflictError,
    DatabaseConflictError,
    UnauthorizedError,
    ValidationError,
)
from app.core.security import create_access_token
from app.crud.user_auth import crud_user_auth
from app.models.user_auth import UserAuth
from app.schemas.user_auth import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    UserAuthOut,
)
from app.services.common import database_errors

logger = logging.getLogger(__name__)

# One message for unknown email and wrong password alike
INVALID_CREDENTIALS = "Invalid credentials"


# =====================================================================
# SERVICE CLASS
# =====================================================================


class UserAuthService:
    """Service layer for registration and login."""

    def __init__(self):
        self.crud = crud_user_auth

    # =====================================================================
    # USER REGISTRATION
    # =====================================================================

    def register_user(self, db: Session, user_data: RegisterRequest) -> UserAuth:
        """
        Public user registration.

        Args:
            db: Database session
            user_data: Name, email and raw password

        Returns:
            Created UserAuth instance

        Raises:
            ValidationError: If any field is blank
            ConflictError: If email already exists
        """
        if not user_data.name.strip() or not user_data.password.strip():
            raise ValidationError("All fields are required")

        with database_errors(db, "register user"):
            if self.crud.get_by_email(db, email=user_data.email):
                raise ConflictError("Email already registered")

            try:
                user = self.crud.create(db, obj_in=user_data)
            except DatabaseConflictError:
                # lost a race with a concurrent registration
                raise ConflictError("Email already registered")

        logger.info(f"Registered user {user.id}")
        return user

    # =====================================================================
    # AUTHENTICATION & LOGIN
    # =====================================================================

    def authenticate_user(self, db: Session, login_data: LoginRequest) -> UserAuth:
        """
        Authenticate user with email and password.

        Raises:
            UnauthorizedError: If the email is unknown or the password is wrong
        """
        with database_errors(db, "log in"):
            user = self.crud.get_by_email(db, email=login_data.email)

        if user is None:
            # keep response time independent of whether the email exists
            self.crud.dummy_verify()
            logger.warning("Rejected login attempt")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not self.crud.verify_password(login_data.password, user.password_hash):
            logger.warning("Rejected login attempt")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        return user

    def login(self, db: Session, login_data: LoginRequest) -> TokenResponse:
        """Authenticate and issue an access token plus the public profile."""
        user = self.authenticate_user(db, login_data)
        token = create_access_token(data={"sub": str(user.id)})
        logger.info(f"User {user.id} logged in")
        return TokenResponse(token=token, user=UserAuthOut.model_validate(user))


# =====================================================================
# SINGLETON INSTANCE
# =====================================================================

user_auth_service = UserAuthService()
