# crud/user_auth.py
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from passlib.context import CryptContext

from app.core.exceptions import DatabaseConflictError
from app.models.user_auth import UserAuth
from app.schemas.user_auth import RegisterRequest

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class UserAuthCRUD:
    """CRUD operations for UserAuth model."""

    # =====================================================================
    # HELPER METHODS
    # =====================================================================

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def dummy_verify() -> None:
        """Spend the same time as a real verification."""
        pwd_context.dummy_verify()

    # =====================================================================
    # CREATE OPERATIONS
    # =====================================================================

    def create(self, db: Session, *, obj_in: RegisterRequest) -> UserAuth:
        """
        Create a new user.

        Args:
            db: Database session
            obj_in: RegisterRequest schema with the raw password

        Returns:
            Created UserAuth instance

        Raises:
            DatabaseConflictError: If the email is already taken
        """
        db_obj = UserAuth(
            name=obj_in.name.strip(),
            email=obj_in.email,
            password_hash=self.hash_password(obj_in.password),
        )

        db.add(db_obj)
        try:
            db.commit()
        except IntegrityError as e:
            db.rollback()
            raise DatabaseConflictError("Email already registered") from e
        db.refresh(db_obj)
        return db_obj

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get_by_email(self, db: Session, email: str) -> Optional[UserAuth]:
        """
        Get user by email.

        Args:
            db: Database session
            email: User email

        Returns:
            UserAuth instance or None
        """
        return db.query(UserAuth).filter(UserAuth.email == email).first()


# Create singleton instance
crud_user_auth = UserAuthCRUD()
