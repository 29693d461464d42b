"""
Authentication service orchestrator.

Coordinates registration, login and bearer token resolution.

Dependencies: backend.boundary.db.CRUD, backend.core.security
System role: Identity use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.user_crud import user_crud
from backend.boundary.db.models.user_model import UserModel, UserRole
from backend.core.exceptions import AuthenticationError, ConflictError
from backend.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Authentication service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize auth service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    def issue_token(self, user: UserModel) -> str:
        """Sign an access token for ``user``."""
        return create_access_token(str(user.id), user.role.value)

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.STUDENT,
    ) -> tuple[UserModel, str]:
        """
        Create an account and sign a token for it.

        Args:
            name: Display name
            email: Login email
            password: Plaintext password
            role: Student or instructor

        Returns:
            tuple[UserModel, str]: Created user and access token

        Raises:
            ConflictError: Email already registered
        """
        if await user_crud.get_by_email(self.db, email):
            raise ConflictError("Email is already registered", details={"email": email})

        user = await user_crud.create(
            self.db,
            name=name.strip(),
            email=email.lower(),
            password_hash=hash_password(password),
            role=role,
        )
        logger.info("User registered", extra={"user_id": str(user.id), "role": role.value})
        return user, self.issue_token(user)

    async def login(self, email: str, password: str) -> tuple[UserModel, str]:
        """
        Check credentials and sign a token.

        Raises:
            AuthenticationError: Unknown email or wrong password
        """
        user = await user_crud.get_by_email(self.db, email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt", extra={"email": email})
            raise AuthenticationError("Invalid email or password")

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return user, self.issue_token(user)

    async def resolve_token(self, token: str) -> UserModel:
        """
        Map a bearer token to its user.

        Raises:
            AuthenticationError: Token invalid, expired, or user no longer exists
        """
        payload = decode_access_token(token)
        try:
            user_id = UUID(payload["sub"])
        except ValueError:
            raise AuthenticationError("Invalid or expired token")

        user = await user_crud.get_by_id(self.db, user_id)
        if not user:
            raise AuthenticationError("Invalid or expired token")
        return user
