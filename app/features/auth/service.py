from typing import Optional

from app.core.logging import logger
from app.core.security import generate_user_id
from app.database import DataStore
from app.features.auth.models import User
from app.shared.exceptions import AuthenticationFailedException, DuplicateEmailException


class AuthService:
    """Authentication service: sign-up, login and the process-wide session."""

    def __init__(self, store: DataStore):
        self.store = store

    async def signup(self, name: str, email: str, password: str) -> User:
        """
        Register a new patient and log them in.

        Raises:
            DuplicateEmailException: email already registered (any case)
        """
        async with self.store.transaction("auth") as db:
            if db.find_user_by_email(email):
                raise DuplicateEmailException(email)

            user = User.build(
                id=generate_user_id(),
                name=name,
                email=email.strip(),
                role="patient",
            )
            db.users = [*db.users, user]
            db.session_user_id = user.id

            logger.info(f"Signed up and logged in new user {user.id} ({user.email})")
            return user.clone()

    async def login(self, email: str, password: str) -> User:
        """
        Log in by case-insensitive email.

        Raises:
            AuthenticationFailedException: unknown email or rejected password
        """
        async with self.store.transaction("auth") as db:
            user = db.find_user_by_email(email)
            if not user or not db.credentials.verify(user.id, password):
                raise AuthenticationFailedException()

            db.session_user_id = user.id
            logger.info(f"Logged in user {user.id}")
            return user.clone()

    async def logout(self) -> None:
        """Clear the session."""
        async with self.store.transaction("logout") as db:
            logger.info(f"Logged out user {db.session_user_id}")
            db.session_user_id = None

    def current_user(self) -> Optional[User]:
        """Snapshot of the logged-in user, if any."""
        user = self.store.session_user
        return user.clone() if user else None
