# File: expense_tracker/services/user_service.py

"""
User service.

Business rules for user accounts:
  - usernames and emails are unique
  - passwords are stored only as salted hashes
  - every user leaving this layer is a ``UserResponse`` (no credential)

Absence is reported as ``None``; duplicates raise ``DuplicateUserError``.
Any other database error propagates unchanged.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from expense_tracker.core.security import hash_password
from expense_tracker.models.user import User
from expense_tracker.repositories.user_repository import UserRepository
from expense_tracker.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)


class DuplicateUserError(ValueError):
    """A username or email is already taken."""

    field: str = ""

    def __init__(self, value: str):
        if not self.field:
            raise TypeError("raise DuplicateUsernameError or DuplicateEmailError")
        self.value = value
        super().__init__(f"{self.field.capitalize()} already exists: {value}")


class DuplicateUsernameError(DuplicateUserError):
    field = "username"


class DuplicateEmailError(DuplicateUserError):
    field = "email"


def to_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)


class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def list_users(self) -> List[UserResponse]:
        return [to_response(user) for user in self.repository.find_all()]

    def get_user_by_id(self, user_id: int) -> Optional[UserResponse]:
        user = self.repository.find_by_id(user_id)
        return to_response(user) if user is not None else None

    def get_user_by_username(self, username: str) -> Optional[UserResponse]:
        user = self.repository.find_by_username(username)
        return to_response(user) if user is not None else None

    def check_unique(self, username: str, email: str) -> None:
        """Raise if either the username or the email is already in use."""
        if self.repository.exists_by_username(username):
            raise DuplicateUsernameError(username)
        if self.repository.exists_by_email(email):
            raise DuplicateEmailError(email)

    def create_user(self, request: UserCreate) -> UserResponse:
        try:
            self.check_unique(request.username, request.email)
        except DuplicateUserError as exc:
            logger.warning("Rejected user creation: %s", exc)
            raise

        user = User(
            username=request.username,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            password_hash=hash_password(request.password),
        )

        try:
            saved = self.repository.save(user)
        except IntegrityError as exc:
            # Lost a race with a concurrent insert; find out which column collided.
            logger.warning("Unique constraint hit while saving user %s", request.username)
            try:
                self.check_unique(request.username, request.email)
            except DuplicateUserError as duplicate:
                raise duplicate from exc
            raise
        logger.info("Created user id=%s username=%s", saved.id, saved.username)
        return to_response(saved)
