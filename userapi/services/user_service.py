"""User service - business logic for user management."""

import logging
from typing import List, Optional

from userapi.models.domain import User
from userapi.models.dto import UserDTO, UserPayload
from userapi.repositories.user_repository import UserRepository
from userapi.services.result import Failure, FailureKind, Result, Success
from userapi.services.validation import validate_user

logger = logging.getLogger(__name__)


def not_found_message(user_id: int) -> str:
    return f"User with ID {user_id} not found"


class UserService:
    """
    Service for user management business logic.

    Responsibilities:
    - Validate payloads before any mutation
    - Orchestrate repository operations
    - Convert between domain entities and DTOs

    Does NOT:
    - Handle HTTP requests or status codes (that's API layer)
    - Own storage (that's repository layer)
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def list_users(self) -> List[UserDTO]:
        """List all users."""
        return [self._to_dto(u) for u in self.user_repo.list()]

    def get_user(self, user_id: int) -> Optional[UserDTO]:
        """Get user by ID."""
        user = self.user_repo.get(user_id)

        if not user:
            return None

        return self._to_dto(user)

    def user_exists(self, user_id: int) -> bool:
        """Check whether a user exists."""
        return self.user_repo.exists(user_id)

    def create_user(self, payload: Optional[UserPayload]) -> Result[UserDTO]:
        """
        Create a new user.

        Business rules:
        - Payload must pass validation
        - Any client-supplied id is ignored
        """
        validation = validate_user(payload)
        if not validation.is_valid:
            return Failure(validation.error_message, FailureKind.INVALID)

        user = self.user_repo.create(self._to_domain(payload))
        logger.info("Created user %d (%s)", user.id, user.username)

        return Success(self._to_dto(user))

    def update_user(self, user_id: int, payload: Optional[UserPayload]) -> Result[UserDTO]:
        """
        Replace an existing user.

        An unknown id is reported as not found whatever the payload holds.
        Validation still runs before the repository is touched.
        """
        if not self.user_repo.exists(user_id):
            return Failure(not_found_message(user_id), FailureKind.NOT_FOUND)

        validation = validate_user(payload)
        if not validation.is_valid:
            return Failure(validation.error_message, FailureKind.INVALID)

        user = self.user_repo.update(user_id, self._to_domain(payload, user_id))
        if user is None:
            return Failure(not_found_message(user_id), FailureKind.NOT_FOUND)

        logger.info("Updated user %d", user_id)
        return Success(self._to_dto(user))

    def delete_user(self, user_id: int) -> Result[None]:
        """Delete a user."""
        if not self.user_repo.delete(user_id):
            return Failure(not_found_message(user_id), FailureKind.NOT_FOUND)

        logger.info("Deleted user %d", user_id)
        return Success(None)

    @staticmethod
    def _to_domain(payload: UserPayload, user_id: int = 0) -> User:
        """Convert a validated payload to a domain entity."""
        return User(
            id=user_id,
            username=payload.username,
            email=payload.email,
            age=payload.age,
            password=payload.password,
        )

    @staticmethod
    def _to_dto(user: User) -> UserDTO:
        """Convert domain entity to DTO."""
        return UserDTO(
            id=user.id,
            username=user.username,
            email=user.email,
            age=user.age,
            password=user.password,
        )
