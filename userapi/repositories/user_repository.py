"""User repository - in-memory implementation."""

import dataclasses
import logging
import threading
from typing import Dict, Iterable, List, Optional

from userapi.models.domain import User
from userapi.repositories.base import Repository
from userapi.repositories.identity import IdentityAllocator

logger = logging.getLogger(__name__)

LOCK_STRIPES = 32


class UserRepository(Repository[User]):
    """
    Repository for user records.

    Current implementation: In-memory (dict)
    Rationale: Records live for the lifetime of the process only

    Reads take no lock: records are frozen and the mapping is only ever
    updated by single-key assignment or removal. Writes take the stripe
    lock for their id, so writers on the same id are serialised and
    writers on different ids usually are not.
    """

    def __init__(
        self,
        seed: Iterable[User] = (),
        allocator: Optional[IdentityAllocator] = None,
    ):
        self._users: Dict[int, User] = {user.id: user for user in seed}
        if allocator is None:
            allocator = IdentityAllocator(start=max(self._users, default=0))
        if self._users and allocator.last_id < max(self._users):
            raise ValueError("Allocator would reissue a seed id")
        self._allocator = allocator
        self._locks = [threading.Lock() for _ in range(LOCK_STRIPES)]

    def _lock_for(self, id: int) -> threading.Lock:
        return self._locks[id % LOCK_STRIPES]

    def get(self, id: int) -> Optional[User]:
        """Get user by ID."""
        return self._users.get(id)

    def list(self) -> List[User]:
        """Snapshot of all users, in no particular order."""
        return list(self._users.copy().values())

    def create(self, user: User) -> User:
        """Store a copy of user under a fresh ID, ignoring user.id."""
        new_id = self._allocator.next_id()
        created = dataclasses.replace(user, id=new_id)
        with self._lock_for(new_id):
            if new_id in self._users:
                raise RuntimeError(f"Allocator reissued id {new_id}")
            self._users[new_id] = created
        logger.debug("Created user %d", new_id)
        return created

    def update(self, id: int, user: User) -> Optional[User]:
        """Replace the user stored under ID. Returns None if absent."""
        updated = dataclasses.replace(user, id=id)
        with self._lock_for(id):
            if id not in self._users:
                return None
            self._users[id] = updated
        logger.debug("Updated user %d", id)
        return updated

    def delete(self, id: int) -> bool:
        """Delete user from memory."""
        with self._lock_for(id):
            removed = self._users.pop(id, None)
        if removed is None:
            return False
        logger.debug("Deleted user %d", id)
        return True

    def exists(self, id: int) -> bool:
        """Check whether a user with ID is stored."""
        return id in self._users

    def count(self) -> int:
        """Number of stored users."""
        return len(self._users)
