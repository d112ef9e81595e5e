"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class User:
    """User domain entity.

    Frozen so a stored record can be handed to any number of readers
    while writers swap in whole new instances.
    """
    id: int
    username: str
    email: str
    age: int
    password: str


SEED_USERS: Tuple[User, ...] = (
    User(id=1, username="Alice", email="alice@example.com", age=30, password="password123"),
    User(id=2, username="Bob", email="bob@example.com", age=25, password="password123"),
    User(id=3, username="Charlie", email="charlie@example.com", age=35, password="password123"),
)
