"""Tagged outcomes returned by the service layer.

A ``Success`` carries a value, a ``Failure`` carries a reason and a kind.
Callers branch with ``isinstance`` so a reason can only be read where the
operation actually failed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar('T')


class FailureKind(str, Enum):
    """Why a service operation did not succeed."""
    INVALID = "invalid"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation succeeded with ``value``."""
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Operation failed for ``reason``."""
    reason: str
    kind: FailureKind

    @property
    def ok(self) -> bool:
        return False


Result = Union[Success[T], Failure]
