"""Tagged results returned by storage operations.

Every repository call resolves to exactly one of three variants, so callers
can tell a missing row apart from any other failure without inspecting error
text:

* :class:`Found` wraps the value the operation produced.
* :class:`NotFound` signals that no row matched the requested id.
* :class:`StorageError` carries a server-side description of any other failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """Successful storage outcome."""

    value: T


@dataclass(frozen=True, slots=True)
class NotFound:
    """No row matched the requested identifier."""


@dataclass(frozen=True, slots=True)
class StorageError:
    """Any storage failure other than a missing row."""

    detail: str


StorageOutcome = Union[Found[T], NotFound, StorageError]

__all__ = ["Found", "NotFound", "StorageError", "StorageOutcome"]
