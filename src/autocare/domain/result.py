"""Result[T, E]: explicit success/failure return type for use cases.

Callers branch with ``isinstance(result, Err)`` and read ``.value`` or ``.error``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from autocare.domain.errors import DomainError

T = TypeVar("T")
E = TypeVar("E", bound=DomainError)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result variant."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result variant."""

    error: E


Result = Union[Ok[T], Err[E]]

__all__ = ["Err", "Ok", "Result"]
