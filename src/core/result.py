"""Success/Failure result types.

Repository and service operations that can fail for expected reasons (not
found, stale version, duplicate characteristic) return a Result rather than
raising. Callers branch with ``isinstance`` or ``match``.

Usage:
    result = await service.get_resource(GetResource(resource_id=rid))

    match result:
        case Success(value=snapshot):
            print(snapshot.version)
        case Failure(error=error):
            print(error.code, error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Outcome of an operation that completed.

    Attributes:
        value: Operation output (snapshot, page, export summary, ...).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Outcome of an operation that was rejected.

    Attributes:
        error: DomainError describing why.
    """

    error: E


Result = Union[Success[T], Failure[E]]
