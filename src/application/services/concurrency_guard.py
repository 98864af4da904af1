"""Optimistic concurrency guard.

Rejects an update before any mutation when the caller's expected version
does not match the stored one. This is the early, cheap check; the
repository's compare-and-swap save remains the authoritative one and also
catches writers that slip in between load and save.

Usage:
    guard = ConcurrencyGuard()
    result = guard.check(
        supplied_version=command.expected_version,
        current_version=resource.version,
        resource_id=resource.id,
    )
    if isinstance(result, Failure):
        return result
"""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import ConcurrencyConflictError, ResourceError


class ConcurrencyGuard:
    """Compare a caller-supplied version with the stored version."""

    def check(
        self,
        *,
        supplied_version: int | None,
        current_version: int | None,
        resource_id: UUID,
    ) -> Result[None, ConcurrencyConflictError]:
        """Check that the caller is updating the version they last read.

        Args:
            supplied_version: Version the caller expects. None skips the check.
            current_version: Version currently stored.
            resource_id: Resource being updated (for error context).

        Returns:
            Success(None) when the check passes or is skipped.
            Failure(ConcurrencyConflictError) on mismatch.
        """
        if supplied_version is None or supplied_version == current_version:
            return Success(value=None)

        return Failure(
            error=ConcurrencyConflictError(
                code=ErrorCode.CONCURRENT_UPDATE,
                message=ResourceError.CONCURRENT_UPDATE,
                resource_type="Resource",
                conflicting_field="version",
                expected_version=supplied_version,
                current_version=current_version,
                details={
                    "resource_id": str(resource_id),
                    "expected_version": str(supplied_version),
                    "current_version": str(current_version),
                },
            )
        )
