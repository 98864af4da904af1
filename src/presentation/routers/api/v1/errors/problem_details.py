"""RFC 9457 Problem Details for HTTP APIs.

Every error response from the catalog API uses this shape. Validation
failures list each offending field in ``errors``.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Path of the offending field (e.g. "characteristics[1].code")
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field path")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details response.

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/concurrent_update",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="Resource was modified by another request. Please refresh and retry.",
        ...     instance="/api/v1/resources/0192...",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/validation_failed"],
    )
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/resources"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
