"""Error response builder for RFC 9457 Problem Details.

Converts domain errors returned by ResourceService into HTTP responses:
DomainError → ApplicationError → ProblemDetails.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import settings
from src.core.errors import DomainError
from src.domain.errors import ResourceValidationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_BY_CODE: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
}

_TITLE_BY_CODE: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
    ApplicationErrorCode.QUERY_FAILED: "Query Failed",
    ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
    ApplicationErrorCode.CONFLICT: "Resource Conflict",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> result = await service.get_resource(GetResource(resource_id=rid))
        >>> if isinstance(result, Failure):
        ...     return ErrorResponseBuilder.from_domain_error(
        ...         result.error, request, trace_id
        ...     )
    """

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert a DomainError to an RFC 9457 JSON response."""
        return ErrorResponseBuilder.from_application_error(
            ApplicationError.from_domain_error(error), request, trace_id
        )

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        The problem type is derived from the originating domain error code
        when there is one (e.g. ``/errors/concurrent_update``), otherwise
        from the application code.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = _STATUS_BY_CODE.get(
            error.code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        domain_error = error.domain_error
        type_slug = domain_error.code.value if domain_error else error.code.value

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{type_slug}",
            title=_TITLE_BY_CODE.get(error.code, "Internal Server Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=ErrorResponseBuilder._field_errors(domain_error),
            trace_id=trace_id or None,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def _field_errors(error: DomainError | None) -> list[ErrorDetail] | None:
        if isinstance(error, ResourceValidationError) and error.violations:
            return [
                ErrorDetail(
                    field=violation.field,
                    code=error.code.value,
                    message=violation.message,
                )
                for violation in error.violations
            ]
        field = getattr(error, "field", None)
        if error is not None and field:
            return [
                ErrorDetail(field=field, code=error.code.value, message=error.message)
            ]
        return None
