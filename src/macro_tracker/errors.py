"""Error taxonomy shared by services, adapters and the HTTP layer."""

from fastapi import status


class MacroTrackerError(Exception):
    """Base class for failures that carry a kind and a user-facing message."""

    kind = "internal_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        """Return the response body for this error."""
        return {"error": self.kind, "message": self.message}


class ValidationError(MacroTrackerError):
    """Malformed or missing input."""

    kind = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(MacroTrackerError):
    """Missing, malformed or expired credential."""

    kind = "unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(MacroTrackerError):
    """Valid credential for a principal that does not own the resource."""

    kind = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(MacroTrackerError):
    """Resource does not exist."""

    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class InvalidDateError(MacroTrackerError):
    """Date input that cannot be parsed."""

    kind = "invalid_date"
    status_code = status.HTTP_400_BAD_REQUEST


class DependencyFailureError(MacroTrackerError):
    """The store, asset service or auth provider failed."""

    kind = "dependency_failure"
    status_code = status.HTTP_502_BAD_GATEWAY


class InternalError(MacroTrackerError):
    """Unexpected failure."""
