"""Bearer credential resolution."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from macro_tracker.errors import UnauthorizedError


class CredentialVerifier(Protocol):
    """Interface for the provider that validates access tokens."""

    def verify(self, token: str) -> UUID | None:
        """Return the principal id for a valid token, or None."""


@dataclass
class AuthGuard:
    """Resolves an Authorization header to a principal id."""

    verifier: CredentialVerifier

    def resolve_principal(self, authorization: str | None) -> UUID:
        """Return the caller's principal id or raise UnauthorizedError."""
        if not authorization:
            raise UnauthorizedError("Missing credential")
        scheme, _, token = authorization.strip().partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token or " " in token:
            raise UnauthorizedError("Malformed credential")
        principal_id = self.verifier.verify(token)
        if principal_id is None:
            raise UnauthorizedError("Invalid or expired credential")
        return principal_id
