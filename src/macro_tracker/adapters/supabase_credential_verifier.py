"""Supabase Auth token verification."""

import logging
from dataclasses import dataclass
from uuid import UUID

import httpx
from supabase import AuthApiError, AuthError, Client

from macro_tracker.errors import DependencyFailureError
from macro_tracker.services.auth import CredentialVerifier

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseCredentialVerifier(CredentialVerifier):
    """Asks Supabase Auth which user an access token belongs to."""

    client: Client

    def verify(self, token: str) -> UUID | None:
        """Return the user id for a valid token, or None when rejected."""
        try:
            response = self.client.auth.get_user(token)
        except AuthApiError:
            return None
        except (AuthError, httpx.HTTPError) as exc:
            _logger.exception("Supabase auth lookup failed")
            raise DependencyFailureError("Could not verify credential") from exc
        if response is None or response.user is None:
            return None
        return UUID(str(response.user.id))
