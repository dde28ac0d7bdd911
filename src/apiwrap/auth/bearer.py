"""Bearer token authentication plugin.

The token comes from ``AuthConfig.token`` or is resolved from the
configured ``source`` (e.g. ``env:RIPPLING_API_TOKEN``) and is sent as an
``Authorization: Bearer <token>`` header. Used by Rippling, Remote, Vercel
and CommonRoom.
"""

from __future__ import annotations

from apiwrap.auth.base import AuthPlugin, AuthResult
from apiwrap.exceptions import AuthError
from apiwrap.models import AuthConfig


class BearerAuthPlugin(AuthPlugin):
    """Authenticate via Bearer token in the Authorization header."""

    @property
    def auth_type(self) -> str:
        return "bearer"

    def authenticate(self, auth_config: AuthConfig) -> AuthResult:
        token = auth_config.resolve_credential().strip()
        if not token:
            raise AuthError("Bearer auth resolved an empty token")
        return AuthResult(headers={"Authorization": f"Bearer {token}"})

    def validate_config(self, auth_config: AuthConfig) -> list[str]:
        errors: list[str] = []
        if auth_config.token is None and not auth_config.source:
            errors.append("Bearer auth requires a 'source' or 'token'")
        return errors
