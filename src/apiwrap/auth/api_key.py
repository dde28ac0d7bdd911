"""API key auth plugin -- header, query parameter, or cookie placement.

Resolves a key from the configured ``source`` and injects it at the
configured ``location``. A second credential can be sent alongside the key
(``secret_source`` / ``secret_header``); Discourse uses this for its
``Api-Key`` + ``Api-Username`` header pair.
"""

from __future__ import annotations

from apiwrap.auth.base import AuthPlugin, AuthResult
from apiwrap.models import AuthConfig

_LOCATIONS = ("header", "query", "cookie")


class APIKeyAuthPlugin(AuthPlugin):
    """Authenticate via API key placed in a header, query parameter, or cookie."""

    @property
    def auth_type(self) -> str:
        return "api_key"

    def authenticate(self, auth_config: AuthConfig) -> AuthResult:
        """Resolve the key (and optional secret) and place them per ``location``.

        Default names: ``X-API-Key`` / ``X-API-Secret`` for headers,
        ``api_key`` / ``api_secret`` for query parameters and cookies.
        """
        credential = auth_config.resolve_credential()
        secret = auth_config.resolve_secret()

        if auth_config.location == "header":
            values = {auth_config.header or "X-API-Key": credential}
            if secret:
                values[auth_config.secret_header or "X-API-Secret"] = secret
            return AuthResult(headers=values)

        values = {auth_config.header or "api_key": credential}
        if secret:
            values[auth_config.secret_header or "api_secret"] = secret
        if auth_config.location == "query":
            return AuthResult(params=values)
        return AuthResult(cookies=values)

    def validate_config(self, auth_config: AuthConfig) -> list[str]:
        errors: list[str] = []
        if auth_config.token is None and not auth_config.source:
            errors.append("API key auth requires a 'source' or 'token' for the credential")
        if auth_config.location not in _LOCATIONS:
            errors.append(
                f"Invalid location '{auth_config.location}': "
                "must be 'header', 'query', or 'cookie'"
            )
        return errors
