"""Abstract base class for authentication plugins.

- :class:`AuthResult` -- the HTTP headers, query parameters, and cookies
  an auth plugin produces.
- :class:`AuthPlugin` -- the base class every authentication strategy
  extends.

See Also:
    :mod:`apiwrap.auth.manager` for plugin registration and dispatch.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from apiwrap.models import AuthConfig


class AuthResult:
    """Container for authentication artifacts to inject into HTTP requests.

    Merged into every request built by
    :class:`~apiwrap.client.async_client.AsyncClient`, including the
    follow-up requests a paginator issues for later pages.

    Example::

        result = AuthResult(headers={"Authorization": "Bearer tok123"})
        assert result.headers["Authorization"] == "Bearer tok123"
    """

    def __init__(
        self,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        cookies: dict[str, str] | None = None,
    ):
        self.headers = headers or {}
        self.params = params or {}
        self.cookies = cookies or {}


class AuthPlugin(ABC):
    """Abstract base class for authentication plugins.

    Subclasses provide an :attr:`auth_type` identifier and an
    :meth:`authenticate` implementation turning an
    :class:`~apiwrap.models.AuthConfig` into an :class:`AuthResult`.
    """

    @property
    @abstractmethod
    def auth_type(self) -> str:
        """Return the unique auth type identifier this plugin handles."""
        ...

    @abstractmethod
    def authenticate(self, auth_config: AuthConfig) -> AuthResult:
        """Resolve credentials and return auth artifacts for HTTP requests.

        Raises:
            AuthError: If credentials are malformed.
            ConfigError: If the credential source cannot be resolved.
        """
        ...

    def validate_config(self, auth_config: AuthConfig) -> list[str]:
        """Return human-readable problems with *auth_config* (empty when valid)."""
        return []
