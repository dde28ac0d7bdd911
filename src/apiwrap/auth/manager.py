"""Auth manager -- registry and dispatcher for auth plugins.

:class:`AuthManager` maps auth-type strings (``"bearer"``, ``"api_key"``)
to :class:`~apiwrap.auth.base.AuthPlugin` instances. The async client calls
:meth:`AuthManager.authenticate` once when it is opened.
"""

from __future__ import annotations

from apiwrap.auth.base import AuthPlugin, AuthResult
from apiwrap.exceptions import AuthError
from apiwrap.models import VendorProfile


class AuthManager:
    """Registry and dispatcher for authentication plugins.

    Example::

        manager = AuthManager()
        manager.register(BearerAuthPlugin())
        result = manager.authenticate(profile)
    """

    def __init__(self) -> None:
        self._plugins: dict[str, AuthPlugin] = {}

    def register(self, plugin: AuthPlugin) -> None:
        """Register *plugin* under its auth type, replacing any previous one."""
        self._plugins[plugin.auth_type] = plugin

    def get_plugin(self, auth_type: str) -> AuthPlugin:
        """Retrieve a registered plugin by its auth type identifier.

        Raises:
            AuthError: If no plugin is registered for *auth_type*.
        """
        plugin = self._plugins.get(auth_type)
        if plugin is None:
            available = ", ".join(sorted(self._plugins)) or "(none)"
            raise AuthError(
                f"No auth plugin registered for type '{auth_type}'. "
                f"Available types: {available}"
            )
        return plugin

    def authenticate(self, profile: VendorProfile) -> AuthResult:
        """Authenticate using the profile's auth configuration.

        Returns an empty :class:`~apiwrap.auth.base.AuthResult` when the
        profile has no auth section.

        Raises:
            AuthError: If the auth type has no registered plugin, the config
                is invalid, or the plugin rejects the credential.
        """
        if profile.auth is None:
            return AuthResult()
        plugin = self.get_plugin(profile.auth.type)
        problems = plugin.validate_config(profile.auth)
        if problems:
            raise AuthError(f"Invalid auth config for '{profile.name}': " + "; ".join(problems))
        return plugin.authenticate(profile.auth)

    def list_types(self) -> list[str]:
        """Return the identifiers of all registered auth types, sorted."""
        return sorted(self._plugins.keys())


def create_default_manager() -> AuthManager:
    """Create an :class:`AuthManager` with the ``bearer`` and ``api_key`` plugins."""
    from apiwrap.auth.api_key import APIKeyAuthPlugin
    from apiwrap.auth.bearer import BearerAuthPlugin

    manager = AuthManager()
    manager.register(BearerAuthPlugin())
    manager.register(APIKeyAuthPlugin())
    return manager
