"""Plugin-based authentication for apiwrap.

- :class:`AuthPlugin` -- abstract base class for auth strategies.
- :class:`AuthManager` -- maps auth type strings to plugins and
  authenticates a :class:`~apiwrap.models.VendorProfile`.
- :func:`create_default_manager` -- manager with the built-in plugins.

Typical usage::

    from apiwrap.auth import create_default_manager

    auth_result = create_default_manager().authenticate(profile)
"""

from apiwrap.auth.base import AuthPlugin, AuthResult
from apiwrap.auth.manager import AuthManager, create_default_manager

__all__ = [
    "AuthPlugin",
    "AuthResult",
    "AuthManager",
    "create_default_manager",
]
