"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to an error category and is referenced by the
corresponding :class:`~apiwrap.exceptions.ApiwrapError` subclass.
Shell wrappers can inspect the exit code of ``apiwrap list ...`` to
determine the failure class without parsing stderr.
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or an invalid request was built."""

EXIT_AUTH_FAILURE = 3
"""Authentication or authorisation failed (HTTP 401/403 or missing credentials)."""

EXIT_NOT_FOUND = 4
"""The requested resource was not found (HTTP 404)."""

EXIT_SERVER_ERROR = 5
"""The remote API returned a non-success status or an unusable body."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""
