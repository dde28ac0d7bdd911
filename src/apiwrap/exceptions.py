"""Exception hierarchy for apiwrap.

All exceptions inherit from :class:`ApiwrapError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`apiwrap.exit_codes`
and a ``status`` attribute holding the HTTP status code when one is known.
The CLI entry point catches ``ApiwrapError`` and exits with the matching
code; library callers catch the subclasses they care about.

Every failure on the request path (including failures on any page of a
paginated stream) is one of six closed cases::

    ApiwrapError (exit 1)
    +-- InvalidRequestError     (exit 2)  request rejected before sending
    +-- CommunicationError      (exit 6)  transport failure
    +-- RequestError            (exit 2)  request could not be constructed
    +-- ResponseParseError      (exit 5)  body did not match the model
    +-- ServerError             (exit 3/4/5, by status)
    +-- UnexpectedResponseError (exit 5)  undocumented response

plus the ambient :class:`ConfigError` and :class:`AuthError`.
"""

from __future__ import annotations

from typing import Optional

import httpx

from apiwrap.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_SERVER_ERROR,
)


class ApiwrapError(Exception):
    """Base exception for all apiwrap errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

    @property
    def status(self) -> Optional[int]:
        """HTTP status code associated with the failure, if any."""
        return None


class InvalidRequestError(ApiwrapError):
    """Raised when a request is rejected locally and never sent."""

    exit_code = EXIT_INVALID_USAGE

    def __init__(self, message: str):
        super().__init__(f"Invalid Request: {message}")


class CommunicationError(ApiwrapError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused)."""

    exit_code = EXIT_CONNECTION_ERROR

    def __init__(self, message: str, error: Optional[httpx.TransportError] = None):
        super().__init__(f"Communication Error: {message}")
        self.error = error


class RequestError(ApiwrapError):
    """Raised when httpx cannot construct the request (bad URL, unencodable params)."""

    exit_code = EXIT_INVALID_USAGE

    def __init__(self, message: str, error: Optional[Exception] = None):
        super().__init__(f"Request Error: {message}")
        self.error = error


class ResponseParseError(ApiwrapError):
    """Raised when a response body cannot be deserialised into the expected model.

    The raw body text is kept on :attr:`body` so the malformed payload can be
    inspected after the fact.
    """

    exit_code = EXIT_SERVER_ERROR

    def __init__(self, body: str, error: Exception, status: int):
        super().__init__(f"Serde Error: Failed to deserialize response ({status}): {error}")
        self.body = body
        self.error = error
        self._status = status

    @property
    def status(self) -> Optional[int]:
        return self._status


class ServerError(ApiwrapError):
    """Raised when the API answers with a 4xx/5xx status and a readable body."""

    exit_code = EXIT_SERVER_ERROR

    def __init__(self, body: str, status: int):
        super().__init__(f"Server Error: {status} {body}".rstrip())
        self.body = body
        self._status = status
        if status in (401, 403):
            self.exit_code = EXIT_AUTH_FAILURE
        elif status == 404:
            self.exit_code = EXIT_NOT_FOUND

    @property
    def status(self) -> Optional[int]:
        return self._status


class UnexpectedResponseError(ApiwrapError):
    """Raised for responses the endpoint does not document (odd status, no error schema)."""

    exit_code = EXIT_SERVER_ERROR

    def __init__(self, response: httpx.Response):
        super().__init__(f"Unexpected Response: {response.status_code} {response.reason_phrase}".rstrip())
        self.response = response

    @property
    def status(self) -> Optional[int]:
        return self.response.status_code


class AuthError(ApiwrapError):
    """Raised when credentials cannot be resolved or an auth plugin is missing."""

    exit_code = EXIT_AUTH_FAILURE


class ConfigError(ApiwrapError):
    """Raised for configuration problems (invalid JSON, unknown vendor, bad credential sources)."""

    exit_code = EXIT_GENERIC_FAILURE
