"""Asynchronous HTTP client shared by every vendor package.

:class:`AsyncClient` wraps :class:`httpx.AsyncClient` with the profile's
base URL, timeouts and credentials. It builds requests (so the paginator
can derive follow-up requests from them), sends them with retry and
exponential backoff, and decodes responses into Pydantic models through
:func:`~apiwrap.client.response.parse_model`.

Every failure surfaces as an :class:`~apiwrap.exceptions.ApiwrapError`.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel

from apiwrap import __version__
from apiwrap.auth.base import AuthResult
from apiwrap.auth.manager import AuthManager, create_default_manager
from apiwrap.client.response import parse_model
from apiwrap.exceptions import CommunicationError, InvalidRequestError, RequestError
from apiwrap.models import VendorProfile
from apiwrap.output import get_output

M = TypeVar("M", bound=BaseModel)

USER_AGENT = f"apiwrap/{__version__}"


class AsyncClient:
    """Asynchronous HTTP client for vendor API calls.

    Must be used as an async context manager; credentials are resolved
    once on entry.

    Args:
        profile: The vendor profile containing ``base_url``, auth config,
            and request settings (timeouts, retries, SSL verify).
        auth_manager: Manager that turns ``profile.auth`` into headers,
            params or cookies. Defaults to
            :func:`~apiwrap.auth.manager.create_default_manager`.
        transport: Optional httpx transport, e.g. :class:`httpx.MockTransport`
            in tests.

    Example::

        async with AsyncClient(profile) as client:
            page = await client.get_model("/workers", ListWorkersResponse)
    """

    def __init__(
        self,
        profile: VendorProfile,
        auth_manager: Optional[AuthManager] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._profile = profile
        self._auth_manager = auth_manager or create_default_manager()
        self._transport = transport
        self._auth_result: Optional[AuthResult] = None
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def profile(self) -> VendorProfile:
        return self._profile

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> AsyncClient:
        if self._profile.auth is not None:
            self._auth_result = self._auth_manager.authenticate(self._profile)
        config = self._profile.request
        self._client = httpx.AsyncClient(
            base_url=(self._profile.base_url or "").rstrip("/"),
            timeout=httpx.Timeout(config.timeout, connect=config.connect_timeout),
            verify=config.verify_ssl,
            follow_redirects=True,
            headers={
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
            },
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *args: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public request methods
    # ------------------------------------------------------------------ #

    def build_request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json_body: Optional[Any] = None,
    ) -> httpx.Request:
        """Build (but do not send) a request with credentials applied.

        ``None`` parameter values are dropped so optional filters can be
        passed straight through.

        Raises:
            InvalidRequestError: If the client is not open.
            RequestError: If httpx rejects the URL or parameters.
        """
        if self._client is None:
            raise InvalidRequestError("client is not open -- use it as an async context manager")

        merged_params = {k: v for k, v in (params or {}).items() if v is not None}
        headers: dict[str, str] = {}
        if self._auth_result is not None:
            headers.update(self._auth_result.headers)
            merged_params = {**self._auth_result.params, **merged_params}
            if self._auth_result.cookies:
                headers["Cookie"] = "; ".join(
                    f"{k}={v}" for k, v in self._auth_result.cookies.items()
                )

        try:
            return self._client.build_request(
                method,
                path,
                params=merged_params,
                headers=headers,
                json=json_body,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise RequestError(str(exc), exc) from exc

    async def send_page(
        self,
        request: httpx.Request,
        model: type[M],
        documented_errors: bool = True,
    ) -> M:
        """Send a prepared request and decode the body into *model*."""
        response = await self._execute_with_retry(request)
        return parse_model(response, model, documented_errors)

    async def get_model(
        self,
        path: str,
        model: type[M],
        params: Optional[dict[str, Any]] = None,
        documented_errors: bool = True,
    ) -> M:
        """``GET`` *path* and decode the body into *model*."""
        request = self.build_request("GET", path, params)
        return await self.send_page(request, model, documented_errors)

    async def send_json(
        self,
        method: str,
        path: str,
        model: type[M],
        json_body: Optional[Any] = None,
        params: Optional[dict[str, Any]] = None,
        documented_errors: bool = True,
    ) -> M:
        """Send a request with a JSON body and decode the response into *model*."""
        if isinstance(json_body, BaseModel):
            json_body = json_body.model_dump(mode="json", by_alias=True, exclude_none=True)
        request = self.build_request(method, path, params, json_body)
        return await self.send_page(request, model, documented_errors)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    async def _execute_with_retry(self, request: httpx.Request) -> httpx.Response:
        """Send *request* with exponential-backoff retry.

        Retries on 5xx status codes and connection / timeout errors up to
        ``max_retries`` times. The delay doubles each attempt: 1 s, 2 s, 4 s, ...

        Raises:
            CommunicationError: If the transport still fails after the last
                attempt.
        """
        if self._client is None:
            raise InvalidRequestError("client is not open -- use it as an async context manager")

        max_retries = self._profile.request.max_retries
        output = get_output()

        for attempt in range(max_retries + 1):
            try:
                response = await self._client.send(request)
            except (httpx.ConnectError, httpx.TimeoutException, httpx.NetworkError) as exc:
                if attempt < max_retries:
                    delay = 2 ** attempt
                    output.debug(
                        f"Connection error: {exc}, retrying in {delay}s "
                        f"(attempt {attempt + 1}/{max_retries})"
                    )
                    await asyncio.sleep(delay)
                    continue
                raise CommunicationError(
                    f"{request.method} {request.url} failed after {max_retries + 1} attempts: {exc}",
                    exc,
                ) from exc
            except httpx.TransportError as exc:
                raise CommunicationError(f"{request.method} {request.url}: {exc}", exc) from exc

            if response.status_code >= 500 and attempt < max_retries:
                delay = 2 ** attempt
                output.debug(
                    f"Server error {response.status_code}, retrying in {delay}s "
                    f"(attempt {attempt + 1}/{max_retries})"
                )
                await asyncio.sleep(delay)
                continue

            return response

        raise CommunicationError("request failed after all retries")  # pragma: no cover
