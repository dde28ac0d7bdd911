"""HTTP client layer shared by the vendor SDKs.

- :class:`AsyncClient` -- httpx wrapper with auth injection, retry and
  typed response decoding; the page fetcher used by pagination.
- :func:`parse_model` -- maps a response to a model or a typed error.
- :class:`VendorClient` / :class:`Resource` -- bases of each vendor's
  ``Client`` and its resource accessors.
"""

from apiwrap.client.async_client import AsyncClient
from apiwrap.client.response import parse_model
from apiwrap.client.vendor import Resource, VendorClient

__all__ = ["AsyncClient", "Resource", "VendorClient", "parse_model"]
