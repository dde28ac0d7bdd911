"""Response decoding -- maps :class:`httpx.Response` to models or typed errors.

After a request completes, :func:`parse_model` turns the response into
either an instance of the expected Pydantic model or one of the errors in
:mod:`apiwrap.exceptions`, so callers never inspect status codes by hand.
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from apiwrap.exceptions import ResponseParseError, ServerError, UnexpectedResponseError

M = TypeVar("M", bound=BaseModel)


def parse_model(
    response: httpx.Response,
    model: type[M],
    documented_errors: bool = True,
) -> M:
    """Decode *response* into *model*.

    Args:
        response: A response whose body has already been read.
        model: The Pydantic model describing the success body.
        documented_errors: Whether the endpoint documents its 4xx/5xx
            bodies. When ``False`` an error status is reported as
            :class:`UnexpectedResponseError` instead of :class:`ServerError`.

    Raises:
        ResponseParseError: 2xx body does not validate against *model*.
        ServerError: 4xx/5xx status on an endpoint with documented errors.
        UnexpectedResponseError: Any other status.
    """
    status = response.status_code
    if response.is_success:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise ResponseParseError(response.text, exc, status) from exc
    if 400 <= status < 600 and documented_errors:
        raise ServerError(response.text, status)
    raise UnexpectedResponseError(response)
