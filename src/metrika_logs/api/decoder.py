"""
Response decoding.

Every response is checked for a non-success status before anything tries
to read business data out of it. Error bodies are decoded into APIError
when they have the documented shape; anything else falls back to the
HTTP reason phrase.
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from metrika_logs.exceptions import UNMARSHAL_RESPONSE_FAILED, APIError, InternalError
from metrika_logs.models.errors import ErrorBody

M = TypeVar("M", bound=BaseModel)


def _generic_message(response: httpx.Response) -> str:
    reason = response.reason_phrase or "Unknown Status"
    return f"{response.status_code} {reason}"


def parse_api_error(response: httpx.Response) -> APIError:
    """Build an APIError from a non-success response whose body is loaded."""
    try:
        body = ErrorBody.model_validate_json(response.content)
    except ValidationError:
        return APIError(response.status_code, _generic_message(response))
    return APIError(response.status_code, body.message, body.errors)


def raise_for_api_error(response: httpx.Response) -> None:
    """Raise APIError unless the response has a 2xx status."""
    if not response.is_success:
        raise parse_api_error(response)


def decode_response(response: httpx.Response, model: type[M]) -> M:
    """
    Decode a loaded response into ``model``.

    Raises:
        APIError: Non-success HTTP status.
        InternalError: Success status but the body does not match ``model``.
    """
    raise_for_api_error(response)
    try:
        return model.model_validate_json(response.content)
    except ValidationError as e:
        raise InternalError(UNMARSHAL_RESPONSE_FAILED, e) from e


__all__ = ["decode_response", "parse_api_error", "raise_for_api_error"]
