from __future__ import annotations
from typing import Any, Optional


class ApiRequestError(Exception):
    """Generic storefront API error."""


class TransportError(ApiRequestError):
    """Network failure or unparseable response body.

    Carries the original exception as ``cause``, the requested ``url`` and,
    for POST requests, the ``payload`` that was being sent.
    """

    def __init__(self, cause: BaseException, url: str, payload: Optional[Any] = None):
        self.cause = cause
        self.url = url
        self.payload = payload
        super().__init__(f"Request to {url} failed: {cause}")
