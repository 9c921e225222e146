from __future__ import annotations
import logging
from typing import Any, Dict, List, NamedTuple, Optional, Tuple
import requests
from .config import StorefrontConfig
from .exceptions import TransportError

logger = logging.getLogger(__name__)

TOKEN_PARAM = 'storefront_token'


class ApiResponse(NamedTuple):
    status: int
    body: Any


class BaseClient:
    """HTTP helpers that attach the storefront token and parse JSON bodies.

    No retry, backoff or caching: every failure is wrapped once in
    TransportError and raised to the caller. HTTP error statuses are not
    inspected, the parsed body is returned together with the status code.
    """

    def __init__(self, config: StorefrontConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def _headers(self, cache: Optional[str], headers: Optional[Dict[str, str]]) -> Dict[str, str]:
        merged = {'Content-Type': 'application/json'}
        if cache:
            merged['Cache-Control'] = cache
        if headers:
            merged.update(headers)
        return merged

    @staticmethod
    def _parse(resp: requests.Response) -> Any:
        if not resp.content:
            return None
        return resp.json()

    def _get(self, url: str, query: Dict[str, Any], *, cache: Optional[str] = None,
             headers: Optional[Dict[str, str]] = None, timeout: Optional[float] = None) -> ApiResponse:
        # Keep mapping order; None means "omit this parameter"
        params: List[Tuple[str, str]] = [(k, str(v)) for k, v in query.items() if v is not None]
        params.append((TOKEN_PARAM, self.config.storefront_token))
        logger.debug('GET %s params=%s', url, [k for k, _ in params])
        try:
            resp = self.session.request(
                'GET', url,
                params=params,
                headers=self._headers(cache, headers),
                timeout=timeout if timeout is not None else self.config.timeout,
            )
            body = self._parse(resp)
        except (requests.RequestException, ValueError) as e:
            raise TransportError(e, url) from e
        return ApiResponse(resp.status_code, body)

    def _post(self, url: str, data: Any, *, cache: Optional[str] = None,
              headers: Optional[Dict[str, str]] = None, timeout: Optional[float] = None) -> ApiResponse:
        logger.debug('POST %s', url)
        try:
            resp = self.session.request(
                'POST', url,
                params={TOKEN_PARAM: self.config.storefront_token},
                headers=self._headers(cache, headers),
                json=data,
                timeout=timeout if timeout is not None else self.config.timeout,
            )
            body = self._parse(resp)
        except (requests.RequestException, ValueError) as e:
            raise TransportError(e, url, data) from e
        return ApiResponse(resp.status_code, body)
