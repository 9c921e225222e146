"""Fourthwall storefront client.

Calls are blocking, one HTTP round trip per operation over requests, the
same way as the rest of this package; there is no async API.
A client owns one requests.Session, which is not documented as thread-safe,
so code that fans out across threads should build one client per thread.
"""
from __future__ import annotations
import logging
from typing import Any, Iterable, List, Optional
import requests
from .base_client import BaseClient
from .config import StorefrontConfig
from .models import Cart, CartLineInput, CartLineUpdate, Collection, Product
from .reshape import reshape_cart, reshape_collection, reshape_product, reshape_products
from .types import FourthwallCart

logger = logging.getLogger(__name__)

NO_STORE = 'no-store'


class FourthwallClient(BaseClient):
    """Fourthwall storefront API client (collections, products, carts).

    Stateless: every call goes to the provider, cart state lives server side
    and is addressed by cart id.
    """

    def __init__(self, config: StorefrontConfig, session: Optional[requests.Session] = None):
        super().__init__(config, session=session)
        self.BASE_URL = config.api_url.rstrip('/')

    @classmethod
    def from_env(cls) -> 'FourthwallClient':
        return cls(StorefrontConfig.from_env())

    def _url(self, path: str) -> str:
        return f"{self.BASE_URL}/{path.lstrip('/')}"

    @staticmethod
    def _results(body: Any) -> Optional[List[Any]]:
        # Error bodies may be plain strings or arrays
        return body.get('results') if isinstance(body, dict) else None

    # Collections

    def get_collections(self) -> List[Collection]:
        res = self._get(self._url('/api/public/v1.0/collections'), {})
        results = self._results(res.body) or []
        return [reshape_collection(c) for c in results]

    def get_collection_products(self, collection: str, currency: str, limit: Optional[int] = None) -> List[Product]:
        res = self._get(self._url(f'/v1/collections/{collection}/products'), {
            'currency': currency,
            'limit': limit,
        })
        results = self._results(res.body)
        if results is None:
            logger.warning('No collection found for `%s`', collection)
            return []
        return reshape_products(results)

    # Products

    def get_product(self, handle: str, currency: str) -> Optional[Product]:
        res = self._get(self._url(f'/v1/products/{handle}'), {'currency': currency})
        return reshape_product(res.body)

    # Carts

    def _reshape_cart(self, body: Optional[FourthwallCart]) -> Cart:
        return reshape_cart(body, checkout_domain=self.config.checkout_domain)

    def get_cart(self, cart_id: Optional[str], currency: str) -> Optional[Cart]:
        if not cart_id:
            return None
        res = self._get(self._url(f'/v1/carts/{cart_id}'), {'currency': currency}, cache=NO_STORE)
        return self._reshape_cart(res.body)

    def create_cart(self) -> Cart:
        res = self._post(self._url('/v1/carts'), {'items': []})
        return self._reshape_cart(res.body)

    def add_to_cart(self, cart_id: str, lines: Iterable[CartLineInput]) -> Cart:
        items = [{'variantId': line.merchandise_id, 'quantity': line.quantity} for line in lines]
        res = self._post(self._url(f'/v1/carts/{cart_id}/add'), {'items': items}, cache=NO_STORE)
        return self._reshape_cart(res.body)

    def remove_from_cart(self, cart_id: str, line_ids: Iterable[str]) -> Cart:
        items = [{'variantId': line_id} for line_id in line_ids]
        res = self._post(self._url(f'/v1/carts/{cart_id}/remove'), {'items': items}, cache=NO_STORE)
        return self._reshape_cart(res.body)

    def update_cart(self, cart_id: str, lines: Iterable[CartLineUpdate]) -> Cart:
        # line.id is not sent; the provider resolves lines by variant id
        items = [{'variantId': line.merchandise_id, 'quantity': line.quantity} for line in lines]
        res = self._post(self._url(f'/v1/carts/{cart_id}/change'), {'items': items}, cache=NO_STORE)
        return self._reshape_cart(res.body)
