"""Fourthwall storefront API client with normalized product/cart models.

Usage example:
    from storefront.fourthwall_client import FourthwallClient
    client = FourthwallClient.from_env()
    products = client.get_collection_products('all', currency='USD', limit=20)
"""
from .config import StorefrontConfig  # noqa: F401
from .exceptions import ApiRequestError, TransportError  # noqa: F401
from .fourthwall_client import FourthwallClient  # noqa: F401
from .models import CartLineInput, CartLineUpdate  # noqa: F401
