"""Fourthwall storefront API response shapes.

Only the fields the reshape layer reads are declared; the provider sends more.
"""
from __future__ import annotations
from typing import List, Optional, TypedDict


class FourthwallMoney(TypedDict):
    value: float
    currency: str


class FourthwallImage(TypedDict, total=False):
    id: str
    url: str
    width: int
    height: int


class FourthwallNamedAttribute(TypedDict, total=False):
    name: str
    swatch: str


class FourthwallVariantAttributes(TypedDict, total=False):
    description: str
    color: Optional[FourthwallNamedAttribute]
    size: Optional[FourthwallNamedAttribute]


class FourthwallStock(TypedDict, total=False):
    type: str  # UNLIMITED | LIMITED
    inStock: int


class FourthwallProductSummary(TypedDict, total=False):
    id: str
    slug: str
    name: str


class FourthwallProductVariant(TypedDict, total=False):
    id: str
    name: str
    sku: str
    unitPrice: FourthwallMoney
    attributes: FourthwallVariantAttributes
    images: List[FourthwallImage]
    stock: FourthwallStock
    product: FourthwallProductSummary


class FourthwallProduct(TypedDict, total=False):
    id: str
    name: str
    slug: str
    description: str
    images: List[FourthwallImage]
    variants: List[FourthwallProductVariant]
    updatedAt: str


class FourthwallCartItem(TypedDict):
    variant: FourthwallProductVariant
    quantity: int


class FourthwallCart(TypedDict, total=False):
    id: str
    items: List[FourthwallCartItem]


class FourthwallCollection(TypedDict, total=False):
    id: str
    name: str
    slug: str
    description: str
