"""Canonical storefront domain types returned to callers.

All types are immutable value objects; sequences are tuples.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Money:
    amount: str
    currency_code: str


@dataclass(frozen=True)
class Image:
    url: str
    alt_text: str
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class SelectedOption:
    name: str
    value: str


@dataclass(frozen=True)
class ProductOption:
    id: str
    name: str
    values: Tuple[str, ...]


@dataclass(frozen=True)
class PriceRange:
    min_variant_price: Money
    max_variant_price: Money


@dataclass(frozen=True)
class ProductVariant:
    id: str
    title: str
    available_for_sale: bool
    selected_options: Tuple[SelectedOption, ...]
    price: Money
    images: Tuple[Image, ...] = ()


@dataclass(frozen=True)
class Product:
    id: str
    handle: str
    title: str
    description: str
    description_html: str
    available_for_sale: bool
    options: Tuple[ProductOption, ...]
    price_range: PriceRange
    variants: Tuple[ProductVariant, ...]
    featured_image: Optional[Image]
    images: Tuple[Image, ...]
    tags: Tuple[str, ...] = ()
    updated_at: Optional[str] = None


@dataclass(frozen=True)
class Collection:
    handle: str
    title: str
    description: str


@dataclass(frozen=True)
class CartProduct:
    id: Optional[str]
    handle: Optional[str]
    title: Optional[str]
    featured_image: Optional[Image]


@dataclass(frozen=True)
class Merchandise:
    id: str
    title: str
    selected_options: Tuple[SelectedOption, ...]
    product: CartProduct


@dataclass(frozen=True)
class CartItem:
    id: str
    quantity: int
    cost: Money
    merchandise: Merchandise


@dataclass(frozen=True)
class CartCost:
    subtotal_amount: Money
    total_amount: Money
    total_tax_amount: Money


@dataclass(frozen=True)
class Cart:
    id: Optional[str]
    checkout_url: Optional[str]
    cost: CartCost
    lines: Tuple[CartItem, ...]
    total_quantity: int


@dataclass(frozen=True)
class CartLineInput:
    """Line to add to a cart."""
    merchandise_id: str
    quantity: int

    def __post_init__(self):
        _check_quantity(self.quantity)


@dataclass(frozen=True)
class CartLineUpdate:
    """Existing cart line with its new quantity."""
    id: str
    merchandise_id: str
    quantity: int

    def __post_init__(self):
        _check_quantity(self.quantity)


def _check_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValueError(f"quantity must be an integer, got {quantity!r}")
    if quantity < 0:
        raise ValueError(f"quantity must be >= 0, got {quantity}")
