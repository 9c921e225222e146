from __future__ import annotations
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from .models import (
    Cart, CartCost, CartItem, CartProduct, Collection, Image, Merchandise, Money,
    PriceRange, Product, ProductOption, ProductVariant, SelectedOption,
)
from .types import (
    FourthwallCart, FourthwallCartItem, FourthwallCollection, FourthwallProduct,
    FourthwallProductVariant,
)

DEFAULT_CURRENCY = 'USD'


def _decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal('0')
    # str() first so floats like 19.99 do not carry binary noise
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return Decimal('0')
    return amount if amount.is_finite() else Decimal('0')


def _money(amount: Decimal, currency: str) -> Money:
    return Money(amount=str(amount), currency_code=currency)


def reshape_images(images: Optional[Iterable[Mapping[str, Any]]], alt_text: str) -> Tuple[Image, ...]:
    out: List[Image] = []
    for img in images or []:
        url = img.get('url')
        if not url:
            continue
        out.append(Image(url=url, alt_text=alt_text, width=img.get('width'), height=img.get('height')))
    return tuple(out)


def _variant_available(variant: Mapping[str, Any]) -> bool:
    stock = variant.get('stock') or {}
    if stock.get('type') == 'LIMITED':
        return (stock.get('inStock') or 0) > 0
    return True


def _selected_options(variant: Mapping[str, Any]) -> Tuple[SelectedOption, ...]:
    attributes = variant.get('attributes') or {}
    options = []
    for key, label in (('size', 'Size'), ('color', 'Color')):
        attr = attributes.get(key) or {}
        if attr.get('name'):
            options.append(SelectedOption(name=label, value=attr['name']))
    return tuple(options)


def _variant_price(variant: Mapping[str, Any]) -> Tuple[Decimal, str]:
    unit_price = variant.get('unitPrice') or {}
    return _decimal(unit_price.get('value')), unit_price.get('currency') or DEFAULT_CURRENCY


def reshape_variant(variant: FourthwallProductVariant) -> ProductVariant:
    amount, currency = _variant_price(variant)
    title = variant.get('name') or ''
    return ProductVariant(
        id=variant.get('id') or '',
        title=title,
        available_for_sale=_variant_available(variant),
        selected_options=_selected_options(variant),
        price=_money(amount, currency),
        images=reshape_images(variant.get('images'), title),
    )


def _product_options(variants: List[FourthwallProductVariant]) -> Tuple[ProductOption, ...]:
    values: Dict[str, List[str]] = {'color': [], 'size': []}
    for v in variants:
        attributes = v.get('attributes') or {}
        for key in values:
            name = (attributes.get(key) or {}).get('name')
            if name and name not in values[key]:
                values[key].append(name)
    options = []
    if values['color']:
        options.append(ProductOption(id='color', name='Color', values=tuple(values['color'])))
    if values['size']:
        options.append(ProductOption(id='size', name='Size', values=tuple(values['size'])))
    return tuple(options)


def reshape_product(product: Optional[FourthwallProduct]) -> Optional[Product]:
    """Map a Fourthwall product body to a Product; empty body yields None."""
    if not product or not isinstance(product, Mapping):
        return None
    variants = list(product.get('variants') or [])
    prices = [_variant_price(v) for v in variants]
    currency = prices[0][1] if prices else DEFAULT_CURRENCY
    amounts = [amount for amount, _ in prices] or [Decimal('0')]
    title = product.get('name') or ''
    description = product.get('description') or ''
    images = reshape_images(product.get('images'), title)
    reshaped_variants = tuple(reshape_variant(v) for v in variants)
    return Product(
        id=product.get('id') or '',
        handle=product.get('slug') or '',
        title=title,
        description=description,
        description_html=description,
        available_for_sale=any(v.available_for_sale for v in reshaped_variants),
        options=_product_options(variants),
        price_range=PriceRange(
            min_variant_price=_money(min(amounts), currency),
            max_variant_price=_money(max(amounts), currency),
        ),
        variants=reshaped_variants,
        featured_image=images[0] if images else None,
        images=images,
        tags=(),
        updated_at=product.get('updatedAt'),
    )


def reshape_products(products: Optional[Iterable[FourthwallProduct]]) -> List[Product]:
    out = []
    for p in products or []:
        reshaped = reshape_product(p)
        if reshaped is not None:
            out.append(reshaped)
    return out


def reshape_collection(collection: FourthwallCollection) -> Collection:
    return Collection(
        handle=collection.get('slug') or '',
        title=collection.get('name') or '',
        description=collection.get('description') or '',
    )


def reshape_cart_item(item: FourthwallCartItem) -> CartItem:
    variant = item.get('variant') or {}
    quantity = item.get('quantity') or 0
    amount, currency = _variant_price(variant)
    summary = variant.get('product') or {}
    variant_images = reshape_images(variant.get('images'), summary.get('name') or variant.get('name') or '')
    # Provider addresses cart lines by variant id
    variant_id = variant.get('id') or ''
    return CartItem(
        id=variant_id,
        quantity=quantity,
        cost=_money(amount * quantity, currency),
        merchandise=Merchandise(
            id=variant_id,
            title=variant.get('name') or '',
            selected_options=_selected_options(variant),
            product=CartProduct(
                id=summary.get('id'),
                handle=summary.get('slug'),
                title=summary.get('name'),
                featured_image=variant_images[0] if variant_images else None,
            ),
        ),
    )


def checkout_url(checkout_domain: Optional[str], cart_id: Optional[str], currency: str) -> Optional[str]:
    if not checkout_domain or not cart_id:
        return None
    base = checkout_domain if checkout_domain.startswith('http') else f"https://{checkout_domain}"
    return f"{base}/checkout/?{urlencode({'cartCurrency': currency, 'cartId': cart_id})}"


def reshape_cart(cart: Optional[FourthwallCart], checkout_domain: Optional[str] = None) -> Cart:
    """Map a Fourthwall cart body to a Cart.

    Totals are derived from line unit prices; the provider reports no tax at
    cart level so the tax amount is always zero.
    """
    if not isinstance(cart, Mapping):
        cart = {}
    items = list(cart.get('items') or [])
    lines = tuple(reshape_cart_item(i) for i in items)
    currency = lines[0].cost.currency_code if lines else DEFAULT_CURRENCY
    total = sum((Decimal(line.cost.amount) for line in lines), Decimal('0'))
    cart_id = cart.get('id')
    return Cart(
        id=cart_id,
        checkout_url=checkout_url(checkout_domain, cart_id, currency),
        cost=CartCost(
            subtotal_amount=_money(total, currency),
            total_amount=_money(total, currency),
            total_tax_amount=_money(Decimal('0.0'), currency),
        ),
        lines=lines,
        total_quantity=sum(line.quantity for line in lines),
    )
