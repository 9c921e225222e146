from __future__ import annotations
import random
from typing import Any, Dict, List, Optional

_RANDOM = random.Random()


def seed_mock(seed: Optional[int] = None) -> None:
    if seed is not None:
        _RANDOM.seed(seed)

ADJECTIVES = ["Classic","Vintage","Heavy","Soft","Oversized","Cropped","Organic","Retro"]
NOUNS = ["Tee","Hoodie","Cap","Mug","Poster","Sticker","Tote","Beanie"]
COLORS = ["Black","White","Navy","Sand","Forest"]
SIZES = ["S","M","L","XL"]
CURRENCIES = ["USD","EUR","GBP"]


def generate_fake_variant(product_id: str, index: int, price: float, currency: str,
                          product_name: str = '', product_slug: str = '') -> Dict[str, Any]:
    vid = f"{product_id}-v{index+1}"
    color = _RANDOM.choice(COLORS)
    size = _RANDOM.choice(SIZES)
    stock = {'type': 'UNLIMITED'} if _RANDOM.random() < 0.7 else {'type': 'LIMITED', 'inStock': _RANDOM.randint(0, 20)}
    return {
        'id': vid,
        'name': f"{color} / {size}",
        'sku': vid.upper(),
        'unitPrice': {'value': price, 'currency': currency},
        'attributes': {
            'description': f"{color} {size}",
            'color': {'name': color, 'swatch': '#000000'},
            'size': {'name': size},
        },
        'images': [{'id': f"{vid}-img", 'url': f"https://example.com/img/{vid}.png", 'width': 800, 'height': 800}],
        'stock': stock,
        'product': {'id': product_id, 'slug': product_slug, 'name': product_name},
    }


def generate_fake_products(n: int = 10, price_min: float = 10.0, price_max: float = 80.0,
                           currency: Optional[str] = None) -> List[Dict[str, Any]]:
    items: List[Dict[str, Any]] = []
    for i in range(n):
        name = f"{_RANDOM.choice(ADJECTIVES)} {_RANDOM.choice(NOUNS)}"
        pid = f"fw-prod-{i+1}"
        slug = f"{name.lower().replace(' ', '-')}-{i+1}"
        cur = currency or _RANDOM.choice(CURRENCIES)
        base = round(_RANDOM.uniform(price_min, price_max), 2)
        variants = [
            generate_fake_variant(pid, v, round(base + v * 2.5, 2), cur, product_name=name, product_slug=slug)
            for v in range(_RANDOM.randint(1, 3))
        ]
        items.append({
            'id': pid,
            'name': name,
            'slug': slug,
            'description': f"<p>{name} from the mock storefront.</p>",
            'images': [{'id': f"{pid}-img", 'url': f"https://example.com/img/{pid}.png", 'width': 1200, 'height': 1200}],
            'variants': variants,
            'updatedAt': '2024-01-01T00:00:00Z',
        })
    return items


def generate_fake_collections(n: int = 3) -> Dict[str, Any]:
    results = []
    for i in range(n):
        noun = NOUNS[i % len(NOUNS)]
        results.append({
            'id': f"fw-col-{i+1}",
            'slug': f"{noun.lower()}s",
            'name': f"{noun}s",
            'description': f"All {noun.lower()}s",
        })
    return {'results': results}


def generate_fake_cart(cart_id: str = 'fw-cart-1', products: Optional[List[Dict[str, Any]]] = None,
                       max_items: int = 3) -> Dict[str, Any]:
    if products is None:
        products = generate_fake_products(n=max_items, currency='USD')
    items = []
    for p in products[:max_items]:
        variant = _RANDOM.choice(p['variants'])
        items.append({'variant': variant, 'quantity': _RANDOM.randint(1, 3)})
    return {'id': cart_id, 'items': items}
