#!/usr/bin/env python
"""CLI to fetch normalized storefront data from the Fourthwall API.

Examples:
  python scripts/fetch_storefront_data.py --resource collections --out data/collections.json
  python scripts/fetch_storefront_data.py --resource collection-products --collection all --currency USD --limit 20 --out data/all.json
  python scripts/fetch_storefront_data.py --resource product --handle classic-tee --currency EUR --out data/tee.json
  python scripts/fetch_storefront_data.py --resource cart --cart-id cart_123 --currency USD --out data/cart.json
  python scripts/fetch_storefront_data.py --resource collection-products --mock --seed 7 --out data/mock.json

Options:
  --mock (reshape generated fixture payloads instead of calling the API)
  --verbose
"""
from __future__ import annotations
import argparse
import dataclasses
import json
import logging
import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# Load a local .env if present (no python-dotenv dependency)
def _load_env_file(env_path: Path) -> None:
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip(); v = v.strip().strip('"').strip("'")
        existing = os.environ.get(k)
        if existing is None or existing.strip() == '':
            os.environ[k] = v

_load_env_file(PROJECT_ROOT / '.env')

from storefront.exceptions import ApiRequestError
from storefront.fourthwall_client import FourthwallClient
from storefront.mock_provider import (
    generate_fake_cart,
    generate_fake_collections,
    generate_fake_products,
    seed_mock,
)
from storefront.reshape import reshape_cart, reshape_collection, reshape_product, reshape_products

RESOURCES = ['collections', 'collection-products', 'product', 'cart']

logger = logging.getLogger('fetch_storefront_data')


def parse_args(argv=None):
    p = argparse.ArgumentParser(description='Fetch normalized Fourthwall storefront data')
    p.add_argument('--resource', required=True, choices=RESOURCES)
    p.add_argument('--collection', help='Collection handle for collection-products')
    p.add_argument('--handle', help='Product handle')
    p.add_argument('--cart-id', help='Cart id')
    p.add_argument('--currency', default='USD')
    p.add_argument('--limit', type=int)
    p.add_argument('--out', required=True, help='Output JSON file path')
    p.add_argument('--mock', action='store_true')
    p.add_argument('--seed', type=int)
    p.add_argument('--verbose', action='store_true')
    return p.parse_args(argv)


def fetch_live(client: FourthwallClient, args):
    if args.resource == 'collections':
        return client.get_collections()
    if args.resource == 'collection-products':
        if not args.collection:
            raise SystemExit('--collection required for collection-products')
        return client.get_collection_products(args.collection, currency=args.currency, limit=args.limit)
    if args.resource == 'product':
        if not args.handle:
            raise SystemExit('--handle required for product')
        return client.get_product(args.handle, currency=args.currency)
    return client.get_cart(args.cart_id, currency=args.currency)


def fetch_mock(args):
    seed_mock(args.seed)
    if args.resource == 'collections':
        return [reshape_collection(c) for c in generate_fake_collections()['results']]
    if args.resource == 'collection-products':
        return reshape_products(generate_fake_products(n=args.limit or 10, currency=args.currency))
    if args.resource == 'product':
        return reshape_product(generate_fake_products(n=1, currency=args.currency)[0])
    return reshape_cart(generate_fake_cart(cart_id=args.cart_id or 'fw-cart-1'))


def to_jsonable(data):
    if isinstance(data, list):
        return [to_jsonable(d) for d in data]
    if dataclasses.is_dataclass(data):
        return dataclasses.asdict(data)
    return data


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format='[%(levelname)s] %(message)s')
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    if args.mock:
        data = fetch_mock(args)
    else:
        client = FourthwallClient.from_env()
        try:
            data = fetch_live(client, args)
        except ApiRequestError as e:
            logger.error('%s', e)
            return 1

    out_path.write_text(json.dumps(to_jsonable(data), ensure_ascii=False, indent=2), encoding='utf-8')
    logger.info('Wrote %s', out_path)
    return 0


if __name__ == '__main__':
    sys.exit(main())
