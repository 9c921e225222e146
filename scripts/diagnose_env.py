#!/usr/bin/env python
"""Environment & connectivity diagnostics for the Fourthwall storefront API.

Usage:
  python scripts/diagnose_env.py [--ping]

Without flags runs variable presence checks. Use --ping to GET the collections listing.
"""
from __future__ import annotations
import os, sys, textwrap
from pathlib import Path
from typing import Dict, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def load_env_file(env_path: Path) -> None:
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k,v = line.split('=',1)
        k = k.strip(); v = v.strip().strip('"').strip("'")
        if not k:
            continue
        existing = os.environ.get(k)
        if existing is None or existing.strip() == '':
            os.environ[k] = v

load_env_file(PROJECT_ROOT / '.env')

from storefront.config import StorefrontConfig
from storefront.exceptions import TransportError
from storefront.fourthwall_client import FourthwallClient

VARIABLES: List[str] = ['FW_API_URL', 'FW_STOREFRONT_TOKEN', 'FW_CHECKOUT_DOMAIN', 'FW_TIMEOUT']


def mask(val: str | None) -> str | None:
    if not val:
        return val
    if len(val) <= 6:
        return '*' * len(val)
    return val[:4] + '...' + val[-4:]


def check_presence() -> Dict[str, str]:
    return {k: 'OK' if (os.getenv(k) or '').strip() else 'MISSING' for k in VARIABLES}


def print_report(config: StorefrontConfig):
    print('\n[VARIABLE PRESENCE]')
    widest = max(len(k) for k in VARIABLES)
    for k, status in check_presence().items():
        shown = mask(os.getenv(k)) if k == 'FW_STOREFRONT_TOKEN' else os.getenv(k)
        print(f"  {k.ljust(widest)} : {status:<8} {'' if status!='OK' else shown}")
    print('\n[EFFECTIVE CONFIG]')
    print(f"  api_url         : {config.api_url}")
    print(f"  checkout_domain : {config.checkout_domain or '-'}")
    print(f"  timeout         : {config.timeout}")
    print()


def ping(config: StorefrontConfig) -> bool:
    if not config.storefront_token:
        print('[fourthwall] Skipping connectivity test (FW_STOREFRONT_TOKEN missing)')
        return False
    client = FourthwallClient(config)
    print(f"[fourthwall] GET {config.api_url}/api/public/v1.0/collections")
    try:
        collections = client.get_collections()
    except TransportError as e:
        print(f"[fourthwall] ERROR network: {e.cause}")
        return False
    print(f"[fourthwall] Collections: {len(collections)}")
    if not collections:
        print(textwrap.dedent("""
            HINT: An empty listing usually means the storefront token belongs to a different shop or the shop has no public collections.
        """))
    return True


def main(argv: List[str]) -> int:
    flags = set(a for a in argv[1:] if a.startswith('--'))
    config = StorefrontConfig.from_env()
    print_report(config)
    if '--ping' in flags:
        return 0 if ping(config) else 1
    return 0

if __name__ == '__main__':
    sys.exit(main(sys.argv))
