from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = 'https://storefront-api.fourthwall.com'


@dataclass(frozen=True)
class StorefrontConfig:
    """Read-only connection settings, resolved once at process start."""
    api_url: str = DEFAULT_API_URL
    storefront_token: str = ''
    checkout_domain: Optional[str] = None
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> 'StorefrontConfig':
        api_url = os.getenv('FW_API_URL') or DEFAULT_API_URL
        token = os.getenv('FW_STOREFRONT_TOKEN', '')
        checkout_domain = os.getenv('FW_CHECKOUT_DOMAIN') or None
        timeout_value = os.getenv('FW_TIMEOUT')
        try:
            timeout = float(timeout_value) if timeout_value else 30.0
        except ValueError:
            raise ValueError(f"FW_TIMEOUT must be a number, got {timeout_value!r}")
        return cls(
            api_url=api_url.rstrip('/'),
            storefront_token=token,
            checkout_domain=checkout_domain.rstrip('/') if checkout_domain else None,
            timeout=timeout,
        )
