"""Pytest fixtures: a client wired to a mocked requests.Session."""
import json
from unittest.mock import Mock

import pytest

from storefront.config import StorefrontConfig
from storefront.fourthwall_client import FourthwallClient

API_URL = 'https://api.test'
TOKEN = 'tok_123'


def make_response(body, status=200):
    resp = Mock()
    resp.status_code = status
    resp.content = b'' if body is None else json.dumps(body).encode('utf-8')
    resp.json.return_value = body
    return resp


@pytest.fixture
def config():
    return StorefrontConfig(api_url=API_URL, storefront_token=TOKEN, checkout_domain='shop.test', timeout=5.0)


@pytest.fixture
def session():
    s = Mock()
    s.request.return_value = make_response({})
    return s


@pytest.fixture
def client(config, session):
    return FourthwallClient(config, session=session)


@pytest.fixture
def product_body():
    return {
        'id': 'p1',
        'name': 'Classic Tee',
        'slug': 'classic-tee',
        'description': '<p>Soft tee</p>',
        'images': [{'id': 'i1', 'url': 'https://img.test/p1.png', 'width': 800, 'height': 600}],
        'variants': [
            {
                'id': 'v1',
                'name': 'Black / M',
                'unitPrice': {'value': 20.0, 'currency': 'USD'},
                'attributes': {'color': {'name': 'Black'}, 'size': {'name': 'M'}},
                'images': [],
                'stock': {'type': 'UNLIMITED'},
            },
            {
                'id': 'v2',
                'name': 'White / L',
                'unitPrice': {'value': 24.5, 'currency': 'USD'},
                'attributes': {'color': {'name': 'White'}, 'size': {'name': 'L'}},
                'images': [],
                'stock': {'type': 'LIMITED', 'inStock': 0},
            },
        ],
        'updatedAt': '2024-05-01T00:00:00Z',
    }


@pytest.fixture
def cart_body(product_body):
    v1, v2 = product_body['variants']
    v1 = dict(v1, product={'id': 'p1', 'slug': 'classic-tee', 'name': 'Classic Tee'})
    return {'id': 'cart1', 'items': [{'variant': v1, 'quantity': 2}, {'variant': v2, 'quantity': 1}]}
