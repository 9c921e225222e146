import pytest

from storefront.mock_provider import generate_fake_cart, generate_fake_products, seed_mock
from storefront.models import Collection, Money
from storefront.reshape import (
    checkout_url,
    reshape_cart,
    reshape_collection,
    reshape_product,
    reshape_products,
)


def test_collection_field_mapping():
    c = reshape_collection({'slug': 'tees', 'name': 'T-Shirts', 'description': 'd'})
    assert c == Collection(handle='tees', title='T-Shirts', description='d')


def test_empty_product_body_yields_none():
    assert reshape_product(None) is None
    assert reshape_product({}) is None


def test_product_mapping(product_body):
    p = reshape_product(product_body)
    assert p.id == 'p1'
    assert p.handle == 'classic-tee'
    assert p.title == 'Classic Tee'
    assert p.description_html == '<p>Soft tee</p>'
    assert p.price_range.min_variant_price == Money('20.0', 'USD')
    assert p.price_range.max_variant_price == Money('24.5', 'USD')
    assert [o.id for o in p.options] == ['color', 'size']
    assert p.options[0].values == ('Black', 'White')
    assert p.featured_image.url == 'https://img.test/p1.png'
    assert p.featured_image.alt_text == 'Classic Tee'
    assert p.updated_at == '2024-05-01T00:00:00Z'


def test_variant_availability_follows_stock(product_body):
    p = reshape_product(product_body)
    assert [v.available_for_sale for v in p.variants] == [True, False]
    assert p.available_for_sale is True
    assert [(o.name, o.value) for o in p.variants[0].selected_options] == [('Size', 'M'), ('Color', 'Black')]


def test_product_without_variants_is_total():
    p = reshape_product({'id': 'p9', 'slug': 'empty', 'name': 'Empty'})
    assert p.variants == ()
    assert p.available_for_sale is False
    assert p.price_range.min_variant_price == Money('0', 'USD')
    assert p.featured_image is None


def test_reshape_products_skips_empty_entries(product_body):
    assert len(reshape_products([product_body, {}, None])) == 1
    assert reshape_products(None) == []


def test_cart_totals_and_lines(cart_body):
    cart = reshape_cart(cart_body, checkout_domain='shop.test')
    assert cart.id == 'cart1'
    assert cart.total_quantity == 3
    assert [line.id for line in cart.lines] == ['v1', 'v2']
    assert cart.lines[0].cost == Money('40.0', 'USD')
    assert cart.lines[0].merchandise.product.handle == 'classic-tee'
    assert cart.lines[1].merchandise.product.handle is None
    assert cart.cost.total_amount == Money('64.5', 'USD')
    assert cart.cost.subtotal_amount == cart.cost.total_amount
    assert cart.cost.total_tax_amount == Money('0.0', 'USD')
    assert cart.checkout_url == 'https://shop.test/checkout/?cartCurrency=USD&cartId=cart1'


def test_empty_cart():
    cart = reshape_cart({'id': 'c0', 'items': []})
    assert cart.lines == ()
    assert cart.total_quantity == 0
    assert cart.cost.total_amount == Money('0', 'USD')
    assert cart.checkout_url is None


def test_checkout_url_requires_domain_and_id():
    assert checkout_url(None, 'c1', 'USD') is None
    assert checkout_url('shop.test', None, 'USD') is None
    assert checkout_url('https://shop.test', 'c 1', 'EUR') == 'https://shop.test/checkout/?cartCurrency=EUR&cartId=c+1'


def test_mock_payloads_reshape_cleanly():
    seed_mock(42)
    products = generate_fake_products(n=5, currency='EUR')
    reshaped = reshape_products(products)
    assert [p.handle for p in reshaped] == [p['slug'] for p in products]
    assert all(p.price_range.min_variant_price.currency_code == 'EUR' for p in reshaped)
    cart = reshape_cart(generate_fake_cart(products=products, max_items=2))
    assert len(cart.lines) == 2
    assert cart.total_quantity == sum(line.quantity for line in cart.lines)


@pytest.mark.parametrize('value', ['N/A', 'NaN', 'Infinity', ''])
def test_unparseable_price_falls_back_to_zero(product_body, value):
    product_body['variants'][0]['unitPrice'] = {'value': value, 'currency': 'USD'}
    p = reshape_product(product_body)
    assert p.variants[0].price == Money('0', 'USD')
    assert p.price_range.min_variant_price == Money('0', 'USD')
    assert p.price_range.max_variant_price == Money('24.5', 'USD')


def test_unparseable_price_in_cart_line(cart_body):
    cart_body['items'][0]['variant']['unitPrice'] = {'value': 'N/A', 'currency': 'USD'}
    cart = reshape_cart(cart_body)
    assert cart.lines[0].cost == Money('0', 'USD')
    assert cart.cost.total_amount == Money('24.5', 'USD')
