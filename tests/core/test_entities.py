"""Tests for domain entities and factories."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from shopstats.core.domain import (
    Order,
    Product,
    ProductFactory,
    ProductKind,
    RealProduct,
    ShopData,
    User,
    VirtualProduct,
    create_order,
    create_real_product,
    create_user,
    create_virtual_product,
)
from shopstats.core.exceptions import InvalidArgumentError, ShopStatsError


class TestUser:
    """Tests for User."""

    def test_create(self):
        user = create_user("Alice", 32)

        assert user.name == "Alice"
        assert user.age == 32

    def test_identity_equality(self):
        first = create_user("Alice", 32)
        second = create_user("Alice", 32)

        assert first == first
        assert first != second
        assert len({first, second}) == 2

    def test_immutable(self):
        user = create_user("Alice", 32)

        with pytest.raises(FrozenInstanceError):
            user.age = 33

    def test_negative_age(self):
        with pytest.raises(InvalidArgumentError):
            create_user("Nobody", -1)

    def test_str(self):
        assert str(create_user("Alice", 32)) == "User{name='Alice', age=32}"


class TestProducts:
    """Tests for the product variants."""

    def test_real_product(self):
        product = create_real_product("Product A", 20.50, 10, 25)

        assert isinstance(product, Product)
        assert isinstance(product, RealProduct)
        assert product.kind is ProductKind.REAL
        assert product.price == 20.50
        assert product.size == 10
        assert product.weight == 25

    def test_virtual_product(self):
        product = create_virtual_product("Product C", 100, "xxx", date(2023, 5, 12))

        assert isinstance(product, Product)
        assert isinstance(product, VirtualProduct)
        assert product.kind is ProductKind.VIRTUAL
        assert product.code == "xxx"
        assert product.expiration_date == date(2023, 5, 12)

    def test_product_factory(self):
        real = ProductFactory.create_real_product("B", 50, 6, 17)
        virtual = ProductFactory.create_virtual_product("D", 81.25, "yyy", date(2024, 6, 20))

        assert real.kind is ProductKind.REAL
        assert virtual.kind is ProductKind.VIRTUAL

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            Product("Generic", 1.0)

    def test_negative_price(self):
        with pytest.raises(InvalidArgumentError):
            create_real_product("Broken", -0.01, 1, 1)

    def test_negative_weight(self):
        with pytest.raises(InvalidArgumentError):
            create_real_product("Broken", 1, 1, -5)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            create_virtual_product("Broken", -1, "code", date(2024, 1, 1))

    def test_invalid_argument_is_shopstats_error(self):
        assert issubclass(InvalidArgumentError, ShopStatsError)

    def test_virtual_product_needs_code(self):
        with pytest.raises(InvalidArgumentError, match="needs a code"):
            create_virtual_product("Voucher", 10, "", date(2024, 1, 1))

    def test_virtual_product_needs_expiration_date(self):
        with pytest.raises(InvalidArgumentError, match="expiration date"):
            create_virtual_product("Voucher", 10, "v-1", None)

    def test_identity_equality(self):
        first = create_real_product("A", 1, 1, 1)
        second = create_real_product("A", 1, 1, 1)

        assert first != second

    def test_str(self):
        real = create_real_product("Product A", 20.5, 10, 25)
        virtual = create_virtual_product("Product C", 100, "xxx", date(2023, 5, 12))

        assert str(real) == "RealProduct{size=10, weight=25, name='Product A', price=20.5}"
        assert str(virtual) == (
            "VirtualProduct{code='xxx', expirationDate=2023-05-12, name='Product C', price=100}"
        )


class TestOrder:
    """Tests for Order."""

    def test_create_keeps_order_and_repeats(self, alice, product_a, product_c):
        order = create_order(alice, [product_a, product_c, product_a])

        assert order.user is alice
        assert order.products == (product_a, product_c, product_a)

    def test_create_copies_products(self, alice, product_a):
        products = [product_a]
        order = create_order(alice, products)

        products.append(product_a)

        assert len(order.products) == 1

    def test_empty_order(self, alice):
        order = create_order(alice, [])

        assert order.products == ()

    def test_contains_by_identity(self, alice, product_a):
        lookalike = create_real_product(product_a.name, product_a.price, product_a.size, product_a.weight)
        order = create_order(alice, [product_a])

        assert order.contains(product_a)
        assert not order.contains(lookalike)

    def test_usable_as_key(self, alice, bob):
        first = create_order(alice, [])
        second = create_order(bob, [])

        mapping = {first: 1, second: 2}

        assert mapping[first] == 1
        assert isinstance(first, Order)


class TestShopData:
    """Tests for ShopData."""

    def test_find_product(self, scenario, product_c):
        assert scenario.find_product("C") is product_c

    def test_find_product_missing(self, scenario):
        assert scenario.find_product("Z") is None

    def test_defaults_are_empty(self):
        data = ShopData()

        assert data.users == []
        assert data.products == []
        assert data.orders == []

    def test_users_are_plain_records(self, scenario):
        assert all(isinstance(user, User) for user in scenario.users)
