"""Tests for the in-memory record store."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from commerce_core.domain.models import Order, OrderStatus, User


def make_user(name="Ann", email="ann@x.com", **kwargs):
    return User(name=name, email=email, **kwargs)


def make_order(user_id=1, product_name="Laptop", amount=100.0, **kwargs):
    return Order(user_id=user_id, product_name=product_name, amount=amount, **kwargs)


class TestUserRecords:
    """User half of the store."""

    def test_save_assigns_sequential_ids(self, store):
        assert store.save_user(make_user()) == 1
        assert store.save_user(make_user(name="Bob")) == 2

    def test_save_ignores_input_id(self, store):
        user_id = store.save_user(make_user(id=99))

        assert user_id == 1
        assert store.find_user_by_id(1).id == 1
        assert store.find_user_by_id(99) is None

    def test_find_missing_returns_none(self, store):
        assert store.find_user_by_id(12345) is None

    def test_update_replaces_whole_record(self, store):
        user_id = store.save_user(make_user())
        replacement = User(id=user_id, name="Ann B", email="annb@x.com", is_active=False)

        assert store.update_user(replacement) is True
        assert store.find_user_by_id(user_id) == replacement

    def test_update_missing_returns_false(self, store):
        assert store.update_user(make_user(id=5)) is False
        assert store.count_users() == 0

    def test_delete(self, store):
        user_id = store.save_user(make_user())

        assert store.delete_user(user_id) is True
        assert store.delete_user(user_id) is False
        assert store.find_user_by_id(user_id) is None

    def test_find_all(self, store):
        store.save_user(make_user())
        store.save_user(make_user(name="Bob", email="bob@x.com"))

        names = sorted(u.name for u in store.find_all_users())
        assert names == ["Ann", "Bob"]


class TestOrderRecords:
    """Order half of the store."""

    def test_order_ids_independent_of_user_ids(self, store):
        store.save_user(make_user())
        store.save_user(make_user())

        assert store.save_order(make_order()) == 1

    def test_find_by_user(self, store):
        store.save_order(make_order(user_id=1))
        store.save_order(make_order(user_id=2))
        store.save_order(make_order(user_id=1, product_name="Mouse"))

        products = sorted(o.product_name for o in store.find_orders_by_user(1))
        assert products == ["Laptop", "Mouse"]
        assert store.find_orders_by_user(3) == []

    def test_update_and_find(self, store):
        order_id = store.save_order(make_order())
        stored = store.find_order_by_id(order_id)

        assert store.update_order(stored.with_status(OrderStatus.SHIPPED)) is True
        assert store.find_order_by_id(order_id).status == OrderStatus.SHIPPED

    def test_update_missing_returns_false(self, store):
        assert store.update_order(make_order(id=3)) is False

    def test_delete(self, store):
        order_id = store.save_order(make_order())

        assert store.delete_order(order_id) is True
        assert store.delete_order(order_id) is False
        assert store.find_all_orders() == []


def test_clear_resets_everything(store):
    store.save_user(make_user())
    store.save_user(make_user())
    store.save_order(make_order())

    store.clear()

    assert store.count_users() == 0
    assert store.count_orders() == 0
    assert store.save_user(make_user()) == 1
    assert store.save_order(make_order()) == 1


@pytest.mark.race
def test_concurrent_saves_get_unique_ids(store):
    """Many threads saving at once never share an id."""

    def save(i):
        return store.save_user(make_user(name=f"User {i}"))

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(save, range(200)))

    assert sorted(ids) == list(range(1, 201))
    assert store.count_users() == 200
