"""Cart line items: accumulate on repeat add, overwrite on update, remove at zero."""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

from storefront.services.cart_service import CartService, cart_total, cart_item_count
from storefront.utils.errors import StoreError

from fakes import USER_ID, OTHER_USER_ID


def _line(price, quantity):
    product = SimpleNamespace(price=price) if price is not None else None
    return SimpleNamespace(product=product, quantity=quantity)


class TestCartTotals:
    def test_empty_cart_totals_zero(self):
        assert cart_total([]) == 0
        assert cart_item_count([]) == 0

    def test_total_is_price_times_quantity(self):
        items = [_line(10, 2), _line(5, 3)]
        assert cart_total(items) == Decimal("35")
        assert cart_item_count(items) == 5

    def test_missing_product_price_counts_as_zero(self):
        items = [_line(None, 4), _line(Decimal("2.50"), 2)]
        assert cart_total(items) == Decimal("5.00")
        assert cart_item_count(items) == 6


class TestCartService:
    def test_empty_cart_lists_nothing(self, db, users):
        assert CartService(db).list_cart(USER_ID) == []

    def test_repeat_add_accumulates_quantity(self, db, users, products):
        svc = CartService(db)
        svc.add_item(USER_ID, products["rice"], 2)
        svc.add_item(USER_ID, products["rice"], 3)

        items = svc.list_cart(USER_ID)
        assert len(items) == 1
        assert items[0].quantity == 5

    def test_add_defaults_to_one(self, db, users, products):
        svc = CartService(db)
        svc.add_item(USER_ID, products["dal"])

        (item,) = svc.list_cart(USER_ID)
        assert item.quantity == 1
        assert item.product.name == "Toor Dal"
        assert item.product.price == Decimal("15.00")

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_add_rejects_non_positive_quantity(self, db, users, products, quantity):
        with pytest.raises(ValueError):
            CartService(db).add_item(USER_ID, products["rice"], quantity)

    def test_carts_are_per_user(self, db, users, products):
        svc = CartService(db)
        svc.add_item(USER_ID, products["rice"], 1)
        svc.add_item(OTHER_USER_ID, products["rice"], 4)

        assert [i.quantity for i in svc.list_cart(USER_ID)] == [1]
        assert [i.quantity for i in svc.list_cart(OTHER_USER_ID)] == [4]

    def test_update_overwrites_quantity(self, db, users, products):
        svc = CartService(db)
        svc.add_item(USER_ID, products["rice"], 2)
        (item,) = svc.list_cart(USER_ID)

        svc.update_quantity(item.id, 7)

        (item,) = svc.list_cart(USER_ID)
        assert item.quantity == 7

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_update_to_zero_or_less_removes_item(self, db, users, products, quantity):
        svc = CartService(db)
        svc.add_item(USER_ID, products["rice"], 2)
        (item,) = svc.list_cart(USER_ID)

        svc.update_quantity(item.id, quantity)

        assert svc.list_cart(USER_ID) == []

    def test_remove_is_idempotent(self, db, users, products):
        svc = CartService(db)
        svc.add_item(USER_ID, products["rice"], 1)
        (item,) = svc.list_cart(USER_ID)

        svc.remove_item(item.id)
        svc.remove_item(item.id)
        svc.remove_item("does-not-exist")

        assert svc.list_cart(USER_ID) == []

    def test_clear_cart_only_touches_one_user(self, db, users, products):
        svc = CartService(db)
        svc.add_item(USER_ID, products["rice"], 1)
        svc.add_item(USER_ID, products["dal"], 2)
        svc.add_item(OTHER_USER_ID, products["dal"], 1)

        svc.clear_cart(USER_ID)

        assert svc.list_cart(USER_ID) == []
        assert len(svc.list_cart(OTHER_USER_ID)) == 1

    def test_cart_total_over_listed_items(self, db, users, products):
        svc = CartService(db)
        svc.add_item(USER_ID, products["rice"], 1)
        svc.add_item(USER_ID, products["dal"], 2)

        items = svc.list_cart(USER_ID)
        assert cart_total(items) == Decimal("50.00")
        assert cart_item_count(items) == 3

    def test_lookup_failure_propagates_as_store_error(self, db, users, products, monkeypatch):
        svc = CartService(db)

        def broken_execute(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(svc.repo.db, "execute", broken_execute)

        with pytest.raises(StoreError):
            svc.add_item(USER_ID, products["rice"], 1)

    def test_list_failure_propagates_as_store_error(self, db, users, monkeypatch):
        svc = CartService(db)

        def broken_execute(*args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(svc.repo.db, "execute", broken_execute)

        with pytest.raises(StoreError):
            svc.list_cart(USER_ID)

    def test_owner_scoped_update_and_remove_skip_other_users_lines(self, db, users, products):
        svc = CartService(db)
        svc.add_item(OTHER_USER_ID, products["rice"], 3)
        (item,) = svc.list_cart(OTHER_USER_ID)

        svc.update_quantity(item.id, 8, user_id=USER_ID)
        svc.update_quantity(item.id, 0, user_id=USER_ID)
        svc.remove_item(item.id, user_id=USER_ID)

        (item,) = svc.list_cart(OTHER_USER_ID)
        assert item.quantity == 3

        svc.update_quantity(item.id, 8, user_id=OTHER_USER_ID)
        assert svc.list_cart(OTHER_USER_ID)[0].quantity == 8
