"""Tests for the catalog store and the order repository."""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from sales_order_service.errors import OrderNotFound
from sales_order_service.repository import OrderRepository, next_order_id
from sales_order_service.schemas import OrderItem, OrderStatus, SaleOrder

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def order(order_id: int, paid: bool = False, modified_offset: int = 0) -> SaleOrder:
    return SaleOrder(
        id=order_id,
        customer_id=1,
        customer_name="Spider Traders",
        items=[OrderItem(sku_id=10, price=100, quantity=1, product_name="Widget")],
        paid=paid,
        invoice_no=f"INV-{order_id}",
        invoice_date=date(2024, 1, 1),
        created_at=T0,
        last_modified=T0 + timedelta(minutes=modified_offset),
        total_price=100,
    )


def test_find_customer_by_profile_id(catalog):
    assert catalog.find_customer(2).customer_profile.name == "Harbor Foods"
    assert catalog.find_customer(102) is None


def test_find_product_by_sku(catalog):
    assert catalog.find_product_by_sku(21).name == "Gadget"
    assert catalog.find_product_by_sku(10).name == "Widget"
    assert catalog.find_product_by_sku(99) is None


def test_sku_index_follows_reload(catalog):
    """Replacing the products rebuilds the SKU lookup."""
    widget = catalog.list_products()[0]
    assert catalog.find_product_by_sku(20) is not None

    catalog.load(catalog.list_customers(), [widget])

    assert catalog.find_product_by_sku(20) is None
    assert catalog.find_product_by_sku(10) == widget


def test_decrement_sku_inventory_allows_negative(catalog):
    sku = catalog.decrement_sku_inventory(21, 5)
    assert sku.quantity_in_inventory == -2
    assert catalog.list_products()[1].sku[1].quantity_in_inventory == -2


def test_decrement_unknown_sku_is_skipped(catalog):
    assert catalog.decrement_sku_inventory(999, 1) is None


def test_next_order_id():
    assert next_order_id([]) == 1
    assert next_order_id([order(3), order(7), order(5)]) == 8


def test_repository_uses_injected_allocator():
    repository = OrderRepository([order(1)], id_allocator=lambda orders: 100 + len(orders))
    assert repository.next_id() == 101


def test_list_by_status_sorts_newest_first():
    repository = OrderRepository([order(1, modified_offset=5), order(2, modified_offset=30), order(3, paid=True)])

    active = repository.list_by_status(OrderStatus.ACTIVE)

    assert [o.id for o in active] == [2, 1]
    assert [o.id for o in repository.list_by_status(OrderStatus.COMPLETED)] == [3]


def test_list_by_status_ties_keep_insertion_order():
    repository = OrderRepository([order(4), order(2), order(9, modified_offset=1), order(7)])
    assert [o.id for o in repository.list_by_status("active")] == [9, 4, 2, 7]


def test_list_by_status_rejects_unknown_status():
    with pytest.raises(ValueError):
        OrderRepository().list_by_status("pending")


def test_replace_keeps_position():
    repository = OrderRepository([order(1), order(2), order(3)])
    repository.replace(order(2, paid=True))

    assert [o.id for o in repository.all()] == [1, 2, 3]
    assert repository.get(2).paid is True


def test_replace_missing_order():
    with pytest.raises(OrderNotFound):
        OrderRepository([order(1)]).replace(order(2))


def test_remove():
    repository = OrderRepository([order(1), order(2)])
    assert repository.remove(1).id == 1
    assert [o.id for o in repository.all()] == [2]
    with pytest.raises(OrderNotFound):
        repository.remove(1)


def test_catalog_hands_out_copies(catalog):
    """Changing a listed product or SKU leaves the stored inventory alone."""
    catalog.list_products()[0].sku[0].quantity_in_inventory = 0
    catalog.find_product_by_sku(10).sku[0].quantity_in_inventory = 0
    catalog.find_sku(10).quantity_in_inventory = 0
    catalog.decrement_sku_inventory(10, 1).quantity_in_inventory = 0

    assert catalog.find_sku(10).quantity_in_inventory == 49


def test_customers_are_read_only(catalog):
    customer = catalog.list_customers()[0]
    with pytest.raises(ValidationError):
        customer.customer_profile.name = "Renamed"
    assert catalog.find_customer(1).customer_profile.name == "Spider Traders"


def test_repository_hands_out_copies():
    """Orders are frozen, and their item lists are copies of the stored ones."""
    repository = OrderRepository([order(1)])
    listed = repository.list_by_status(OrderStatus.ACTIVE)[0]

    with pytest.raises(ValidationError):
        listed.paid = True
    listed.items.append(OrderItem(sku_id=20, price=1, quantity=1))
    repository.get(1).items.clear()

    stored = repository.get(1)
    assert stored.paid is False
    assert len(stored.items) == 1
    assert stored.total_price == 100


def test_inserted_order_is_not_aliased():
    repository = OrderRepository()
    new = order(1)
    repository.insert(new)
    new.items.clear()
    assert len(repository.get(1).items) == 1
