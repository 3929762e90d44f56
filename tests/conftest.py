"""Test fixtures for the sales order service tests."""

from datetime import date, datetime, timedelta, timezone

import pytest

from sales_order_service.catalog import CatalogStore
from sales_order_service.repository import OrderRepository
from sales_order_service.schemas import SKU, Customer, CustomerProfile, OrderItem, Product, SaleOrderFormData
from sales_order_service.service import OrderService


class FakeClock:
    """Clock that moves forward one second on every reading."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


def make_customer(profile_id: int, name: str) -> Customer:
    return Customer(
        id=profile_id + 100,
        customer=profile_id + 1000,
        customer_profile=CustomerProfile(
            id=profile_id,
            name=name,
            color=[0, 0, 0],
            email=f"{name.lower().replace(' ', '.')}@example.com",
            pincode="560001",
            location_name="Bengaluru",
            type="C",
            gst="29ABCDE1234F1Z5",
        ),
    )


def make_product(product_id: int, name: str, skus: list[tuple[int, float, int]]) -> Product:
    return Product(
        id=product_id,
        display_id=product_id,
        owner=1,
        name=name,
        category="General",
        brand="Acme",
        sku=[
            SKU(
                id=sku_id,
                selling_price=price,
                max_retail_price=price,
                amount=1,
                unit="pc",
                quantity_in_inventory=on_hand,
                product=product_id,
            )
            for sku_id, price, on_hand in skus
        ],
        updated_on=datetime(2024, 1, 1, tzinfo=timezone.utc),
        adding_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def clock():
    """Create a deterministic, strictly increasing clock."""
    return FakeClock()


@pytest.fixture
def catalog():
    """Create a catalog with a Widget (SKU 10) and a Gadget with two SKUs.

    Returns:
        CatalogStore: Catalog with customers 1 and 2.
    """
    return CatalogStore(
        customers=[make_customer(1, "Spider Traders"), make_customer(2, "Harbor Foods")],
        products=[
            make_product(1, "Widget", [(10, 100, 50)]),
            make_product(2, "Gadget", [(20, 25.5, 8), (21, 60, 3)]),
        ],
    )


@pytest.fixture
def repository():
    """Create an empty order repository."""
    return OrderRepository()


@pytest.fixture
def service(catalog, repository, clock):
    """Create an order service over the test catalog with no latency."""
    return OrderService(catalog, repository, clock=clock)


@pytest.fixture
def widget_order():
    """Order form for three Widgets at 100 each."""
    return SaleOrderFormData(
        customer_id=1,
        items=[OrderItem(sku_id=10, price=100, quantity=3)],
        paid=False,
        invoice_no="INV-1",
        invoice_date=date(2024, 1, 1),
    )
