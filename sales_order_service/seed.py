"""Seed data for the in-memory stores.

Each function returns fresh objects so separate contexts never share state.
"""

from datetime import date, datetime, timezone

from .schemas import SKU, Customer, CustomerProfile, OrderItem, Product, SaleOrder, User


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def seed_users() -> list[User]:
    return [
        User(username="admin", password="admin123"),
        User(username="operator", password="operator123"),
    ]


def seed_customers() -> list[Customer]:
    return [
        Customer(
            id=9,
            customer=11908,
            customer_profile=CustomerProfile(
                id=1,
                name="Spider Traders",
                color=[182, 73, 99],
                email="orders@spidertraders.example",
                pincode="560001",
                location_name="Bengaluru, Karnataka",
                type="C",
                profile_pic=None,
                gst="29ABCDE1234F1Z5",
            ),
        ),
        Customer(
            id=10,
            customer=11909,
            customer_profile=CustomerProfile(
                id=2,
                name="Harbor Foods",
                color=[40, 120, 200],
                email="accounts@harborfoods.example",
                pincode="400001",
                location_name="Mumbai, Maharashtra",
                type="B",
                profile_pic=None,
                gst="27FGHIJ5678K1Z2",
            ),
        ),
        Customer(
            id=11,
            customer=11910,
            customer_profile=CustomerProfile(
                id=3,
                name="Lotus Stationers",
                color=[90, 160, 60],
                email="hello@lotusstationers.example",
                pincode="110001",
                location_name="New Delhi, Delhi",
                type="C",
                profile_pic="https://images.example/lotus.png",
                gst="07LMNOP9012Q1Z8",
            ),
        ),
    ]


def seed_products() -> list[Product]:
    return [
        Product(
            id=209,
            display_id=8,
            owner=1079,
            name="Premium Basmati Rice",
            category="Grocery",
            characteristics="Long grain, aged 12 months",
            features="Aromatic, non-sticky",
            brand="Royal Harvest",
            sku=[
                SKU(id=248, selling_price=54, max_retail_price=60, amount=1, unit="kg",
                    quantity_in_inventory=120, product=209),
                SKU(id=249, selling_price=250, max_retail_price=280, amount=5, unit="kg",
                    quantity_in_inventory=40, product=209),
            ],
            updated_on=_ts("2024-03-02T10:15:00"),
            adding_date=_ts("2024-01-12T09:00:00"),
        ),
        Product(
            id=210,
            display_id=9,
            owner=1079,
            name="Cold Pressed Groundnut Oil",
            category="Grocery",
            characteristics="Wood pressed, unrefined",
            features="No preservatives",
            brand="Village Mill",
            sku=[
                SKU(id=250, selling_price=320, max_retail_price=350, amount=1, unit="L",
                    quantity_in_inventory=60, product=210),
            ],
            updated_on=_ts("2024-02-20T14:30:00"),
            adding_date=_ts("2024-01-15T11:45:00"),
        ),
        Product(
            id=211,
            display_id=10,
            owner=1079,
            name="A4 Copier Paper",
            category="Stationery",
            characteristics="75 GSM, bright white",
            features="Jam-free printing",
            brand="PaperCraft",
            sku=[
                SKU(id=251, selling_price=280, max_retail_price=310, amount=500, unit="sheets",
                    quantity_in_inventory=75, product=211),
                SKU(id=252, selling_price=1350, max_retail_price=1500, amount=2500, unit="sheets",
                    quantity_in_inventory=12, product=211),
            ],
            updated_on=_ts("2024-03-10T08:00:00"),
            adding_date=_ts("2024-02-01T10:20:00"),
        ),
    ]


def seed_orders() -> list[SaleOrder]:
    return [
        SaleOrder(
            id=1,
            customer_id=1,
            customer_name="Spider Traders",
            items=[
                OrderItem(sku_id=248, price=54, quantity=10, product_name="Premium Basmati Rice"),
                OrderItem(sku_id=250, price=320, quantity=2, product_name="Cold Pressed Groundnut Oil"),
            ],
            paid=False,
            invoice_no="INV-20240315-001",
            invoice_date=date(2024, 3, 15),
            created_at=_ts("2024-03-15T10:30:00"),
            last_modified=_ts("2024-03-15T10:30:00"),
            total_price=1180,
        ),
        SaleOrder(
            id=2,
            customer_id=2,
            customer_name="Harbor Foods",
            items=[
                OrderItem(sku_id=249, price=250, quantity=4, product_name="Premium Basmati Rice"),
            ],
            paid=True,
            invoice_no="INV-20240312-017",
            invoice_date=date(2024, 3, 12),
            created_at=_ts("2024-03-12T16:05:00"),
            last_modified=_ts("2024-03-14T09:40:00"),
            total_price=1000,
        ),
        SaleOrder(
            id=3,
            customer_id=3,
            customer_name="Lotus Stationers",
            items=[
                OrderItem(sku_id=251, price=280, quantity=5, product_name="A4 Copier Paper"),
                OrderItem(sku_id=252, price=1300, quantity=1, product_name="A4 Copier Paper"),
            ],
            paid=False,
            invoice_no="INV-20240318-042",
            invoice_date=date(2024, 3, 18),
            created_at=_ts("2024-03-18T12:00:00"),
            last_modified=_ts("2024-03-18T12:00:00"),
            total_price=2700,
        ),
    ]
