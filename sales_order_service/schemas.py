"""Pydantic models for customers, products and sale orders."""

import random
from datetime import date, datetime, timezone
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_PRODUCT = "Unknown Product"


def generate_invoice_no(today: Optional[date] = None) -> str:
    """Generate an invoice number in format INV-YYYYMMDD-NNN.

    Args:
        today (date | None): Date stamped into the number, defaults to today.

    Returns:
        str: Invoice number with a random zero-padded three digit suffix.
    """
    today = today or date.today()
    return f"INV-{today:%Y%m%d}-{random.randint(0, 999):03d}"


class OrderStatus(str, Enum):
    """Payment status filter for order listings."""

    ACTIVE = "active"
    COMPLETED = "completed"


class CustomerProfile(BaseModel):
    """Contact and classification details of a customer."""

    id: int
    name: str
    color: list[int] = Field(default_factory=list)
    email: str
    pincode: str
    location_name: str
    type: str
    profile_pic: Optional[str] = None
    gst: str

    model_config = ConfigDict(frozen=True)


class Customer(BaseModel):
    """Customer reference data.

    Attributes:
        id (int): Record identifier.
        customer (int): Linked customer account identifier.
        customer_profile (CustomerProfile): Embedded profile; its id is what orders reference.
    """

    id: int
    customer: int
    customer_profile: CustomerProfile

    model_config = ConfigDict(frozen=True)


class SKU(BaseModel):
    """A purchasable variant of a product.

    Attributes:
        id (int): SKU identifier, unique across the catalog.
        selling_price (float): Current selling price.
        max_retail_price (float): Maximum retail price.
        amount (float): Package amount, expressed in `unit`.
        unit (str): Package unit label.
        quantity_in_inventory (int): On-hand quantity, may go negative.
        product (int): Owning product identifier.
    """

    id: int
    selling_price: float
    max_retail_price: float
    amount: float
    unit: str
    quantity_in_inventory: int
    product: int


class Product(BaseModel):
    """A catalog product owning one or more SKUs."""

    id: int
    display_id: int
    owner: int
    name: str
    category: str
    characteristics: str = ""
    features: str = ""
    brand: str
    sku: list[SKU] = Field(..., min_length=1)
    updated_on: datetime
    adding_date: datetime


class OrderItem(BaseModel):
    """One line of a sale order.

    Attributes:
        sku_id (int): Referenced SKU identifier.
        price (float): Unit price captured at order time, must not be negative.
        quantity (int): Ordered quantity, at least one.
        product_name (str | None): Display name resolved from the catalog.
    """

    sku_id: int
    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=1)
    product_name: Optional[str] = None

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "properties": {
                "sku_id": {"example": 10},
                "price": {"example": 100.0},
                "quantity": {"example": 3},
            }
        },
    )

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


class SaleOrderFormData(BaseModel):
    """Operator input for creating or updating a sale order."""

    customer_id: int
    items: list[OrderItem] = Field(..., min_length=1, description="At least one item required")
    paid: bool = False
    invoice_no: str = Field(default_factory=generate_invoice_no, min_length=1)
    invoice_date: date = Field(default_factory=date.today)

    model_config = ConfigDict(
        json_schema_extra={
            "properties": {
                "customer_id": {"example": 1},
                "items": {"example": [{"sku_id": 10, "price": 100.0, "quantity": 3}]},
                "invoice_no": {"example": "INV-20240101-001"},
                "invoice_date": {"example": "2024-01-01"},
            }
        }
    )


class SaleOrder(BaseModel):
    """A persisted sale order.

    `total_price` is always derived from `items`; see `compute_total`. Orders
    are immutable, changes go through `model_copy(update=...)`.
    """

    id: int
    customer_id: int
    customer_name: str
    items: list[OrderItem]
    paid: bool
    invoice_no: str
    invoice_date: date
    created_at: datetime
    last_modified: datetime
    total_price: float

    model_config = ConfigDict(frozen=True)


def compute_total(items: list[OrderItem]) -> float:
    """Sum of price times quantity over all items."""
    return sum(item.line_total for item in items)


class User(BaseModel):
    """An operator allowed to log in."""

    username: str
    password: str


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    username: str
    token: str


class OrderEvent(BaseModel):
    """Order lifecycle event published after a mutation commits."""

    event_type: Literal["created", "updated", "paid"]
    order: SaleOrder
    emitted_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def topic(self) -> str:
        return f"orders.{self.event_type}"
