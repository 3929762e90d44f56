"""Order management: assembling, pricing and persisting sale orders."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Callable, Literal, Optional

from .catalog import CatalogStore
from .errors import CustomerNotFound, OrderNotFound
from .logger import logger
from .producer import OrderEventProducer
from .repository import OrderRepository
from .schemas import (
    UNKNOWN_PRODUCT,
    Customer,
    OrderEvent,
    OrderItem,
    OrderStatus,
    Product,
    SaleOrder,
    SaleOrderFormData,
    compute_total,
)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderService:
    """Validates and assembles sale orders against the catalog.

    Every operation first awaits the simulated store round trip, then runs
    its reads and writes as one critical section under `_lock`.

    Attributes:
        catalog: Customer and product store; inventory is decremented on create.
        orders: Sale order store.
        clock: Source of the current timestamp.
        latency: Seconds awaited before each operation.
        events: Optional publisher notified after each committed mutation.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        orders: OrderRepository,
        clock: Clock = utcnow,
        latency_ms: int = 0,
        events: Optional[OrderEventProducer] = None,
    ):
        self.catalog = catalog
        self.orders = orders
        self.clock = clock
        self.latency = latency_ms / 1000
        self.events = events
        self._lock = asyncio.Lock()

    async def _round_trip(self) -> None:
        if self.latency:
            await asyncio.sleep(self.latency)

    def _stamp(self, previous: Optional[datetime] = None) -> datetime:
        """Current UTC time, nudged past `previous` so modifications always move forward.

        Naive readings, from the clock or stored orders, are taken as local time.
        """
        now = self.clock().astimezone(timezone.utc)
        if previous is not None:
            previous = previous.astimezone(timezone.utc)
            if now <= previous:
                now = previous + timedelta(microseconds=1)
        return now

    def _require_customer(self, customer_id: int) -> Customer:
        customer = self.catalog.find_customer(customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)
        return customer

    def _resolve_items(self, items: list[OrderItem]) -> list[OrderItem]:
        """Copy items with product names looked up from the catalog.

        An unresolvable SKU is not an error; its item is labelled UNKNOWN_PRODUCT.
        """
        resolved = []
        for item in items:
            product = self.catalog.find_product_by_sku(item.sku_id)
            name = product.name if product is not None else UNKNOWN_PRODUCT
            if product is None:
                logger.warning(f"SKU {item.sku_id} not in catalog, recording as {UNKNOWN_PRODUCT!r}")
            resolved.append(item.model_copy(update={"product_name": name}))
        return resolved

    def _apply_inventory(self, items: list[OrderItem]) -> None:
        """Decrement inventory for every item, undoing all of it if one fails."""
        applied: list[OrderItem] = []
        try:
            for item in items:
                self.catalog.decrement_sku_inventory(item.sku_id, item.quantity)
                applied.append(item)
        except Exception:
            for item in reversed(applied):
                self.catalog.decrement_sku_inventory(item.sku_id, -item.quantity)
            raise

    def _publish(self, event_type: Literal["created", "updated", "paid"], order: SaleOrder) -> None:
        if self.events is not None:
            self.events.publish(OrderEvent(event_type=event_type, order=order))

    async def list_customers(self) -> list[Customer]:
        await self._round_trip()
        return self.catalog.list_customers()

    async def list_products(self) -> list[Product]:
        await self._round_trip()
        return self.catalog.list_products()

    async def list_orders(self, status: OrderStatus) -> list[SaleOrder]:
        """Get active (unpaid) or completed (paid) orders, most recently modified first."""
        await self._round_trip()
        return self.orders.list_by_status(status)

    async def get_order(self, order_id: int) -> SaleOrder:
        await self._round_trip()
        order = self.orders.get(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    async def create_order(self, data: SaleOrderFormData) -> SaleOrder:
        """Create and persist a sale order, then take its items out of inventory.

        The insert and the inventory decrements form one unit: if any
        decrement fails, the decrements already applied are reverted, the
        order is removed again and the error propagates.

        Args:
            data: Customer, items, payment flag and invoice details.

        Returns:
            SaleOrder: The persisted order.

        Raises:
            CustomerNotFound: If `data.customer_id` matches no customer.
        """
        await self._round_trip()
        async with self._lock:
            customer = self._require_customer(data.customer_id)
            items = self._resolve_items(data.items)
            now = self._stamp()
            order = SaleOrder(
                id=self.orders.next_id(),
                customer_id=data.customer_id,
                customer_name=customer.customer_profile.name,
                items=items,
                paid=data.paid,
                invoice_no=data.invoice_no,
                invoice_date=data.invoice_date,
                created_at=now,
                last_modified=now,
                total_price=compute_total(items),
            )
            self.orders.insert(order)
            try:
                self._apply_inventory(order.items)
            except Exception as e:
                self.orders.remove(order.id)
                logger.error(f"Order {order.id} rolled back, inventory update failed: {e}")
                raise

        logger.info(
            f"Order created | id={order.id} | customer_id={order.customer_id} | "
            f"items={len(order.items)} | total={order.total_price} | paid={order.paid}"
        )
        self._publish("created", order)
        return order

    async def update_order(self, order_id: int, data: SaleOrderFormData) -> SaleOrder:
        """Replace an order's contents, keeping its id and creation time.

        Inventory is not touched. `paid` is taken from `data` as given, so an
        update can also reopen a completed order.

        Raises:
            OrderNotFound: If no order has `order_id`.
            CustomerNotFound: If `data.customer_id` matches no customer.
        """
        await self._round_trip()
        async with self._lock:
            existing = self.orders.get(order_id)
            if existing is None:
                raise OrderNotFound(order_id)
            customer = self._require_customer(data.customer_id)
            items = self._resolve_items(data.items)
            order = existing.model_copy(
                update={
                    "customer_id": data.customer_id,
                    "customer_name": customer.customer_profile.name,
                    "items": items,
                    "paid": data.paid,
                    "invoice_no": data.invoice_no,
                    "invoice_date": data.invoice_date,
                    "last_modified": self._stamp(existing.last_modified),
                    "total_price": compute_total(items),
                }
            )
            self.orders.replace(order)

        logger.info(f"Order updated | id={order.id} | total={order.total_price} | paid={order.paid}")
        self._publish("updated", order)
        return order

    async def mark_order_as_paid(self, order_id: int) -> SaleOrder:
        """Set an order's paid flag.

        Repeating the call on a paid order only refreshes `last_modified`.

        Raises:
            OrderNotFound: If no order has `order_id`.
        """
        await self._round_trip()
        async with self._lock:
            existing = self.orders.get(order_id)
            if existing is None:
                raise OrderNotFound(order_id)
            order = existing.model_copy(
                update={"paid": True, "last_modified": self._stamp(existing.last_modified)}
            )
            self.orders.replace(order)

        logger.info(f"Order marked as paid | id={order.id}")
        self._publish("paid", order)
        return order
