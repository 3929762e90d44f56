"""In-memory store of sale orders."""

from typing import Callable, Iterable, Optional

from .errors import OrderNotFound
from .logger import logger
from .schemas import OrderStatus, SaleOrder

IdAllocator = Callable[[list[SaleOrder]], int]


def next_order_id(orders: list[SaleOrder]) -> int:
    """Allocate the identifier following the highest one in use.

    Args:
        orders: Orders currently stored.

    Returns:
        int: max(existing ids) + 1, or 1 when there are none.
    """
    return max((order.id for order in orders), default=0) + 1


class OrderRepository:
    """Sale orders kept in insertion order.

    Orders are copied on the way in and out, so nothing a caller holds
    aliases stored state.

    Attributes:
        _orders: Stored orders; position is the insertion order.
        _allocate_id: Computes the id of the next inserted order.
    """

    def __init__(self, orders: Iterable[SaleOrder] = (), id_allocator: IdAllocator = next_order_id):
        self._orders: list[SaleOrder] = [order.model_copy(deep=True) for order in orders]
        self._allocate_id = id_allocator

    def __len__(self) -> int:
        return len(self._orders)

    def all(self) -> list[SaleOrder]:
        return [order.model_copy(deep=True) for order in self._orders]

    def next_id(self) -> int:
        return self._allocate_id(list(self._orders))

    def get(self, order_id: int) -> Optional[SaleOrder]:
        order = next((order for order in self._orders if order.id == order_id), None)
        return order.model_copy(deep=True) if order is not None else None

    def list_by_status(self, status: OrderStatus) -> list[SaleOrder]:
        """Get orders matching a payment status, most recently modified first.

        Args:
            status: `active` selects unpaid orders, `completed` paid ones.

        Returns:
            Matching orders sorted by `last_modified` descending; ties keep insertion order.
        """
        paid = OrderStatus(status) is OrderStatus.COMPLETED
        matching = [order for order in self._orders if order.paid == paid]
        # sorted() is stable with reverse=True, so equal timestamps keep insertion order
        ordered = sorted(matching, key=lambda order: order.last_modified, reverse=True)
        return [order.model_copy(deep=True) for order in ordered]

    def insert(self, order: SaleOrder) -> SaleOrder:
        self._orders.append(order.model_copy(deep=True))
        logger.debug(f"Order stored | id={order.id} | count={len(self._orders)}")
        return order

    def replace(self, order: SaleOrder) -> SaleOrder:
        """Replace the stored order that has the same id, keeping its position.

        Raises:
            OrderNotFound: If no stored order has `order.id`.
        """
        for index, existing in enumerate(self._orders):
            if existing.id == order.id:
                self._orders[index] = order.model_copy(deep=True)
                return order
        raise OrderNotFound(order.id)

    def remove(self, order_id: int) -> SaleOrder:
        """Remove an order; used to undo an insert whose side effects failed.

        Raises:
            OrderNotFound: If no stored order has `order_id`.
        """
        for index, existing in enumerate(self._orders):
            if existing.id == order_id:
                return self._orders.pop(index)
        raise OrderNotFound(order_id)
