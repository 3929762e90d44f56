"""In-memory catalog of customers and products."""

from typing import Iterable, Optional

from .logger import logger
from .schemas import SKU, Customer, Product


class CatalogStore:
    """Canonical customer and product lists.

    Products are indexed by SKU id so an order item resolves to its owning
    product without scanning. The index is rebuilt whenever the product list
    is replaced; inventory adjustments do not change SKU ownership and keep it.
    Everything handed out is a deep copy; only `decrement_sku_inventory`
    changes stored SKUs.

    Attributes:
        _customers: Customers in seed order.
        _products: Products in seed order, each owning its SKUs.
    """

    def __init__(self, customers: Iterable[Customer] = (), products: Iterable[Product] = ()):
        self._customers: list[Customer] = []
        self._products: list[Product] = []
        self._sku_index: Optional[dict[int, Product]] = None
        self.load(customers, products)

    def load(self, customers: Iterable[Customer], products: Iterable[Product]) -> None:
        """Replace the catalog contents.

        Args:
            customers: Customers to hold.
            products: Products to hold.
        """
        self._customers = [customer.model_copy(deep=True) for customer in customers]
        self._products = [product.model_copy(deep=True) for product in products]
        self._sku_index = None
        logger.debug(f"Catalog loaded | customers={len(self._customers)} | products={len(self._products)}")

    def list_customers(self) -> list[Customer]:
        return [customer.model_copy(deep=True) for customer in self._customers]

    def list_products(self) -> list[Product]:
        return [product.model_copy(deep=True) for product in self._products]

    def find_customer(self, customer_id: int) -> Optional[Customer]:
        """Find a customer by its profile identifier.

        Args:
            customer_id: The `customer_profile.id` orders reference.

        Returns:
            The customer if found, None otherwise.
        """
        customer = next((c for c in self._customers if c.customer_profile.id == customer_id), None)
        return customer.model_copy(deep=True) if customer is not None else None

    def _index(self) -> dict[int, Product]:
        if self._sku_index is None:
            self._sku_index = {sku.id: product for product in self._products for sku in product.sku}
        return self._sku_index

    def _stored_sku(self, sku_id: int) -> Optional[SKU]:
        product = self._index().get(sku_id)
        if product is None:
            return None
        return next((sku for sku in product.sku if sku.id == sku_id), None)

    def find_product_by_sku(self, sku_id: int) -> Optional[Product]:
        product = self._index().get(sku_id)
        return product.model_copy(deep=True) if product is not None else None

    def find_sku(self, sku_id: int) -> Optional[SKU]:
        sku = self._stored_sku(sku_id)
        return sku.model_copy() if sku is not None else None

    def decrement_sku_inventory(self, sku_id: int, amount: int) -> Optional[SKU]:
        """Reduce a SKU's on-hand quantity in place.

        No lower bound is enforced; inventory may go negative. An unknown SKU
        is skipped with a warning.

        Args:
            sku_id: SKU to adjust.
            amount: Quantity to remove; a negative amount restocks.

        Returns:
            A copy of the adjusted SKU, or None when no product owns `sku_id`.
        """
        sku = self._stored_sku(sku_id)
        if sku is None:
            logger.warning(f"Skipping inventory adjustment for unknown SKU {sku_id}")
            return None
        sku.quantity_in_inventory -= amount
        logger.debug(f"Inventory adjusted | sku_id={sku_id} | delta={-amount} | on_hand={sku.quantity_in_inventory}")
        return sku.model_copy()
