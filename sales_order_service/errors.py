"""Exceptions raised by the order, catalog and session layers."""


class OrderServiceError(Exception):
    """Base class for domain errors surfaced to callers."""


class CustomerNotFound(OrderServiceError):
    def __init__(self, customer_id: int):
        super().__init__(f"Customer not found: {customer_id}")
        self.customer_id = customer_id


class OrderNotFound(OrderServiceError):
    def __init__(self, order_id: int):
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id


class InvalidCredentials(OrderServiceError):
    """Raised for a failed login or an unknown session token."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
