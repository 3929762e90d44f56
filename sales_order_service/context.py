"""Process-wide service context."""

from typing import Optional

from .catalog import CatalogStore
from .config import Settings
from .logger import logger
from .producer import OrderEventProducer
from .repository import OrderRepository
from .seed import seed_customers, seed_orders, seed_products, seed_users
from .service import Clock, OrderService, utcnow
from .session import SessionManager


class ServiceContext:
    """Owns the stores and the services built on them.

    Constructed once at startup and handed to whatever serves requests; no
    module reaches the stores any other way.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        orders: OrderRepository,
        sessions: SessionManager,
        service: OrderService,
        producer: Optional[OrderEventProducer] = None,
    ) -> None:
        self.catalog = catalog
        self.orders = orders
        self.sessions = sessions
        self.service = service
        self.producer = producer

    def close(self) -> None:
        if self.producer:
            self.producer.close()


def build_context(
    settings: Settings,
    clock: Clock = utcnow,
    producer: Optional[OrderEventProducer] = None,
) -> ServiceContext:
    """Build a context over freshly seeded stores.

    Args:
        settings: Runtime settings; a Kafka producer is created when brokers are configured
            and no `producer` is given.
        clock: Timestamp source for the order service.
        producer: Explicit event producer, mainly for tests.

    Returns:
        ServiceContext: Ready-to-use context.
    """
    if producer is None and settings.kafka_bootstrap_servers:
        producer = OrderEventProducer(settings.kafka_bootstrap_servers, client_id=settings.service_name)
        logger.info(f"Order events enabled | bootstrap_servers={settings.kafka_bootstrap_servers}")

    catalog = CatalogStore(seed_customers(), seed_products())
    orders = OrderRepository(seed_orders())
    service = OrderService(
        catalog,
        orders,
        clock=clock,
        latency_ms=settings.simulated_latency_ms,
        events=producer,
    )
    return ServiceContext(
        catalog=catalog,
        orders=orders,
        sessions=SessionManager(seed_users()),
        service=service,
        producer=producer,
    )
