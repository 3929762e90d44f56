"""Kafka producer for publishing order lifecycle events."""

from confluent_kafka import Producer

from .logger import logger
from .schemas import OrderEvent


class OrderEventProducer:
    """Kafka producer for publishing order events.

    Events are keyed by order id so every event of one order lands on the
    same partition and is delivered in order.

    Attributes:
        _producer: The underlying Kafka producer instance.
    """

    def __init__(self, bootstrap_servers: str, client_id: str = "sales-order-service"):
        """Initialize the Kafka producer with the given bootstrap servers.

        Args:
            bootstrap_servers (str): Comma-separated list of Kafka broker addresses.
            client_id (str): Client id reported to the brokers.
        """
        self._producer = Producer(
            {
                "bootstrap.servers": bootstrap_servers,
                "client.id": client_id,
                "message.timeout.ms": 5000,
                "partitioner": "consistent_random",
            }
        )

    @property
    def producer(self):
        """Get the underlying Kafka producer instance.

        Returns:
            Producer: The Kafka producer instance.
        """
        return self._producer

    def _delivery_callback(self, err, msg):
        """Callback function for message delivery reports.

        Args:
            err: Error that occurred during message delivery, if any.
            msg: Message that was delivered or failed.
        """
        if err:
            logger.error(f"Message failed delivery: {err} | topic={msg.topic()} | key={msg.key()}")
        else:
            logger.debug(f"Message delivered to {msg.topic()} [p:{msg.partition()}]")

    def _produce(self, event: OrderEvent) -> None:
        self._producer.produce(
            topic=event.topic,
            key=str(event.order.id).encode("utf-8"),
            value=event.model_dump_json(),
            on_delivery=self._delivery_callback,
        )

    def publish(self, event: OrderEvent) -> None:
        """Publish an order event to its topic.

        The mutation behind the event has already committed, so failures are
        logged rather than raised.

        Args:
            event (OrderEvent): The event to publish.
        """
        try:
            try:
                self._produce(event)
            except BufferError:
                logger.warning("Producer buffer full, flushing...")
                self._producer.flush()
                self._produce(event)
            self._producer.poll(0)
        except Exception as e:
            logger.error(f"Failed to publish {event.topic} for order {event.order.id}: {e}")

    def close(self) -> None:
        """Flush outstanding messages."""
        self._producer.flush(5)
