"""Tests for settings loading and context construction."""

import json
from unittest.mock import patch

from sales_order_service.catalog import CatalogStore
from sales_order_service.config import Settings, load_settings
from sales_order_service.context import build_context
from sales_order_service.logger import logger, setup_service_logger


def test_load_settings_defaults(monkeypatch):
    names = ("SERVICE_NAME", "LOG_LEVEL", "LOG_FILE", "SIMULATED_LATENCY_MS", "KAFKA_BOOTSTRAP_SERVERS", "HOST", "PORT")
    for name in names:
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings == Settings()
    assert settings.kafka_bootstrap_servers is None


def test_load_settings_from_environment(monkeypatch):
    monkeypatch.setenv("SIMULATED_LATENCY_MS", "500")
    monkeypatch.setenv("KAFKA_BOOTSTRAP_SERVERS", "kafka:9092")
    monkeypatch.setenv("PORT", "9000")

    settings = load_settings()

    assert settings.simulated_latency_ms == 500
    assert settings.kafka_bootstrap_servers == "kafka:9092"
    assert settings.port == 9000


def test_build_context_seeds_stores():
    context = build_context(Settings())

    assert len(context.orders) == 3
    assert len(context.catalog.list_customers()) == 3
    assert context.service.catalog is context.catalog
    assert context.service.orders is context.orders
    assert context.producer is None


def test_contexts_do_not_share_state():
    first = build_context(Settings())
    second = build_context(Settings())

    first.catalog.decrement_sku_inventory(248, 20)

    assert second.catalog.find_sku(248).quantity_in_inventory == 120


def test_build_context_creates_producer_when_brokers_configured():
    with patch("sales_order_service.producer.Producer") as mock_producer_class:
        context = build_context(Settings(kafka_bootstrap_servers="kafka:9092"))

    assert context.service.events is context.producer
    assert mock_producer_class.call_args.args[0]["bootstrap.servers"] == "kafka:9092"

    context.close()
    context.producer.producer.flush.assert_called_once_with(5)


def test_setup_service_logger_writes_json_file(tmp_path):
    log_file = tmp_path / "service.log"
    service_logger = setup_service_logger("orders-test", log_level="DEBUG", log_file=str(log_file))

    service_logger.info("hello from the test")
    service_logger.complete()

    record = json.loads(log_file.read_text().splitlines()[-1])["record"]
    assert record["message"] == "hello from the test"
    assert record["extra"]["service"] == "orders-test"
    setup_service_logger("sales-order-service")


def test_module_records_carry_service_name():
    """Records from modules importing the shared logger are tagged with the service."""
    setup_service_logger("orders-test")
    seen = []
    handler_id = logger.add(lambda message: seen.append(message.record["extra"]), format="{message}")

    CatalogStore().decrement_sku_inventory(1, 1)

    logger.remove(handler_id)
    setup_service_logger("sales-order-service")
    assert seen and all(extra["service"] == "orders-test" for extra in seen)
