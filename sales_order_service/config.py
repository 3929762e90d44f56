"""Environment-driven settings."""

import os
from typing import Optional

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Runtime settings for the service.

    Attributes:
        service_name (str): Name bound to log records and Kafka client id.
        log_level (str): Minimum log level.
        log_file (str | None): Optional rotating log file path.
        simulated_latency_ms (int): Delay awaited by every store round trip.
        kafka_bootstrap_servers (str | None): Brokers for order events; unset disables publishing.
        host (str): Bind address for uvicorn.
        port (int): Bind port for uvicorn.
    """

    service_name: str = "sales-order-service"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    simulated_latency_ms: int = Field(0, ge=0)
    kafka_bootstrap_servers: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    """Build settings from environment variables.

    Returns:
        Settings: Settings with unset variables left at their defaults.
    """
    return Settings(
        service_name=os.getenv("SERVICE_NAME", "sales-order-service"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE") or None,
        simulated_latency_ms=int(os.getenv("SIMULATED_LATENCY_MS", "0")),
        kafka_bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS") or None,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
