"""Main entry point for the Sales Order Service."""

import uvicorn

from sales_order_service.server import app, settings


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
