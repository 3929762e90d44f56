"""FastAPI server implementation for the Sales Order Service."""

from contextlib import asynccontextmanager

from confluent_kafka.admin import AdminClient
from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from .config import load_settings
from .context import ServiceContext, build_context
from .errors import CustomerNotFound, InvalidCredentials, OrderNotFound
from .logger import setup_service_logger
from .schemas import (
    Customer,
    LoginRequest,
    LoginResponse,
    OrderStatus,
    Product,
    SaleOrder,
    SaleOrderFormData,
    User,
)

settings = load_settings()

# Configure service logger
logger = setup_service_logger(settings.service_name, log_level=settings.log_level, log_file=settings.log_file)

BEARER_PREFIX = "Bearer "


class ServiceState:
    """Holds the context serving requests."""

    def __init__(self) -> None:
        self.context: ServiceContext = build_context(settings)

    def reset(self, context: ServiceContext) -> None:
        """Swap in a different context, closing the current one.

        Args:
            context: The context to serve from now on
        """
        self.context.close()
        self.context = context


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage the lifecycle of the FastAPI application."""
    logger.info(f"{settings.service_name} started | latency_ms={settings.simulated_latency_ms}")
    yield
    logger.info("Shutting down sales order service...")
    state.context.close()
    logger.info("Shutdown complete")


app = FastAPI(title="Sales Order Service", lifespan=lifespan)
state = ServiceState()


@app.exception_handler(CustomerNotFound)
@app.exception_handler(OrderNotFound)
async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(InvalidCredentials)
async def invalid_credentials_handler(request: Request, exc: InvalidCredentials) -> JSONResponse:
    return JSONResponse(status_code=401, content={"detail": str(exc)})


def _bearer_token(authorization: str | None) -> str:
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise HTTPException(status_code=401, detail="Missing token")
    return authorization[len(BEARER_PREFIX):]


def require_user(authorization: str | None = Header(default=None)) -> User:
    """Resolve the operator behind the request's bearer token."""
    return state.context.sessions.authenticate(_bearer_token(authorization))


@app.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy"}


@app.get("/health/ready")
async def readiness_check():
    """Check if the service is ready, including the event broker when configured."""
    if not settings.kafka_bootstrap_servers:
        return {"status": "ready", "kafka": "disabled"}
    try:
        admin = AdminClient({"bootstrap.servers": settings.kafka_bootstrap_servers})
        cluster_metadata = admin.list_topics(timeout=5)
        if cluster_metadata is not None:
            return {"status": "ready", "kafka": "connected"}
    except Exception as e:
        logger.error(f"Kafka connection failed: {e}")
    return {"status": "not ready", "kafka": "disconnected"}


@app.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest):
    """Open an operator session.

    Returns:
        The bearer token to send with every other request
    """
    token = state.context.sessions.login(credentials.username, credentials.password)
    return LoginResponse(username=credentials.username, token=token)


@app.post("/logout", status_code=204)
async def logout(authorization: str | None = Header(default=None)):
    token = _bearer_token(authorization)
    state.context.sessions.authenticate(token)
    state.context.sessions.logout(token)


@app.get("/customers", response_model=list[Customer])
async def list_customers(user: User = Depends(require_user)):
    return await state.context.service.list_customers()


@app.get("/products", response_model=list[Product])
async def list_products(user: User = Depends(require_user)):
    return await state.context.service.list_products()


@app.get("/orders", response_model=list[SaleOrder])
async def list_orders(status: OrderStatus, user: User = Depends(require_user)):
    """List active or completed orders, most recently modified first.

    Args:
        status: `active` for unpaid orders, `completed` for paid ones
    """
    return await state.context.service.list_orders(status)


@app.get("/orders/{order_id}", response_model=SaleOrder)
async def get_order(order_id: int, user: User = Depends(require_user)):
    return await state.context.service.get_order(order_id)


@app.post("/orders", response_model=SaleOrder, status_code=201)
async def create_order(data: SaleOrderFormData, user: User = Depends(require_user)):
    """Create a sale order and take its items out of inventory."""
    logger.info(f"Received new order from {user.username}: customer_id={data.customer_id}")
    return await state.context.service.create_order(data)


@app.put("/orders/{order_id}", response_model=SaleOrder)
async def update_order(order_id: int, data: SaleOrderFormData, user: User = Depends(require_user)):
    return await state.context.service.update_order(order_id, data)


@app.post("/orders/{order_id}/paid", response_model=SaleOrder)
async def mark_order_as_paid(order_id: int, user: User = Depends(require_user)):
    return await state.context.service.mark_order_as_paid(order_id)
