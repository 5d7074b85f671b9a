# storefront/api/__init__.py
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.api.routers import addresses, auth, carts, health, orders, payments
from storefront.services.identity_client import IdentityClient
from storefront.services.notification_service import NotificationService
from storefront.services.payment_client import PaymentClient
from storefront.utils.errors import StoreError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(
    identity_client: IdentityClient | None = None,
    payment_client: PaymentClient | None = None,
    notification_service: NotificationService | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Storefront Service",
        version="1.0.0",
    )

    # outbound clients live for the whole process
    app.state.identity_client = identity_client or IdentityClient()
    app.state.payment_client = payment_client or PaymentClient()
    app.state.notification_service = notification_service or NotificationService()

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=500, content={"detail": "Backing service error"})

    # Include routers
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(auth.profiles_router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(addresses.router)
    app.include_router(payments.router)

    return app
