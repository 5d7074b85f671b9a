# storefront/api/routers/payments.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.api.deps import get_payment_client
from storefront.domain.schemas import PaymentOrderIn
from storefront.services.payment_client import PaymentClient
from storefront.services.payment_service import PaymentService
from storefront.utils.errors import GatewayError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/razorpay", tags=["payments"])


@router.post("/create-order")
def create_payment_order(
    payload: PaymentOrderIn,
    client: PaymentClient = Depends(get_payment_client),
):
    """
    Creates the gateway order and hands back the key id for the client checkout.
    """
    svc = PaymentService(client)
    try:
        return svc.create_payment_order(payload.amount, payload.currency or "INR", payload.receipt)
    except GatewayError as e:
        logger.error(f"Error creating gateway order: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to create order"})
