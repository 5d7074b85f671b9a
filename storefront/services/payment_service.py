# storefront/services/payment_service.py
from typing import Any, Dict

from storefront.services.payment_client import PaymentClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentService:
    """
    Creates payable orders on the gateway. Nothing is stored locally; the
    caller keeps the returned gateway order id and passes it to the order.
    """

    def __init__(self, client: PaymentClient):
        self.client = client

    def create_payment_order(
        self,
        amount: int,
        currency: str = "INR",
        receipt: str | None = None,
    ) -> Dict[str, Any]:
        gateway_order = self.client.create_order(amount, currency or "INR", receipt)
        logger.info(f"Gateway order {gateway_order.get('id')} created for receipt {receipt}")
        return {**gateway_order, "key_id": self.client.key_id}
