# storefront/services/payment_client.py
import requests
from requests import RequestException

from storefront.utils.errors import GatewayError
from storefront.utils.settings import (
    RAZORPAY_API_URL,
    RAZORPAY_KEY_ID,
    RAZORPAY_KEY_SECRET,
    GATEWAY_TIMEOUT_SECONDS,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentClient:
    """
    Razorpay orders API. One attempt per call, failures surface as GatewayError.
    """

    def __init__(
        self,
        key_id: str | None = None,
        key_secret: str | None = None,
        base_url: str | None = None,
        timeout: float = GATEWAY_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.key_id = key_id if key_id is not None else RAZORPAY_KEY_ID
        self.base_url = (base_url or RAZORPAY_API_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (
            self.key_id,
            key_secret if key_secret is not None else RAZORPAY_KEY_SECRET,
        )

    def create_order(self, amount: int, currency: str, receipt: str | None) -> dict:
        url = f"{self.base_url}/orders"
        payload = {"amount": amount, "currency": currency}
        if receipt is not None:
            payload["receipt"] = receipt

        logger.info(f"PaymentClient POST {url} amount={amount} currency={currency} receipt={receipt}")

        try:
            resp = self.session.post(url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.json()
        except (RequestException, ValueError) as e:
            raise GatewayError(f"Gateway order creation failed: {e}") from e

        if not isinstance(body, dict):
            raise GatewayError(f"Gateway returned an unexpected order body: {body!r}")
        return body
