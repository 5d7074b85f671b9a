# storefront/services/order_service.py
import time
from typing import Any, Dict, List, Sequence

from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel, OrderItemModel
from storefront.domain.schemas import AddressIn, OrderOut
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_service import cart_total, unit_price_of
from storefront.services.notification_service import NotificationService
from storefront.utils.settings import ORDER_NUMBER_PREFIX
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def generate_order_number(prefix: str = ORDER_NUMBER_PREFIX) -> str:
    """Display order number, prefix + epoch millis. Not guaranteed unique."""
    return f"{prefix}{int(time.time() * 1000)}"


class OrderService:
    """
    Orders domain, separate from CartService.
    """

    def __init__(self, db: Session, notification_service: NotificationService | None = None):
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.notification_service = notification_service or NotificationService()

    def create_order(
        self,
        user_id: str,
        cart_items: Sequence,
        delivery_address: AddressIn | Dict[str, Any],
        payment_method: str = "cod",
        notes: str | None = None,
        razorpay_order_id: str | None = None,
        razorpay_payment_id: str | None = None,
    ) -> OrderOut:
        """
        Use case: place an order from a cart snapshot.

        1. Generates the order number
        2. Totals the supplied cart items (trusted as given, not re-fetched)
        3. Inserts the order row
        4. Inserts one order item per cart line with snapshot prices
        5. Clears the user's cart
        6. Sends the notification (async)

        Every step commits on its own. A failure after step 3 leaves the
        earlier rows in place and needs manual cleanup.
        """
        order_number = generate_order_number()
        total_amount = cart_total(cart_items)

        if isinstance(delivery_address, AddressIn):
            address_snapshot = delivery_address.model_dump()
        else:
            address_snapshot = dict(delivery_address)

        order = self.repo.create_order(
            OrderModel(
                user_id=user_id,
                order_number=order_number,
                status="pending",
                total_amount=total_amount,
                delivery_address=address_snapshot,
                payment_method=payment_method,
                payment_status="pending",
                notes=notes,
                razorpay_order_id=razorpay_order_id,
                razorpay_payment_id=razorpay_payment_id,
            )
        )
        logger.info(f"Order {order.id} ({order_number}) created for user {user_id}, total {total_amount}")

        order_items = []
        for item in cart_items:
            unit_price = unit_price_of(item)
            order_items.append(
                OrderItemModel(
                    order_id=order.id,
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=unit_price,
                    total_price=unit_price * item.quantity,
                )
            )
        self.repo.add_order_items(order_items)

        self.cart_repo.delete_user_items(user_id)
        logger.info(f"Cart of user {user_id} cleared after order {order_number}")

        try:
            self.notification_service.send_order_notification(user_id, order.id, order_number)
        except Exception as e:
            logger.warning(f"Failed to dispatch notification for order {order_number}: {e}")

        return self.get_order(order.id, user_id)

    def get_user_orders(self, user_id: str) -> List[OrderOut]:
        orders = self.repo.get_user_orders(user_id)
        return [OrderOut.model_validate(o) for o in orders]

    def get_order(self, order_id: str, user_id: str) -> OrderOut | None:
        """
        Use case: single order (query), scoped to its owner.
        Someone else's order reads as missing.
        """
        order = self.repo.get_order(order_id, user_id)
        if not order:
            return None
        return OrderOut.model_validate(order)
