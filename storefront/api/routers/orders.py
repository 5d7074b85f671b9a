# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id, get_notification_service
from storefront.data.database import get_db
from storefront.domain.schemas import OrderCreate, OrderOut
from storefront.services.cart_service import CartService
from storefront.services.notification_service import NotificationService
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=201)
def create_order(
    payload: OrderCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    notifications: NotificationService = Depends(get_notification_service),
):
    """
    Places an order from the signed-in user's cart and empties the cart.
    """
    cart_items = CartService(db).list_cart(user_id)
    if not cart_items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    svc = OrderService(db, notification_service=notifications)
    return svc.create_order(
        user_id=user_id,
        cart_items=cart_items,
        delivery_address=payload.delivery_address,
        payment_method=payload.payment_method,
        notes=payload.notes,
        razorpay_order_id=payload.razorpay_order_id,
        razorpay_payment_id=payload.razorpay_payment_id,
    )


@router.get("", response_model=List[OrderOut])
def list_orders(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return OrderService(db).get_user_orders(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    order = OrderService(db).get_order(order_id, user_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
