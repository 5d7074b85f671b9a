# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user_id
from storefront.data.database import get_db
from storefront.domain.schemas import CartItemIn, CartItemUpdate, CartOut
from storefront.services.cart_service import CartService, cart_total, cart_item_count

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


def _cart_out(svc: CartService, user_id: str) -> CartOut:
    items = svc.list_cart(user_id)
    return CartOut(
        user_id=user_id,
        items=items,
        total=cart_total(items),
        item_count=cart_item_count(items),
    )


@router.get("", response_model=CartOut)
def get_cart(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    return _cart_out(get_service(db), user_id)


@router.post("/items", response_model=CartOut)
def add_item(
    payload: CartItemIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        svc.add_item(user_id, payload.product_id, payload.quantity)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _cart_out(svc, user_id)


@router.patch("/items/{cart_item_id}", response_model=CartOut)
def update_item(
    cart_item_id: str,
    payload: CartItemUpdate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    svc.update_quantity(cart_item_id, payload.quantity, user_id=user_id)
    return _cart_out(svc, user_id)


@router.delete("/items/{cart_item_id}", response_model=CartOut)
def remove_item(
    cart_item_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    svc.remove_item(cart_item_id, user_id=user_id)
    return _cart_out(svc, user_id)


@router.delete("", response_model=CartOut)
def clear_cart(user_id: str = Depends(get_current_user_id), db: Session = Depends(get_db)):
    svc = get_service(db)
    svc.clear_cart(user_id)
    return _cart_out(svc, user_id)
