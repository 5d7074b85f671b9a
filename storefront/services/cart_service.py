# storefront/services/cart_service.py
from decimal import Decimal
from typing import Iterable, List

from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.domain.schemas import CartItemOut
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def unit_price_of(item) -> Decimal:
    product = getattr(item, "product", None)
    price = getattr(product, "price", None) if product is not None else None
    if price is None:
        return Decimal("0.00")
    return Decimal(str(price))


def cart_total(items: Iterable) -> Decimal:
    """Sum of price * quantity over a cart snapshot; a missing price counts as 0."""
    return sum((unit_price_of(i) * i.quantity for i in items), Decimal("0.00"))


def cart_item_count(items: Iterable) -> int:
    return sum(i.quantity for i in items)


class CartService:
    """
    Cart line items per user.
    commands (add, update, remove, clear) write, list_cart only reads
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    #query
    def list_cart(self, user_id: str) -> List[CartItemOut]:
        items = self.repo.get_cart_items(user_id)
        return [CartItemOut.model_validate(i) for i in items]

    #commands
    def add_item(self, user_id: str, product_id: str, quantity: int = 1) -> None:
        if quantity <= 0:
            raise ValueError("Quantity must be greater than 0")

        # absence is the normal branch here, other failures raise StoreError
        existing_item = self.repo.get_cart_item(user_id, product_id)

        if existing_item:
            new_quantity = existing_item.quantity + quantity
            logger.info(
                f"Product {product_id} already in cart of user {user_id}, "
                f"raising quantity from {existing_item.quantity} to {new_quantity}"
            )
            self.repo.update_quantity(existing_item.id, new_quantity, user_id)
        else:
            logger.info(f"Adding product {product_id} to cart of user {user_id}")
            self.repo.add_cart_item(
                CartItemModel(
                    user_id=user_id,
                    product_id=product_id,
                    quantity=quantity,
                )
            )

    def update_quantity(self, cart_item_id: str, quantity: int, user_id: str | None = None) -> None:
        """
        Overwrites the quantity, zero or less removes the line.
        With user_id set, lines of other users are left alone.
        """
        if quantity <= 0:
            self.remove_item(cart_item_id, user_id)
            return

        logger.info(f"Setting quantity of cart item {cart_item_id} to {quantity}")
        self.repo.update_quantity(cart_item_id, quantity, user_id)

    def remove_item(self, cart_item_id: str, user_id: str | None = None) -> None:
        deleted = self.repo.delete_cart_item(cart_item_id, user_id)
        logger.info(f"Removed cart item {cart_item_id} ({deleted} row(s))")

    def clear_cart(self, user_id: str) -> None:
        deleted = self.repo.delete_user_items(user_id)
        logger.info(f"Cleared cart of user {user_id} ({deleted} row(s))")
