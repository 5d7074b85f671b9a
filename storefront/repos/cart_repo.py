# storefront/repos/cart_repo.py
from sqlalchemy import select, update, delete
from sqlalchemy.orm import selectinload

from storefront.data.models.cart_item import CartItemModel
from storefront.repos.base import BaseRepo


class CartRepo(BaseRepo):
    def get_cart_items(self, user_id: str) -> list[CartItemModel]:
        stmt = (
            select(CartItemModel)
            .options(selectinload(CartItemModel.product))
            .where(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.created_at)
        )
        with self.guard("fetching cart items"):
            return list(self.db.execute(stmt).scalars().all())

    def get_cart_item(self, user_id: str, product_id: str) -> CartItemModel | None:
        stmt = select(CartItemModel).where(
            CartItemModel.user_id == user_id,
            CartItemModel.product_id == product_id,
        )
        with self.guard("checking existing cart item"):
            return self.db.execute(stmt).scalars().first()

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        with self.guard("adding cart item"):
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)
        return item

    def update_quantity(self, cart_item_id: str, quantity: int, user_id: str | None = None) -> int:
        stmt = update(CartItemModel).where(CartItemModel.id == cart_item_id)
        if user_id is not None:
            stmt = stmt.where(CartItemModel.user_id == user_id)
        stmt = stmt.values(quantity=quantity)
        with self.guard("updating cart item"):
            result = self.db.execute(stmt)
            self.db.commit()
        return result.rowcount

    def delete_cart_item(self, cart_item_id: str, user_id: str | None = None) -> int:
        stmt = delete(CartItemModel).where(CartItemModel.id == cart_item_id)
        if user_id is not None:
            stmt = stmt.where(CartItemModel.user_id == user_id)
        with self.guard("removing cart item"):
            result = self.db.execute(stmt)
            self.db.commit()
        return result.rowcount

    def delete_user_items(self, user_id: str) -> int:
        stmt = delete(CartItemModel).where(CartItemModel.user_id == user_id)
        with self.guard("clearing cart"):
            result = self.db.execute(stmt)
            self.db.commit()
        return result.rowcount
