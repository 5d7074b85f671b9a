# storefront/repos/order_repo.py
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.data.models.order import OrderModel, OrderItemModel
from storefront.repos.base import BaseRepo


def _with_items():
    return selectinload(OrderModel.items).selectinload(OrderItemModel.product)


class OrderRepo(BaseRepo):
    def create_order(self, order: OrderModel) -> OrderModel:
        with self.guard("creating order"):
            self.db.add(order)
            self.db.commit()
            self.db.refresh(order)
        return order

    def add_order_items(self, items: list[OrderItemModel]) -> list[OrderItemModel]:
        with self.guard("creating order items"):
            self.db.add_all(items)
            self.db.commit()
        return items

    def get_user_orders(self, user_id: str) -> list[OrderModel]:
        stmt = (
            select(OrderModel)
            .options(_with_items())
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc())
        )
        with self.guard("fetching orders"):
            return list(self.db.execute(stmt).scalars().all())

    def get_order(self, order_id: str, user_id: str) -> OrderModel | None:
        stmt = (
            select(OrderModel)
            .options(_with_items())
            .where(OrderModel.id == order_id, OrderModel.user_id == user_id)
        )
        with self.guard("fetching order"):
            return self.db.execute(stmt).scalar_one_or_none()
