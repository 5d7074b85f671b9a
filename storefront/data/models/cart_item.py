from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Index
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models._columns import new_id, utcnow


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    product = relationship("ProductModel")

    # one row per (user, product) is kept by the service, not by a unique constraint
    __table_args__ = (Index("ix_cart_items_user_product", "user_id", "product_id"),)
