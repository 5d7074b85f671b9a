from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Numeric, Text, JSON
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models._columns import new_id, utcnow


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("profiles.id"), nullable=False, index=True)
    order_number = Column(String, nullable=False)

    status = Column(String, nullable=False, default="pending")  # pending, then managed by back office
    total_amount = Column(Numeric(10, 2), nullable=False)
    # copied from the address at checkout, later address edits do not touch it
    delivery_address = Column(JSON, nullable=False)
    payment_method = Column(String, nullable=False, default="cod")
    payment_status = Column(String, nullable=False, default="pending")
    notes = Column(Text, nullable=True)
    razorpay_order_id = Column(String, nullable=True)
    razorpay_payment_id = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
    )


class OrderItemModel(Base):
    __tablename__ = "order_items"

    id = Column(String(36), primary_key=True, default=new_id)
    order_id = Column(String(36), ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(36), ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)

    order = relationship("OrderModel", back_populates="items")
    product = relationship("ProductModel")
