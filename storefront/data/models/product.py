from sqlalchemy import Column, String, DateTime, ForeignKey, Numeric, Boolean, Integer, Text
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.data.models._columns import new_id, utcnow


class CategoryModel(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    products = relationship("ProductModel", back_populates="category")


class ProductModel(Base):
    """Catalogue entry. Read-only for the cart and order code."""

    __tablename__ = "products"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    unit = Column(String, nullable=False)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True)
    image_url = Column(String, nullable=True)
    in_stock = Column(Boolean, nullable=False, default=True)
    stock_quantity = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    category = relationship("CategoryModel", back_populates="products")
