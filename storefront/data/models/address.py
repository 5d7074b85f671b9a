from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey

from storefront.data.database import Base
from storefront.data.models._columns import new_id, utcnow


class AddressModel(Base):
    __tablename__ = "addresses"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)

    full_name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    address_line_1 = Column(String, nullable=False)
    address_line_2 = Column(String, nullable=True)
    city = Column(String, nullable=False)
    state = Column(String, nullable=False)
    postal_code = Column(String, nullable=False)
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
