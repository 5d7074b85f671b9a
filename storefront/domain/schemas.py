# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, EmailStr
from typing import List, Any, Dict
from decimal import Decimal
from datetime import datetime


# ---------------------------------------------------------------------------
# catalogue
# ---------------------------------------------------------------------------
class ProductOut(BaseModel):
    """Product as joined into a cart line."""

    id: str
    name: str
    price: Decimal
    unit: str
    category_id: str | None = None
    image_url: str | None = None
    in_stock: bool = True
    stock_quantity: int | None = None

    model_config = ConfigDict(from_attributes=True)


class ProductSummary(BaseModel):
    """Reduced product projection nested in order items."""

    id: str
    name: str
    image_url: str | None = None
    unit: str

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# cart
# ---------------------------------------------------------------------------
class CartItemIn(BaseModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(1, gt=0, description="Quantity to add (> 0)")


class CartItemUpdate(BaseModel):
    # zero or less removes the line
    quantity: int


class CartItemOut(BaseModel):
    id: str
    user_id: str
    product_id: str
    quantity: int
    created_at: datetime | None = None
    product: ProductOut | None = None

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    user_id: str
    items: List[CartItemOut]
    total: Decimal
    item_count: int


# ---------------------------------------------------------------------------
# addresses
# ---------------------------------------------------------------------------
class AddressIn(BaseModel):
    full_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    address_line_1: str = Field(..., min_length=1)
    address_line_2: str | None = None
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    postal_code: str = Field(..., min_length=1)
    is_default: bool = False


class AddressOut(AddressIn):
    id: str
    user_id: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# orders
# ---------------------------------------------------------------------------
class OrderCreate(BaseModel):
    """The owner is the signed-in user, not part of the body."""

    delivery_address: AddressIn
    payment_method: str = "cod"
    notes: str | None = None
    razorpay_order_id: str | None = None
    razorpay_payment_id: str | None = None


class OrderItemOut(BaseModel):
    id: str
    product_id: str
    quantity: int
    unit_price: Decimal
    total_price: Decimal
    product: ProductSummary | None = None

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: str
    user_id: str
    order_number: str
    status: str
    total_amount: Decimal
    delivery_address: Dict[str, Any]
    payment_method: str
    payment_status: str
    notes: str | None = None
    razorpay_order_id: str | None = None
    razorpay_payment_id: str | None = None
    created_at: datetime
    items: List[OrderItemOut] = []

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# payments
# ---------------------------------------------------------------------------
class PaymentOrderIn(BaseModel):
    """Amount is in the smallest currency unit (paise for INR)."""

    amount: int = Field(..., gt=0)
    currency: str | None = "INR"
    receipt: str | None = None


# ---------------------------------------------------------------------------
# auth / profiles
# ---------------------------------------------------------------------------
class SignUpIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1, max_length=200)


class SignInIn(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class ProfileOut(BaseModel):
    id: str
    email: str
    full_name: str | None = None
    phone: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
