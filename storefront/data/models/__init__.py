#import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.profile import ProfileModel
from storefront.data.models.product import CategoryModel, ProductModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.address import AddressModel
from storefront.data.models.order import OrderModel, OrderItemModel

__all__ = [
    "ProfileModel",
    "CategoryModel",
    "ProductModel",
    "CartItemModel",
    "AddressModel",
    "OrderModel",
    "OrderItemModel",
]
