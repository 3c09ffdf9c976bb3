#import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.user import UserModel
from storefront.data.models.address import AddressModel
from storefront.data.models.profile import ProfileModel
from storefront.data.models.tag import TagModel
from storefront.data.models.category import CategoryModel
from storefront.data.models.product import ProductModel
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel

__all__ = [
    "UserModel",
    "AddressModel",
    "ProfileModel",
    "TagModel",
    "CategoryModel",
    "ProductModel",
    "CartModel",
    "CartItemModel",
]
