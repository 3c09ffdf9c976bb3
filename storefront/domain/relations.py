# storefront/domain/relations.py
"""
Owning-side helpers for the bidirectional associations of the store.

Every function updates both ends of a relation in one call, so callers never
touch `cart.items`, `item.cart`, `user.addresses`, `address.user`, ... directly.
Two helpers leave the inverse side untouched:

- clear_cart empties the collection but keeps each item's `cart` link
- remove_profile nulls `user.profile` but keeps `profile.user`

The repositories reconcile children from the owning collection, so a stale
inverse link never reaches the database.
"""
from typing import Iterable
from uuid import UUID

from storefront.domain.entities import Address, Cart, CartItem, Product, Profile, Tag, User
from storefront.domain.errors import NotFound
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


#cart <-> cart item
def get_item_by_product_id(cart: Cart, product_id: UUID) -> CartItem | None:
    for item in cart.items:
        if item.product_id == product_id:
            return item
    return None


def add_item_to_cart(cart: Cart, item: CartItem) -> bool:
    """
    Link `item` into `cart`.

    At most one item per product: if a different item for the same product is
    already in the cart the new one is rejected and False is returned. Callers
    are expected to look the existing item up and bump its quantity instead.
    Re-adding an item that is already linked is a no-op.
    """
    existing = get_item_by_product_id(cart, item.product_id)
    if existing is item:
        item.cart = cart
        return True
    if existing is not None:
        logger.warning(
            f"Rejected second item for product {item.product_id} in cart {cart.id}"
        )
        return False

    cart.items.append(item)
    item.cart = cart
    return True


def remove_item_from_cart_by_product_id(cart: Cart, product_id: UUID) -> CartItem:
    item = get_item_by_product_id(cart, product_id)
    if item is None:
        raise NotFound("Cart item", product_id)

    cart.items.remove(item)
    item.cart = None
    return item


def clear_cart(cart: Cart) -> None:
    #item.cart is left as is
    cart.items.clear()


#user <-> address
def add_address(user: User, address: Address) -> None:
    user.addresses.append(address)
    address.user = user


def remove_address(user: User, address: Address) -> None:
    if address in user.addresses:
        user.addresses.remove(address)
    address.user = None


#user <-> profile
def set_profile(user: User, profile: Profile) -> None:
    #an existing profile is replaced without a check
    user.profile = profile
    profile.user = user


def remove_profile(user: User) -> None:
    #profile.user is left as is
    user.profile = None


#user <-> tag
def add_tags(user: User, tags: Iterable[Tag]) -> None:
    for tag in tags:
        user.tags.add(tag)
        tag.users.add(user)


def remove_tag(user: User, tag_name: str) -> None:
    """
    Detach tags by name. Tags are matched on name only, so every tag of the
    user carrying that name is removed.
    """
    for tag in [t for t in user.tags if t.name == tag_name]:
        user.tags.discard(tag)
        tag.users.discard(user)


#user -> favorite products (wishlist, no inverse side)
def add_favorite_product(user: User, product: Product) -> None:
    user.favorite_products.add(product)


def remove_favorite_product(user: User, product_id: UUID) -> None:
    user.favorite_products = {p for p in user.favorite_products if p.id != product_id}


def set_favorite_products(user: User, products: Iterable[Product]) -> None:
    user.favorite_products = set(products)
