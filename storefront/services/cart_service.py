# storefront/services/cart_service.py
from typing import Any, Dict
from uuid import UUID

from storefront.domain import relations
from storefront.domain.entities import Cart, CartItem
from storefront.domain.errors import NotFound, ValidationFailed
from storefront.domain.pricing import cart_total, line_total
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def cart_item_to_dict(item: CartItem) -> Dict[str, Any]:
    total = line_total(item)
    return {
        "product": {
            "id": item.product.id,
            "name": item.product.name,
            "price": item.product.price,
        },
        "quantity": item.quantity,
        "total_price": total,
    }


def cart_to_dict(cart: Cart) -> Dict[str, Any]:
    return {
        "id": cart.id,
        "items": [cart_item_to_dict(i) for i in cart.items],
        "total_price": cart_total(cart),
    }


class CartService:
    """
    Use cases of the cart domain.
    Commands (create, add, update, remove, clear) change state,
    the query (get) only reads.
    """

    def __init__(self, carts, products):
        self.carts = carts
        self.products = products

    #query
    def get_cart(self, cart_id: UUID) -> Dict[str, Any]:
        return cart_to_dict(self._get(cart_id))

    #commands
    def create_cart(self) -> Dict[str, Any]:
        cart = self.carts.save(Cart())
        logger.info(f"Created cart {cart.id}")
        return cart_to_dict(cart)

    def add_product(self, cart_id: UUID, product_id: UUID) -> Dict[str, Any]:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFound("Product", product_id)
        cart = self._get(cart_id)

        item = relations.get_item_by_product_id(cart, product_id)
        if item is not None:
            logger.info(
                f"Product {product_id} already in cart {cart_id}, "
                f"quantity {item.quantity} -> {item.quantity + 1}"
            )
            item.quantity += 1
        else:
            logger.info(f"Adding product {product_id} to cart {cart_id}")
            item = CartItem(product=product, quantity=1)
            relations.add_item_to_cart(cart, item)

        self.carts.save(cart)
        return cart_item_to_dict(item)

    def update_quantity(self, cart_id: UUID, product_id: UUID, quantity: int) -> Dict[str, Any]:
        if quantity < 1:
            raise ValidationFailed({"quantity": "Quantity must be at least 1"})

        cart = self._get(cart_id)
        item = relations.get_item_by_product_id(cart, product_id)
        if item is None:
            raise NotFound("Cart item", product_id)

        item.quantity = quantity
        self.carts.save(cart)
        logger.info(f"Cart {cart_id}: product {product_id} quantity set to {quantity}")
        return cart_item_to_dict(item)

    def remove_product(self, cart_id: UUID, product_id: UUID) -> None:
        cart = self._get(cart_id)
        relations.remove_item_from_cart_by_product_id(cart, product_id)
        self.carts.save(cart)
        logger.info(f"Removed product {product_id} from cart {cart_id}")

    def clear_cart(self, cart_id: UUID) -> None:
        cart = self._get(cart_id)
        relations.clear_cart(cart)
        self.carts.save(cart)
        logger.info(f"Cleared cart {cart_id}")

    def _get(self, cart_id: UUID) -> Cart:
        cart = self.carts.find_by_id(cart_id)
        if cart is None:
            raise NotFound("Cart", cart_id)
        return cart
