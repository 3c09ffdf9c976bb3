# storefront/repos/cart_repo.py
from uuid import UUID

from sqlalchemy.orm import Session

from storefront.data.models.base import utcnow
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.entities import Cart
from storefront.repos import mappers
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, cart_id: UUID) -> Cart | None:
        model = self.db.get(CartModel, cart_id)
        return mappers.cart_to_domain(model) if model else None

    def save(self, cart: Cart) -> Cart:
        """
        Persist the cart and reconcile its item rows with `cart.items`.
        Rows whose product is no longer in the cart are orphan-removed.
        """
        model = self.db.get(CartModel, cart.id)
        if model is None:
            model = CartModel(id=cart.id)
            self.db.add(model)

        rows = {row.product_id: row for row in model.items}
        wanted = {item.product_id: item for item in cart.items}

        for product_id, row in rows.items():
            if product_id not in wanted:
                logger.info(f"Orphan cart item for product {product_id} removed from cart {cart.id}")
                model.items.remove(row)

        for product_id, item in wanted.items():
            row = rows.get(product_id)
            if row is not None:
                row.quantity = item.quantity
            else:
                model.items.append(
                    CartItemModel(id=item.id, product_id=product_id, quantity=item.quantity)
                )

        model.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(model)

        cart.created_at = model.created_at
        cart.updated_at = model.updated_at
        return cart

    def delete(self, cart: Cart) -> None:
        model = self.db.get(CartModel, cart.id)
        if model is not None:
            self.db.delete(model)
            self.db.commit()
