# storefront/services/wishlist_service.py
from typing import Any, Dict, List
from uuid import UUID

from storefront.domain import relations
from storefront.domain.entities import User
from storefront.domain.errors import NotFound
from storefront.services.product_service import product_to_dict
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class WishlistService:
    """Favorite products of a user."""

    def __init__(self, users, products):
        self.users = users
        self.products = products

    def get_wishlist(self, user_id: UUID) -> Dict[str, Any]:
        return self._to_dict(self._get_user(user_id))

    def set_wishlist(self, user_id: UUID, product_ids: List[UUID]) -> Dict[str, Any]:
        user = self._get_user(user_id)
        products = self.products.find_all_by_ids(product_ids)
        missing = set(product_ids) - {p.id for p in products}
        if missing:
            raise NotFound("Product", sorted(str(m) for m in missing))

        relations.set_favorite_products(user, products)
        self.users.save(user)
        logger.info(f"Wishlist of user {user_id} replaced with {len(products)} products")
        return self._to_dict(user)

    def add_product(self, user_id: UUID, product_id: UUID) -> Dict[str, Any]:
        user = self._get_user(user_id)
        if any(p.id == product_id for p in user.favorite_products):
            return self._to_dict(user)

        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFound("Product", product_id)

        relations.add_favorite_product(user, product)
        self.users.save(user)
        logger.info(f"Product {product_id} added to wishlist of user {user_id}")
        return self._to_dict(user)

    def remove_product(self, user_id: UUID, product_id: UUID) -> None:
        user = self._get_user(user_id)
        if not any(p.id == product_id for p in user.favorite_products):
            raise NotFound("Wishlist item", product_id)

        relations.remove_favorite_product(user, product_id)
        self.users.save(user)
        logger.info(f"Product {product_id} removed from wishlist of user {user_id}")

    def _get_user(self, user_id: UUID) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFound("User", user_id)
        return user

    @staticmethod
    def _to_dict(user: User) -> Dict[str, Any]:
        products = sorted(user.favorite_products, key=lambda p: p.name)
        return {"user_id": user.id, "products": [product_to_dict(p) for p in products]}
