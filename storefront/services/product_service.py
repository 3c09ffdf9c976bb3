# storefront/services/product_service.py
from typing import Any, Dict, List
from uuid import UUID

from storefront.domain.entities import Category, Product
from storefront.domain.errors import NotFound
from storefront.domain.pagination import create_page_request
from storefront.domain.pricing import to_money
from storefront.domain.schemas import (
    CategoryCreate,
    ProductCreate,
    ProductListQuery,
    ProductUpdate,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def product_to_dict(product: Product) -> Dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "category_id": product.category_id,
    }


def category_to_dict(category: Category, with_products: bool = False) -> Dict[str, Any]:
    data = {"id": category.id, "name": category.name}
    if with_products:
        data["products"] = [product_to_dict(p) for p in category.products]
    return data


class ProductService:
    def __init__(self, products, categories):
        self.products = products
        self.categories = categories

    #query
    def list_products(self, query: ProductListQuery) -> List[Dict[str, Any]]:
        page = create_page_request(query.page, query.limit, query.sort, query.sort_by)
        products = self.products.find_page(page, category_id=query.category_id)
        return [product_to_dict(p) for p in products]

    def get_product(self, product_id: UUID) -> Dict[str, Any]:
        return product_to_dict(self._get(product_id))

    #commands
    def create_product(self, payload: ProductCreate) -> Dict[str, Any]:
        product = Product(
            name=payload.name,
            description=payload.description,
            price=to_money(payload.price),
            category=self._get_category(payload.category_id),
        )
        created = self.products.save(product)
        logger.info(f"Created product {created.id} ({created.name})")
        return product_to_dict(created)

    def update_product(self, product_id: UUID, payload: ProductUpdate) -> Dict[str, Any]:
        product = self._get(product_id)

        #only fields present in the payload are touched
        changes = payload.model_dump(exclude_unset=True)
        if changes.get("name") is not None:
            product.name = changes["name"]
        if "description" in changes:
            product.description = changes["description"]
        if changes.get("price") is not None:
            product.price = to_money(changes["price"])
        if changes.get("category_id") is not None:
            product.category = self._get_category(changes["category_id"])

        saved = self.products.save(product)
        logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return product_to_dict(saved)

    def delete_product(self, product_id: UUID) -> None:
        product = self._get(product_id)
        self.products.delete(product)
        logger.info(f"Deleted product {product_id}")

    def _get(self, product_id: UUID) -> Product:
        product = self.products.find_by_id(product_id)
        if product is None:
            raise NotFound("Product", product_id)
        return product

    def _get_category(self, category_id: UUID | None) -> Category | None:
        if category_id is None:
            return None
        category = self.categories.find_by_id(category_id)
        if category is None:
            raise NotFound("Category", category_id)
        return category


class CategoryService:
    def __init__(self, categories):
        self.categories = categories

    def list_categories(self, page: int | None = None, limit: int | None = None) -> List[Dict[str, Any]]:
        page_request = create_page_request(page, limit, None, None)
        return [category_to_dict(c) for c in self.categories.find_page(page_request)]

    def get_category(self, category_id: UUID) -> Dict[str, Any]:
        category = self.categories.find_by_id(category_id)
        if category is None:
            raise NotFound("Category", category_id)
        return category_to_dict(category, with_products=True)

    def create_category(self, payload: CategoryCreate) -> Dict[str, Any]:
        category = self.categories.save(Category(name=payload.name))
        logger.info(f"Created category {category.id} ({category.name})")
        return category_to_dict(category)
