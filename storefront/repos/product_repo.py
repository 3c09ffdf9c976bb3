# storefront/repos/product_repo.py
from typing import Iterable, List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.entities import Product
from storefront.domain.pagination import PageRequest
from storefront.repos import mappers
from storefront.repos.base import apply_page


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, product_id: UUID) -> Product | None:
        model = self.db.get(ProductModel, product_id)
        return mappers.product_to_domain(model) if model else None

    def find_all_by_ids(self, product_ids: Iterable[UUID]) -> List[Product]:
        ids = list(product_ids)
        if not ids:
            return []
        rows = self.db.execute(select(ProductModel).where(ProductModel.id.in_(ids))).scalars().all()
        return [mappers.product_to_domain(r) for r in rows]

    def find_page(self, page: PageRequest, category_id: UUID | None = None) -> List[Product]:
        stmt = select(ProductModel)
        if category_id is not None:
            stmt = stmt.where(ProductModel.category_id == category_id)
        rows = self.db.execute(apply_page(stmt, ProductModel, page)).scalars().all()
        return [mappers.product_to_domain(r) for r in rows]

    def save(self, product: Product) -> Product:
        model = self.db.get(ProductModel, product.id)
        if model is None:
            model = ProductModel(id=product.id)
            self.db.add(model)
        mappers.update_product_model(model, product)
        self.db.commit()
        self.db.refresh(model)

        product.created_at = model.created_at
        product.updated_at = model.updated_at
        return product

    def delete(self, product: Product) -> None:
        model = self.db.get(ProductModel, product.id)
        if model is not None:
            self.db.delete(model)
            self.db.commit()
