# storefront/repos/category_repo.py
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.category import CategoryModel
from storefront.domain.entities import Category
from storefront.domain.pagination import PageRequest
from storefront.repos import mappers
from storefront.repos.base import apply_page


class CategoryRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, category_id: UUID) -> Category | None:
        model = self.db.get(CategoryModel, category_id)
        if not model:
            return None
        category = mappers.category_to_domain(model)
        #inverse side, read only
        category.products = [mappers.product_to_domain(p) for p in model.products]
        return category

    def find_page(self, page: PageRequest) -> List[Category]:
        rows = self.db.execute(apply_page(select(CategoryModel), CategoryModel, page)).scalars().all()
        return [mappers.category_to_domain(r) for r in rows]

    def save(self, category: Category) -> Category:
        model = self.db.get(CategoryModel, category.id)
        if model is None:
            model = CategoryModel(id=category.id)
            self.db.add(model)
        model.name = category.name
        self.db.commit()
        self.db.refresh(model)

        category.created_at = model.created_at
        category.updated_at = model.updated_at
        return category

    def delete(self, category: Category) -> None:
        model = self.db.get(CategoryModel, category.id)
        if model is not None:
            self.db.delete(model)
            self.db.commit()
