# storefront/repos/tag_repo.py
from typing import Iterable, List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.tag import TagModel
from storefront.domain.entities import Tag
from storefront.domain.pagination import PageRequest
from storefront.repos import mappers
from storefront.repos.base import apply_page


class TagRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, tag_id: UUID) -> Tag | None:
        model = self.db.get(TagModel, tag_id)
        return mappers.tag_to_domain(model) if model else None

    def find_all_by_ids(self, tag_ids: Iterable[UUID]) -> List[Tag]:
        ids = list(tag_ids)
        if not ids:
            return []
        rows = self.db.execute(select(TagModel).where(TagModel.id.in_(ids))).scalars().all()
        return [mappers.tag_to_domain(r) for r in rows]

    def find_page(self, page: PageRequest) -> List[Tag]:
        rows = self.db.execute(apply_page(select(TagModel), TagModel, page)).scalars().all()
        return [mappers.tag_to_domain(r) for r in rows]

    def save(self, tag: Tag) -> Tag:
        model = self.db.get(TagModel, tag.id)
        if model is None:
            model = TagModel(id=tag.id)
            self.db.add(model)
        model.name = tag.name
        model.description = tag.description
        self.db.commit()
        return tag

    def delete(self, tag: Tag) -> None:
        model = self.db.get(TagModel, tag.id)
        if model is not None:
            self.db.delete(model)
            self.db.commit()
