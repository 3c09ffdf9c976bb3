# storefront/repos/user_repo.py
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.data.models.tag import TagModel
from storefront.data.models.user import UserModel
from storefront.domain.entities import User
from storefront.domain.errors import NotFound
from storefront.domain.pagination import PageRequest
from storefront.repos import mappers
from storefront.repos.base import apply_page


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: UUID) -> User | None:
        model = self.db.get(UserModel, user_id)
        return mappers.user_to_domain(model) if model else None

    def find_by_email(self, email: str) -> User | None:
        model = self.db.execute(select(UserModel).where(UserModel.email == email)).scalars().first()
        return mappers.user_to_domain(model) if model else None

    def find_page(self, page: PageRequest) -> List[User]:
        rows = self.db.execute(apply_page(select(UserModel), UserModel, page)).scalars().all()
        return [mappers.user_to_domain(r) for r in rows]

    def save(self, user: User) -> User:
        model = self.db.get(UserModel, user.id)
        if model is None:
            model = UserModel(id=user.id)
            self.db.add(model)

        model.name = user.name
        model.email = user.email
        model.password = user.password

        self._sync_addresses(model, user)
        self._sync_profile(model, user)
        model.tags = [self._load(TagModel, "Tag", t.id) for t in user.tags]
        model.favorite_products = [self._load(ProductModel, "Product", p.id) for p in user.favorite_products]

        self.db.commit()
        self.db.refresh(model)

        user.created_at = model.created_at
        user.updated_at = model.updated_at
        return user

    def delete(self, user: User) -> None:
        model = self.db.get(UserModel, user.id)
        if model is not None:
            #addresses and profile go with the user
            self.db.delete(model)
            self.db.commit()

    def _load(self, model_cls, entity: str, key: UUID):
        row = self.db.get(model_cls, key)
        if row is None:
            raise NotFound(entity, key)
        return row

    def _sync_addresses(self, model: UserModel, user: User):
        rows = {row.id: row for row in model.addresses}
        wanted = {a.id for a in user.addresses}

        for address_id, row in rows.items():
            if address_id not in wanted:
                model.addresses.remove(row)

        for position, address in enumerate(user.addresses):
            row = rows.get(address.id)
            if row is None:
                model.addresses.append(mappers.address_to_model(address, position))
            else:
                row.street = address.street
                row.city = address.city
                row.zip = address.zip
                row.position = position

    def _sync_profile(self, model: UserModel, user: User):
        profile = user.profile
        current = model.profile

        if profile is None:
            model.profile = None
            return

        if current is not None and current.id == profile.id:
            current.bio = profile.bio
            current.phone_number = profile.phone_number
            current.date_of_birth = profile.date_of_birth
            current.loyalty_points = profile.loyalty_points
            return

        if current is not None:
            #one profile row per user, drop the old one before inserting
            model.profile = None
            self.db.flush()
        model.profile = mappers.profile_to_model(profile)
