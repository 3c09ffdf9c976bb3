# storefront/repos/memory_repo.py
"""
Dict-backed repositories.

A KeyValueStore is an explicit object handed to whoever needs it; there is no
module-level registry. InMemoryRepo implements the same contract as the
SQLAlchemy repos (find_by_id / save / delete / find_page), which makes it a
drop-in collaborator for services in tests and demos.
"""
from typing import Any, Dict, Generic, Iterable, List, TypeVar
from uuid import UUID

from storefront.data.models.base import utcnow
from storefront.domain.pagination import PageRequest
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class KeyValueStore(Generic[T]):
    def __init__(self):
        self._data: Dict[Any, T] = {}

    def get(self, key) -> T | None:
        return self._data.get(key)

    def put(self, key, value: T) -> None:
        self._data[key] = value

    def remove(self, key) -> T | None:
        return self._data.pop(key, None)

    def values(self) -> List[T]:
        return list(self._data.values())

    def __contains__(self, key) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)


class InMemoryRepo(Generic[T]):
    def __init__(self, store: KeyValueStore[T] | None = None):
        self.store = store if store is not None else KeyValueStore()

    def find_by_id(self, key: UUID) -> T | None:
        return self.store.get(key)

    def find_all_by_ids(self, keys: Iterable[UUID]) -> List[T]:
        return [e for e in (self.store.get(k) for k in keys) if e is not None]

    def find_page(self, page: PageRequest, **filters) -> List[T]:
        rows = [
            e for e in self.store.values()
            if all(getattr(e, name) == value for name, value in filters.items() if value is not None)
        ]
        if page.ordering is not None:
            column = page.ordering.column
            #entities without a value sort first
            rows.sort(
                key=lambda e: (getattr(e, column) is not None, getattr(e, column)),
                reverse=page.ordering.descending,
            )
        return rows[page.offset:page.offset + page.limit]

    def save(self, entity: T) -> T:
        now = utcnow()
        if getattr(entity, "created_at", now) is None:
            entity.created_at = now
        if hasattr(entity, "updated_at"):
            entity.updated_at = now
        self.store.put(entity.id, entity)
        logger.debug(f"Stored {type(entity).__name__} {entity.id}")
        return entity

    def delete(self, entity: T) -> None:
        self.store.remove(entity.id)


class InMemoryUserRepo(InMemoryRepo):
    def find_by_email(self, email: str):
        for user in self.store.values():
            if user.email == email:
                return user
        return None
