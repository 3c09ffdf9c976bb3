# storefront/domain/errors.py


class StoreError(Exception):
    """Base class for errors raised by the store domain."""


class NotFound(StoreError):
    """Referenced aggregate or item does not exist."""

    def __init__(self, entity: str, key=None):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found")


class ValidationFailed(StoreError):
    """Payload constraint violated. Carries a field -> message mapping."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


class InvalidState(StoreError):
    """Derived computation attempted on an incomplete aggregate."""
