# storefront/domain/entities.py
"""
In-memory aggregates of the store.

Bidirectional links (Cart <-> CartItem, User <-> Address, User <-> Profile,
User <-> Tag) must only be changed through storefront.domain.relations.
Entities compare by identity, so they can live in sets.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(eq=False)
class Category:
    name: str
    id: UUID = field(default_factory=uuid4)
    #inverse side only, filled by the repository
    products: list["Product"] = field(default_factory=list, repr=False)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(eq=False)
class Product:
    name: str
    price: Decimal
    description: str | None = None
    category: Category | None = field(default=None, repr=False)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def category_id(self) -> UUID | None:
        return self.category.id if self.category else None


@dataclass(eq=False)
class CartItem:
    product: Product | None
    quantity: int = 1
    cart: "Cart | None" = field(default=None, repr=False)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def product_id(self) -> UUID | None:
        return self.product.id if self.product else None


@dataclass(eq=False)
class Cart:
    id: UUID = field(default_factory=uuid4)
    items: list[CartItem] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(eq=False)
class Address:
    street: str
    city: str
    zip: str
    user: "User | None" = field(default=None, repr=False)
    id: UUID = field(default_factory=uuid4)


@dataclass(eq=False)
class Profile:
    bio: str | None = None
    phone_number: str | None = None
    date_of_birth: date | None = None
    loyalty_points: int = 0
    user: "User | None" = field(default=None, repr=False)
    id: UUID = field(default_factory=uuid4)


@dataclass(eq=False)
class Tag:
    name: str
    description: str | None = None
    users: set["User"] = field(default_factory=set, repr=False)
    id: UUID = field(default_factory=uuid4)


@dataclass(eq=False)
class User:
    name: str
    email: str
    password: str = field(repr=False)
    id: UUID = field(default_factory=uuid4)
    addresses: list[Address] = field(default_factory=list, repr=False)
    profile: Profile | None = field(default=None, repr=False)
    tags: set[Tag] = field(default_factory=set, repr=False)
    favorite_products: set[Product] = field(default_factory=set, repr=False)
    created_at: datetime | None = None
    updated_at: datetime | None = None
