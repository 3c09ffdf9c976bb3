# storefront/domain/schemas.py
from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, List
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from storefront.domain.pagination import ProductSortBy, SortDirection, UserSortBy
from storefront.utils.settings import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT


class CamelModel(BaseModel):
    """Wire format is camelCase, python side stays snake_case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _not_blank(value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]

#column limits: Numeric(10, 2) price, 32-bit quantity
MAX_PRICE = Decimal("100000000")
MAX_QUANTITY = 2**31 - 1


# ---------- query params ----------

class ListQuery(CamelModel):
    page: int = Field(1, ge=1)
    limit: int = Field(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT)
    sort: SortDirection = SortDirection.DESC


class ProductListQuery(ListQuery):
    sort_by: ProductSortBy = ProductSortBy.created_at
    category_id: UUID | None = None


class UserListQuery(ListQuery):
    sort_by: UserSortBy = UserSortBy.created_at


# ---------- categories ----------

class CategoryCreate(CamelModel):
    name: NonBlankStr = Field(..., min_length=1, max_length=255)


class CategoryOut(CamelModel):
    id: UUID
    name: str


# ---------- products ----------

class ProductCreate(CamelModel):
    """Schema for creating a product."""

    name: NonBlankStr = Field(..., min_length=1, max_length=255, description="Product name")
    description: str | None = Field(None, max_length=255)
    price: Decimal = Field(..., ge=Decimal("0.01"), lt=MAX_PRICE, decimal_places=2, description="Price, at least 0.01")
    category_id: UUID | None = None


class ProductUpdate(CamelModel):
    """Schema for a partial product update."""

    name: NonBlankStr | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=255)
    price: Decimal | None = Field(None, ge=Decimal("0.01"), lt=MAX_PRICE, decimal_places=2)
    category_id: UUID | None = None


class ProductOut(CamelModel):
    id: UUID
    name: str
    description: str | None = None
    price: Decimal
    category_id: UUID | None = None


class CategoryDetailOut(CategoryOut):
    products: List[ProductOut] = []


# ---------- carts ----------

class CartItemCreate(CamelModel):
    """Schema for adding a product to a cart."""

    product_id: UUID


class CartItemUpdate(CamelModel):
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)


class CartProductOut(CamelModel):
    id: UUID
    name: str
    price: Decimal


class CartItemOut(CamelModel):
    product: CartProductOut
    quantity: int
    total_price: Decimal


class CartOut(CamelModel):
    id: UUID
    items: List[CartItemOut]
    total_price: Decimal


# ---------- users ----------

class UserCreate(CamelModel):
    """Schema for registering a user."""

    name: NonBlankStr = Field(..., min_length=3, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=255)


class UserUpdate(CamelModel):
    name: NonBlankStr | None = Field(None, min_length=3, max_length=255)
    email: EmailStr | None = None


class ChangePassword(CamelModel):
    old_password: str
    new_password: str = Field(..., min_length=8, max_length=255)


class UserOut(CamelModel):
    id: UUID
    name: str
    email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AddressCreate(CamelModel):
    street: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=255)
    zip: str = Field(..., min_length=1, max_length=10)


class AddressOut(CamelModel):
    id: UUID
    street: str
    city: str
    zip: str


class ProfileIn(CamelModel):
    bio: str | None = Field(None, max_length=255)
    phone_number: str | None = Field(None, max_length=255)
    date_of_birth: date | None = None
    loyalty_points: int = Field(0, ge=0)


class ProfileOut(ProfileIn):
    id: UUID


class TagCreate(CamelModel):
    name: NonBlankStr = Field(..., min_length=1, max_length=255)
    description: str | None = Field(None, max_length=255)


class TagOut(CamelModel):
    id: UUID
    name: str
    description: str | None = None


class UserTagsIn(CamelModel):
    tag_ids: List[UUID] = Field(..., min_length=1)


class UserDetailOut(UserOut):
    addresses: List[AddressOut] = []
    profile: ProfileOut | None = None
    tags: List[TagOut] = []


# ---------- wishlist ----------

class WishlistIn(CamelModel):
    product_ids: List[UUID]


class WishlistOut(CamelModel):
    user_id: UUID
    products: List[ProductOut]
