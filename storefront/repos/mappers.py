# storefront/repos/mappers.py
"""
Translation between ORM rows and in-memory aggregates.

Rows -> aggregates go through storefront.domain.relations so the loaded graph
obeys the same back-reference rules as one built by hand.
"""
from decimal import Decimal

from storefront.data.models import (
    AddressModel,
    CartModel,
    CategoryModel,
    ProductModel,
    ProfileModel,
    TagModel,
    UserModel,
)
from storefront.domain import relations
from storefront.domain.entities import Address, Cart, CartItem, Category, Product, Profile, Tag, User


def category_to_domain(model: CategoryModel) -> Category:
    return Category(
        id=model.id,
        name=model.name,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def product_to_domain(model: ProductModel) -> Product:
    return Product(
        id=model.id,
        name=model.name,
        description=model.description,
        price=Decimal(model.price),
        category=category_to_domain(model.category) if model.category else None,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def update_product_model(model: ProductModel, product: Product) -> ProductModel:
    model.name = product.name
    model.description = product.description
    model.price = product.price
    model.category_id = product.category_id
    return model


def tag_to_domain(model: TagModel) -> Tag:
    return Tag(id=model.id, name=model.name, description=model.description)


def cart_to_domain(model: CartModel) -> Cart:
    cart = Cart(id=model.id, created_at=model.created_at, updated_at=model.updated_at)
    for row in model.items:
        #product deleted underneath the cart, the row goes away on next save
        if row.product is None:
            continue
        item = CartItem(
            id=row.id,
            product=product_to_domain(row.product),
            quantity=row.quantity,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
        relations.add_item_to_cart(cart, item)
    return cart


def user_to_domain(model: UserModel) -> User:
    user = User(
        id=model.id,
        name=model.name,
        email=model.email,
        password=model.password,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
    for row in model.addresses:
        relations.add_address(user, Address(id=row.id, street=row.street, city=row.city, zip=row.zip))

    if model.profile is not None:
        p = model.profile
        relations.set_profile(
            user,
            Profile(
                id=p.id,
                bio=p.bio,
                phone_number=p.phone_number,
                date_of_birth=p.date_of_birth,
                loyalty_points=p.loyalty_points,
            ),
        )

    relations.add_tags(user, [tag_to_domain(t) for t in model.tags])
    relations.set_favorite_products(user, [product_to_domain(p) for p in model.favorite_products])
    return user


def address_to_model(address: Address, position: int) -> AddressModel:
    return AddressModel(
        id=address.id,
        street=address.street,
        city=address.city,
        zip=address.zip,
        position=position,
    )


def profile_to_model(profile: Profile) -> ProfileModel:
    return ProfileModel(
        id=profile.id,
        bio=profile.bio,
        phone_number=profile.phone_number,
        date_of_birth=profile.date_of_birth,
        loyalty_points=profile.loyalty_points,
    )
