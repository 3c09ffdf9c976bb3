# storefront/api/__init__.py
from storefront.api.routers import carts, categories, health, products, tags, users, wishlists

ROUTERS = (
    health.router,
    users.router,
    wishlists.router,
    tags.router,
    categories.router,
    products.router,
    carts.router,
)
