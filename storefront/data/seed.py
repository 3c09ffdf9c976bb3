# storefront/data/seed.py
from datetime import date
from decimal import Decimal

from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import UserModel
from storefront.domain import relations
from storefront.domain.entities import Address, Category, Product, Profile, Tag, User
from storefront.repos.category_repo import CategoryRepo
from storefront.repos.product_repo import ProductRepo
from storefront.repos.tag_repo import TagRepo
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        #only seed an empty database
        if db.query(UserModel).first():
            return

        category = CategoryRepo(db).save(Category(name="Peripherals"))
        products = ProductRepo(db)
        for name, price in (("Keyboard", "199.99"), ("Mouse", "49.50"), ("Monitor", "899.00")):
            products.save(Product(name=name, price=Decimal(price), category=category))

        tag = TagRepo(db).save(Tag(name="early-adopter", description="Joined during the beta"))

        user = User(name="Demo User", email="demo@example.com", password="change-me-please")
        relations.add_address(user, Address(street="123 Main St", city="Springfield", zip="12345"))
        relations.set_profile(user, Profile(bio="I'm a developer", date_of_birth=date(1990, 1, 1)))
        relations.add_tags(user, [tag])
        UserRepo(db).save(user)
        logger.info(f"Seeded demo data, user {user.id}")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
