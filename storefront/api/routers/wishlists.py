# storefront/api/routers/wishlists.py
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import WishlistIn, WishlistOut
from storefront.repos.product_repo import ProductRepo
from storefront.repos.user_repo import UserRepo
from storefront.services.wishlist_service import WishlistService

router = APIRouter(prefix="/users/{user_id}/wishlist", tags=["wishlists"])


def get_service(db: Session):
    return WishlistService(users=UserRepo(db), products=ProductRepo(db))


@router.get("", response_model=WishlistOut)
def get_wishlist(user_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).get_wishlist(user_id)


@router.put("", response_model=WishlistOut)
def set_wishlist(user_id: UUID, payload: WishlistIn, db: Session = Depends(get_db)):
    return get_service(db).set_wishlist(user_id, payload.product_ids)


@router.post("/{product_id}", response_model=WishlistOut)
def add_to_wishlist(user_id: UUID, product_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).add_product(user_id, product_id)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_from_wishlist(user_id: UUID, product_id: UUID, db: Session = Depends(get_db)):
    get_service(db).remove_product(user_id, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
