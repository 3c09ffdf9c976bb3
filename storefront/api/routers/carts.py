# storefront/api/routers/carts.py
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import CartItemCreate, CartItemOut, CartItemUpdate, CartOut
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"])


def get_service(db: Session):
    return CartService(carts=CartRepo(db), products=ProductRepo(db))


@router.post("", response_model=CartOut, status_code=status.HTTP_201_CREATED)
def create_cart(db: Session = Depends(get_db)):
    return get_service(db).create_cart()


@router.get("/{cart_id}", response_model=CartOut)
def get_cart(cart_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).get_cart(cart_id)


@router.post("/{cart_id}/items", response_model=CartItemOut, status_code=status.HTTP_201_CREATED)
def add_item(cart_id: UUID, payload: CartItemCreate, db: Session = Depends(get_db)):
    return get_service(db).add_product(cart_id, payload.product_id)


@router.patch("/{cart_id}/items/{product_id}", response_model=CartItemOut)
def update_item(
    cart_id: UUID,
    product_id: UUID,
    payload: CartItemUpdate,
    db: Session = Depends(get_db),
):
    return get_service(db).update_quantity(cart_id, product_id, payload.quantity)


@router.delete("/{cart_id}/items/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_item(cart_id: UUID, product_id: UUID, db: Session = Depends(get_db)):
    get_service(db).remove_product(cart_id, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{cart_id}/items", status_code=status.HTTP_204_NO_CONTENT)
def clear_items(cart_id: UUID, db: Session = Depends(get_db)):
    get_service(db).clear_cart(cart_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
