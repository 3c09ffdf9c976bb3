# storefront/api/routers/products.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.pagination import ProductSortBy, SortDirection
from storefront.domain.schemas import ProductCreate, ProductListQuery, ProductOut, ProductUpdate
from storefront.repos.category_repo import CategoryRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.product_service import ProductService
from storefront.utils.settings import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session):
    return ProductService(products=ProductRepo(db), categories=CategoryRepo(db))


@router.get("", response_model=List[ProductOut])
def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    sort: SortDirection = Query(SortDirection.DESC),
    sort_by: ProductSortBy = Query(ProductSortBy.created_at, alias="sortBy"),
    category_id: UUID | None = Query(None, alias="categoryId"),
    db: Session = Depends(get_db),
):
    query = ProductListQuery(page=page, limit=limit, sort=sort, sort_by=sort_by, category_id=category_id)
    return get_service(db).list_products(query)


@router.post("", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(payload: ProductCreate, response: Response, db: Session = Depends(get_db)):
    product = get_service(db).create_product(payload)
    response.headers["Location"] = f"/products/{product['id']}"
    return product


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).get_product(product_id)


@router.patch("/{product_id}", response_model=ProductOut)
def update_product(product_id: UUID, payload: ProductUpdate, db: Session = Depends(get_db)):
    return get_service(db).update_product(product_id, payload)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: UUID, db: Session = Depends(get_db)):
    get_service(db).delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
