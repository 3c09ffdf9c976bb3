# storefront/api/routers/categories.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import CategoryCreate, CategoryDetailOut, CategoryOut
from storefront.repos.category_repo import CategoryRepo
from storefront.services.product_service import CategoryService
from storefront.utils.settings import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

router = APIRouter(prefix="/categories", tags=["categories"])


def get_service(db: Session):
    return CategoryService(CategoryRepo(db))


@router.get("", response_model=List[CategoryOut])
def list_categories(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    db: Session = Depends(get_db),
):
    return get_service(db).list_categories(page, limit)


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, db: Session = Depends(get_db)):
    return get_service(db).create_category(payload)


@router.get("/{category_id}", response_model=CategoryDetailOut)
def get_category(category_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).get_category(category_id)
