# storefront/api/routers/tags.py
from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import TagCreate, TagOut
from storefront.repos.tag_repo import TagRepo
from storefront.services.user_service import TagService
from storefront.utils.settings import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=List[TagOut])
def list_tags(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    db: Session = Depends(get_db),
):
    return TagService(TagRepo(db)).list_tags(page, limit)


@router.post("", response_model=TagOut, status_code=status.HTTP_201_CREATED)
def create_tag(payload: TagCreate, db: Session = Depends(get_db)):
    return TagService(TagRepo(db)).create_tag(payload)
