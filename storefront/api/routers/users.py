# storefront/api/routers/users.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.pagination import SortDirection, UserSortBy
from storefront.domain.schemas import (
    AddressCreate,
    AddressOut,
    ChangePassword,
    ProfileIn,
    ProfileOut,
    UserCreate,
    UserDetailOut,
    UserListQuery,
    UserOut,
    UserTagsIn,
    UserUpdate,
)
from storefront.repos.tag_repo import TagRepo
from storefront.repos.user_repo import UserRepo
from storefront.services.notification_service import NotificationService
from storefront.services.user_service import UserService
from storefront.utils.settings import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT

router = APIRouter(prefix="/users", tags=["users"])


def get_service(db: Session):
    return UserService(users=UserRepo(db), tags=TagRepo(db), notifications=NotificationService())


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserCreate, response: Response, db: Session = Depends(get_db)):
    user = get_service(db).register(payload)
    response.headers["Location"] = f"/users/{user['id']}"
    return user


@router.get("", response_model=List[UserOut])
def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    sort: SortDirection = Query(SortDirection.DESC),
    sort_by: UserSortBy = Query(UserSortBy.created_at, alias="sortBy"),
    db: Session = Depends(get_db),
):
    query = UserListQuery(page=page, limit=limit, sort=sort, sort_by=sort_by)
    return get_service(db).list_users(query)


@router.get("/{user_id}", response_model=UserDetailOut)
def get_user(user_id: UUID, db: Session = Depends(get_db)):
    return get_service(db).get_user(user_id)


@router.patch("/{user_id}", response_model=UserOut)
def update_user(user_id: UUID, payload: UserUpdate, db: Session = Depends(get_db)):
    return get_service(db).update_user(user_id, payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    get_service(db).delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{user_id}/change-password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(user_id: UUID, payload: ChangePassword, db: Session = Depends(get_db)):
    get_service(db).change_password(user_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/addresses", response_model=AddressOut, status_code=status.HTTP_201_CREATED)
def add_address(user_id: UUID, payload: AddressCreate, db: Session = Depends(get_db)):
    return get_service(db).add_address(user_id, payload)


@router.delete("/{user_id}/addresses/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_address(user_id: UUID, address_id: UUID, db: Session = Depends(get_db)):
    get_service(db).remove_address(user_id, address_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{user_id}/profile", response_model=ProfileOut)
def set_profile(user_id: UUID, payload: ProfileIn, db: Session = Depends(get_db)):
    return get_service(db).set_profile(user_id, payload)


@router.delete("/{user_id}/profile", status_code=status.HTTP_204_NO_CONTENT)
def remove_profile(user_id: UUID, db: Session = Depends(get_db)):
    get_service(db).remove_profile(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/tags", response_model=UserDetailOut)
def add_tags(user_id: UUID, payload: UserTagsIn, db: Session = Depends(get_db)):
    return get_service(db).add_tags(user_id, payload.tag_ids)


@router.delete("/{user_id}/tags/{tag_name}", status_code=status.HTTP_204_NO_CONTENT)
def remove_tag(user_id: UUID, tag_name: str, db: Session = Depends(get_db)):
    get_service(db).remove_tag(user_id, tag_name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
