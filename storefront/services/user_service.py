# storefront/services/user_service.py
import secrets
from typing import Any, Dict, List
from uuid import UUID

from kombu.exceptions import OperationalError

from storefront.domain import relations
from storefront.domain.entities import Address, Profile, Tag, User
from storefront.domain.errors import NotFound, ValidationFailed
from storefront.domain.pagination import create_page_request
from storefront.domain.schemas import (
    AddressCreate,
    ChangePassword,
    ProfileIn,
    TagCreate,
    UserCreate,
    UserListQuery,
    UserUpdate,
)
from storefront.services.notification_service import NotificationService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def user_to_dict(user: User) -> Dict[str, Any]:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    return {"id": tag.id, "name": tag.name, "description": tag.description}


def address_to_dict(address: Address) -> Dict[str, Any]:
    return {"id": address.id, "street": address.street, "city": address.city, "zip": address.zip}


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    return {
        "id": profile.id,
        "bio": profile.bio,
        "phone_number": profile.phone_number,
        "date_of_birth": profile.date_of_birth,
        "loyalty_points": profile.loyalty_points,
    }


def user_detail_to_dict(user: User) -> Dict[str, Any]:
    data = user_to_dict(user)
    data["addresses"] = [address_to_dict(a) for a in user.addresses]
    data["profile"] = profile_to_dict(user.profile) if user.profile else None
    data["tags"] = [tag_to_dict(t) for t in sorted(user.tags, key=lambda t: t.name)]
    return data


class UserService:
    def __init__(self, users, tags, notifications: NotificationService | None = None):
        self.users = users
        self.tags = tags
        self.notifications = notifications

    #queries
    def list_users(self, query: UserListQuery) -> List[Dict[str, Any]]:
        page = create_page_request(query.page, query.limit, query.sort, query.sort_by)
        return [user_to_dict(u) for u in self.users.find_page(page)]

    def get_user(self, user_id: UUID) -> Dict[str, Any]:
        return user_detail_to_dict(self._get(user_id))

    #commands
    def register(self, payload: UserCreate) -> Dict[str, Any]:
        if self.users.find_by_email(payload.email) is not None:
            raise ValidationFailed({"email": "Email is already registered"})

        user = self.users.save(User(name=payload.name, email=payload.email, password=payload.password))
        logger.info(f"Registered user {user.id} ({user.email})")

        if self.notifications is not None:
            #user is already committed, do not fail the request
            try:
                self.notifications.send_welcome(user.email)
            except OperationalError as e:
                logger.error(f"Welcome notification for user {user.id} not queued: {e}")
        return user_to_dict(user)

    def update_user(self, user_id: UUID, payload: UserUpdate) -> Dict[str, Any]:
        user = self._get(user_id)
        if payload.email is not None and payload.email != user.email:
            other = self.users.find_by_email(payload.email)
            if other is not None and other.id != user.id:
                raise ValidationFailed({"email": "Email is already registered"})
            user.email = payload.email
        if payload.name is not None:
            user.name = payload.name

        self.users.save(user)
        logger.info(f"Updated user {user_id}")
        return user_to_dict(user)

    def delete_user(self, user_id: UUID) -> None:
        user = self._get(user_id)
        self.users.delete(user)
        logger.info(f"Deleted user {user_id}")

    def change_password(self, user_id: UUID, payload: ChangePassword) -> None:
        user = self._get(user_id)
        if not secrets.compare_digest(user.password.encode(), payload.old_password.encode()):
            raise ValidationFailed({"oldPassword": "Old password does not match"})

        user.password = payload.new_password
        self.users.save(user)
        logger.info(f"Password changed for user {user_id}")

    def add_address(self, user_id: UUID, payload: AddressCreate) -> Dict[str, Any]:
        user = self._get(user_id)
        address = Address(street=payload.street, city=payload.city, zip=payload.zip)
        relations.add_address(user, address)
        self.users.save(user)
        logger.info(f"Added address {address.id} to user {user_id}")
        return address_to_dict(address)

    def remove_address(self, user_id: UUID, address_id: UUID) -> None:
        user = self._get(user_id)
        address = next((a for a in user.addresses if a.id == address_id), None)
        if address is None:
            raise NotFound("Address", address_id)

        relations.remove_address(user, address)
        self.users.save(user)
        logger.info(f"Removed address {address_id} from user {user_id}")

    def set_profile(self, user_id: UUID, payload: ProfileIn) -> Dict[str, Any]:
        user = self._get(user_id)
        profile = user.profile
        if profile is None:
            profile = Profile()
        profile.bio = payload.bio
        profile.phone_number = payload.phone_number
        profile.date_of_birth = payload.date_of_birth
        profile.loyalty_points = payload.loyalty_points

        relations.set_profile(user, profile)
        self.users.save(user)
        logger.info(f"Profile {profile.id} set for user {user_id}")
        return profile_to_dict(profile)

    def remove_profile(self, user_id: UUID) -> None:
        user = self._get(user_id)
        if user.profile is None:
            raise NotFound("Profile", user_id)

        relations.remove_profile(user)
        self.users.save(user)
        logger.info(f"Removed profile of user {user_id}")

    def add_tags(self, user_id: UUID, tag_ids: List[UUID]) -> Dict[str, Any]:
        user = self._get(user_id)
        tags = self.tags.find_all_by_ids(tag_ids)
        missing = set(tag_ids) - {t.id for t in tags}
        if missing:
            raise NotFound("Tag", sorted(str(m) for m in missing))

        #reuse tags already attached so the set keeps one object per tag
        attached = {t.id: t for t in user.tags}
        relations.add_tags(user, [attached.get(t.id, t) for t in tags])
        self.users.save(user)
        logger.info(f"User {user_id} tagged with {[t.name for t in tags]}")
        return user_detail_to_dict(user)

    def remove_tag(self, user_id: UUID, tag_name: str) -> None:
        user = self._get(user_id)
        relations.remove_tag(user, tag_name)
        self.users.save(user)
        logger.info(f"Removed tag '{tag_name}' from user {user_id}")

    def _get(self, user_id: UUID) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise NotFound("User", user_id)
        return user


class TagService:
    def __init__(self, tags):
        self.tags = tags

    def list_tags(self, page: int | None = None, limit: int | None = None) -> List[Dict[str, Any]]:
        page_request = create_page_request(page, limit, None, None)
        return [tag_to_dict(t) for t in self.tags.find_page(page_request)]

    def create_tag(self, payload: TagCreate) -> Dict[str, Any]:
        tag = self.tags.save(Tag(name=payload.name, description=payload.description))
        logger.info(f"Created tag {tag.id} ({tag.name})")
        return tag_to_dict(tag)
