"""Read/update/delete operations on user accounts."""

import logging

from userhub.core.errors import ConflictError, NotFoundError
from userhub.core.security import PasswordHasher
from userhub.models.user import User
from userhub.schemas.user import UserUpdate
from userhub.services.user_store import UserStore

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: UserStore, hasher: PasswordHasher) -> None:
        self.store = store
        self.hasher = hasher

    def get(self, user_id: str) -> User:
        user = self.store.find_by_id(user_id)
        if user is None:
            raise NotFoundError()
        return user

    def list_all(self) -> list[User]:
        return self.store.find_all()

    def update(self, user_id: str, payload: UserUpdate) -> User:
        fields = payload.model_dump(exclude_unset=True)
        if "email" in fields:
            fields["email"] = fields["email"].lower()
            owner = self.store.find_by_email(fields["email"])
            if owner is not None and owner.id != user_id:
                raise ConflictError("Email already registered")
        if "password" in fields:
            fields["password_hash"] = self.hasher.hash(fields.pop("password"))

        user = self.store.update_by_id(user_id, fields)
        if user is None:
            raise NotFoundError()
        logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(fields)) or "no fields")
        return user

    def delete(self, user_id: str) -> User:
        user = self.store.delete_by_id(user_id)
        if user is None:
            raise NotFoundError()
        logger.info("Deleted user %s", user_id)
        return user
