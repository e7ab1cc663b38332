"""User persistence helpers."""

from typing import Any, Mapping, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from userhub.core.errors import ConflictError
from userhub.models.user import User


class UserStore:
    """
    CRUD access to ``User`` rows.

    Lookups return None when nothing matches; turning that into a 404 is the
    caller's job. Mutating calls commit immediately.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._session.get(User, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        result = self._session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    def find_all(self) -> list[User]:
        result = self._session.execute(select(User).order_by(User.created_at, User.id))
        return list(result.scalars())

    def insert(self, user: User) -> User:
        self._session.add(user)
        self._commit()
        return user

    def update_by_id(self, user_id: str, fields: Mapping[str, Any]) -> Optional[User]:
        user = self.find_by_id(user_id)
        if user is None:
            return None
        for key, value in fields.items():
            setattr(user, key, value)
        self._commit()
        return user

    def delete_by_id(self, user_id: str) -> Optional[User]:
        user = self.find_by_id(user_id)
        if user is None:
            return None
        self._session.delete(user)
        self._commit()
        return user

    def _commit(self) -> None:
        # The only unique column besides the primary key is ``email``.
        try:
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            raise ConflictError("Email already registered") from exc
