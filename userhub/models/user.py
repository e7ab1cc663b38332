# File: userhub/models/user.py

"""
User model.

The only persisted entity. The password is stored as a bcrypt digest and the
last token issued at registration is cached in ``auth_token`` (it is never used
to verify requests). There is no admin column: tokens are always issued with
``isAdmin = False``.
"""

import uuid
from datetime import datetime

from sqlalchemy import JSON, DateTime, Float, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from userhub.models.base import Base


def new_user_id() -> str:
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_user_id)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(320), index=True, unique=True, nullable=False)
    image: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(64), nullable=True)

    # Ordered list of skill tags, e.g. ["python", "django"]
    user_skills: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    price_per_hour: Mapped[float | None] = mapped_column(Float, nullable=True)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    auth_token: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"
