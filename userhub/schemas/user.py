# File: userhub/schemas/user.py

from typing import List, Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from userhub.schemas.base import CamelModel


class UserProfile(CamelModel):
    name: Optional[str] = None
    image: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    user_skills: List[str] = Field(default_factory=list)
    price_per_hour: Optional[float] = Field(default=None, ge=0)


class UserCreate(UserProfile):
    email: EmailStr
    password: str = Field(min_length=1)


class UserUpdate(CamelModel):
    """
    Partial update. Only the fields present in the body are written.

    ``id`` is not accepted (identifiers are immutable) and neither is any
    other unknown field.
    """

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    email: Optional[EmailStr] = None
    image: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    user_skills: Optional[List[str]] = None
    price_per_hour: Optional[float] = Field(default=None, ge=0)
    password: Optional[str] = Field(default=None, min_length=1)

    @field_validator("email", "password", "user_skills")
    @classmethod
    def not_null(cls, v):
        # Only runs for values present in the body; these columns can't be cleared.
        if v is None:
            raise ValueError("may not be null")
        return v


class UserRead(UserProfile):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: Optional[str] = None


class UserResponse(CamelModel):
    message: str
    user: UserRead


class UserListResponse(CamelModel):
    users: List[UserRead]


class UpdatedUserResponse(CamelModel):
    message: str
    updated_user: UserRead


class DeletedUserResponse(CamelModel):
    message: str
    deleted_user: UserRead
