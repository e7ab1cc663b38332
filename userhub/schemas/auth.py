# File: userhub/schemas/auth.py

from userhub.schemas.base import CamelModel


class LoginRequest(CamelModel):
    # Not EmailStr: a malformed email gets the same 401 as an unknown one.
    email: str
    password: str


class TokenResponse(CamelModel):
    message: str
    auth_token: str
