# File: userhub/api/v1/routes_auth.py

"""
Auth API routes: registration and login.

Both return a signed token valid for one hour.
"""

from fastapi import APIRouter, Depends, status

from userhub.api.deps import get_auth_service
from userhub.schemas.auth import LoginRequest, TokenResponse
from userhub.schemas.user import UserCreate
from userhub.services.auth_service import AuthService

router = APIRouter()


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(
    payload: UserCreate,
    auth: AuthService = Depends(get_auth_service),
):
    token = auth.register(payload)
    return TokenResponse(message="User registered successfully", auth_token=token)


@router.post("/login", response_model=TokenResponse, summary="User login")
def login(
    payload: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
):
    """
    Exchange email + password for a token.

    Unknown email and wrong password get the same 401 "Invalid credentials".
    """
    token = auth.login(payload.email, payload.password)
    return TokenResponse(message="Login successful", auth_token=token)
