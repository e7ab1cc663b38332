# File: userhub/api/deps.py

from collections.abc import Generator
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from userhub.core.security import TokenClaims
from userhub.services.auth_service import AuthService
from userhub.services.user_service import UserService
from userhub.services.user_store import UserStore


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_user_store(db: Session = Depends(get_db)) -> UserStore:
    return UserStore(db)


def get_auth_service(
    request: Request,
    store: UserStore = Depends(get_user_store),
) -> AuthService:
    state = request.app.state
    return AuthService(store, state.password_hasher, state.token_issuer)


def get_user_service(
    request: Request,
    store: UserStore = Depends(get_user_store),
) -> UserService:
    return UserService(store, request.app.state.password_hasher)


def require_token(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> TokenClaims:
    """
    Gate for protected routes.

    The raw ``Authorization`` header value is the token (no "Bearer " prefix
    is stripped). A missing header raises MissingTokenError and a bad token
    raises InvalidTokenError, both answered with 401 by the app's handlers.
    On success the claims are attached to ``request.state`` and returned.
    """
    claims = request.app.state.token_verifier.verify(authorization)
    request.state.user_id = claims.subject_id
    request.state.is_admin = claims.is_admin
    return claims
