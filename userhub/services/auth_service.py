# File: userhub/services/auth_service.py

"""
Authentication service.

Handles:
  - Registration (hash password, store user, issue token)
  - Login (look up by email, verify password, issue token)
"""

import logging

from userhub.core.errors import AuthenticationError, ConflictError
from userhub.core.security import PasswordHasher, TokenIssuer
from userhub.models.user import User, new_user_id
from userhub.schemas.user import UserCreate
from userhub.services.user_store import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, store: UserStore, hasher: PasswordHasher, issuer: TokenIssuer) -> None:
        self.store = store
        self.hasher = hasher
        self.issuer = issuer

    def register(self, payload: UserCreate) -> str:
        """
        Create a user from ``payload`` and return a freshly issued token.

        Raises ConflictError if the email is already taken.
        """
        email = payload.email.lower()
        if self.store.find_by_email(email) is not None:
            raise ConflictError("Email already registered")

        user = User(
            **payload.model_dump(exclude={"email", "password"}),
            id=new_user_id(),
            email=email,
            password_hash=self.hasher.hash(payload.password),
        )

        # Sign before saving: a signing failure must not leave a row behind.
        # No code path grants admin yet; every token says isAdmin=False.
        token = self.issuer.issue(user.id, is_admin=False)
        user.auth_token = token
        self.store.insert(user)

        logger.info("Registered user %s", user.id)
        return token

    def login(self, email: str, password: str) -> str:
        """
        Return a new token for a valid email/password pair.

        Unknown email and wrong password both raise the same AuthenticationError.
        """
        user = self.store.find_by_email(email.lower())
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthenticationError()

        return self.issuer.issue(user.id, is_admin=False)
