"""
Business logic for users.

Users are kept in the ``users`` collection.  Email addresses are unique
and compared exactly as submitted.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from home_service_api.app.core import store
from home_service_api.app.core.security import hash_password, verify_password
from home_service_api.app.schemas.user import SignupRequest

COLLECTION = "users"


def utc_timestamp() -> str:
    """ISO‑8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class UserService:
    """Service for registering and looking up users."""

    @classmethod
    async def create_user(cls, data: SignupRequest) -> Dict[str, Any]:
        """Register a new user and return the stored record.

        Raises ``ValueError`` if the email is already registered.  A
        ``StoreError`` from saving the collection is propagated.
        """
        logger = logging.getLogger(__name__)
        with store.collection_lock(COLLECTION):
            users = store.load(COLLECTION)
            if any(u.get("email") == data.email for u in users):
                raise ValueError("Email already exists")
            user = {
                "id": store.next_id(users),
                "email": data.email,
                "password": hash_password(data.password),
                "name": data.name,
                "phone": data.phone,
                "createdAt": utc_timestamp(),
            }
            users.append(user)
            store.save(COLLECTION, users)
        logger.info("Registered user %s with id %s", data.email, user["id"])
        return user

    @classmethod
    async def authenticate(cls, email: str, password: str) -> Optional[Dict[str, Any]]:
        """Return the user record if the credentials match, otherwise ``None``."""
        for user in store.load(COLLECTION):
            if user.get("email") == email and verify_password(password, user.get("password")):
                return user
        return None

    @classmethod
    async def get_user_by_id(cls, user_id: int) -> Optional[Dict[str, Any]]:
        """Retrieve a user by ID."""
        return next((u for u in store.load(COLLECTION) if u.get("id") == user_id), None)

    @classmethod
    async def set_password(cls, email: str, password: str) -> Dict[str, Any]:
        """Replace the password hash of the user with the given email.

        Raises ``ValueError`` if no such user exists.
        """
        logger = logging.getLogger(__name__)
        with store.collection_lock(COLLECTION):
            users = store.load(COLLECTION)
            user = next((u for u in users if u.get("email") == email), None)
            if user is None:
                raise ValueError(f"User {email} not found")
            user["password"] = hash_password(password)
            store.save(COLLECTION, users)
        logger.info("Password reset for user %s", email)
        return user
