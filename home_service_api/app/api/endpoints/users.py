"""
User profile endpoints.

The user id is taken from the path as a string and parsed here so a
non‑numeric id is answered with ``400 Invalid user ID``.
"""

import re
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException, Path, status

from home_service_api.app.schemas.user import UserRead
from home_service_api.app.services.booking_service import BookingService
from home_service_api.app.services.user_service import UserService

router = APIRouter()

USER_ID_RE = re.compile(r"-?[0-9]+")


def parse_user_id(raw: str) -> int:
    value = raw.strip()
    if not USER_ID_RE.fullmatch(value):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid user ID")
    return int(value)


@router.get("/user/{user_id}", response_model=UserRead)
async def get_user(user_id: str = Path(..., description="ID of the user")) -> UserRead:
    """Return a user's public profile (no password hash)."""
    user = await UserService.get_user_by_id(parse_user_id(user_id))
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead(id=user["id"], email=user["email"], name=user["name"], phone=user["phone"])


# Stored bookings are returned as they are on disk; records written by
# older deployments need not match ``BookingRead``.
@router.get("/user/{user_id}/bookings", response_model=List[Dict[str, Any]])
async def list_user_bookings(user_id: str = Path(..., description="ID of the user")) -> List[Dict[str, Any]]:
    """Return the bookings made by a user; an empty list if there are none."""
    return await BookingService.list_user_bookings(parse_user_id(user_id))
