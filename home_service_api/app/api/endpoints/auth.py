"""
Signup and signin endpoints.

There are no sessions or tokens: signin only checks the credentials
and returns the user's id and name so the client can remember them.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status

from home_service_api.app.core.store import StoreError
from home_service_api.app.schemas.user import (
    SigninRequest,
    SigninResponse,
    SignupRequest,
    SignupResponse,
)
from home_service_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(payload: Optional[SignupRequest] = None) -> SignupResponse:
    """Register a new user.

    All of ``email``, ``password``, ``name`` and ``phone`` are required
    and the email must not be registered yet.
    """
    payload = payload or SignupRequest()
    if payload.missing_fields():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields")
    try:
        user = await UserService.create_user(payload)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError as e:
        logger.error("Error in /api/signup: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Error during sign-up", "error": str(e)},
        )
    return SignupResponse(message="Sign-up successful", user_id=user["id"])


@router.post("/signin", response_model=SigninResponse)
async def signin(payload: Optional[SigninRequest] = None) -> SigninResponse:
    """Check a user's email and password."""
    payload = payload or SigninRequest()
    if payload.missing_fields():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing email or password")
    user = await UserService.authenticate(payload.email, payload.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password")
    return SigninResponse(message="Sign-in successful", user_id=user["id"], name=user["name"])
