"""
Booking endpoints.

``POST /book`` creates a booking; listing a user's bookings lives in
``users.py`` next to the other ``/user/{id}`` routes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status

from home_service_api.app.core.store import StoreError
from home_service_api.app.schemas.booking import BookingCreated, BookingRequest
from home_service_api.app.services.booking_service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/book", response_model=BookingCreated, status_code=status.HTTP_201_CREATED)
async def create_booking(payload: Optional[BookingRequest] = None) -> dict:
    """Create a booking.

    ``technicianId``, ``customerName``, ``phone``, ``address``,
    ``serviceType``, ``serviceId`` and ``date`` are required.  Nothing
    is stored when any of them is missing.
    """
    payload = payload or BookingRequest()
    missing = payload.missing_fields()
    if missing:
        logger.info("Rejected booking, missing fields: %s", ", ".join(missing))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields for booking")
    try:
        booking = await BookingService.create_booking(payload)
    except StoreError as e:
        logger.error("Error in /api/book: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Error during booking", "error": str(e)},
        )
    return {"message": "Booking confirmed!", "booking": booking}
