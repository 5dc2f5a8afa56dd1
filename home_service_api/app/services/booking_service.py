"""
Business logic for bookings.

A booking records a customer's request for a technician to perform a
catalog service at a given date.  Bookings are never updated or
deleted; they are read back by the id of the user who made them.
"""

import logging
from typing import Any, Dict, List

from home_service_api.app.core import store
from home_service_api.app.schemas.booking import BookingRequest
from home_service_api.app.services.user_service import utc_timestamp

COLLECTION = "bookings"


class BookingService:
    """Service for creating and listing bookings."""

    @classmethod
    async def create_booking(cls, data: BookingRequest) -> Dict[str, Any]:
        """Persist a new booking and return the stored record.

        Optional fields are normalised: ``price`` defaults to 0,
        ``time`` and ``notes`` to an empty string and ``userId`` to
        ``None``.
        """
        logger = logging.getLogger(__name__)
        with store.collection_lock(COLLECTION):
            bookings = store.load(COLLECTION)
            booking = {
                "id": store.next_id(bookings),
                "technicianId": data.technician_id,
                "customerName": data.customer_name,
                "phone": data.phone,
                "address": data.address,
                "serviceType": data.service_type,
                "serviceId": data.service_id,
                "price": data.price or 0,
                "date": data.date,
                "time": data.time or "",
                "notes": data.notes or "",
                "userId": data.user_id or None,
                "createdAt": utc_timestamp(),
            }
            bookings.append(booking)
            store.save(COLLECTION, bookings)
        logger.info(
            "Booking %s created for technician %s on %s",
            booking["id"],
            booking["technicianId"],
            booking["date"],
        )
        return booking

    @classmethod
    async def list_user_bookings(cls, user_id: int) -> List[Dict[str, Any]]:
        """Return all bookings owned by ``user_id`` in stored order."""
        return [b for b in store.load(COLLECTION) if b.get("userId") == user_id]
