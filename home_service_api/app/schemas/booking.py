"""
Pydantic models for service bookings.

Technician and service identifiers come from the static catalog and
may be numeric or string ids, so both are accepted and stored as sent.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from . import RequestModel

Identifier = Union[int, str]
Amount = Union[int, float]


class BookingRequest(RequestModel):
    """Schema for creating a booking."""

    required_fields = (
        "technician_id",
        "customer_name",
        "phone",
        "address",
        "service_type",
        "service_id",
        "date",
    )

    technician_id: Optional[Identifier] = Field(None, alias="technicianId", examples=[1])
    customer_name: Optional[str] = Field(None, alias="customerName", examples=["Tran Thi B"])
    phone: Optional[str] = Field(None, examples=["0901234567"])
    address: Optional[str] = Field(None, examples=["12 Le Loi, District 1"])
    service_type: Optional[str] = Field(None, alias="serviceType", examples=["electrical"])
    service_id: Optional[Identifier] = Field(None, alias="serviceId", examples=[101])
    # Falsy prices are stored as 0.
    price: Optional[Amount] = Field(None, examples=[150000])
    date: Optional[str] = Field(None, examples=["2026-11-02"])
    time: Optional[str] = Field(None, examples=["09:30"])
    notes: Optional[str] = None
    # Owning user; ``null`` for guest bookings.
    user_id: Optional[int] = Field(None, alias="userId")


class BookingRead(BaseModel):
    id: int
    technician_id: Identifier = Field(..., alias="technicianId")
    customer_name: str = Field(..., alias="customerName")
    phone: str
    address: str
    service_type: str = Field(..., alias="serviceType")
    service_id: Identifier = Field(..., alias="serviceId")
    price: Amount = 0
    date: str
    time: str = ""
    notes: str = ""
    user_id: Optional[int] = Field(None, alias="userId")
    created_at: str = Field(..., alias="createdAt")

    model_config = {"populate_by_name": True}


class BookingCreated(BaseModel):
    message: str
    booking: BookingRead
