"""
Booking API Schemas - Pydantic models for remote payloads (camelCase on the wire)
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ticketing_client.service.booking.domain.entity.booking_record import BookingRecord


class BookingRecordSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra='ignore',
    )

    id: str
    event_id: str
    event_name: str = ''
    user_id: str
    user_name: str = ''
    ticket_count: int = Field(..., ge=1)
    booking_date: str
    total_price: float = Field(..., ge=0)

    def to_entity(self) -> BookingRecord:
        return BookingRecord(
            id=self.id,
            event_id=self.event_id,
            event_name=self.event_name,
            user_id=self.user_id,
            user_name=self.user_name,
            ticket_count=self.ticket_count,
            booking_date=self.booking_date,
            total_price=self.total_price,
        )


class BookingListResponse(BaseModel):
    """GET /bookings/my-bookings and GET /admin/bookings"""

    model_config = ConfigDict(extra='ignore')

    bookings: List[BookingRecordSchema]
