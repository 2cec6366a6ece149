"""
Event API Schemas - Pydantic models for remote payloads (camelCase on the wire)
"""

from typing import List, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ticketing_client.service.booking.domain.entity.event_listing import EventListing


class EventListingSchema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra='ignore',
    )

    id: str
    name: str
    description: str = ''
    date: str
    location: str = ''
    total_capacity: int = Field(..., ge=0)
    available_tickets: int = Field(..., ge=0)
    price: float = Field(..., ge=0)

    @model_validator(mode='after')
    def check_inventory(self) -> Self:
        if self.available_tickets > self.total_capacity:
            raise ValueError(
                f'availableTickets ({self.available_tickets}) exceeds '
                f'totalCapacity ({self.total_capacity})'
            )
        return self

    def to_entity(self) -> EventListing:
        return EventListing(
            id=self.id,
            name=self.name,
            description=self.description,
            date=self.date,
            location=self.location,
            total_capacity=self.total_capacity,
            available_tickets=self.available_tickets,
            price=self.price,
        )


class EventListResponse(BaseModel):
    """GET /events and GET /admin/events"""

    model_config = ConfigDict(extra='ignore')

    events: List[EventListingSchema]


class EventEnvelope(BaseModel):
    """POST/PUT /admin/events: the event either wrapped in {"event": ...} or bare"""

    model_config = ConfigDict(extra='ignore')

    event: EventListingSchema

    @model_validator(mode='before')
    @classmethod
    def wrap_bare_event(cls, data: object) -> object:
        if isinstance(data, dict) and 'event' not in data:
            return {'event': data}
        return data
