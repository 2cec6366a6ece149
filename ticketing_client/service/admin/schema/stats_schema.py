"""
Admin Stats Schema - GET /admin/stats, bare or wrapped in {"stats": ...}
"""

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from ticketing_client.service.admin.domain.event_stats import EventStats


class EventStatsSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    total_events: int = 0
    total_bookings: int = 0
    total_revenue: float = 0
    total_tickets_sold: int = 0

    @model_validator(mode='before')
    @classmethod
    def unwrap_stats(cls, data: object) -> object:
        if isinstance(data, dict) and isinstance(data.get('stats'), dict):
            return data['stats']
        return data

    def to_entity(self) -> EventStats:
        return EventStats(
            total_events=self.total_events,
            total_bookings=self.total_bookings,
            total_revenue=self.total_revenue,
            total_tickets_sold=self.total_tickets_sold,
        )
