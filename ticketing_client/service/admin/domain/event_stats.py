import attrs


@attrs.define(frozen=True)
class EventStats:
    total_events: int = 0
    total_bookings: int = 0
    total_revenue: float = 0
    total_tickets_sold: int = 0
