import attrs


@attrs.define(frozen=True)
class BookingRecord:
    id: str
    event_id: str
    event_name: str
    user_id: str
    user_name: str
    ticket_count: int
    booking_date: str
    total_price: float
