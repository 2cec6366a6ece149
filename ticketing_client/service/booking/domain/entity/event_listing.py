import attrs


@attrs.define(frozen=True)
class EventListing:
    """
    Snapshot of a bookable event as last fetched from the remote.

    Possibly stale: another client may have consumed tickets since the fetch.
    Never patched in place; a newer snapshot replaces it.
    """

    id: str
    name: str
    description: str
    date: str
    location: str
    total_capacity: int
    available_tickets: int
    price: float

    @property
    def is_sold_out(self) -> bool:
        return self.available_tickets == 0
