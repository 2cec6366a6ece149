from typing import Any

import attrs


@attrs.define(frozen=True)
class EventDraft:
    """Admin input for creating or replacing an event"""

    name: str
    description: str
    date: str
    location: str
    total_capacity: int = attrs.field(validator=attrs.validators.ge(0))
    price: float = attrs.field(validator=attrs.validators.ge(0))

    def to_body(self) -> dict[str, Any]:
        return {
            'name': self.name,
            'description': self.description,
            'date': self.date,
            'location': self.location,
            'totalCapacity': self.total_capacity,
            'price': self.price,
        }
