from typing import Any

import attrs
import uuid_utils


def _new_idempotency_key() -> str:
    return str(uuid_utils.uuid7())


@attrs.define(frozen=True)
class ReservationRequest:
    """
    Intent to consume inventory, not yet authoritative.

    The idempotency key is fixed at construction, so every retry of the
    same request carries the same key.
    """

    event_id: str
    ticket_count: int = attrs.field(validator=attrs.validators.ge(1))
    idempotency_key: str = attrs.field(factory=_new_idempotency_key)

    def to_body(self) -> dict[str, Any]:
        return {'eventId': self.event_id, 'ticketCount': self.ticket_count}
