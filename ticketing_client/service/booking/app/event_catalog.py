"""
Event Catalog

The host view's cache of EventListing snapshots. Each refresh replaces the
whole cache at once; entries are never patched field by field.
"""

from typing import Optional

from ticketing_client.platform.constant.route_constant import EVENT_LIST
from ticketing_client.platform.http.payload_parser import parse_payload
from ticketing_client.platform.http.request_executor import ResilientRequestExecutor
from ticketing_client.platform.http.request_spec import RequestSpec
from ticketing_client.platform.logging.loguru_io import Logger
from ticketing_client.service.booking.domain.entity.event_listing import EventListing
from ticketing_client.service.booking.schema.event_schema import EventListResponse
from ticketing_client.service.session.app.session_manager import SessionManager
from ticketing_client.service.shared_kernel.app.interface.i_busy_indicator import IBusyIndicator


class EventCatalog:
    def __init__(
        self,
        *,
        request_executor: ResilientRequestExecutor,
        session_manager: SessionManager,
        busy_indicator: IBusyIndicator,
    ) -> None:
        self.request_executor = request_executor
        self.session_manager = session_manager
        self.busy_indicator = busy_indicator
        self._events: tuple[EventListing, ...] = ()
        self._events_by_id: dict[str, EventListing] = {}

    @property
    def events(self) -> tuple[EventListing, ...]:
        return self._events

    def get(self, event_id: str) -> Optional[EventListing]:
        return self._events_by_id.get(event_id)

    @Logger.io
    async def refresh(self) -> tuple[EventListing, ...]:
        """
        Fetch the authoritative listing and swap it in.

        Raises:
            TransportError, RemoteError: fetch failed or payload malformed;
                the previous snapshot stays in place
        """
        Logger.base.info('🌟 [EVENTS] Refreshing event listing')

        with self.busy_indicator.track():
            payload = await self.request_executor.execute(
                EVENT_LIST, RequestSpec.get(credential=self.session_manager.credential)
            )
        events = tuple(
            schema.to_entity() for schema in parse_payload(EventListResponse, payload).events
        )

        self._events = events
        self._events_by_id = {event.id: event for event in events}

        Logger.base.info(f'✅ [EVENTS] Loaded {len(events)} events')
        return events
