"""
Admin Event Use Case

Event CRUD for admins. Role gating happens in the view; the remote enforces it.
Mutations report their outcome through the notification sink and re-raise failures.
"""

from ticketing_client.platform.constant.route_constant import (
    ADMIN_EVENT_CREATE,
    ADMIN_EVENT_DELETE,
    ADMIN_EVENT_LIST,
    ADMIN_EVENT_UPDATE,
)
from ticketing_client.platform.exception.exceptions import CustomBaseError
from ticketing_client.platform.http.payload_parser import parse_payload
from ticketing_client.platform.http.request_executor import ResilientRequestExecutor
from ticketing_client.platform.http.request_spec import RequestSpec
from ticketing_client.platform.logging.loguru_io import Logger
from ticketing_client.service.admin.domain.event_draft import EventDraft
from ticketing_client.service.booking.domain.entity.event_listing import EventListing
from ticketing_client.service.booking.schema.event_schema import EventEnvelope, EventListResponse
from ticketing_client.service.session.app.session_manager import SessionManager
from ticketing_client.service.shared_kernel.app.interface.i_busy_indicator import IBusyIndicator
from ticketing_client.service.shared_kernel.app.interface.i_notification_sink import (
    INotificationSink,
)
from ticketing_client.service.shared_kernel.domain.notification import NotificationKind


class AdminEventUseCase:
    def __init__(
        self,
        *,
        request_executor: ResilientRequestExecutor,
        session_manager: SessionManager,
        notification_sink: INotificationSink,
        busy_indicator: IBusyIndicator,
    ) -> None:
        self.request_executor = request_executor
        self.session_manager = session_manager
        self.notification_sink = notification_sink
        self.busy_indicator = busy_indicator

    @Logger.io
    async def list_events(self) -> tuple[EventListing, ...]:
        credential = self.session_manager.require_credential('manage events')
        with self.busy_indicator.track():
            payload = await self.request_executor.execute(
                ADMIN_EVENT_LIST, RequestSpec.get(credential=credential)
            )
        return tuple(
            schema.to_entity() for schema in parse_payload(EventListResponse, payload).events
        )

    @Logger.io
    async def create_event(self, *, draft: EventDraft) -> EventListing:
        credential = self.session_manager.require_credential('manage events')
        try:
            with self.busy_indicator.track():
                payload = await self.request_executor.execute(
                    ADMIN_EVENT_CREATE,
                    RequestSpec.post(body=draft.to_body(), credential=credential),
                )
            event = parse_payload(EventEnvelope, payload).event.to_entity()
        except CustomBaseError as e:
            self.notification_sink.notify(e.message, NotificationKind.FAILURE)
            raise

        Logger.base.info(f'🆕 [ADMIN] Created event {event.id} ({event.name})')
        self.notification_sink.notify('Event created successfully', NotificationKind.SUCCESS)
        return event

    @Logger.io
    async def update_event(self, *, event_id: str, draft: EventDraft) -> EventListing:
        credential = self.session_manager.require_credential('manage events')
        try:
            with self.busy_indicator.track():
                payload = await self.request_executor.execute(
                    ADMIN_EVENT_UPDATE.format(event_id=event_id),
                    RequestSpec.put(body=draft.to_body(), credential=credential),
                )
            event = parse_payload(EventEnvelope, payload).event.to_entity()
        except CustomBaseError as e:
            self.notification_sink.notify(e.message, NotificationKind.FAILURE)
            raise

        Logger.base.info(f'✏️ [ADMIN] Updated event {event.id}')
        self.notification_sink.notify('Event updated successfully', NotificationKind.SUCCESS)
        return event

    @Logger.io
    async def delete_event(self, *, event_id: str) -> None:
        credential = self.session_manager.require_credential('manage events')
        try:
            with self.busy_indicator.track():
                await self.request_executor.execute(
                    ADMIN_EVENT_DELETE.format(event_id=event_id),
                    RequestSpec.delete(credential=credential),
                )
        except CustomBaseError as e:
            self.notification_sink.notify(e.message, NotificationKind.FAILURE)
            raise

        Logger.base.info(f'🗑️ [ADMIN] Deleted event {event_id}')
        self.notification_sink.notify('Event deleted successfully', NotificationKind.SUCCESS)
