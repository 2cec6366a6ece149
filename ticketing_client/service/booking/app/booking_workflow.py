"""
Booking Reservation Workflow

State machine:
    IDLE → SELECTED(ticket_count=1) → SUBMITTING → IDLE      (remote accepted)
                                                 → SELECTED  (remote rejected / aborted)

Capacity:
- confirm() prechecks ticket_count against the cached available_tickets
- The precheck is advisory only; the remote is the final arbiter
- After a successful booking the catalog is re-fetched, never decremented locally
"""

from typing import Any, Optional

from ticketing_client.platform.constant.route_constant import BOOKING_CREATE
from ticketing_client.platform.exception.exceptions import (
    CustomBaseError,
    DomainError,
    ValidationError,
)
from ticketing_client.platform.http.request_executor import ResilientRequestExecutor
from ticketing_client.platform.http.request_spec import RequestSpec
from ticketing_client.platform.logging.loguru_io import Logger
from ticketing_client.service.booking.app.event_catalog import EventCatalog
from ticketing_client.service.booking.domain.booking_state import BookingState
from ticketing_client.service.booking.domain.entity.event_listing import EventListing
from ticketing_client.service.booking.domain.value_object.reservation_request import (
    ReservationRequest,
)
from ticketing_client.service.session.app.session_manager import SessionManager
from ticketing_client.service.shared_kernel.app.interface.i_busy_indicator import IBusyIndicator
from ticketing_client.service.shared_kernel.app.interface.i_notification_sink import (
    INotificationSink,
)
from ticketing_client.service.shared_kernel.domain.notification import NotificationKind


class BookingWorkflow:
    def __init__(
        self,
        *,
        request_executor: ResilientRequestExecutor,
        session_manager: SessionManager,
        event_catalog: EventCatalog,
        notification_sink: INotificationSink,
        busy_indicator: IBusyIndicator,
    ) -> None:
        self.request_executor = request_executor
        self.session_manager = session_manager
        self.event_catalog = event_catalog
        self.notification_sink = notification_sink
        self.busy_indicator = busy_indicator

        self._state = BookingState.IDLE
        self._selected_event: Optional[EventListing] = None
        self._ticket_count = 1
        self._last_confirmation: Any = None

    @property
    def state(self) -> BookingState:
        return self._state

    @property
    def ticket_count(self) -> int:
        return self._ticket_count

    @property
    def selected_event(self) -> Optional[EventListing]:
        """Latest catalog snapshot of the selected event, else the one captured at selection"""
        if self._selected_event is None:
            return None
        return self.event_catalog.get(self._selected_event.id) or self._selected_event

    @property
    def total_price(self) -> float:
        event = self.selected_event
        if event is None:
            return 0
        return self._ticket_count * event.price

    @property
    def last_confirmation(self) -> Any:
        """Body returned by the remote for the last accepted booking"""
        return self._last_confirmation

    def select_event(self, event: EventListing) -> None:
        if self._state is BookingState.SUBMITTING:
            raise DomainError('Cannot change selection while a booking is being submitted')
        self._selected_event = event
        self._ticket_count = 1
        self._state = BookingState.SELECTED

    def set_ticket_count(self, ticket_count: int) -> int:
        """Clamp to at least 1; no upper bound here, confirm() prechecks capacity"""
        if self._state is not BookingState.SELECTED:
            raise DomainError(f'Cannot change ticket count in state {self._state}')
        self._ticket_count = max(1, ticket_count)
        return self._ticket_count

    def cancel_selection(self) -> None:
        if self._state is BookingState.SUBMITTING:
            raise DomainError('Cannot cancel while a booking is being submitted')
        self._selected_event = None
        self._ticket_count = 1
        self._state = BookingState.IDLE

    def _precheck(self, event: EventListing) -> str:
        if self._ticket_count > event.available_tickets:
            raise ValidationError(
                f'Not enough tickets available. Only {event.available_tickets} left.'
            )
        credential = self.session_manager.credential
        if not self.session_manager.is_authenticated or credential is None:
            raise ValidationError('Please log in to book tickets')
        return credential

    @Logger.io
    async def confirm(self) -> bool:
        """
        Submit the current selection.

        Every outcome is reported through the notification sink; only misuse
        (calling outside SELECTED) raises.

        Returns:
            True when the remote accepted the reservation
        """
        event = self.selected_event
        if self._state is not BookingState.SELECTED or event is None:
            raise DomainError(f'Cannot confirm in state {self._state}')

        try:
            credential = self._precheck(event)
        except ValidationError as e:
            Logger.base.info(f'🚫 [BOOKING] Precheck rejected: {e.message}')
            self.notification_sink.notify(e.message, NotificationKind.FAILURE)
            return False

        request = ReservationRequest(event_id=event.id, ticket_count=self._ticket_count)
        self._state = BookingState.SUBMITTING
        Logger.base.info(
            f'🎫 [BOOKING] Submitting {request.ticket_count} ticket(s) for event {event.id} '
            f'(key {request.idempotency_key})'
        )

        try:
            with self.session_manager.bind_to_session() as scope, self.busy_indicator.track():
                confirmation = await self.request_executor.execute(
                    BOOKING_CREATE,
                    RequestSpec.post(
                        body=request.to_body(),
                        credential=credential,
                        idempotency_key=request.idempotency_key,
                    ),
                )
        except CustomBaseError as e:
            self.notification_sink.notify(e.message, NotificationKind.FAILURE)
            return False
        finally:
            # Any outcome other than acceptance returns to SELECTED with the selection kept
            self._state = BookingState.SELECTED

        if scope.cancelled_caught:
            Logger.base.warning(f'🛑 [BOOKING] Submission for event {event.id} aborted by logout')
            self.notification_sink.notify(
                'Booking aborted: you were logged out', NotificationKind.FAILURE
            )
            return False

        self._last_confirmation = confirmation
        self._selected_event = None
        self._ticket_count = 1
        self._state = BookingState.IDLE
        Logger.base.info(f'✅ [BOOKING] Reservation accepted for event {event.id}')
        self.notification_sink.notify('Booking confirmed successfully!', NotificationKind.SUCCESS)

        await self._refresh_catalog()
        return True

    async def _refresh_catalog(self) -> None:
        try:
            await self.event_catalog.refresh()
        except CustomBaseError as e:
            self.notification_sink.notify(e.message, NotificationKind.FAILURE)
