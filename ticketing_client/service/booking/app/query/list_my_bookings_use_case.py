from ticketing_client.platform.constant.route_constant import BOOKING_MY_BOOKINGS
from ticketing_client.platform.http.payload_parser import parse_payload
from ticketing_client.platform.http.request_executor import ResilientRequestExecutor
from ticketing_client.platform.http.request_spec import RequestSpec
from ticketing_client.platform.logging.loguru_io import Logger
from ticketing_client.service.booking.domain.entity.booking_record import BookingRecord
from ticketing_client.service.booking.schema.booking_schema import BookingListResponse
from ticketing_client.service.session.app.session_manager import SessionManager
from ticketing_client.service.shared_kernel.app.interface.i_busy_indicator import IBusyIndicator


class ListMyBookingsUseCase:
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

    @Logger.io
    async def list_my_bookings(self) -> tuple[BookingRecord, ...]:
        """Bookings of the logged-in user, as returned by the remote"""
        credential = self.session_manager.require_credential('view your bookings')

        with self.busy_indicator.track():
            payload = await self.request_executor.execute(
                BOOKING_MY_BOOKINGS, RequestSpec.get(credential=credential)
            )
        bookings = tuple(
            schema.to_entity() for schema in parse_payload(BookingListResponse, payload).bookings
        )

        Logger.base.info(f'✅ [MY_BOOKINGS] Found {len(bookings)} bookings')
        return bookings
