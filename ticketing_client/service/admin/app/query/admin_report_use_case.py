from ticketing_client.platform.constant.route_constant import ADMIN_BOOKING_LIST, ADMIN_STATS
from ticketing_client.platform.http.payload_parser import parse_payload
from ticketing_client.platform.http.request_executor import ResilientRequestExecutor
from ticketing_client.platform.http.request_spec import RequestSpec
from ticketing_client.platform.logging.loguru_io import Logger
from ticketing_client.service.admin.domain.event_stats import EventStats
from ticketing_client.service.admin.schema.stats_schema import EventStatsSchema
from ticketing_client.service.booking.domain.entity.booking_record import BookingRecord
from ticketing_client.service.booking.schema.booking_schema import BookingListResponse
from ticketing_client.service.session.app.session_manager import SessionManager
from ticketing_client.service.shared_kernel.app.interface.i_busy_indicator import IBusyIndicator


class AdminReportUseCase:
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
    async def list_bookings(self) -> tuple[BookingRecord, ...]:
        """All bookings across users"""
        credential = self.session_manager.require_credential('view all bookings')
        with self.busy_indicator.track():
            payload = await self.request_executor.execute(
                ADMIN_BOOKING_LIST, RequestSpec.get(credential=credential)
            )
        return tuple(
            schema.to_entity() for schema in parse_payload(BookingListResponse, payload).bookings
        )

    @Logger.io
    async def get_stats(self) -> EventStats:
        credential = self.session_manager.require_credential('view statistics')
        with self.busy_indicator.track():
            payload = await self.request_executor.execute(
                ADMIN_STATS, RequestSpec.get(credential=credential)
            )
        return parse_payload(EventStatsSchema, payload).to_entity()
