import pytest

from test.helpers import (
    FakeRemote,
    RecordingNotificationSink,
    event_payload,
    json_response,
    log_in,
)
from ticketing_client.platform.exception.exceptions import AuthenticationError, RemoteError
from ticketing_client.platform.http.request_executor import ResilientRequestExecutor
from ticketing_client.service.admin.app.command.admin_event_use_case import AdminEventUseCase
from ticketing_client.service.admin.app.query.admin_report_use_case import AdminReportUseCase
from ticketing_client.service.admin.domain.event_draft import EventDraft
from ticketing_client.service.admin.domain.event_stats import EventStats
from ticketing_client.service.session.app.session_manager import SessionManager
from ticketing_client.service.shared_kernel.domain.notification import NotificationKind
from ticketing_client.service.shared_kernel.driven_adapter.busy_counter import BusyCounter


DRAFT = EventDraft(
    name='Spring Concert',
    description='Live music',
    date='2026-05-01T19:00:00Z',
    location='Main Hall',
    total_capacity=100,
    price=25.0,
)


@pytest.fixture
def admin_event_use_case(
    executor: ResilientRequestExecutor,
    session_manager: SessionManager,
    sink: RecordingNotificationSink,
    busy: BusyCounter,
) -> AdminEventUseCase:
    return AdminEventUseCase(
        request_executor=executor,
        session_manager=session_manager,
        notification_sink=sink,
        busy_indicator=busy,
    )


@pytest.fixture
def admin_report_use_case(
    executor: ResilientRequestExecutor, session_manager: SessionManager, busy: BusyCounter
) -> AdminReportUseCase:
    return AdminReportUseCase(
        request_executor=executor, session_manager=session_manager, busy_indicator=busy
    )


@pytest.mark.unit
class TestAdminEventUseCase:
    @pytest.mark.asyncio
    async def test_create_event__camel_case_body_and_notified(
        self,
        admin_event_use_case: AdminEventUseCase,
        session_manager: SessionManager,
        remote: FakeRemote,
        sink: RecordingNotificationSink,
    ) -> None:
        await log_in(session_manager, remote, role='admin', token='admin-token')
        remote.on('POST', '/admin/events', json_response(201, {'event': event_payload()}))

        event = await admin_event_use_case.create_event(draft=DRAFT)

        assert event.id == 'evt-1'
        request = remote.requests_to('POST', '/admin/events')[0]
        assert request.headers['Authorization'] == 'Bearer admin-token'
        assert FakeRemote.body_of(request) == {
            'name': 'Spring Concert',
            'description': 'Live music',
            'date': '2026-05-01T19:00:00Z',
            'location': 'Main Hall',
            'totalCapacity': 100,
            'price': 25.0,
        }
        assert sink.last is not None
        assert sink.last.message == 'Event created successfully'

    @pytest.mark.asyncio
    async def test_update_event__bare_event_response_accepted(
        self,
        admin_event_use_case: AdminEventUseCase,
        session_manager: SessionManager,
        remote: FakeRemote,
    ) -> None:
        await log_in(session_manager, remote, role='admin')
        remote.on('PUT', '/admin/events/evt-1', json_response(200, event_payload(price=30.0)))

        event = await admin_event_use_case.update_event(event_id='evt-1', draft=DRAFT)

        assert event.price == 30.0

    @pytest.mark.asyncio
    async def test_delete_event__empty_body_ok(
        self,
        admin_event_use_case: AdminEventUseCase,
        session_manager: SessionManager,
        remote: FakeRemote,
        sink: RecordingNotificationSink,
    ) -> None:
        await log_in(session_manager, remote, role='admin')
        remote.on('DELETE', '/admin/events/evt-1', json_response(204))

        await admin_event_use_case.delete_event(event_id='evt-1')

        assert remote.count('DELETE', '/admin/events/evt-1') == 1
        assert sink.last is not None
        assert sink.last.message == 'Event deleted successfully'

    @pytest.mark.asyncio
    async def test_forbidden__notified_and_raised(
        self,
        admin_event_use_case: AdminEventUseCase,
        session_manager: SessionManager,
        remote: FakeRemote,
        sink: RecordingNotificationSink,
    ) -> None:
        await log_in(session_manager, remote, role='user')
        remote.on('DELETE', '/admin/events/evt-1', json_response(403, {'message': 'Forbidden'}))

        with pytest.raises(RemoteError):
            await admin_event_use_case.delete_event(event_id='evt-1')

        assert sink.last is not None
        assert sink.last.kind is NotificationKind.FAILURE
        assert sink.last.message == 'Forbidden'

    @pytest.mark.asyncio
    async def test_list_events(
        self,
        admin_event_use_case: AdminEventUseCase,
        session_manager: SessionManager,
        remote: FakeRemote,
    ) -> None:
        await log_in(session_manager, remote, role='admin')
        remote.on(
            'GET',
            '/admin/events',
            json_response(200, {'events': [event_payload(), event_payload(event_id='evt-2')]}),
        )

        events = await admin_event_use_case.list_events()

        assert [event.id for event in events] == ['evt-1', 'evt-2']

    @pytest.mark.asyncio
    async def test_anonymous__raises_without_network(
        self, admin_event_use_case: AdminEventUseCase, remote: FakeRemote
    ) -> None:
        with pytest.raises(AuthenticationError):
            await admin_event_use_case.create_event(draft=DRAFT)

        assert remote.requests == []

    def test_negative_capacity_draft__rejected(self) -> None:
        with pytest.raises(ValueError):
            EventDraft(
                name='x', description='', date='2026-01-01', location='', total_capacity=-1, price=0
            )


@pytest.mark.unit
class TestAdminReportUseCase:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'body',
        [
            {'totalEvents': 3, 'totalBookings': 12, 'totalRevenue': 300.5, 'totalTicketsSold': 20},
            {
                'stats': {
                    'totalEvents': 3,
                    'totalBookings': 12,
                    'totalRevenue': 300.5,
                    'totalTicketsSold': 20,
                }
            },
        ],
    )
    async def test_get_stats__bare_or_wrapped(
        self,
        admin_report_use_case: AdminReportUseCase,
        session_manager: SessionManager,
        remote: FakeRemote,
        body: dict,
    ) -> None:
        await log_in(session_manager, remote, role='admin')
        remote.on('GET', '/admin/stats', json_response(200, body))

        stats = await admin_report_use_case.get_stats()

        assert stats == EventStats(
            total_events=3, total_bookings=12, total_revenue=300.5, total_tickets_sold=20
        )

    @pytest.mark.asyncio
    async def test_list_bookings(
        self,
        admin_report_use_case: AdminReportUseCase,
        session_manager: SessionManager,
        remote: FakeRemote,
    ) -> None:
        await log_in(session_manager, remote, role='admin')
        remote.on(
            'GET',
            '/admin/bookings',
            json_response(
                200,
                {
                    'bookings': [
                        {
                            'id': 'bk-1',
                            'eventId': 'evt-1',
                            'userId': 'u-2',
                            'ticketCount': 1,
                            'bookingDate': '2026-04-01',
                            'totalPrice': 25,
                        }
                    ]
                },
            ),
        )

        bookings = await admin_report_use_case.list_bookings()

        assert len(bookings) == 1
        assert bookings[0].event_name == ''
        assert bookings[0].total_price == 25.0
