"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers
import httpx

from ticketing_client.platform.config.core_setting import Settings
from ticketing_client.platform.http.request_executor import ResilientRequestExecutor
from ticketing_client.service.admin.app.command.admin_event_use_case import AdminEventUseCase
from ticketing_client.service.admin.app.query.admin_report_use_case import AdminReportUseCase
from ticketing_client.service.booking.app.booking_workflow import BookingWorkflow
from ticketing_client.service.booking.app.event_catalog import EventCatalog
from ticketing_client.service.booking.app.query.list_my_bookings_use_case import (
    ListMyBookingsUseCase,
)
from ticketing_client.service.session.app.session_manager import SessionManager
from ticketing_client.service.session.driven_adapter.file_credential_store import (
    FileCredentialStore,
)
from ticketing_client.service.shared_kernel.driven_adapter.busy_counter import BusyCounter
from ticketing_client.service.shared_kernel.driven_adapter.memory_stream_notification_sink import (
    MemoryStreamNotificationSink,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Transport
    http_client = providers.Singleton(
        httpx.AsyncClient,
        base_url=config_service.provided.API_BASE_URL,
        timeout=config_service.provided.REQUEST_TIMEOUT_SECONDS,
    )
    request_executor = providers.Singleton(
        ResilientRequestExecutor,
        http_client=http_client,
        max_attempts=config_service.provided.REQUEST_MAX_ATTEMPTS,
        base_delay=config_service.provided.REQUEST_BASE_DELAY_SECONDS,
        retry_non_idempotent=config_service.provided.RETRY_NON_IDEMPOTENT,
        generic_error_message=config_service.provided.GENERIC_ERROR_MESSAGE,
    )

    # Presentation contracts (the host reads from these)
    notification_sink = providers.Singleton(
        MemoryStreamNotificationSink,
        max_buffer_size=config_service.provided.NOTIFICATION_BUFFER_SIZE,
    )
    busy_indicator = providers.Singleton(BusyCounter)

    # Session (single writer of credential + principal)
    credential_store = providers.Singleton(
        FileCredentialStore,
        path=config_service.provided.CREDENTIAL_STORE_PATH,
        storage_key=config_service.provided.CREDENTIAL_STORAGE_KEY,
    )
    session_manager = providers.Singleton(
        SessionManager,
        request_executor=request_executor,
        credential_store=credential_store,
        notification_sink=notification_sink,
        busy_indicator=busy_indicator,
    )

    # Booking
    event_catalog = providers.Singleton(
        EventCatalog,
        request_executor=request_executor,
        session_manager=session_manager,
        busy_indicator=busy_indicator,
    )
    booking_workflow = providers.Singleton(
        BookingWorkflow,
        request_executor=request_executor,
        session_manager=session_manager,
        event_catalog=event_catalog,
        notification_sink=notification_sink,
        busy_indicator=busy_indicator,
    )
    list_my_bookings_use_case = providers.Factory(
        ListMyBookingsUseCase,
        request_executor=request_executor,
        session_manager=session_manager,
        busy_indicator=busy_indicator,
    )

    # Admin
    admin_event_use_case = providers.Factory(
        AdminEventUseCase,
        request_executor=request_executor,
        session_manager=session_manager,
        notification_sink=notification_sink,
        busy_indicator=busy_indicator,
    )
    admin_report_use_case = providers.Factory(
        AdminReportUseCase,
        request_executor=request_executor,
        session_manager=session_manager,
        busy_indicator=busy_indicator,
    )
