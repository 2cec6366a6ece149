"""
Test Configuration and Fixtures

Every collaborator of the core is real except the remote API (FakeRemote),
the presentation layer (RecordingNotificationSink) and backoff sleeps (AsyncMock).
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before settings are imported."""
    test_log_dir = Path(__file__).parent / 'test_log'
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEBUG', 'false')
    os.environ.setdefault('API_BASE_URL', 'http://remote.test')


_early_setup_test_environment()

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402

from test.helpers import (  # noqa: E402
    GENERIC_ERROR_MESSAGE,
    FakeRemote,
    RecordingNotificationSink,
)
from ticketing_client.platform.http.request_executor import ResilientRequestExecutor  # noqa: E402
from ticketing_client.service.booking.app.booking_workflow import BookingWorkflow  # noqa: E402
from ticketing_client.service.booking.app.event_catalog import EventCatalog  # noqa: E402
from ticketing_client.service.session.app.session_manager import SessionManager  # noqa: E402
from ticketing_client.service.session.driven_adapter.in_memory_credential_store import (  # noqa: E402
    InMemoryCredentialStore,
)
from ticketing_client.service.shared_kernel.driven_adapter.busy_counter import (  # noqa: E402
    BusyCounter,
)


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def sink() -> RecordingNotificationSink:
    return RecordingNotificationSink()


@pytest.fixture
def busy() -> BusyCounter:
    return BusyCounter()


@pytest.fixture
def sleep_mock() -> AsyncMock:
    """Stands in for anyio.sleep so backoff is recorded, not waited"""
    return AsyncMock()


@pytest.fixture
def executor(remote: FakeRemote, sleep_mock: AsyncMock) -> ResilientRequestExecutor:
    return ResilientRequestExecutor(
        http_client=remote.client(),
        max_attempts=3,
        base_delay=1.0,
        retry_non_idempotent=True,
        generic_error_message=GENERIC_ERROR_MESSAGE,
        sleep=sleep_mock,
    )


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def session_manager(
    executor: ResilientRequestExecutor,
    credential_store: InMemoryCredentialStore,
    sink: RecordingNotificationSink,
    busy: BusyCounter,
) -> SessionManager:
    return SessionManager(
        request_executor=executor,
        credential_store=credential_store,
        notification_sink=sink,
        busy_indicator=busy,
    )


@pytest.fixture
def event_catalog(
    executor: ResilientRequestExecutor, session_manager: SessionManager, busy: BusyCounter
) -> EventCatalog:
    return EventCatalog(
        request_executor=executor, session_manager=session_manager, busy_indicator=busy
    )


@pytest.fixture
def booking_workflow(
    executor: ResilientRequestExecutor,
    session_manager: SessionManager,
    event_catalog: EventCatalog,
    sink: RecordingNotificationSink,
    busy: BusyCounter,
) -> BookingWorkflow:
    return BookingWorkflow(
        request_executor=executor,
        session_manager=session_manager,
        event_catalog=event_catalog,
        notification_sink=sink,
        busy_indicator=busy,
    )
