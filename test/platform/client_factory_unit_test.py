import anyio
from dependency_injector import providers
import httpx
import pytest

from test.helpers import FakeRemote, json_response, user_payload
from ticketing_client.platform.client_factory import create_client
from ticketing_client.platform.config.di import Container
from ticketing_client.service.session.domain.session_state import SessionState
from ticketing_client.service.session.driven_adapter.in_memory_credential_store import (
    InMemoryCredentialStore,
)
from ticketing_client.service.shared_kernel.domain.notification import NotificationKind


@pytest.fixture
def container(remote: FakeRemote) -> Container:
    container = Container()
    container.http_client.override(providers.Object(remote.client()))
    container.credential_store.override(
        providers.Object(InMemoryCredentialStore(credential='stored-token'))
    )
    return container


@pytest.mark.unit
class TestCreateClient:
    @pytest.mark.asyncio
    async def test_restores_session_in_background(
        self, container: Container, remote: FakeRemote
    ) -> None:
        remote.on('GET', '/auth/validate', json_response(200, {'user': user_payload()}))

        async with create_client(container=container) as client:
            session_manager = client.session_manager()
            with anyio.fail_after(2):
                while session_manager.state is not SessionState.AUTHENTICATED:
                    await anyio.sleep(0.01)

            assert session_manager.principal is not None
            assert session_manager.principal.email == 'alice@example.com'
            assert client.booking_workflow().session_manager is session_manager

    @pytest.mark.asyncio
    async def test_shutdown__cancels_pending_restore_and_closes_sink(
        self, container: Container, remote: FakeRemote
    ) -> None:
        received = anyio.Event()

        async def hanging_validate(request: httpx.Request) -> httpx.Response:
            received.set()
            await anyio.sleep_forever()

        remote.on('GET', '/auth/validate', hanging_validate)

        with anyio.fail_after(2):
            async with create_client(container=container) as client:
                await received.wait()

        sink = client.notification_sink()
        sink.notify('after shutdown', NotificationKind.SUCCESS)
        assert client.session_manager().principal is None
