"""
Client Factory

Opens the transport, starts session restoration in the background and hands
the wired container to the host. The host renders as anonymous until
restore() settles.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

import anyio

from ticketing_client.platform.config.di import Container
from ticketing_client.platform.logging.loguru_io import Logger


@asynccontextmanager
async def create_client(*, container: Optional[Container] = None) -> AsyncIterator[Container]:
    """
    Usage:
        async with create_client() as container:
            workflow = container.booking_workflow()
            ...
    """
    container = container or Container()
    settings = container.config_service()
    Logger.base.info(
        f'🚀 [CLIENT] {settings.PROJECT_NAME} {settings.VERSION} -> {settings.API_BASE_URL}'
    )

    async with container.http_client(), anyio.create_task_group() as task_group:
        task_group.start_soon(container.session_manager().restore)
        try:
            yield container
        finally:
            task_group.cancel_scope.cancel()
            container.notification_sink().close()
            Logger.base.info('🛑 [CLIENT] Shut down')
