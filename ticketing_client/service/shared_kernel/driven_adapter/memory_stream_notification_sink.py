"""
In-memory Notification Sink

Bridges the core to a presentation layer running in the same process.
The host reads notifications from `receive_stream`; the core never waits for it.
"""

from anyio import BrokenResourceError, ClosedResourceError, WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream

from ticketing_client.platform.config.core_setting import settings
from ticketing_client.platform.logging.loguru_io import Logger
from ticketing_client.service.shared_kernel.domain.notification import (
    Notification,
    NotificationKind,
)


class MemoryStreamNotificationSink:
    """
    Fire-and-forget notification queue

    Memory Management:
    - Stream max buffer: NOTIFICATION_BUFFER_SIZE notifications
    - Drop policy: silently drop if the buffer is full (send_nowait raises WouldBlock)
    - Drop after close: notifications sent after close() are discarded
    """

    def __init__(self, *, max_buffer_size: int = settings.NOTIFICATION_BUFFER_SIZE) -> None:
        self._send_stream, self._receive_stream = create_memory_object_stream[Notification](
            max_buffer_size=max_buffer_size
        )

    @property
    def receive_stream(self) -> MemoryObjectReceiveStream[Notification]:
        return self._receive_stream

    def notify(self, message: str, kind: NotificationKind) -> None:
        notification = Notification(message=message, kind=kind)
        try:
            self._send_stream.send_nowait(notification)
        except WouldBlock:
            Logger.base.debug(f'📭 [NOTIFY] Buffer full, dropped {kind}: {message}')
            return
        except (ClosedResourceError, BrokenResourceError):
            Logger.base.debug(f'📭 [NOTIFY] Sink closed, dropped {kind}: {message}')
            return
        Logger.base.info(f'📣 [NOTIFY] {kind}: {message}')

    def close(self) -> None:
        self._send_stream.close()
        self._receive_stream.close()
