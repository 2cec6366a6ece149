"""
Notification Sink Interface

The presentation layer (toasts, banners, a terminal) owns display duration,
queuing and stacking. The core only hands messages over.
"""

from typing import Protocol

from ticketing_client.service.shared_kernel.domain.notification import NotificationKind


class INotificationSink(Protocol):
    def notify(self, message: str, kind: NotificationKind) -> None:
        """
        Hand a user-visible message to the presentation layer.

        Note:
            - Fire-and-forget: must return immediately and never raise
        """
        ...
