"""Notification value object"""

from enum import StrEnum

import attrs


class NotificationKind(StrEnum):
    SUCCESS = 'success'
    FAILURE = 'failure'


@attrs.define(frozen=True)
class Notification:
    message: str
    kind: NotificationKind
