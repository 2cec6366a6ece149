"""Busy Indicator Interface"""

from contextlib import AbstractContextManager
from typing import Protocol


class IBusyIndicator(Protocol):
    def track(self) -> AbstractContextManager[None]:
        """Mark the client busy for the duration of the block (nesting allowed)"""
        ...

    @property
    def is_busy(self) -> bool: ...
