"""Booking Workflow State Enum"""

from enum import StrEnum


class BookingState(StrEnum):
    IDLE = 'idle'
    SELECTED = 'selected'
    SUBMITTING = 'submitting'
