"""Session State Enum"""

from enum import StrEnum


class SessionState(StrEnum):
    ANONYMOUS = 'anonymous'
    AUTHENTICATING = 'authenticating'
    AUTHENTICATED = 'authenticated'
