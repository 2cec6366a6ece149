from enum import StrEnum

import attrs


class Role(StrEnum):
    USER = 'user'
    ADMIN = 'admin'


@attrs.define(frozen=True)
class Principal:
    """Authenticated identity; only meaningful alongside a live credential"""

    id: str
    email: str
    name: str
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
