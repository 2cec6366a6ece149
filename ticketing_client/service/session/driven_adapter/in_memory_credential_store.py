from typing import Optional

from ticketing_client.platform.config.core_setting import settings


class InMemoryCredentialStore:
    """Process-local store; the credential does not survive a restart"""

    def __init__(
        self,
        *,
        credential: Optional[str] = None,
        storage_key: str = settings.CREDENTIAL_STORAGE_KEY,
    ) -> None:
        self.storage_key = storage_key
        self._data: dict[str, str] = {storage_key: credential} if credential else {}

    async def load(self) -> Optional[str]:
        return self._data.get(self.storage_key)

    async def save(self, credential: str) -> None:
        self._data = {self.storage_key: credential}

    async def clear(self) -> None:
        self._data.clear()
