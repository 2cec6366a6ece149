"""
File-backed Credential Store

Keeps the credential as a single-key JSON document, e.g. {"token": "..."}.
"""

from pathlib import Path
from typing import Optional

import anyio
import orjson

from ticketing_client.platform.config.core_setting import settings
from ticketing_client.platform.exception.exceptions import CredentialStoreError
from ticketing_client.platform.logging.loguru_io import Logger


class FileCredentialStore:
    def __init__(
        self,
        *,
        path: Path = settings.CREDENTIAL_STORE_PATH,
        storage_key: str = settings.CREDENTIAL_STORAGE_KEY,
    ) -> None:
        self.path = anyio.Path(path)
        self.storage_key = storage_key

    async def load(self) -> Optional[str]:
        if not await self.path.exists():
            return None

        try:
            document = orjson.loads(await self.path.read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            Logger.base.warning(f'🗝️ [CREDENTIAL] Unreadable store at {self.path}: {e}')
            return None

        credential = document.get(self.storage_key) if isinstance(document, dict) else None
        if not isinstance(credential, str) or not credential:
            return None
        return credential

    async def save(self, credential: str) -> None:
        try:
            await self.path.parent.mkdir(parents=True, exist_ok=True)
            await self.path.write_bytes(orjson.dumps({self.storage_key: credential}))
            await self.path.chmod(0o600)
        except OSError as e:
            Logger.base.error(f'🗝️ [CREDENTIAL] Cannot write store at {self.path}: {e}')
            raise CredentialStoreError('Could not save your session on this device') from e

    async def clear(self) -> None:
        try:
            await self.path.unlink(missing_ok=True)
        except OSError as e:
            Logger.base.error(f'🗝️ [CREDENTIAL] Cannot clear store at {self.path}: {e}')
            raise CredentialStoreError('Could not remove your saved session') from e
