"""
Credential Store Interface

Durable storage for exactly one opaque credential string.
"""

from typing import Optional, Protocol


class ICredentialStore(Protocol):
    async def load(self) -> Optional[str]:
        """
        Read the persisted credential

        Returns:
            The credential, or None when nothing (usable) is stored
        """
        ...

    async def save(self, credential: str) -> None:
        """
        Persist the credential, replacing any previous one

        Raises:
            CredentialStoreError: the store could not be written
        """
        ...

    async def clear(self) -> None:
        """
        Remove the persisted credential (safe to call when nothing is stored)

        Raises:
            CredentialStoreError: the store could not be cleared
        """
        ...
