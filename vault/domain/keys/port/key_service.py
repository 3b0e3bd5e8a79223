from abc import abstractmethod
from typing import Protocol

from vault.domain.shared.port import Port


class KeyService(Port, Protocol):
    """Identity key derivation service.

    Implementations raise KeyServiceError when the service fails; the message
    is passed through to callers unchanged.
    """

    @abstractmethod
    async def public_key(self, context: bytes) -> bytes:
        """Master public key for ``context``, used for encryption."""
        ...

    @abstractmethod
    async def derive_key(
        self,
        context: bytes,
        input: bytes,
        transport_public_key: bytes,
    ) -> bytes:
        """Key derived for ``input`` under ``context``, encrypted to the transport key."""
        ...
