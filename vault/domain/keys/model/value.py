from enum import Enum, StrEnum
from typing import Annotated, Any

from pydantic import BeforeValidator

from vault.domain.shared.model.value import ValueObject


class KeyContext(bytes, Enum):
    """Derivation context labels.

    Each label domain-separates key derivation: material derived under one
    context never decrypts anything encrypted for another.
    """

    SYMMETRIC_KEY = b"symmetric_key"
    IBE_ENCRYPTION = b"ibe_encryption"
    TIMELOCK = b"timelock_encryption"


class CallerKeyContext(StrEnum):
    """Contexts whose keys are derived from the caller's own identity."""

    SYMMETRIC = "symmetric"
    IBE = "ibe"

    @property
    def context(self) -> KeyContext:
        return _CALLER_CONTEXTS[self]


_CALLER_CONTEXTS = {
    CallerKeyContext.SYMMETRIC: KeyContext.SYMMETRIC_KEY,
    CallerKeyContext.IBE: KeyContext.IBE_ENCRYPTION,
}


def _decode_hex(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return bytes.fromhex(value)
        except ValueError as e:
            raise ValueError("expected a hex-encoded public key") from e
    return value


TransportKey = Annotated[bytes, BeforeValidator(_decode_hex)]
"""Caller-supplied transport public key; accepts raw bytes or a hex string."""


class KeyResponse(ValueObject):
    """Hex-encoded key material and the identity of the caller it was issued to."""

    key_hex: str
    caller: str
