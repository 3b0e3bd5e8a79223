from uuid import uuid4

from vault.domain.shared.model.value import RootValueObject, ValueObject

TIMELOCK_ID_PREFIX = "timelock"
RELEASE_IDENTITY_PREFIX = "timelock_"


class TimelockId(RootValueObject[str]):
    """Opaque, globally unique record identifier."""

    @classmethod
    def generate(cls, creator: str, timestamp: int) -> "TimelockId":
        """Build an id from prefix, creator and creation second.

        A random suffix keeps ids unique when one creator makes several
        records within the same second.
        """
        return cls(f"{TIMELOCK_ID_PREFIX}_{creator}_{timestamp}_{uuid4().hex[:12]}")

    def release_identity(self) -> str:
        """IBE identity bound to this record; a pure function of the id."""
        return f"{RELEASE_IDENTITY_PREFIX}{self.root}"


class TimelockSummary(ValueObject):
    id: TimelockId
    title: str
    unlock_time: int
    is_expired: bool
