"""Identity hierarchy: who is making the current request."""

from dataclasses import dataclass

ANONYMOUS_TEXT = "anonymous"


@dataclass(frozen=True)
class Identity:
    """Base for all request identities."""

    @property
    def text(self) -> str:
        return ANONYMOUS_TEXT

    @property
    def is_anonymous(self) -> bool:
        return True


@dataclass(frozen=True)
class Anonymous(Identity):
    """Unauthenticated request."""


@dataclass(frozen=True)
class Principal(Identity):
    """The authenticated caller.

    Resolved per-request from the bearer token. ``identity`` is the caller's
    stable textual identity; it is what records store as their creator.
    """

    identity: str

    @property
    def text(self) -> str:
        return self.identity

    @property
    def is_anonymous(self) -> bool:
        return False

    def as_bytes(self) -> bytes:
        """Identity input used when deriving caller-bound key material."""
        return self.identity.encode("utf-8")

    def __str__(self) -> str:
        return self.identity
