"""Handler-level authorization gates: public() and authenticated()."""

from dataclasses import dataclass

from vault.domain.auth.model.identity import Identity, Principal


class Gate:
    """Base for handler-level authorization gates.

    Every CommandHandler/QueryHandler must declare ``__auth__: ClassVar[Gate]``.
    """


@dataclass(frozen=True)
class Public(Gate):
    """No authentication required."""


@dataclass(frozen=True)
class Authenticated(Gate):
    """Requires a resolved Principal on the handler."""


_PUBLIC = Public()
_AUTHENTICATED = Authenticated()


def public() -> Public:
    """Mark a handler as publicly accessible (no auth required)."""
    return _PUBLIC


def authenticated() -> Authenticated:
    """Mark a handler as requiring an authenticated caller."""
    return _AUTHENTICATED


def caller_of(handler: object) -> Identity | None:
    caller = getattr(handler, "principal", None)
    if caller is None:
        caller = getattr(handler, "identity", None)
    return caller if isinstance(caller, Identity) else None


def require_principal(caller: Identity | None) -> Principal:
    """Narrow a resolved caller to a Principal, or reject it as unauthenticated."""
    from vault.domain.shared.error import AuthorizationError

    if not isinstance(caller, Principal):
        raise AuthorizationError("Authentication required", code="missing_token")
    return caller


def enforce_gate(handler: object) -> Identity | None:
    """Evaluate the handler's ``__auth__`` gate against its resolved caller.

    Returns the caller identity (``None`` if the handler carries none).
    """
    from vault.domain.shared.error import ConfigurationError

    auth_gate = getattr(type(handler), "__auth__", None)
    if not isinstance(auth_gate, Gate):
        raise ConfigurationError(f"Handler {type(handler).__name__} has no __auth__ declaration")

    caller = caller_of(handler)

    if isinstance(auth_gate, Public):
        return caller

    if isinstance(auth_gate, Authenticated):
        return require_principal(caller)

    raise ConfigurationError(  # pragma: no cover
        f"Handler {type(handler).__name__} has unhandled __auth__ type: {type(auth_gate).__name__}"
    )
