"""Startup validation for handler authorization declarations."""

import logging

from vault.domain.shared.authorization.gate import Gate
from vault.domain.shared.command import CommandHandler
from vault.domain.shared.error import ConfigurationError
from vault.domain.shared.query import QueryHandler

logger = logging.getLogger(__name__)


def _missing_gate(handler_cls: type) -> str | None:
    if isinstance(getattr(handler_cls, "__auth__", None), Gate):
        return None
    return f"Handler {handler_cls.__name__} has no __auth__ declaration"


def validate_all_handlers() -> None:
    """Scan all imported CommandHandler and QueryHandler subclasses.

    Raises ConfigurationError listing all handlers missing __auth__ declarations.
    """
    handlers = [*CommandHandler.__subclasses__(), *QueryHandler.__subclasses__()]
    violations = [v for v in map(_missing_gate, handlers) if v is not None]

    if violations:
        raise ConfigurationError(
            f"Authorization validation failed for {len(violations)} handler(s):\n"
            + "\n".join(f"  - {v}" for v in violations)
        )

    logger.info("Authorization startup validation passed for %d handlers", len(handlers))
