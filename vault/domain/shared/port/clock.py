from abc import abstractmethod
from typing import Protocol

from vault.domain.shared.port import Port


class Clock(Port, Protocol):
    """Wall-clock source in whole unix seconds."""

    @abstractmethod
    def now(self) -> int: ...
