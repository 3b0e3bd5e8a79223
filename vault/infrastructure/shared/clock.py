import time

from vault.domain.shared.port.clock import Clock


class SystemClock(Clock):
    """Wall clock, truncated to whole seconds."""

    def now(self) -> int:
        return int(time.time())
