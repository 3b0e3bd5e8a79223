"""Global test fixtures."""

import os

# Set JWT secret before any test builds a Config
os.environ.setdefault("VAULT_AUTH__JWT__SECRET", "test-secret-for-unit-tests-min-32")

from unittest.mock import AsyncMock  # noqa: E402

import logfire  # noqa: E402
import pytest  # noqa: E402

from vault.domain.auth.model.identity import Principal  # noqa: E402
from vault.domain.keys.port.key_service import KeyService  # noqa: E402
from vault.domain.keys.service.keys import KeyContextService  # noqa: E402
from vault.domain.timelock.service.timelock import TimelockService  # noqa: E402
from vault.infrastructure.persistence.memory import InMemoryTimelockRepository  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)

NOW = 1_700_000_000


class FakeClock:
    """Settable clock; tests move ``current`` to simulate waiting."""

    def __init__(self, current: int = NOW) -> None:
        self.current = current

    def now(self) -> int:
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def key_service() -> AsyncMock:
    service = AsyncMock(spec=KeyService)
    service.public_key.return_value = bytes.fromhex("a1b2c3")
    service.derive_key.return_value = bytes.fromhex("deadbeef")
    return service


@pytest.fixture
def timelock_repo() -> InMemoryTimelockRepository:
    return InMemoryTimelockRepository()


@pytest.fixture
def timelock_service(
    timelock_repo: InMemoryTimelockRepository,
    key_service: AsyncMock,
    clock: FakeClock,
) -> TimelockService:
    return TimelockService(
        timelock_repo=timelock_repo,
        key_context_service=KeyContextService(key_service=key_service),
        clock=clock,
    )


@pytest.fixture
def alice() -> Principal:
    return Principal(identity="alice")


@pytest.fixture
def bob() -> Principal:
    return Principal(identity="bob")
