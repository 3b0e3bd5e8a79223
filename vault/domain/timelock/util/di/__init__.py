from vault.domain.timelock.util.di.provider import TimelockProvider

__all__ = ["TimelockProvider"]
