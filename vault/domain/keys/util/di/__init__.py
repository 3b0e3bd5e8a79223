from vault.domain.keys.util.di.provider import KeysProvider

__all__ = ["KeysProvider"]
