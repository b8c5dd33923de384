"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from council.config import AuthSettings, GovernanceSettings, Settings, StorageSettings
from council.util.di.base import ProviderBase
from council.util.locks import KeyedLock


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        """Provide storage settings."""
        return settings.storage

    @provide(scope=Scope.APP)
    def provide_governance_settings(self, settings: Settings) -> GovernanceSettings:
        """Provide governance settings."""
        return settings.governance

    @provide(scope=Scope.APP)
    def provide_locks(self) -> KeyedLock:
        """Provide the process-wide per-key locks.

        Shared by all requests so concurrent mutations of one record queue up.
        """
        return KeyedLock()
