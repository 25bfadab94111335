"""Configuration schema using Pydantic.

Settings come from keyword arguments, ``FACTOM_*`` environment variables, or
the JSON file read by ``factom.config.loader``.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "localhost"


class FactomSettings(BaseSettings):
    """Where the node and wallet daemons live."""
    host: str | None = None  # Shared host for both daemons, e.g. "node.example.com"
    https: bool = False
    factomd_uri: str | None = None  # Full node daemon URI; overrides host/port
    walletd_uri: str | None = None  # Full wallet daemon URI; overrides host/port
    factomd_port: int = 8089
    walletd_port: int = 8088
    api_version: int = 2
    timeout: float | None = None  # Seconds; None waits indefinitely

    model_config = SettingsConfigDict(env_prefix="FACTOM_")

    def _build_uri(self, port: int) -> str:
        scheme = "https" if self.https else "http"
        return f"{scheme}://{self.host or DEFAULT_HOST}:{port}/v{self.api_version}"

    def resolve_factomd_uri(self) -> str:
        """Node daemon base URI."""
        return self.factomd_uri or self._build_uri(self.factomd_port)

    def resolve_walletd_uri(self) -> str:
        """Wallet daemon base URI."""
        return self.walletd_uri or self._build_uri(self.walletd_port)
