"""Server configuration from environment variables."""

import os
from dataclasses import dataclass

from component_registry.providers.remote import SHADCN_BASE_URL


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration loaded from environment variables."""

    host: str
    port: int
    shadcn_base_url: str
    fetch_timeout_seconds: float
    debug: bool
    log_level: str

    @staticmethod
    def from_env() -> "ServerConfig":
        """Load configuration from environment variables.

        Raises:
            ValueError: If PORT or the fetch timeout is not a number
        """
        return ServerConfig(
            host=os.environ.get("COMPONENT_REGISTRY_HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "3001")),
            shadcn_base_url=os.environ.get("COMPONENT_REGISTRY_SHADCN_BASE_URL", SHADCN_BASE_URL),
            fetch_timeout_seconds=float(os.environ.get("COMPONENT_REGISTRY_FETCH_TIMEOUT", "10")),
            debug=os.environ.get("COMPONENT_REGISTRY_DEBUG", "false").lower() == "true",
            log_level=os.environ.get("COMPONENT_REGISTRY_LOG_LEVEL", "INFO").upper(),
        )
