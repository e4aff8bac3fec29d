# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal, Optional

from dotenv import find_dotenv
from pydantic_settings import BaseSettings

from .client_config import ClientConfig

# Find .env file by searching up from current working directory
_ENV_FILE = find_dotenv(usecwd=True)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Scope3 API
    scope3_api_key: str = ""
    scope3_base_url: Optional[str] = None
    scope3_environment: Literal["production", "staging"] = "production"
    scope3_timeout: float = 30.0
    scope3_debug: bool = False

    # How to treat tool results that only carry text: "strict" or "lenient"
    response_policy: Literal["strict", "lenient"] = "strict"

    # Media agent budget allocation
    min_daily_budget: float = 100.0
    overallocation_percent: float = 40.0

    # Example servers
    port: int = 8080
    media_agent_url: str = "http://localhost:8080"
    media_agent_api_key: Optional[str] = None
    webhook_port: int = 3000
    webhook_path: str = "/webhooks"
    webhook_secret: Optional[str] = None

    # Logging
    environment: str = "production"
    log_format: Optional[Literal["json", "text"]] = None

    model_config = {
        "env_file": _ENV_FILE if _ENV_FILE else None,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def resolved_log_format(self) -> str:
        """Return the log format, defaulting to text in development."""
        if self.log_format:
            return self.log_format
        return "text" if self.environment == "development" else "json"

    def client_config(self) -> ClientConfig:
        """Build a client configuration from these settings.

        Returns:
            ClientConfig for Scope3Client.from_config
        """
        return ClientConfig(
            api_key=self.scope3_api_key,
            base_url=self.scope3_base_url,
            environment=self.scope3_environment,
            timeout=self.scope3_timeout,
            debug=self.scope3_debug,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
