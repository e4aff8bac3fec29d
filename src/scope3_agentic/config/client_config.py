# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Connection options for a Scope3 client."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

Environment = Literal["production", "staging"]

BASE_URLS: dict[str, str] = {
    "production": "https://api.agentic.scope3.com",
    "staging": "https://api.agentic.staging.scope3.com",
}


class ClientConfig(BaseModel):
    """Options recognized by Scope3Client."""

    api_key: str = Field(..., alias="apiKey", min_length=1)
    base_url: Optional[str] = Field(
        default=None,
        alias="baseUrl",
        description="Explicit endpoint, overrides environment",
    )
    environment: Environment = "production"
    timeout: float = Field(default=30.0, gt=0, description="Transport timeout in seconds")
    debug: bool = False

    model_config = {"populate_by_name": True}
