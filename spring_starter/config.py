"""Spring starter client configuration.

Typed settings for the remote service and the local work directory. Uses a
Pydantic v2 model so values are validated on construction and can be loaded
from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

DEFAULT_SERVICE_URL = "https://start.spring.io"


class Config(BaseModel):
    """Global client configuration.

    Created once by the CLI entry point (or by tests) and passed to the
    session, which hands the relevant pieces to each component.
    """

    service_url: str = Field(
        default=DEFAULT_SERVICE_URL, description="Base URL of the generation endpoint"
    )
    catalog_url: str = Field(
        default=DEFAULT_SERVICE_URL, description="URL serving the capability catalog"
    )
    timeout: float = Field(default=30.0, ge=1, description="Per-request timeout in seconds")
    language: str = Field(default="java", description="Value sent as the 'language' parameter")
    work_dir: Path = Field(
        default=Path("."), description="Directory where the downloaded archive is written"
    )

    @field_validator("service_url", "catalog_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("URL must not be empty")
        return value.rstrip("/")

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SPRING_STARTER_SERVICE_URL, SPRING_STARTER_CATALOG_URL,
            SPRING_STARTER_TIMEOUT, SPRING_STARTER_WORK_DIR.

        When only the service URL is set, the catalog is read from the same
        address.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SPRING_STARTER_SERVICE_URL"):
            kwargs["service_url"] = os.environ["SPRING_STARTER_SERVICE_URL"]
            kwargs["catalog_url"] = os.environ["SPRING_STARTER_SERVICE_URL"]
        if os.environ.get("SPRING_STARTER_CATALOG_URL"):
            kwargs["catalog_url"] = os.environ["SPRING_STARTER_CATALOG_URL"]
        if os.environ.get("SPRING_STARTER_TIMEOUT"):
            kwargs["timeout"] = float(os.environ["SPRING_STARTER_TIMEOUT"])
        if os.environ.get("SPRING_STARTER_WORK_DIR"):
            kwargs["work_dir"] = Path(os.environ["SPRING_STARTER_WORK_DIR"])
        return cls(**kwargs)
