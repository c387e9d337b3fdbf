"""Turn a confirmed configuration into the generation request.

The query string is assembled by hand from an ordered list of pairs rather
than from a dict, so the same configuration always produces the same bytes.

Example::

    request = RequestBuilder("https://start.spring.io").build(configuration)
    request.url
    # https://start.spring.io/starter.zip?type=maven-project&language=java&...
"""

from __future__ import annotations

import re
from typing import Optional
from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict, Field

from spring_starter.config import DEFAULT_SERVICE_URL
from spring_starter.errors import EncodingFailure
from spring_starter.wizard.project import ProjectConfiguration

STARTER_RESOURCE = "/starter.zip"

PARAMETER_ORDER: tuple[str, ...] = (
    "type",
    "language",
    "bootVersion",
    "baseDir",
    "groupId",
    "artifactId",
    "name",
    "description",
    "packageName",
    "packaging",
    "javaVersion",
)


class EncodedRequest(BaseModel):
    """A ready-to-send generation request."""

    model_config = ConfigDict(frozen=True)

    url: str
    params: tuple[tuple[str, str], ...] = Field(
        default_factory=tuple, description="Unencoded query pairs, in send order"
    )
    accept: str = "application/zip"
    archive_name: str = Field(..., description="File name the archive is saved under")


def archive_name_for(project_name: str) -> str:
    """``"demo"`` -> ``"demo.zip"``; path separators become hyphens."""
    return re.sub(r"[\\/]", "-", project_name) + ".zip"


def _encode(field: str, value: str) -> str:
    try:
        return quote_plus(value, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise EncodingFailure(field, exc.reason) from exc


class RequestBuilder:
    """Builds ``<base_url>/starter.zip?...`` URLs. Pure: no I/O, no state."""

    def __init__(
        self,
        base_url: str = DEFAULT_SERVICE_URL,
        language: str = "java",
        resource: str = STARTER_RESOURCE,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.resource = resource

    def parameters(self, config: ProjectConfiguration) -> list[tuple[str, str]]:
        """Query pairs in send order.

        Parameters whose category the catalog did not offer are left out so
        the service applies its own default.
        """
        values: dict[str, Optional[str]] = {
            "type": config.build_system_id,
            "language": self.language,
            "bootVersion": config.boot_version_id,
            "baseDir": config.name,
            "groupId": config.group_id,
            "artifactId": config.artifact_id,
            "name": config.name,
            "description": config.description,
            "packageName": config.package_name,
            "packaging": config.packaging_id,
            "javaVersion": config.java_version_id,
        }
        pairs = [(key, values[key]) for key in PARAMETER_ORDER if values[key] is not None]
        pairs.extend(("dependencies", dependency) for dependency in config.dependencies)
        return pairs

    def build(self, config: ProjectConfiguration) -> EncodedRequest:
        """Assemble the request for *config*.

        Raises:
            EncodingFailure: If a value cannot be encoded as UTF-8.
        """
        pairs = self.parameters(config)
        query = "&".join(f"{key}={_encode(key, value)}" for key, value in pairs)
        return EncodedRequest(
            url=f"{self.base_url}{self.resource}?{query}",
            params=tuple(pairs),
            archive_name=archive_name_for(config.name),
        )
