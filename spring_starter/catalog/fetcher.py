"""Fetch and parse the remote capability catalog.

The catalog payload is validated against a small set of wire models first,
so any shape mismatch surfaces as a single ``CatalogMalformed`` instead of an
error raised deep inside the wizard.

Typical usage::

    fetcher = CatalogFetcher(HttpTransport(), "https://start.spring.io")
    catalog = await fetcher.fetch()
"""

from __future__ import annotations

import copy
import json
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from spring_starter.catalog.models import (
    BOOT_VERSION,
    BUILD_SYSTEM,
    JAVA_VERSION,
    LANGUAGE,
    PACKAGING,
    Catalog,
    CatalogCategory,
    CatalogOption,
    DependencyGroup,
)
from spring_starter.errors import CatalogMalformed, CatalogUnavailable, TransportError
from spring_starter.transport import Transport

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Wire models
# ---------------------------------------------------------------------------


class _WireOption(BaseModel):
    name: str
    id: str


class _WireCategory(BaseModel):
    values: list[_WireOption]
    default: Optional[Any] = None


class _WireGroup(BaseModel):
    name: str
    values: list[_WireOption] = Field(default_factory=list)


class _WireDependencies(BaseModel):
    values: list[_WireGroup]


class _WireCatalog(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: Optional[_WireCategory] = None
    packaging: Optional[_WireCategory] = None
    java_version: Optional[_WireCategory] = Field(default=None, alias=JAVA_VERSION)
    boot_version: Optional[_WireCategory] = Field(default=None, alias=BOOT_VERSION)
    language: Optional[_WireCategory] = None
    dependencies: Optional[_WireDependencies] = None


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _options(values: list[_WireOption]) -> tuple[CatalogOption, ...]:
    return tuple(CatalogOption(display_name=value.name, id=value.id) for value in values)


def _category(field: str, wire: _WireCategory | None) -> CatalogCategory:
    if wire is None:
        logger.debug("Catalog has no '%s' category", field)
        return CatalogCategory(name=field)
    default = wire.default if isinstance(wire.default, str) else None
    return CatalogCategory(name=field, options=_options(wire.values), default_id=default)


def parse_catalog(data: Any) -> Catalog:
    """Turn a decoded catalog payload into a :class:`Catalog`.

    Categories missing from the payload become empty categories, which the
    wizard skips. Categories that are present but have the wrong shape are
    rejected.

    Raises:
        CatalogMalformed: If *data* is not an object or any present section
            does not match the expected structure.
    """
    if not isinstance(data, dict):
        raise CatalogMalformed(f"Catalog must be a JSON object, got {type(data).__name__}")

    try:
        wire = _WireCatalog.model_validate(data)
        categories = {
            BUILD_SYSTEM: _category(BUILD_SYSTEM, wire.type),
            PACKAGING: _category(PACKAGING, wire.packaging),
            JAVA_VERSION: _category(JAVA_VERSION, wire.java_version),
            BOOT_VERSION: _category(BOOT_VERSION, wire.boot_version),
            LANGUAGE: _category(LANGUAGE, wire.language),
        }
        groups = tuple(
            DependencyGroup(group_name=group.name, options=_options(group.values))
            for group in (wire.dependencies.values if wire.dependencies else [])
        )
        return Catalog(categories=categories, dependency_groups=groups, raw=copy.deepcopy(data))
    except ValidationError as exc:
        raise CatalogMalformed(f"Unexpected catalog structure: {exc.error_count()} error(s)\n{exc}") from exc


# ---------------------------------------------------------------------------
# Fetcher
# ---------------------------------------------------------------------------


class CatalogFetcher:
    """Retrieves the catalog from the service. Single attempt, no retries."""

    ACCEPT = "application/json"

    def __init__(self, transport: Transport, catalog_url: str) -> None:
        self.transport = transport
        self.catalog_url = catalog_url

    async def fetch(self) -> Catalog:
        """Download and parse the catalog.

        Raises:
            CatalogUnavailable: On transport errors or a non-200 status.
            CatalogMalformed: If the body is not JSON or has the wrong shape.
        """
        logger.info("Fetching catalog from %s", self.catalog_url)
        try:
            body = await self.transport.get(self.catalog_url, accept=self.ACCEPT)
        except TransportError as exc:
            raise CatalogUnavailable(f"Failed to fetch catalog: {exc}") from exc

        try:
            data = json.loads(body)
        except ValueError as exc:
            raise CatalogMalformed(f"Catalog is not valid JSON: {exc}") from exc

        catalog = parse_catalog(data)
        logger.info(
            "Catalog loaded: %d dependency group(s)", len(catalog.dependency_groups)
        )
        return catalog
