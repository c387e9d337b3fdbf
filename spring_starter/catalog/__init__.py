"""Capability catalog: typed model and remote fetcher.

Usage::

    from spring_starter.catalog import CatalogFetcher, extract_default_value

    catalog = await CatalogFetcher(transport, url).fetch()
    group_id = extract_default_value(catalog, "groupId.default")
"""

from spring_starter.catalog.fetcher import CatalogFetcher, parse_catalog
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
    extract_default_value,
)

__all__ = [
    "BOOT_VERSION",
    "BUILD_SYSTEM",
    "JAVA_VERSION",
    "LANGUAGE",
    "PACKAGING",
    "Catalog",
    "CatalogCategory",
    "CatalogFetcher",
    "CatalogOption",
    "DependencyGroup",
    "extract_default_value",
    "parse_catalog",
]
