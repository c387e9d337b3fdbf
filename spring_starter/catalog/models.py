"""Typed model of the remote capability catalog.

The catalog is parsed once by the fetcher and is read-only afterwards. Option
sets keep the order the service declared them in, since that order is what
the user sees.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Catalog field keys
# ---------------------------------------------------------------------------

BUILD_SYSTEM = "type"
PACKAGING = "packaging"
JAVA_VERSION = "javaVersion"
BOOT_VERSION = "bootVersion"
LANGUAGE = "language"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class CatalogOption(BaseModel):
    """A single selectable value: what the user sees and what the service expects."""

    model_config = ConfigDict(frozen=True)

    display_name: str = Field(..., description="Label presented to the user")
    id: str = Field(..., description="Opaque value sent to the service")


class _OptionSet(BaseModel):
    """Ordered collection of options addressable by display name."""

    model_config = ConfigDict(frozen=True)

    options: tuple[CatalogOption, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _unique_display_names(self) -> "_OptionSet":
        seen: set[str] = set()
        for option in self.options:
            if option.display_name in seen:
                raise ValueError(f"Duplicate option name: {option.display_name!r}")
            seen.add(option.display_name)
        return self

    @property
    def is_empty(self) -> bool:
        return not self.options

    def display_names(self) -> list[str]:
        return [option.display_name for option in self.options]

    def ids(self) -> list[str]:
        return [option.id for option in self.options]

    def id_for(self, display_name: str) -> str:
        """Return the id of the option labelled *display_name*.

        Raises:
            KeyError: If no option carries that label.
        """
        for option in self.options:
            if option.display_name == display_name:
                return option.id
        raise KeyError(display_name)

    def display_name_for(self, option_id: str) -> str | None:
        for option in self.options:
            if option.id == option_id:
                return option.display_name
        return None


class CatalogCategory(_OptionSet):
    """A named set of mutually exclusive options (e.g. packaging)."""

    name: str
    default_id: str | None = Field(default=None, description="Id the service pre-selects")

    @property
    def default_display_name(self) -> str | None:
        if self.default_id is None:
            return None
        return self.display_name_for(self.default_id)


class DependencyGroup(_OptionSet):
    """A named set of independently selectable dependencies."""

    group_name: str


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class Catalog(BaseModel):
    """The service's declared categories, dependency groups and defaults."""

    model_config = ConfigDict(frozen=True)

    categories: dict[str, CatalogCategory] = Field(default_factory=dict)
    dependency_groups: tuple[DependencyGroup, ...] = Field(default_factory=tuple)
    raw: dict[str, Any] = Field(
        default_factory=dict, description="Original nested payload, used for default lookups"
    )

    @model_validator(mode="after")
    def _unique_group_names(self) -> "Catalog":
        names = [group.group_name for group in self.dependency_groups]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate dependency groups: {', '.join(duplicates)}")
        return self

    def category(self, field: str) -> CatalogCategory:
        """Return the category for *field*, or an empty one if the catalog lacks it."""
        return self.categories.get(field) or CatalogCategory(name=field)

    def dependency_ids(self) -> set[str]:
        return {option.id for group in self.dependency_groups for option in group.options}


# ---------------------------------------------------------------------------
# Default lookups
# ---------------------------------------------------------------------------


def extract_default_value(catalog: Catalog | Mapping[str, Any], path: str) -> str | None:
    """Look up a string default by dotted path, e.g. ``"groupId.default"``.

    Each segment is matched as a key of the current node. A missing segment,
    a non-mapping intermediate node or a non-string terminal value all mean
    "no default" and yield ``None``.

    Examples::

        extract_default_value({"groupId": {"default": "com.example"}}, "groupId.default")
        -> "com.example"
        extract_default_value({"groupId": {}}, "groupId.default") -> None
    """
    node: Any = catalog.raw if isinstance(catalog, Catalog) else catalog
    for segment in path.split("."):
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]
    return node if isinstance(node, str) else None
