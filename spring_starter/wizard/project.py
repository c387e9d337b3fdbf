"""Project configuration models.

``ProjectDraft`` is the partially filled value passed from one wizard step to
the next. ``ProjectConfiguration`` is the validated, frozen result handed to
the request builder.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spring_starter.catalog.models import (
    BOOT_VERSION,
    BUILD_SYSTEM,
    JAVA_VERSION,
    PACKAGING,
    Catalog,
)

# Field on the configuration -> catalog category it must come from.
CATEGORY_FOR_FIELD: dict[str, str] = {
    "build_system_id": BUILD_SYSTEM,
    "packaging_id": PACKAGING,
    "java_version_id": JAVA_VERSION,
    "boot_version_id": BOOT_VERSION,
}


class ProjectConfiguration(BaseModel):
    """The user's confirmed choices."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, also used as base directory")
    description: str = Field(default="", description="Free-form project description")
    group_id: str
    artifact_id: str
    package_name: str
    output_directory: str = Field(..., description="Where the archive is extracted")
    build_system_id: Optional[str] = None
    packaging_id: Optional[str] = None
    java_version_id: Optional[str] = None
    boot_version_id: Optional[str] = None
    dependencies: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("name", "group_id", "artifact_id", "package_name", "output_directory")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("dependencies")
    @classmethod
    def _dedupe(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(dict.fromkeys(value))

    def validate_against(self, catalog: Catalog) -> None:
        """Check that every selected id is declared by *catalog*.

        Raises:
            ValueError: Naming the first field whose id the catalog does not offer.
        """
        for attr, field in CATEGORY_FOR_FIELD.items():
            value = getattr(self, attr)
            if value is not None and value not in catalog.category(field).ids():
                raise ValueError(f"{attr}={value!r} is not offered by the catalog")
        known = catalog.dependency_ids()
        unknown = [dep for dep in self.dependencies if dep not in known]
        if unknown:
            raise ValueError(f"Unknown dependencies: {', '.join(unknown)}")

    def summary(self) -> dict[str, str]:
        """Label -> value rows for the confirmation table."""
        return {
            "Project Name": self.name,
            "Description": self.description,
            "Group ID": self.group_id,
            "Artifact ID": self.artifact_id,
            "Package": self.package_name,
            "Java Version": self.java_version_id or "(service default)",
            "Spring Boot": self.boot_version_id or "(service default)",
            "Build System": self.build_system_id or "(service default)",
            "Packaging": self.packaging_id or "(service default)",
            "Dependencies": ", ".join(self.dependencies) or "(none)",
            "Output Directory": self.output_directory,
        }


class ProjectDraft(BaseModel):
    """Configuration under construction. Every step returns an updated copy."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    description: Optional[str] = None
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    package_name: Optional[str] = None
    output_directory: Optional[str] = None
    build_system_id: Optional[str] = None
    packaging_id: Optional[str] = None
    java_version_id: Optional[str] = None
    boot_version_id: Optional[str] = None
    dependencies: tuple[str, ...] = Field(default_factory=tuple)

    def with_(self, **changes: object) -> "ProjectDraft":
        return self.model_copy(update=changes)

    def finalize(self) -> ProjectConfiguration:
        """Freeze the draft.

        Raises:
            pydantic.ValidationError: If a required field is still missing or blank.
        """
        values = self.model_dump()
        if values["description"] is None:
            values["description"] = ""
        return ProjectConfiguration.model_validate(values)
