"""Selection wizard: the ordered sequence of configuration steps.

Each step is a plain function ``(catalog, draft, prompter) -> draft``. It
reads the catalog and the fields earlier steps filled in, asks one question
and returns a new draft. Keeping steps free of shared state lets tests run
any of them in isolation.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from typing import Optional

from spring_starter.catalog.models import (
    BOOT_VERSION,
    BUILD_SYSTEM,
    JAVA_VERSION,
    PACKAGING,
    Catalog,
    extract_default_value,
)
from spring_starter.utils import print_summary_table, print_warning
from spring_starter.wizard.project import ProjectConfiguration, ProjectDraft
from spring_starter.wizard.prompts import Prompter

logger = logging.getLogger(__name__)

Step = Callable[[Catalog, ProjectDraft, Prompter], ProjectDraft]

DEFAULT_PROJECT_NAME = "demo"
DEFAULT_DESCRIPTION = "Spring Boot Demo Project"
DEFAULT_GROUP_ID = "com.example"
DEFAULT_OUTPUT_DIRECTORY = "."


def default_package_name(group_id: str, artifact_id: str) -> str:
    """Derive a Java package from the group and artifact ids.

    The artifact id is lower-cased and stripped of everything that is not a
    letter or digit, so ``("com.example", "My-App")`` becomes
    ``"com.example.myapp"``.
    """
    suffix = re.sub(r"[\W_]", "", artifact_id.lower())
    return f"{group_id}.{suffix}" if suffix else group_id


# ---------------------------------------------------------------------------
# Free-text steps
# ---------------------------------------------------------------------------


def ask_project_name(catalog: Catalog, draft: ProjectDraft, prompter: Prompter) -> ProjectDraft:
    return draft.with_(name=prompter.question("Project name", DEFAULT_PROJECT_NAME, required=True))


def ask_description(catalog: Catalog, draft: ProjectDraft, prompter: Prompter) -> ProjectDraft:
    return draft.with_(
        description=prompter.question("Project description", DEFAULT_DESCRIPTION, required=False)
    )


def ask_group_id(catalog: Catalog, draft: ProjectDraft, prompter: Prompter) -> ProjectDraft:
    default = extract_default_value(catalog, "groupId.default") or DEFAULT_GROUP_ID
    return draft.with_(group_id=prompter.question("Group ID", default, required=True))


def ask_artifact_id(catalog: Catalog, draft: ProjectDraft, prompter: Prompter) -> ProjectDraft:
    default = draft.name or extract_default_value(catalog, "artifactId.default") or DEFAULT_PROJECT_NAME
    return draft.with_(artifact_id=prompter.question("Artifact ID", default, required=True))


def ask_package_name(catalog: Catalog, draft: ProjectDraft, prompter: Prompter) -> ProjectDraft:
    default = default_package_name(draft.group_id or DEFAULT_GROUP_ID, draft.artifact_id or "")
    return draft.with_(package_name=prompter.question("Package name", default, required=True))


def ask_output_directory(catalog: Catalog, draft: ProjectDraft, prompter: Prompter) -> ProjectDraft:
    return draft.with_(
        output_directory=prompter.question(
            "Project output directory", DEFAULT_OUTPUT_DIRECTORY, required=True
        )
    )


# ---------------------------------------------------------------------------
# Single-choice steps
# ---------------------------------------------------------------------------


def choose_from(field: str, label: str, attr: str) -> Step:
    """Build a step that picks one option of the *field* category into *attr*.

    An empty or missing category is skipped and leaves *attr* unset, so the
    service falls back to its own default.
    """

    def step(catalog: Catalog, draft: ProjectDraft, prompter: Prompter) -> ProjectDraft:
        category = catalog.category(field)
        if category.is_empty:
            logger.warning("Catalog offers no '%s' options; skipping", field)
            print_warning(f"No options available for '{label}', using the service default.")
            return draft.with_(**{attr: None})
        chosen = prompter.options(label, category.display_names(), default=category.default_display_name)
        return draft.with_(**{attr: category.id_for(chosen)})

    step.__name__ = f"choose_{attr}"
    return step


choose_build_system = choose_from(BUILD_SYSTEM, "Choose build system", "build_system_id")
choose_packaging = choose_from(PACKAGING, "Choose packaging", "packaging_id")
choose_java_version = choose_from(JAVA_VERSION, "Choose Java version", "java_version_id")
choose_boot_version = choose_from(BOOT_VERSION, "Choose Spring Boot version", "boot_version_id")


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def select_dependencies(catalog: Catalog, draft: ProjectDraft, prompter: Prompter) -> ProjectDraft:
    """One checklist per dependency group, in catalog order.

    Ids are accumulated in the order groups and options are declared,
    whatever order the prompter returned them in; an id picked twice is
    kept once.
    """
    selected: list[str] = []
    for group in catalog.dependency_groups:
        if group.is_empty:
            continue
        chosen = prompter.checklist(f"Select {group.group_name} dependencies", group.display_names())
        chosen_ids = {group.id_for(display_name) for display_name in chosen}
        for dependency_id in group.ids():
            if dependency_id in chosen_ids and dependency_id not in selected:
                selected.append(dependency_id)
    return draft.with_(dependencies=tuple(selected))


WIZARD_STEPS: tuple[Step, ...] = (
    ask_project_name,
    ask_description,
    ask_group_id,
    ask_artifact_id,
    ask_package_name,
    ask_output_directory,
    choose_build_system,
    choose_packaging,
    choose_java_version,
    choose_boot_version,
    select_dependencies,
)


# ---------------------------------------------------------------------------
# Wizard
# ---------------------------------------------------------------------------


class SelectionWizard:
    """Runs the configuration steps against a catalog and asks for confirmation."""

    def __init__(
        self,
        catalog: Catalog,
        prompter: Prompter,
        steps: Sequence[Step] = WIZARD_STEPS,
    ) -> None:
        self.catalog = catalog
        self.prompter = prompter
        self.steps = tuple(steps)

    def collect(self) -> ProjectConfiguration:
        """Run every step and freeze the result."""
        draft = ProjectDraft()
        for step in self.steps:
            draft = step(self.catalog, draft, self.prompter)
        configuration = draft.finalize()
        configuration.validate_against(self.catalog)
        return configuration

    def confirm(self, configuration: ProjectConfiguration) -> bool:
        print_summary_table(configuration.summary(), title="Project Configuration Summary")
        return self.prompter.confirm("Do you want to create this project?", default=False)

    def run(self) -> Optional[ProjectConfiguration]:
        """Collect a configuration; ``None`` means the user declined to proceed."""
        configuration = self.collect()
        if not self.confirm(configuration):
            return None
        return configuration
