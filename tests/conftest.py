"""Shared pytest fixtures for the spring-starter test suite.

Provides reusable fixtures for:
- A Spring Initializr style catalog payload and its parsed ``Catalog``
- A scripted prompter that answers wizard questions from a dict
- An in-memory transport and a recording extractor
- Small zip archives built on the fly
"""

from __future__ import annotations

import io
import json
import zipfile
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from spring_starter.catalog import Catalog, parse_catalog
from spring_starter.errors import TransportError


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


def build_catalog_payload() -> dict[str, Any]:
    return {
        "type": {
            "type": "action",
            "default": "maven-project",
            "values": [
                {"id": "maven-project", "name": "Maven", "action": "/starter.zip"},
                {"id": "gradle-project", "name": "Gradle", "action": "/starter.zip"},
            ],
        },
        "packaging": {
            "type": "single-select",
            "default": "jar",
            "values": [{"id": "jar", "name": "Jar"}, {"id": "war", "name": "War"}],
        },
        "javaVersion": {
            "type": "single-select",
            "default": "17",
            "values": [{"id": "21", "name": "21"}, {"id": "17", "name": "17"}],
        },
        "bootVersion": {
            "type": "single-select",
            "default": "3.2.0",
            "values": [
                {"id": "3.3.0-SNAPSHOT", "name": "3.3.0 (SNAPSHOT)"},
                {"id": "3.2.0", "name": "3.2.0"},
            ],
        },
        "language": {
            "type": "single-select",
            "default": "java",
            "values": [{"id": "java", "name": "Java"}, {"id": "kotlin", "name": "Kotlin"}],
        },
        "groupId": {"type": "text", "default": "com.example"},
        "artifactId": {"type": "text", "default": "demo"},
        "dependencies": {
            "type": "hierarchical-multi-select",
            "values": [
                {
                    "name": "Developer Tools",
                    "values": [
                        {"id": "devtools", "name": "Spring Boot DevTools"},
                        {"id": "lombok", "name": "Lombok"},
                    ],
                },
                {
                    "name": "Web",
                    "values": [
                        {"id": "web", "name": "Spring Web"},
                        {"id": "webflux", "name": "Spring Reactive Web"},
                    ],
                },
            ],
        },
    }


@pytest.fixture
def catalog_payload() -> dict[str, Any]:
    """Raw catalog JSON as the service returns it."""
    return build_catalog_payload()


@pytest.fixture
def catalog(catalog_payload: dict[str, Any]) -> Catalog:
    """Parsed catalog built from ``catalog_payload``."""
    return parse_catalog(catalog_payload)


# ---------------------------------------------------------------------------
# Prompter double
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Answers prompts from a ``{label: answer}`` mapping.

    Unscripted questions fall back to the offered default (or the first
    choice). Every prompt is recorded in ``calls`` as ``(kind, label, choices)``.
    """

    def __init__(self, answers: Optional[dict[str, Any]] = None) -> None:
        self.answers = answers or {}
        self.calls: list[tuple[str, str, Any]] = []

    def question(self, label: str, default: Optional[str] = None, required: bool = False) -> str:
        self.calls.append(("question", label, default))
        return self.answers.get(label, default or "")

    def options(self, label: str, choices: Sequence[str], default: Optional[str] = None) -> str:
        self.calls.append(("options", label, list(choices)))
        return self.answers.get(label, default if default is not None else choices[0])

    def checklist(self, label: str, choices: Sequence[str]) -> list[str]:
        self.calls.append(("checklist", label, list(choices)))
        return list(self.answers.get(label, []))

    def confirm(self, label: str, default: bool = True) -> bool:
        self.calls.append(("confirm", label, default))
        return self.answers.get(label, default)

    def labels(self, kind: str) -> list[str]:
        return [label for call_kind, label, _ in self.calls if call_kind == kind]


@pytest.fixture
def scripted_prompter() -> Callable[..., ScriptedPrompter]:
    """Factory: ``scripted_prompter({"Project name": "demo"})``."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Transport / extractor doubles
# ---------------------------------------------------------------------------


def make_zip(files: dict[str, str]) -> bytes:
    """Build an in-memory zip archive from ``{member: text}``."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, content in files.items():
            archive.writestr(name, content)
    return buffer.getvalue()


class FakeTransport:
    """Serves the catalog and the starter archive from memory.

    Set ``catalog_error`` / ``download_error`` to a ``TransportError`` to
    simulate failures. Every call is recorded in ``calls``.
    """

    def __init__(
        self,
        catalog_body: bytes,
        archive: bytes = b"",
        catalog_error: Optional[TransportError] = None,
        download_error: Optional[TransportError] = None,
    ) -> None:
        self.catalog_body = catalog_body
        self.archive = archive
        self.catalog_error = catalog_error
        self.download_error = download_error
        self.calls: list[tuple[str, str]] = []

    async def get(self, url: str, accept: str) -> bytes:
        self.calls.append((url, accept))
        if "/starter.zip" in url:
            if self.download_error is not None:
                raise self.download_error
            return self.archive
        if self.catalog_error is not None:
            raise self.catalog_error
        return self.catalog_body


class RecordingExtractor:
    """Records extraction requests; optionally raises ``error``."""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.error = error
        self.calls: list[tuple[Path, Path]] = []

    def extract(self, archive_path: Path, destination: Path) -> list[Path]:
        self.calls.append((archive_path, destination))
        if self.error is not None:
            raise self.error
        return []


@pytest.fixture
def starter_zip() -> bytes:
    """A small archive shaped like a generated project."""
    return make_zip(
        {
            "demo/pom.xml": "<project/>",
            "demo/src/main/java/com/example/demo/DemoApplication.java": "class DemoApplication {}",
        }
    )


@pytest.fixture
def fake_transport(catalog_payload: dict[str, Any], starter_zip: bytes) -> FakeTransport:
    return FakeTransport(json.dumps(catalog_payload).encode("utf-8"), archive=starter_zip)
