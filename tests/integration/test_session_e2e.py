"""End-to-end session test.

Drives the real fetcher, wizard, request builder, driver and zip extractor
against an ``httpx.MockTransport`` that plays the Spring Initializr service.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx
import pytest

from spring_starter.config import Config
from spring_starter.errors import CatalogUnavailable
from spring_starter.session import GenerationSession
from spring_starter.transport import HttpTransport

from conftest import ScriptedPrompter


EXPECTED_URL = (
    "https://start.spring.io/starter.zip"
    "?type=maven-project&language=java&bootVersion=3.2.0&baseDir=demo"
    "&groupId=com.example&artifactId=demo&name=demo"
    "&description=Spring+Boot+Demo+Project&packageName=com.example.demo"
    "&packaging=jar&javaVersion=21"
)


pytestmark = pytest.mark.integration


@pytest.fixture
def service(catalog_payload: dict[str, Any], starter_zip: bytes):
    """Mock service that records every request it receives."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path == "/starter.zip":
            return httpx.Response(200, content=starter_zip, headers={"Content-Type": "application/zip"})
        return httpx.Response(200, json=catalog_payload)

    return handler, requests


@pytest.mark.asyncio
async def test_maven_demo_project(service, tmp_path: Path):
    handler, requests = service
    output = tmp_path / "projects"
    prompter = ScriptedPrompter(
        {
            "Project name": "demo",
            "Do you want to create this project?": True,
            "Project output directory": str(output),
            "Choose build system": "Maven",
            "Choose packaging": "Jar",
            "Choose Java version": "21",
            "Choose Spring Boot version": "3.2.0",
        }
    )
    transport = HttpTransport(transport=httpx.MockTransport(handler))
    session = GenerationSession(Config(work_dir=tmp_path), prompter, transport)

    result = await session.run()

    assert result is not None
    assert str(requests[0].url).rstrip("/") == "https://start.spring.io"
    assert requests[0].headers["Accept"] == "application/json"
    assert str(requests[1].url) == EXPECTED_URL
    assert requests[1].headers["Accept"] == "application/zip"
    assert result.url == EXPECTED_URL
    assert (tmp_path / "demo.zip").exists()
    assert (output / "demo" / "pom.xml").read_text() == "<project/>"


@pytest.mark.asyncio
async def test_dependencies_and_custom_fields(service, tmp_path: Path):
    handler, requests = service
    prompter = ScriptedPrompter(
        {
            "Project name": "order service",
            "Do you want to create this project?": True,
            "Project description": "Orders & billing",
            "Group ID": "org.acme",
            "Artifact ID": "order-service",
            "Project output directory": str(tmp_path / "out"),
            "Choose build system": "Gradle",
            "Select Developer Tools dependencies": ["Lombok"],
            "Select Web dependencies": ["Spring Reactive Web", "Spring Web"],
        }
    )
    transport = HttpTransport(transport=httpx.MockTransport(handler))

    result = await GenerationSession(Config(work_dir=tmp_path), prompter, transport).run()

    params = list(requests[1].url.params.multi_items())
    assert params[0] == ("type", "gradle-project")
    assert ("baseDir", "order service") in params
    assert ("description", "Orders & billing") in params
    assert ("packageName", "org.acme.orderservice") in params
    assert [value for key, value in params if key == "dependencies"] == ["lombok", "web", "webflux"]
    assert result.archive_path == (tmp_path / "order service.zip").resolve()


@pytest.mark.asyncio
async def test_catalog_http_error_surfaces_status(tmp_path: Path):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="maintenance")

    prompter = ScriptedPrompter()
    transport = HttpTransport(transport=httpx.MockTransport(handler))

    with pytest.raises(CatalogUnavailable, match="HTTP 503"):
        await GenerationSession(Config(work_dir=tmp_path), prompter, transport).run()
    assert prompter.calls == []
    assert list(tmp_path.iterdir()) == []
