"""Generation driver: download the archive, save it, unpack it.

Single attempt, no retries. A failed download writes nothing; a failed
extraction keeps the downloaded archive so it can be unpacked by hand.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from spring_starter.errors import DownloadFailed, ExtractionFailed, TransportError
from spring_starter.extractor import Extractor
from spring_starter.request_builder import EncodedRequest
from spring_starter.transport import Transport

logger = logging.getLogger(__name__)


class GenerationResult(BaseModel):
    """Where the generated project ended up."""

    model_config = ConfigDict(frozen=True)

    url: str
    archive_path: Path = Field(..., description="Downloaded archive, kept after extraction")
    output_dir: Path
    files: tuple[Path, ...] = Field(default_factory=tuple)


class GenerationDriver:
    """Issues an ``EncodedRequest`` and hands the archive to the extractor."""

    def __init__(self, transport: Transport, extractor: Extractor, work_dir: Path = Path(".")) -> None:
        self.transport = transport
        self.extractor = extractor
        self.work_dir = Path(work_dir)

    def _save(self, payload: bytes, archive_path: Path) -> None:
        try:
            archive_path.parent.mkdir(parents=True, exist_ok=True)
            archive_path.write_bytes(payload)
        except OSError as exc:
            if archive_path.is_file():
                archive_path.unlink()
            raise DownloadFailed(f"Could not save archive to {archive_path}: {exc}") from exc

    async def generate(self, request: EncodedRequest, output_dir: Path) -> GenerationResult:
        """Download, persist and extract the project.

        Raises:
            DownloadFailed: On transport errors, non-200 responses or a failed write.
            ExtractionFailed: If the archive cannot be unpacked into *output_dir*.
        """
        logger.info("Requesting %s", request.url)
        try:
            payload = await self.transport.get(request.url, accept=request.accept)
        except TransportError as exc:
            raise DownloadFailed(f"Failed to create project: {exc}", status_code=exc.status_code) from exc

        archive_path = (self.work_dir / request.archive_name).resolve()
        self._save(payload, archive_path)
        logger.info("Downloaded %d bytes to %s", len(payload), archive_path)

        output = Path(output_dir)
        try:
            files = self.extractor.extract(archive_path, output)
        except Exception as exc:  # noqa: BLE001
            raise ExtractionFailed(
                f"Error unzipping project: {exc}. The archive is still available at {archive_path}",
                archive_path=archive_path,
            ) from exc

        return GenerationResult(
            url=request.url,
            archive_path=archive_path,
            output_dir=output.resolve(),
            files=tuple(files or ()),
        )
