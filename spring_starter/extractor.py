"""Unpack downloaded project archives."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class Extractor(Protocol):
    def extract(self, archive_path: Path, destination: Path) -> list[Path]:
        """Unpack *archive_path* into *destination*; return the files written."""
        ...


class ZipExtractor:
    """Extracts zip archives, refusing members that would land outside the destination."""

    def extract(self, archive_path: Path, destination: Path) -> list[Path]:
        """Unpack *archive_path* into *destination* (created if needed).

        Raises:
            zipfile.BadZipFile: If the archive is corrupt.
            ValueError: If a member path escapes *destination*.
            OSError: On filesystem errors.
        """
        root = Path(destination).resolve()
        with zipfile.ZipFile(archive_path) as archive:
            members = archive.infolist()
            for member in members:
                target = (root / member.filename).resolve()
                if target != root and root not in target.parents:
                    raise ValueError(f"Archive member escapes destination: {member.filename}")

            root.mkdir(parents=True, exist_ok=True)
            written: list[Path] = []
            for member in members:
                archive.extract(member, root)
                if not member.is_dir():
                    written.append(root / member.filename)

        logger.info("Extracted %d file(s) into %s", len(written), root)
        return written
