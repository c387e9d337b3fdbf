"""Spring starter session orchestrator.

Wires the pipeline together::

    catalog fetch -> wizard -> confirmation -> request build -> download -> extract

Usage::

    python -m spring_starter
    python -m spring_starter --service-url http://localhost:8080 --verbose
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from spring_starter import __version__
from spring_starter.catalog import CatalogFetcher
from spring_starter.config import Config
from spring_starter.errors import ExtractionFailed, StarterError
from spring_starter.extractor import Extractor, ZipExtractor
from spring_starter.generator import GenerationDriver, GenerationResult
from spring_starter.request_builder import RequestBuilder
from spring_starter.transport import HttpTransport, Transport
from spring_starter.utils import console, print_banner, print_error, print_success, print_warning
from spring_starter.wizard import Prompter, RichPrompter, SelectionWizard

logger = logging.getLogger(__name__)


class GenerationSession:
    """One interactive run of the client.

    Attributes:
        config: Client configuration.
        prompter: Interactive surface used by the wizard.
        transport: Shared by the catalog fetcher and the generation driver.
        extractor: Unpacks the downloaded archive.
    """

    def __init__(
        self,
        config: Config,
        prompter: Optional[Prompter] = None,
        transport: Optional[Transport] = None,
        extractor: Optional[Extractor] = None,
    ) -> None:
        self.config = config
        self.prompter = prompter or RichPrompter()
        self.transport = transport or HttpTransport(timeout=config.timeout)
        self.extractor = extractor or ZipExtractor()

    async def run(self) -> Optional[GenerationResult]:
        """Execute the whole flow.

        Returns:
            The generation result, or ``None`` if the user cancelled at the
            confirmation step.

        Raises:
            StarterError: Any phase failure. Nothing is retried.
        """
        print_banner(
            "Spring Boot Project Generator",
            {"Service": self.config.service_url, "Catalog": self.config.catalog_url},
        )

        console.print("Fetching metadata from Spring Initializr...")
        catalog = await CatalogFetcher(self.transport, self.config.catalog_url).fetch()

        configuration = SelectionWizard(catalog, self.prompter).run()
        if configuration is None:
            console.print("Project creation canceled.")
            return None

        request = RequestBuilder(self.config.service_url, language=self.config.language).build(
            configuration
        )
        console.print("Generating project from Spring Initializr...")
        console.print(f"URL: {request.url}", markup=False)

        driver = GenerationDriver(self.transport, self.extractor, work_dir=self.config.work_dir)
        result = await driver.generate(request, Path(configuration.output_directory))

        print_success("Project created successfully!")
        console.print(f"Downloaded to: {result.archive_path}", markup=False)
        console.print(f"Extracted into: {result.output_dir}", markup=False)
        return result


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``python -m spring_starter``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="spring-starter",
        description="Spring Boot Project Generator -- interactive Spring Initializr client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m spring_starter\n"
            "  python -m spring_starter --service-url http://localhost:8080\n"
            "  python -m spring_starter --work-dir /tmp --verbose\n"
        ),
    )
    parser.add_argument("--service-url", default=None, help="Generation endpoint base URL")
    parser.add_argument(
        "--catalog-url",
        default=None,
        help="Catalog URL (defaults to the service URL)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument(
        "--work-dir",
        default=None,
        help="Directory the downloaded archive is saved in (default: current directory)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = Config.from_env()
        updates: dict[str, object] = {}
        if args.service_url:
            updates["service_url"] = args.service_url
            updates["catalog_url"] = args.catalog_url or args.service_url
        if args.catalog_url:
            updates["catalog_url"] = args.catalog_url
        if args.timeout is not None:
            updates["timeout"] = args.timeout
        if args.work_dir:
            updates["work_dir"] = Path(args.work_dir)
        if updates:
            config = Config.model_validate({**config.model_dump(), **updates})
    except (ValidationError, ValueError) as exc:
        print_error(f"Error: invalid configuration: {exc}")
        return 1

    try:
        asyncio.run(GenerationSession(config).run())
    except ExtractionFailed as exc:
        print_error(f"Error during {exc.phase_name}: {exc.message}")
        print_warning(f"Downloaded archive kept at {exc.archive_path}")
        return 1
    except StarterError as exc:
        logger.debug("Generation failed", exc_info=True)
        print_error(f"Error during {exc.phase_name}: {exc.message}")
        return 1
    except KeyboardInterrupt:
        print_warning("Interrupted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
