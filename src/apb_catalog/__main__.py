"""Entry point for the APB Catalog CLI."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from apb_catalog import __version__
from apb_catalog.config import LogLevel, RegistryConfig
from apb_catalog.registries import create_http_client, create_registry
from apb_catalog.registries.rhcc import RHCCRegistry
from apb_catalog.utils.errors import APBCatalogError


def setup_logging(level: LogLevel) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="apb-catalog",
        description="Discover APB images in a registry and decode their specs",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Registry options
    parser.add_argument(
        "--url",
        default=None,
        help="Registry base URL (default: from config or registry.access.redhat.com)",
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Registry name used in logs (default: rhcc)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: no timeout)",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("specs", help="Load every APB spec in the registry")
    search_parser = subparsers.add_parser("search", help="Run a raw image search")
    search_parser.add_argument("query", help="Search term, e.g. '\"*-apb\"'")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Build config from args, falling back to environment/defaults
    config_kwargs: dict[str, Any] = {}

    if args.url:
        config_kwargs["url"] = args.url

    if args.name:
        config_kwargs["name"] = args.name

    if args.timeout:
        config_kwargs["request_timeout"] = args.timeout

    if args.log_level:
        config_kwargs["log_level"] = LogLevel(args.log_level)

    try:
        config = RegistryConfig(**config_kwargs)
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.debug(f"Starting APB Catalog v{__version__}")

    with create_http_client(config) as http_client:
        try:
            registry = create_registry(config, http_client)

            if args.command == "search":
                if not isinstance(registry, RHCCRegistry):
                    logger.error(f"Registry type {config.type.value} does not support search")
                    return 1
                result = registry.load_images(args.query)
                output: dict[str, Any] = result.model_dump()
            else:
                specs, num_results = registry.load_specs()
                logger.info(f"Loaded {len(specs)} specs out of {num_results} images")
                output = {
                    "num_results": num_results,
                    "specs": [spec.to_document() for spec in specs],
                }
        except APBCatalogError as e:
            logger.error(f"{e}")
            return 1

    print(json.dumps(output, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
