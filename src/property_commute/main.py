"""Main entry point: find new properties and send the commute digest."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import aiohttp

from property_commute.adapters.booli_api import BooliGraphQLClient
from property_commute.adapters.config import AppConfig
from property_commute.adapters.digest import (
    DigestSummary,
    HtmlFilePublisher,
    ImageFetcher,
    SmtpDigestPublisher,
)
from property_commute.adapters.skanetrafiken_api import SkanetrafikenClient
from property_commute.application import CommuteService, build_search_input
from property_commute.domain.errors import CommuteApiError
from property_commute.domain.models import PropertyDigestEntry
from property_commute.domain.ports import DigestPublisher

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for command-line runs."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _build_summary(config: AppConfig) -> DigestSummary:
    return DigestSummary(
        area_name=config.area_name,
        object_types=config.object_types.replace(",", ", "),
        max_distance_to_water=config.max_distance_to_water,
        days_active=config.days_active,
        origin_label=config.origin_label,
    )


def create_publisher(config: AppConfig) -> DigestPublisher | None:
    """Pick how the digest is delivered: HTML file in debug mode, otherwise email.

    Returns None when email delivery is selected but not configured.
    """
    summary = _build_summary(config)
    if config.debug:
        return HtmlFilePublisher(Path(config.output_dir), summary, title=config.email_subject)

    if not config.email_configured:
        logger.warning("Email not sent - SMTP configuration missing. Configure the .env file.")
        logger.warning("Alternatively, use --debug to save the HTML to a file for testing.")
        return None

    return SmtpDigestPublisher(config, summary)


def print_entries(entries: list[PropertyDigestEntry], origin_label: str) -> None:
    """Print the digest entries to stdout."""
    for index, entry in enumerate(entries, start=1):
        print(f"{index}. {entry.address}")
        print(f"   Type: {entry.object_type}")
        print(f"   Location: {entry.location}")
        print(f"   Price: {entry.price}")
        print(f"   Travel time from {origin_label}: {entry.travel_time}")
        print(f"   URL: {entry.url}")
        print()


async def run(config: AppConfig) -> int:
    """Run one digest. Returns the process exit code."""
    if config.debug:
        logger.info("Debug mode enabled - HTML will be saved to a file instead of emailed")

    try:
        search_filters = config.get_search_filters()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid search configuration: {e}")
        return 1

    async with aiohttp.ClientSession() as session:
        service = CommuteService(
            listing_repository=BooliGraphQLClient(session=session, base_url=config.booli_graphql_url),
            transit_repository=SkanetrafikenClient(
                session=session, base_url=config.skanetrafiken_api_url
            ),
            origin_address=config.origin_address,
            prefer_stop_area=config.prefer_stop_area,
            listing_base_url=config.listing_base_url,
            image_url_template=config.image_url_template,
            image_source=ImageFetcher(session),
        )

        try:
            area_id = await service.resolve_area(config.area_name, config.area_type)
            if not area_id:
                logger.error(f"Could not find area id for '{config.area_name}'")
                return 1

            search_input = build_search_input(
                {
                    **search_filters,
                    "areaId": area_id,
                    "page": 1,
                    "excludeAncestors": True,
                }
            )
            _, listings = await service.find_listings(search_input, limit=config.search_limit)
        except (CommuteApiError, aiohttp.ClientError, TimeoutError) as e:
            logger.error(f"Error searching for properties: {e}")
            return 1

        logger.info("Calculating travel times and preparing email data...")
        entries = await service.build_entries(listings)

    print_entries(entries, config.origin_label)

    if not entries:
        logger.info("No properties found - no email sent.")
        return 0

    publisher = create_publisher(config)
    if publisher is None:
        return 0

    delivered = await publisher.publish(entries)
    return 0 if delivered else 1


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find new property listings and email their commute times",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Save the digest to an HTML file instead of sending it (same as DEBUG=true)",
    )
    parser.add_argument("--output-dir", help="Directory for the debug HTML file")
    parser.add_argument("--config-file", help="TOML file with extra [search.filters]")
    return parser.parse_args(argv)


def cli_main(argv: list[str] | None = None) -> None:
    """Synchronous entry point for the property-commute command."""
    args = _parse_args(argv)
    config = AppConfig()
    if args.debug:
        config.debug = True
    if args.output_dir:
        config.output_dir = args.output_dir
    if args.config_file:
        config.config_file = args.config_file

    configure_logging(config.log_level)

    try:
        exit_code = asyncio.run(run(config))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    cli_main()
