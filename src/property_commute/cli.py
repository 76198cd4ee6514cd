"""Command-line journey planner and area lookup."""

import argparse
import asyncio
import json
import math
import sys
from dataclasses import asdict
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

import aiohttp

from property_commute.adapters.booli_api import BooliGraphQLClient
from property_commute.adapters.skanetrafiken_api import SkanetrafikenClient
from property_commute.application import format_duration, select_best_point
from property_commute.domain.errors import CommuteApiError
from property_commute.domain.models import Journey, RouteLink, TransitPoint

DISPLAY_TIMEZONE = ZoneInfo("Europe/Stockholm")


def _format_clock(value: datetime) -> str:
    """Format a time as HH:MM in Swedish local time."""
    return value.astimezone(DISPLAY_TIMEZONE).strftime("%H:%M")


def _format_leg(index: int, link: RouteLink) -> list[str]:
    """Format one leg of a journey for display."""
    if link.line.is_walk:
        distance = f" {link.line.distance}" if link.line.distance else ""
        return [f"    {index}. Walk{distance} ({format_duration(link.duration_minutes)})"]

    line_no = f" {link.line.no}" if link.line.no else ""
    towards = f" {link.line.towards}" if link.line.towards else ""
    return [
        f"    {index}. {link.line.name or 'Transit'}{line_no}{towards}",
        f"       {_format_clock(link.from_stop.time)} {link.from_stop.name} → "
        f"{_format_clock(link.to_stop.time)} {link.to_stop.name}",
    ]


def format_journey(position: int, journey: Journey) -> list[str]:
    """Format a journey as display lines."""
    lines = [f"Trip {position}:"]
    if not journey.route_links:
        lines.append(f"  Changes:   {journey.no_of_changes}")
        return lines

    departure = journey.route_links[0].from_stop.time
    arrival = journey.route_links[-1].to_stop.time
    total_minutes = math.floor((arrival - departure).total_seconds() / 60 + 0.5)

    lines.append(f"  Departure: {_format_clock(departure)}")
    lines.append(f"  Arrival:   {_format_clock(arrival)}")
    lines.append(f"  Duration:  {format_duration(total_minutes)}")
    lines.append(f"  Changes:   {journey.no_of_changes}")
    lines.append("  Route:")
    for index, link in enumerate(journey.route_links, start=1):
        lines.extend(_format_leg(index, link))
    return lines


def _display_journeys(journeys: tuple[Journey, ...], from_name: str, to_name: str) -> None:
    """Print all journeys between two points."""
    if not journeys:
        print("\nNo journeys found.")
        return

    print(f"\n{'=' * 80}")
    print(f'Journey from "{from_name}" to "{to_name}"')
    print(f"{'=' * 80}\n")

    for position, journey in enumerate(journeys, start=1):
        print("\n".join(format_journey(position, journey)))
        print()


def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


async def _resolve_point(client: SkanetrafikenClient, query: str) -> TransitPoint:
    """Search for a point and select the best match, exiting if there is none."""
    print(f'Searching for "{query}"...', file=sys.stderr)
    points = await client.search_points(query)
    point = select_best_point(points)
    if point is None:
        print(f'Error: No locations found for "{query}"', file=sys.stderr)
        sys.exit(1)

    print(f"✓ Found: {point.name} ({point.type})", file=sys.stderr)
    return point


async def _handle_journey_command(
    from_query: str, to_query: str, departure: str | None, output_json: bool
) -> None:
    """Handle the journey command."""
    departure_time = datetime.fromisoformat(departure) if departure else None

    async with aiohttp.ClientSession() as session:
        client = SkanetrafikenClient(session=session)
        from_point = await _resolve_point(client, from_query)
        to_point = await _resolve_point(client, to_query)

        print("\nPlanning journey...", file=sys.stderr)
        plan = await client.plan_journey(from_point, to_point, departure_time=departure_time)

    if output_json:
        print(_to_json(asdict(plan)))
        return

    _display_journeys(plan.journeys, from_point.name, to_point.name)


async def _handle_points_command(query: str, output_json: bool) -> None:
    """Handle the points command."""
    async with aiohttp.ClientSession() as session:
        points = await SkanetrafikenClient(session=session).search_points(query)

    if output_json:
        print(_to_json([asdict(point) for point in points]))
        return

    if not points:
        print(f"No points found for '{query}'", file=sys.stderr)
        sys.exit(1)

    print(f"\nFound {len(points)} point(s):\n")
    for point in points:
        print(f"  {point.name} ({point.type})")
        print(f"    ID: {point.id2}")
        print()


async def _handle_areas_command(query: str, area_type: str | None, output_json: bool) -> None:
    """Handle the areas command."""
    async with aiohttp.ClientSession() as session:
        client = BooliGraphQLClient(session=session)
        if area_type:
            area_id = await client.find_area_id(query, type=area_type)
            if output_json:
                print(_to_json({"search": query, "type": area_type, "id": area_id}))
            elif area_id is None:
                print(f"No area of type '{area_type}' found for '{query}'", file=sys.stderr)
                sys.exit(1)
            else:
                print(area_id)
            return

        suggestions = await client.search_area(query)

    if output_json:
        print(_to_json([asdict(suggestion) for suggestion in suggestions]))
        return

    if not suggestions:
        print(f"No areas found for '{query}'", file=sys.stderr)
        sys.exit(1)

    print(f'\nSearch results for "{query}":\n')
    for index, suggestion in enumerate(suggestions, start=1):
        print(f"{index}. {suggestion.display_name}")
        print(f"   ID: {suggestion.id}")
        print(f"   Type: {suggestion.type} ({suggestion.type_display_name})")
        print(f"   Parent: {suggestion.parent} ({suggestion.parent_display_name})")
        print()


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Skånetrafiken journey planner and Booli area lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plan a journey departing now
  commute-planner journey "Malmö Hyllie" "Lund C"

  # Plan a journey departing at a given local time
  commute-planner journey "Hyllie" "Lund Central" 2025-12-20T14:30

  # Search transit stops and addresses
  commute-planner points "Hyllie, Malmö"

  # Look up listing areas, or resolve one to its id
  commute-planner areas "Skåne"
  commute-planner areas "Skåne län" --type Län
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    journey_parser = subparsers.add_parser("journey", help="Plan a journey between two places")
    journey_parser.add_argument("from_query", help="Origin stop or address")
    journey_parser.add_argument("to_query", help="Destination stop or address")
    journey_parser.add_argument(
        "departure", nargs="?", help="Departure time (ISO 8601, local time; default: now)"
    )
    journey_parser.add_argument("--json", action="store_true", help="Output as JSON")

    points_parser = subparsers.add_parser("points", help="Search transit stops and addresses")
    points_parser.add_argument("query", help="Stop name or address")
    points_parser.add_argument("--json", action="store_true", help="Output as JSON")

    areas_parser = subparsers.add_parser("areas", help="Search listing areas")
    areas_parser.add_argument("query", help="Area name")
    areas_parser.add_argument("--type", dest="area_type", help="Only accept this area type")
    areas_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def _execute_command(args: argparse.Namespace) -> None:
    """Execute the appropriate command based on args."""
    if args.command == "journey":
        await _handle_journey_command(args.from_query, args.to_query, args.departure, args.json)
    elif args.command == "points":
        await _handle_points_command(args.query, args.json)
    elif args.command == "areas":
        await _handle_areas_command(args.query, args.area_type, args.json)


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        await _execute_command(args)
    except (CommuteApiError, aiohttp.ClientError, TimeoutError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
