"""Command-line interface for activity suitability scores."""

import argparse
import asyncio
import logging
import sys

from activity_suitability.config import get_settings
from activity_suitability.errors import IncompleteUpstreamData, InvalidActivity
from activity_suitability.models.activity import ACTIVITY_ALIASES, normalize_activity
from activity_suitability.models.location import Coordinates, Place
from activity_suitability.models.suitability import SuitabilityResult
from activity_suitability.orchestrator import SuitabilityOrchestrator

EXIT_OK = 0
EXIT_UPSTREAM_FAILURE = 1
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="activity-suitability",
        description="Activity Suitability - Score places for outdoor activities from live weather",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Score command
    score_parser = subparsers.add_parser(
        "score", help="Score a location for an activity"
    )
    score_parser.add_argument(
        "activity",
        help=f"Activity ({', '.join(sorted(ACTIVITY_ALIASES))})",
    )
    score_parser.add_argument(
        "location",
        help="Location as lat,lon coordinates (e.g. 40.5795,-73.8370)",
    )
    score_parser.add_argument(
        "--name",
        help="Display name of the place (defaults to the coordinates)",
    )
    score_parser.add_argument(
        "--tag",
        action="append",
        dest="tags",
        default=[],
        help="Tag such as surf-spot or ski-resort (repeatable)",
    )
    score_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address (default from settings)")
    serve_parser.add_argument("--port", type=int, help="Port (default from settings)")

    return parser


def format_result(activity: str, place: Place, result: SuitabilityResult) -> str:
    """Format a result for terminal output."""
    lines = [f"{activity} at {place.name}: {result.score}/100 ({result.label.value})"]
    lines.extend(f"  - {reason}" for reason in result.reasons)
    return "\n".join(lines)


async def _score(place: Place, activity: str) -> SuitabilityResult:
    async with SuitabilityOrchestrator.from_settings() as orchestrator:
        return await orchestrator.compute_suitability(place, activity)


def run_score(args: argparse.Namespace) -> int:
    """Run the score command."""
    activity = normalize_activity(args.activity)
    if activity is None:
        print(f"Error: {InvalidActivity(args.activity)}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        coordinates = Coordinates.from_string(args.location)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    place = Place(
        coordinates=coordinates,
        name=args.name or str(coordinates),
        tags=args.tags,
    )

    try:
        result = asyncio.run(_score(place, activity))
    except IncompleteUpstreamData as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_UPSTREAM_FAILURE

    if args.json:
        print(result.model_dump_json())
    else:
        print(format_result(activity.display_name, place, result))
    return EXIT_OK


def run_serve(args: argparse.Namespace) -> int:
    """Run the serve command."""
    import uvicorn

    from activity_suitability.api import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(),
        host=args.host or settings.host,
        port=args.port or settings.port,
        log_level=settings.log_level.lower(),
    )
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "score":
        return run_score(args)
    return run_serve(args)


if __name__ == "__main__":
    sys.exit(main())
