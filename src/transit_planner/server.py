import argparse
import asyncio
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel, ValidationError

import transit_planner.tools  # noqa: F401  (registers tools)
from transit_planner.app import mcp
from transit_planner.models.itinerary import AddressStop, ItineraryRequest
from transit_planner.models.responses import PlanItineraryResponse


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


@mcp.tool()
def health() -> HealthResponse:
    """Check if the Transit Planner server is running and healthy.

    Returns the server status, version, and current timestamp.
    """
    from transit_planner import __version__

    return HealthResponse(
        status="ok",
        version=__version__,
        timestamp=datetime.now(UTC).isoformat(),
    )


def parse_stop(value: str) -> AddressStop:
    """Parse 'ADDRESS' or 'ADDRESS@SECONDS' into an AddressStop."""
    address, sep, stay = value.rpartition("@")
    if sep and stay.isdigit():
        return AddressStop(address=address, stay_duration=int(stay))
    return AddressStop(address=value)


def load_request(path: Path) -> ItineraryRequest:
    """Read an itinerary request body (stops or addresses, start_time or startTime)."""
    return ItineraryRequest.model_validate_json(path.read_text(encoding="utf-8"))


async def run_plan(stops: list[AddressStop], start_time: int) -> PlanItineraryResponse:
    """Run a single itinerary computation."""
    from transit_planner.services.itinerary_service import plan_itinerary

    return await plan_itinerary(stops, start_time)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="transit-planner",
        description="Transit Planner MCP Server",
    )
    subparsers = parser.add_subparsers(dest="command")

    # plan command
    plan_parser = subparsers.add_parser(
        "plan",
        help="Plan an itinerary and print it as JSON",
    )
    plan_parser.add_argument(
        "stops",
        nargs="*",
        help="Stops in visiting order, as ADDRESS or ADDRESS@STAY_SECONDS",
    )
    plan_parser.add_argument(
        "--start",
        type=int,
        default=None,
        help="Start time as a UNIX timestamp (default: now)",
    )
    plan_parser.add_argument(
        "--request",
        type=Path,
        default=None,
        help="JSON file with an itinerary request instead of positional stops",
    )
    plan_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    if args.command == "plan":
        # Configure logging
        log_level = logging.DEBUG if args.verbose else logging.INFO
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

        try:
            if args.request is not None:
                request = load_request(args.request)
                stops, start_time = request.stops, request.start_time
            else:
                start_time = args.start if args.start is not None else int(datetime.now(UTC).timestamp())
                stops = [parse_stop(value) for value in args.stops]
        except ValidationError as e:
            print(f"Invalid itinerary input: {e}", file=sys.stderr)
            raise SystemExit(1) from e
        response = asyncio.run(run_plan(stops, start_time))
        print(response.model_dump_json(indent=2, exclude_none=True))
        if not response.success:
            raise SystemExit(1)
    else:
        # Default: run MCP server
        mcp.run()


if __name__ == "__main__":
    main()
