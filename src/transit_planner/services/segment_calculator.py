"""Transit time for a single leg between two consecutive stops."""

import logging
from datetime import UTC, datetime
from typing import Protocol

from transit_planner.errors import ItineraryValidationError, QueryFailure, TransportError
from transit_planner.models.distance_matrix import (
    DistanceMatrixResponse,
    ElementRejected,
    ResponseRejected,
)
from transit_planner.models.itinerary import AddressStop, SegmentOutcome

logger = logging.getLogger(__name__)


class TravelTimeOracle(Protocol):
    """Anything that can answer a transit Distance Matrix query."""

    async def query_travel_time(
        self, origin: str, destination: str, departure_time: int
    ) -> DistanceMatrixResponse: ...


def format_timestamp(timestamp: int) -> str:
    """Render a UNIX timestamp as ISO-8601 in UTC (e.g. '2023-11-14T22:13:20+00:00')."""
    return datetime.fromtimestamp(timestamp, UTC).isoformat()


def _render_time(timestamp: int, segment_index: int, what: str) -> str:
    try:
        return format_timestamp(timestamp)
    except (ValueError, OverflowError, OSError) as e:
        logger.warning(f"{what} of segment {segment_index} is out of range: {timestamp}")
        raise ItineraryValidationError(
            f"{what} of segment {segment_index} is out of range: {timestamp}",
            segment_index=segment_index,
        ) from e


async def compute_segment(
    oracle: TravelTimeOracle,
    origin: AddressStop,
    destination: AddressStop,
    departure_time: int,
    segment_index: int = 0,
) -> SegmentOutcome:
    """Query the oracle for one leg and build its outcome.

    Args:
        oracle: Travel time source (normally a MapsClient).
        origin: Stop the leg departs from.
        destination: Stop the leg arrives at.
        departure_time: Departure as a UNIX timestamp.
        segment_index: Position of the leg in the itinerary, used in errors.

    Returns:
        SegmentOutcome for the leg.

    Raises:
        ItineraryValidationError: If the departure or arrival time cannot be
            represented as a date. The departure is checked before querying.
        QueryFailure: If Google reports a non-OK status or no duration.
        TransportError: If the request itself failed.
    """
    start_date_time = _render_time(departure_time, segment_index, "Departure time")

    try:
        response = await oracle.query_travel_time(
            origin.address, destination.address, departure_time
        )
    except TransportError as e:
        logger.error(f"Error calculating distance for segment {segment_index}: {e}")
        e.segment_index = segment_index
        raise

    result = response.travel_time()

    if isinstance(result, ResponseRejected):
        logger.warning(f"Invalid response for segment {segment_index}: {result.status}")
        raise QueryFailure(result.status, segment_index)

    if isinstance(result, ElementRejected):
        logger.warning(f"Failed to calculate distance for segment {segment_index}: {result.status}")
        raise QueryFailure(result.status, segment_index)

    return SegmentOutcome(
        origin=origin.address,
        destination=destination.address,
        duration=result.duration_text,
        start_date_time=start_date_time,
        arrival_date_time=_render_time(
            departure_time + result.duration_seconds, segment_index, "Arrival time"
        ),
        stay_time=str(destination.stay_duration) if destination.stay_duration != 0 else None,
        status=result.status,
        transit_seconds=result.duration_seconds,
    )
