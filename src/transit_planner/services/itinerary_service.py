"""Multi-stop itinerary computation.

Each leg is queried with the departure time produced by the previous leg
(arrival plus stay), so legs are computed strictly one after another.
"""

import logging
from collections.abc import Sequence

from transit_planner.data.config import MapsConfig, get_maps_config
from transit_planner.data.maps_client import MapsClient
from transit_planner.errors import ItineraryValidationError, QueryFailure, TransportError
from transit_planner.models.itinerary import (
    MAX_TIMESTAMP,
    MIN_TIMESTAMP,
    MINIMUM_STOP_COUNT,
    AddressStop,
    SegmentOutcome,
)
from transit_planner.models.responses import ErrorKind, PlanItineraryResponse
from transit_planner.services.segment_calculator import TravelTimeOracle, compute_segment

logger = logging.getLogger(__name__)

_config: MapsConfig | None = None


def _get_config() -> MapsConfig:
    """Get or create the config singleton."""
    global _config
    if _config is None:
        _config = get_maps_config()
    return _config


def reset_service() -> None:
    """Reset the service state. Useful for testing."""
    global _config
    _config = None
    if hasattr(get_maps_config, "cache_clear"):
        get_maps_config.cache_clear()


def _validate_request(stops: Sequence[AddressStop], start_time: int) -> None:
    if len(stops) < MINIMUM_STOP_COUNT:
        raise ItineraryValidationError(
            f"At least {MINIMUM_STOP_COUNT} addresses are required",
            minimum_stops=MINIMUM_STOP_COUNT,
        )
    for i, stop in enumerate(stops):
        if not stop.address or not stop.address.strip():
            raise ItineraryValidationError(f"Address of stop {i} must not be empty")
    if not MIN_TIMESTAMP <= start_time <= MAX_TIMESTAMP:
        raise ItineraryValidationError(
            f"Start time must be between {MIN_TIMESTAMP} and {MAX_TIMESTAMP}, got {start_time}"
        )


async def compute_itinerary(
    stops: Sequence[AddressStop],
    start_time: int,
    oracle: TravelTimeOracle,
) -> list[SegmentOutcome]:
    """Compute transit legs between consecutive stops.

    Args:
        stops: Ordered stops, at least two.
        start_time: Departure from the first stop as a UNIX timestamp.
        oracle: Travel time source queried once per leg.

    Returns:
        One SegmentOutcome per consecutive pair, in stop order.

    Raises:
        ItineraryValidationError: Fewer than two stops, a blank address, or a
            start, departure or arrival time outside the representable range.
        QueryFailure: Google rejected a leg; nothing is returned.
        TransportError: A request could not be completed; nothing is returned.
    """
    _validate_request(stops, start_time)

    logger.info(f"Calculating transit times for {len(stops)} addresses")

    results: list[SegmentOutcome] = []
    departure_time = start_time

    for i in range(len(stops) - 1):
        destination = stops[i + 1]
        outcome = await compute_segment(oracle, stops[i], destination, departure_time, i)
        results.append(outcome)
        departure_time = departure_time + destination.stay_duration + outcome.transit_seconds

    logger.info(f"Transit calculation completed successfully with {len(results)} results")
    return results


def _failure(error: str, kind: ErrorKind, failed_segment: int | None = None) -> PlanItineraryResponse:
    return PlanItineraryResponse(
        segments=[],
        count=0,
        success=False,
        error=error,
        error_kind=kind,
        failed_segment=failed_segment,
    )


async def plan_itinerary(stops: Sequence[AddressStop], start_time: int) -> PlanItineraryResponse:
    """Plan an itinerary against Google Maps and report the outcome.

    Failures are logged and returned in the response rather than raised.

    Args:
        stops: Ordered stops, at least two.
        start_time: Departure from the first stop as a UNIX timestamp.

    Returns:
        PlanItineraryResponse with all segments, or with the error and
        the failing segment index.
    """
    config = _get_config()

    # Validate before touching the network
    try:
        _validate_request(stops, start_time)
    except ItineraryValidationError as e:
        logger.warning(f"Invalid request: {e}")
        return _failure(str(e), ErrorKind.VALIDATION)

    if not config.api_key:
        logger.warning("No API key configured, cannot plan itinerary")
        return _failure("Google Maps API key is not configured", ErrorKind.CONFIGURATION)

    try:
        async with MapsClient(config) as client:
            segments = await compute_itinerary(stops, start_time, client)
    except ItineraryValidationError as e:
        logger.warning(f"Invalid request: {e}")
        return _failure(str(e), ErrorKind.VALIDATION, e.segment_index)
    except QueryFailure as e:
        return _failure(str(e), ErrorKind.QUERY, e.segment_index)
    except TransportError as e:
        return _failure(str(e), ErrorKind.TRANSPORT, e.segment_index)

    return PlanItineraryResponse(segments=segments, count=len(segments), success=True)
