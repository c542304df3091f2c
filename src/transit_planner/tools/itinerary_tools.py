from transit_planner.app import mcp
from transit_planner.models.itinerary import AddressStop
from transit_planner.models.responses import PlanItineraryResponse
from transit_planner.services.itinerary_service import plan_itinerary as _plan_itinerary


@mcp.tool()
async def plan_itinerary(stops: list[AddressStop], start_time: int) -> PlanItineraryResponse:
    """Plan a public transit trip visiting several addresses in order.

    Each leg departs when the traveler leaves the previous stop: the arrival
    time of the previous leg plus the stay duration at that stop.

    Examples:
        plan_itinerary(
            stops=[
                {"address": "Stephansplatz, Wien"},
                {"address": "Schloss Schönbrunn, Wien", "stay_duration": 3600},
                {"address": "Wien Hauptbahnhof"},
            ],
            start_time=1700000000,
        )

    Args:
        stops: Ordered stops (at least 2). stay_duration is in seconds.
        start_time: Departure from the first stop as a UNIX timestamp.

    Returns:
        PlanItineraryResponse with one segment per consecutive pair of stops.
        On failure success is False and failed_segment names the leg.
    """
    return await _plan_itinerary(stops=stops, start_time=start_time)
