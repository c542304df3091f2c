"""Tests for the MCP tools."""

from unittest.mock import AsyncMock, patch

import pytest

from transit_planner.models.itinerary import AddressStop, SegmentOutcome
from transit_planner.models.responses import AutocompleteResponse, PlanItineraryResponse
from transit_planner.tools.itinerary_tools import plan_itinerary
from transit_planner.tools.places_tools import autocomplete_places


def _create_mock_plan_response() -> PlanItineraryResponse:
    """Create a mock successful itinerary response."""
    return PlanItineraryResponse(
        segments=[
            SegmentOutcome(
                origin="Stephansplatz, Wien",
                destination="Schloss Schönbrunn, Wien",
                duration="22 Min.",
                start_date_time="2023-11-14T22:13:20+00:00",
                arrival_date_time="2023-11-14T22:35:20+00:00",
                stay_time="3600",
                status="OK",
                transit_seconds=1320,
            )
        ],
        count=1,
        success=True,
    )


@pytest.mark.asyncio
async def test_plan_itinerary_tool_delegates_to_service():
    """plan_itinerary passes stops and start time through."""
    stops = [
        AddressStop(address="Stephansplatz, Wien"),
        AddressStop(address="Schloss Schönbrunn, Wien", stay_duration=3600),
    ]

    with patch(
        "transit_planner.tools.itinerary_tools._plan_itinerary",
        new_callable=AsyncMock,
    ) as mock_service:
        mock_service.return_value = _create_mock_plan_response()

        result = await plan_itinerary(stops=stops, start_time=1700000000)

        mock_service.assert_called_once_with(stops=stops, start_time=1700000000)
        assert result.success is True
        assert result.segments[0].stay_time == "3600"


@pytest.mark.asyncio
async def test_autocomplete_places_tool_defaults():
    """autocomplete_places uses Austrian/German defaults."""
    with patch(
        "transit_planner.tools.places_tools._autocomplete_places",
        new_callable=AsyncMock,
    ) as mock_service:
        mock_service.return_value = AutocompleteResponse(count=0, api_available=True)

        await autocomplete_places(input="Prater")

        mock_service.assert_called_once_with(text="Prater", components="country:at", language="de")


def test_address_stop_accepts_duration_alias():
    """Stops accept the 'duration' key used by existing clients."""
    stop = AddressStop.model_validate({"address": "Prater, Wien", "duration": 900})

    assert stop.stay_duration == 900


def test_address_stop_rejects_negative_stay():
    """Negative stay durations are invalid."""
    with pytest.raises(ValueError):
        AddressStop(address="Prater, Wien", stay_duration=-1)


def test_address_stop_is_immutable():
    """Stops cannot be modified after construction."""
    stop = AddressStop(address="Prater, Wien")

    with pytest.raises(ValueError):
        stop.address = "Elsewhere"
