from enum import Enum

from pydantic import BaseModel, Field

from transit_planner.models.itinerary import SegmentOutcome
from transit_planner.models.places import PlacePrediction


class ErrorKind(str, Enum):
    """Which stage of an itinerary computation failed."""

    VALIDATION = "validation"
    QUERY = "query"
    TRANSPORT = "transport"
    CONFIGURATION = "configuration"


class PlanItineraryResponse(BaseModel):
    """Response from plan_itinerary tool."""

    segments: list[SegmentOutcome] = Field(default_factory=list)
    count: int = Field(description="Number of segments returned")
    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
    failed_segment: int | None = Field(
        default=None, description="Zero-based index of the segment that failed"
    )


class AutocompleteResponse(BaseModel):
    """Response from autocomplete_places tool."""

    predictions: list[PlacePrediction] = Field(default_factory=list)
    count: int = Field(description="Number of predictions returned")
    status: str | None = Field(default=None, description="Status reported by Google")
    api_available: bool = Field(
        description="Whether Google Maps was reachable (false if API key missing or error)"
    )
    error: str | None = None
