"""Exceptions raised while computing an itinerary."""


class PlannerError(Exception):
    """Base class for itinerary planning failures."""


class ItineraryValidationError(PlannerError, ValueError):
    """The itinerary cannot be planned (too few stops, a blank address, or a time out of range)."""

    def __init__(
        self,
        message: str,
        minimum_stops: int | None = None,
        segment_index: int | None = None,
    ):
        super().__init__(message)
        self.minimum_stops = minimum_stops
        self.segment_index = segment_index


class QueryFailure(PlannerError):
    """Google answered, but with a non-OK status or an incomplete payload."""

    def __init__(self, status: str, segment_index: int):
        super().__init__(f"Failed to calculate distance for segment {segment_index}: {status}")
        self.status = status
        self.segment_index = segment_index


class TransportError(PlannerError):
    """The request to Google could not be completed or its body was unusable."""

    def __init__(self, message: str, segment_index: int | None = None):
        super().__init__(message)
        self.segment_index = segment_index
