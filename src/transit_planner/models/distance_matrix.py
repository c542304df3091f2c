"""Models for the Google Maps Distance Matrix API.

The raw response is nested and mostly optional (rows -> elements -> duration).
``DistanceMatrixResponse.travel_time()`` reduces it to one of three tagged
results so callers can branch on the outcome instead of walking the structure.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

STATUS_OK = "OK"


class TextValue(BaseModel):
    """A measured quantity with its display text (e.g. duration, distance)."""

    model_config = ConfigDict(extra="ignore")

    text: str = ""
    value: int


class Element(BaseModel):
    """One origin/destination cell of the matrix."""

    model_config = ConfigDict(extra="ignore")

    status: str = ""
    duration: TextValue | None = None
    distance: TextValue | None = None


class Row(BaseModel):
    """One origin row of the matrix."""

    model_config = ConfigDict(extra="ignore")

    elements: list[Element] = []


@dataclass(frozen=True)
class TravelTimeFound:
    """The oracle answered with a usable transit duration."""

    duration_seconds: int
    duration_text: str
    status: str


@dataclass(frozen=True)
class ResponseRejected:
    """Top-level failure, or a response without any row/element."""

    status: str


@dataclass(frozen=True)
class ElementRejected:
    """The element for the pair failed or carried no duration."""

    status: str


TravelTime = TravelTimeFound | ResponseRejected | ElementRejected


class DistanceMatrixResponse(BaseModel):
    """Top-level response from the distancematrix/json endpoint."""

    model_config = ConfigDict(extra="ignore")

    status: str = ""
    origin_addresses: list[str] = []
    destination_addresses: list[str] = []
    rows: list[Row] = []
    error_message: str | None = None

    def travel_time(self) -> TravelTime:
        """Reduce the first matrix cell to a tagged travel time result."""
        if self.status != STATUS_OK or not self.rows or not self.rows[0].elements:
            return ResponseRejected(status=self.status)

        element = self.rows[0].elements[0]
        if element.status != STATUS_OK or element.duration is None:
            return ElementRejected(status=element.status)

        return TravelTimeFound(
            duration_seconds=element.duration.value,
            duration_text=element.duration.text,
            status=element.status,
        )
