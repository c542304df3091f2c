from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MINIMUM_STOP_COUNT = 2

# Range of UNIX timestamps datetime can render (0001-01-01 to 9999-12-31T23:59:59 UTC)
MIN_TIMESTAMP = -62135596800
MAX_TIMESTAMP = 253402300799


class AddressStop(BaseModel):
    """An address to visit and how long to stay there after arriving."""

    model_config = ConfigDict(frozen=True)

    address: str = Field(min_length=1, description="Free-form address understood by Google Maps")
    stay_duration: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("stay_duration", "duration"),
        description="Seconds to remain at this stop before departing",
    )


class ItineraryRequest(BaseModel):
    """Ordered stops plus the trip start time."""

    model_config = ConfigDict(frozen=True)

    stops: list[AddressStop] = Field(
        min_length=MINIMUM_STOP_COUNT,
        validation_alias=AliasChoices("stops", "addresses"),
    )
    start_time: int = Field(
        ge=MIN_TIMESTAMP,
        le=MAX_TIMESTAMP,
        validation_alias=AliasChoices("start_time", "startTime"),
        description="Trip start as a UNIX timestamp (seconds)",
    )


class SegmentOutcome(BaseModel):
    """Transit result for one leg between two consecutive stops."""

    model_config = ConfigDict(frozen=True)

    origin: str
    destination: str
    duration: str = Field(description="Formatted duration from Google (e.g. '1 Stunde 30 Min.')")
    start_date_time: str = Field(description="Departure, ISO-8601 with UTC offset")
    arrival_date_time: str = Field(description="Arrival, ISO-8601 with UTC offset")
    stay_time: str | None = Field(
        default=None, description="Seconds spent at the destination (absent when zero)"
    )
    status: str

    # Needed to advance the departure-time cursor, not part of the payload
    transit_seconds: int = Field(exclude=True)
