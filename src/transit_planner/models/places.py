from pydantic import BaseModel, ConfigDict, Field


class StructuredFormatting(BaseModel):
    """Main/secondary split of a prediction's description."""

    model_config = ConfigDict(extra="ignore")

    main_text: str = ""
    secondary_text: str = ""


class PlacePrediction(BaseModel):
    """A single place suggestion from Places Autocomplete."""

    model_config = ConfigDict(extra="ignore")

    description: str = ""
    place_id: str = ""
    structured_formatting: StructuredFormatting = Field(default_factory=StructuredFormatting)
    types: list[str] = []


class PlacesAutocompleteResponse(BaseModel):
    """Top-level response from the place/autocomplete/json endpoint."""

    model_config = ConfigDict(extra="ignore")

    predictions: list[PlacePrediction] = []
    status: str = ""
