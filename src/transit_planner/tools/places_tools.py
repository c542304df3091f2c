from transit_planner.app import mcp
from transit_planner.models.responses import AutocompleteResponse
from transit_planner.services.places_service import autocomplete_places as _autocomplete_places


@mcp.tool()
async def autocomplete_places(
    input: str,
    components: str = "country:at",
    language: str = "de",
) -> AutocompleteResponse:
    """Suggest full addresses for partial input using Google Places Autocomplete.

    Args:
        input: Partial address or place name (e.g., "Stephansp").
        components: Component filter restricting results (default: "country:at").
        language: Language for the results (default: "de").

    Returns:
        AutocompleteResponse with predictions. api_available is False when the
        API key is missing or Google is unreachable.
    """
    return await _autocomplete_places(text=input, components=components, language=language)
