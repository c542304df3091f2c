"""Places Autocomplete passthrough.

Errors are caught and logged - the response carries api_available=False.
"""

import logging

from transit_planner.data.config import MapsConfig, get_maps_config
from transit_planner.data.maps_client import MapsClient
from transit_planner.errors import TransportError
from transit_planner.models.responses import AutocompleteResponse

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


async def autocomplete_places(
    text: str,
    components: str | None = None,
    language: str | None = None,
) -> AutocompleteResponse:
    """Get place predictions for partial address input.

    Args:
        text: Partial address typed by the user.
        components: Component filter (default "country:at").
        language: Result language (default "de").

    Returns:
        AutocompleteResponse with predictions, or api_available=False.
    """
    if not text or not text.strip():
        return AutocompleteResponse(count=0, api_available=True, error="Input must not be empty")

    config = _get_config()
    if not config.api_key:
        logger.debug("No API key configured, cannot fetch place predictions")
        return AutocompleteResponse(
            count=0, api_available=False, error="Google Maps API key is not configured"
        )

    try:
        async with MapsClient(config) as client:
            data = await client.autocomplete_places(text, components=components, language=language)
    except TransportError as e:
        logger.warning(f"Failed to fetch place predictions: {e}")
        return AutocompleteResponse(count=0, api_available=False, error=str(e))

    logger.debug(f"Fetched {len(data.predictions)} predictions for '{text}'")
    return AutocompleteResponse(
        predictions=data.predictions,
        count=len(data.predictions),
        status=data.status,
        api_available=True,
    )
