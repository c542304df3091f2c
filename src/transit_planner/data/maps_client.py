import logging

import httpx

from transit_planner.data.config import MapsConfig
from transit_planner.errors import TransportError
from transit_planner.models.distance_matrix import DistanceMatrixResponse
from transit_planner.models.places import PlacesAutocompleteResponse

logger = logging.getLogger(__name__)

DISTANCE_MATRIX_PATH = "/maps/api/distancematrix/json"
PLACES_AUTOCOMPLETE_PATH = "/maps/api/place/autocomplete/json"
TRANSIT_MODE = "transit"


class MapsClient:
    """Async HTTP client for the Google Maps Distance Matrix and Places APIs.

    Usage:
        async with MapsClient(config) as client:
            response = await client.query_travel_time("Wien Hbf", "Graz Hbf", 1700000000)
    """

    def __init__(self, config: MapsConfig):
        """Initialize the client.

        Args:
            config: Configuration with API key, base URL and language.
        """
        self._config = config
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "MapsClient":
        """Enter async context - create HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout_seconds,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def query_travel_time(
        self, origin: str, destination: str, departure_time: int
    ) -> DistanceMatrixResponse:
        """Query the transit duration between two addresses.

        Args:
            origin: Origin address.
            destination: Destination address.
            departure_time: Departure as a UNIX timestamp.

        Returns:
            DistanceMatrixResponse as reported by Google. A non-OK status is
            returned as-is, not raised.

        Raises:
            RuntimeError: If client not initialized.
            ValueError: If origin or destination is blank.
            TransportError: If the request fails or the body is not a
                Distance Matrix document.
        """
        if not origin or not origin.strip():
            raise ValueError("origin must not be blank")
        if not destination or not destination.strip():
            raise ValueError("destination must not be blank")

        params = {
            "origins": origin,
            "destinations": destination,
            "mode": TRANSIT_MODE,
            "departure_time": str(departure_time),
            "language": self._config.language,
        }
        logger.info(f"Requesting distance matrix data for {origin} to {destination}")
        payload = await self._get_json(DISTANCE_MATRIX_PATH, params, "distance matrix")

        try:
            return DistanceMatrixResponse.model_validate(payload)
        except ValueError as e:
            logger.error(f"Failed to parse distance matrix response: {e}")
            raise TransportError("Failed to parse distance matrix response") from e

    async def autocomplete_places(
        self, text: str, components: str | None = None, language: str | None = None
    ) -> PlacesAutocompleteResponse:
        """Fetch place predictions for partial input text.

        Args:
            text: The text to search for.
            components: Component filter (default from config, e.g. "country:at").
            language: Result language (default from config).

        Returns:
            PlacesAutocompleteResponse with predictions.

        Raises:
            RuntimeError: If client not initialized.
            ValueError: If text is blank.
            TransportError: If the request fails or the body cannot be parsed.
        """
        if not text or not text.strip():
            raise ValueError("input must not be blank")

        params = {
            "input": text,
            "components": components or self._config.autocomplete_components,
            "language": language or self._config.language,
        }
        logger.info(f"Requesting place predictions for input: '{text}'")
        payload = await self._get_json(PLACES_AUTOCOMPLETE_PATH, params, "place predictions")

        try:
            return PlacesAutocompleteResponse.model_validate(payload)
        except ValueError as e:
            logger.error(f"Failed to parse places autocomplete response: {e}")
            raise TransportError("Failed to parse places autocomplete response") from e

    async def _get_json(self, path: str, params: dict[str, str], what: str):
        """GET an endpoint with the API key attached and decode its JSON body."""
        if not self._client:
            raise RuntimeError("Client not initialized - use 'async with'")

        if self._config.api_key:
            params = {**params, "key": self._config.api_key}

        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPError as e:
            logger.error(f"HTTP error occurred while retrieving {what}: {e}")
            raise TransportError(f"Failed to retrieve {what}") from e
        except ValueError as e:
            # body was not JSON
            logger.error(f"Invalid JSON while retrieving {what}: {e}")
            raise TransportError(f"Failed to decode {what}") from e
