"""Multi-stop public transit itinerary planning on top of Google Maps."""

__version__ = "0.1.0"
