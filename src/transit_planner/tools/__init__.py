"""MCP tools. Importing this package registers every tool on the app."""

from transit_planner.tools import itinerary_tools, places_tools

__all__ = ["itinerary_tools", "places_tools"]
