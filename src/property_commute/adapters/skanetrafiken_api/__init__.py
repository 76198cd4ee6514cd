"""Skånetrafiken journey planner adapter."""

from property_commute.adapters.skanetrafiken_api.http_client import SkanetrafikenClient
from property_commute.adapters.skanetrafiken_api.journey_parser import JourneyParser

__all__ = ["JourneyParser", "SkanetrafikenClient"]
