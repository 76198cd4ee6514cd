"""Adapters layer - external system integrations."""

from property_commute.adapters.booli_api import BooliGraphQLClient
from property_commute.adapters.config import AppConfig
from property_commute.adapters.skanetrafiken_api import SkanetrafikenClient

__all__ = [
    "AppConfig",
    "BooliGraphQLClient",
    "SkanetrafikenClient",
]
