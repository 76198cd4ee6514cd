"""Booli listing API adapter."""

from property_commute.adapters.booli_api.constants import OPERATION_HASHES
from property_commute.adapters.booli_api.graphql_client import BooliGraphQLClient

__all__ = ["OPERATION_HASHES", "BooliGraphQLClient"]
