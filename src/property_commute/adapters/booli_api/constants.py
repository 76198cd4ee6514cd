"""Constants for the Booli listing API adapter.

Booli's web client talks to a GraphQL endpoint using persisted queries: the
query text is registered server-side and requests reference it by SHA-256 hash.
No authentication is required.
"""

from types import MappingProxyType

BOOLI_GRAPHQL_URL = "https://www.booli.se/graphql"

PERSISTED_QUERY_VERSION = 1

# Operation name -> persisted query hash. Must match the server's registered
# query text exactly; an unknown hash is rejected as an unknown persisted query.
OPERATION_HASHES = MappingProxyType(
    {
        "search": "cb4a5ccfbe86483ee760bcd9d09284fb49045581ee48568c678479a2a9f2e724",
        "polygons": "b38be74aaac081a0e1e151ca222c848f3817c4b3528301f1b44a1e250bda2bb7",
        "userSearchHistoryDescriptions": (
            "ae37c4b99365c3db13d534a542aa095df050e890c082f677c06835f3665eca2e"
        ),
        "areaSuggestionSearch": "ae60b499ae7d33a7e96f69fcf2c40ca7b88275169aee38e8cc844c76e5544f2a",
    }
)

# HTTP headers identifying the client the way the booli.se web app does
DEFAULT_HEADERS = MappingProxyType(
    {
        "accept": "*/*",
        "api-client": "booli.se",
        "content-type": "application/json",
        "sec-fetch-dest": "empty",
        "sec-fetch-mode": "cors",
        "sec-fetch-site": "same-origin",
    }
)

DEFAULT_QUERY_CONTEXT = "SERP_LIST_LISTING"
DEFAULT_SEARCH_LIMIT = 35
