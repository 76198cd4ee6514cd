"""Tests for the commute application service."""

from datetime import UTC, datetime
from typing import Any

import pytest

from property_commute.application.commute_service import NOT_AVAILABLE, CommuteService
from property_commute.domain.errors import TransportError
from property_commute.domain.models import (
    Journey,
    JourneyPlan,
    Line,
    LinkEndpoint,
    Listing,
    ListingImage,
    RouteLink,
    SearchInput,
    TransitPoint,
)

ORIGIN = TransitPoint(id2="9021012080040000", type="STOP_AREA", name="Malmö Hyllie")
DESTINATION = TransitPoint(id2="9021012065131000", type="STOP_AREA", name="Höör station")


def _plan(minutes: int) -> JourneyPlan:
    start = datetime(2025, 1, 1, 10, 0, tzinfo=UTC)
    end = datetime(2025, 1, 1, 10 + minutes // 60, minutes % 60, tzinfo=UTC)
    link = RouteLink(
        from_stop=LinkEndpoint(name="Malmö Hyllie", time=start),
        to_stop=LinkEndpoint(name="Höör station", time=end),
        line=Line(type="Train", name="Pågatåg"),
    )
    return JourneyPlan(journeys=(Journey(id="0", no_of_changes=0, route_links=(link,)),))


def _listing(**overrides: Any) -> Listing:
    fields: dict[str, Any] = {
        "booli_id": "5551",
        "street_address": "Storgatan 1",
        "descriptive_area_name": "Höör",
        "object_type": "Villa",
        "municipality_name": "Höörs kommun",
        "list_price": "2 495 000 kr",
        "url": "/annons/5551",
        "primary_image_id": "987",
    }
    fields.update(overrides)
    return Listing(**fields)


class MockListingRepository:
    """Mock listing repository for testing."""

    def __init__(self, area_id: str | None = "2", result: dict[str, Any] | None = None) -> None:
        """Initialize with the area id and search result to return."""
        self.area_id = area_id
        self.result = result or {}
        self.searches: list[tuple[SearchInput, int]] = []

    async def find_area_id(self, search_term: str, type: str | None = None) -> str | None:  # noqa: ARG002
        """Return the configured area id."""
        return self.area_id

    async def search(
        self,
        search_input: SearchInput,
        query_context: str = "SERP_LIST_LISTING",  # noqa: ARG002
        limit: int = 35,
    ) -> dict[str, Any]:
        """Record the search and return the configured result."""
        self.searches.append((search_input, limit))
        return self.result


class MockTransitRepository:
    """Mock transit repository for testing."""

    def __init__(
        self,
        points: dict[str, list[TransitPoint]],
        plan: JourneyPlan | None = None,
        error: Exception | None = None,
    ) -> None:
        """Initialize with points per query, the plan to return, and an optional failure."""
        self.points = points
        self.plan = plan or JourneyPlan()
        self.error = error
        self.queries: list[str] = []
        self.planned: list[tuple[Any, Any]] = []

    async def search_points(self, query: str) -> list[TransitPoint]:
        """Record the query and return its configured points."""
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.points.get(query, [])

    async def plan_journey(
        self,
        from_point: Any,
        to_point: Any,
        departure_time: datetime | None = None,  # noqa: ARG002
    ) -> JourneyPlan:
        """Record the endpoints and return the configured plan."""
        self.planned.append((from_point, to_point))
        return self.plan


class MockImageSource:
    """Mock image source returning a fixed image."""

    def __init__(self) -> None:
        """Initialize with no recorded fetches."""
        self.fetched: list[tuple[str, str]] = []

    async def fetch(self, url: str, property_id: str) -> ListingImage | None:
        """Record the fetch and return a tiny image."""
        self.fetched.append((url, property_id))
        return ListingImage(
            content=b"jpg",
            mime_type="image/jpeg",
            cid=f"property-{property_id}",
            filename=f"property-{property_id}.jpg",
            original_url=url,
        )


@pytest.fixture
def transit() -> MockTransitRepository:
    """Transit repository that knows the origin and one destination."""
    return MockTransitRepository(
        points={"Hyllie, Malmö": [ORIGIN], "Storgatan 1, Höör": [DESTINATION]},
        plan=_plan(47),
    )


def _service(
    transit: MockTransitRepository,
    listings: MockListingRepository | None = None,
    **kwargs: Any,
) -> CommuteService:
    return CommuteService(
        listing_repository=listings or MockListingRepository(),
        transit_repository=transit,
        origin_address="Hyllie, Malmö",
        **kwargs,
    )


class TestTravelTime:
    """Tests for CommuteService.travel_time_to."""

    @pytest.mark.asyncio
    async def test_when_both_points_found_then_returns_formatted_time(
        self, transit: MockTransitRepository
    ) -> None:
        """Given known points, when estimating, then destination is searched before origin."""
        travel_time = await _service(transit).travel_time_to(_listing())

        assert travel_time == "47m"
        assert transit.queries == ["Storgatan 1, Höör", "Hyllie, Malmö"]
        assert transit.planned == [(ORIGIN, DESTINATION)]

    @pytest.mark.asyncio
    async def test_when_destination_unknown_then_not_available(
        self, transit: MockTransitRepository
    ) -> None:
        """Given no destination points, when estimating, then returns N/A without planning."""
        travel_time = await _service(transit).travel_time_to(
            _listing(street_address="Okänd väg 9")
        )

        assert travel_time == NOT_AVAILABLE
        assert transit.queries == ["Okänd väg 9, Höör"]
        assert transit.planned == []

    @pytest.mark.asyncio
    async def test_when_origin_unknown_then_not_available(self) -> None:
        """Given no origin points, when estimating, then returns N/A."""
        transit = MockTransitRepository(points={"Storgatan 1, Höör": [DESTINATION]})

        assert await _service(transit).travel_time_to(_listing()) == NOT_AVAILABLE
        assert transit.planned == []

    @pytest.mark.asyncio
    async def test_when_no_journeys_then_not_available(self) -> None:
        """Given an empty plan, when estimating, then returns N/A."""
        transit = MockTransitRepository(
            points={"Hyllie, Malmö": [ORIGIN], "Storgatan 1, Höör": [DESTINATION]}
        )

        assert await _service(transit).travel_time_to(_listing()) == NOT_AVAILABLE

    @pytest.mark.asyncio
    async def test_when_transit_fails_then_not_available(self) -> None:
        """Given a failing transit API, when estimating, then the error becomes N/A."""
        transit = MockTransitRepository(points={}, error=TransportError(502, "Bad Gateway"))

        assert await _service(transit).travel_time_to(_listing()) == NOT_AVAILABLE

    @pytest.mark.asyncio
    async def test_when_multiple_listings_then_origin_searched_for_each(
        self, transit: MockTransitRepository
    ) -> None:
        """Given two listings, when estimating both, then the origin is looked up twice."""
        service = _service(transit)

        await service.travel_time_to(_listing())
        await service.travel_time_to(_listing())

        assert transit.queries.count("Hyllie, Malmö") == 2


class TestBuildEntry:
    """Tests for CommuteService.build_entry and build_entries."""

    @pytest.mark.asyncio
    async def test_when_listing_complete_then_entry_has_all_fields(
        self, transit: MockTransitRepository
    ) -> None:
        """Given a full listing, when building an entry, then fields are combined."""
        images = MockImageSource()
        service = _service(
            transit,
            image_url_template="https://bcdn.se/images/cache/{image_id}_420x0.jpg",
            image_source=images,
        )

        entry = await service.build_entry(_listing(), position=0)

        assert entry.address == "Storgatan 1"
        assert entry.object_type == "Villa"
        assert entry.location == "Höör, Höörs kommun"
        assert entry.price == "2 495 000 kr"
        assert entry.travel_time == "47m"
        assert entry.url == "https://www.booli.se/annons/5551"
        assert entry.image_url == "https://bcdn.se/images/cache/987_420x0.jpg"
        assert entry.image is not None
        assert images.fetched == [("https://bcdn.se/images/cache/987_420x0.jpg", "5551")]

    @pytest.mark.asyncio
    async def test_when_price_and_image_missing_then_defaults_apply(
        self, transit: MockTransitRepository
    ) -> None:
        """Given no price or image, when building an entry, then price is N/A and no image."""
        images = MockImageSource()
        service = _service(
            transit,
            image_url_template="https://bcdn.se/images/cache/{image_id}_420x0.jpg",
            image_source=images,
        )

        entry = await service.build_entry(
            _listing(list_price=None, primary_image_id=None), position=3
        )

        assert entry.price == NOT_AVAILABLE
        assert entry.image_url is None
        assert entry.image is None
        assert images.fetched == []

    @pytest.mark.asyncio
    async def test_when_listing_has_no_id_then_position_names_the_image(
        self, transit: MockTransitRepository
    ) -> None:
        """Given a listing without id, when fetching its image, then the position is used."""
        images = MockImageSource()
        service = _service(
            transit,
            image_url_template="https://img/{image_id}.jpg",
            image_source=images,
        )

        await service.build_entry(_listing(booli_id=""), position=4)

        assert images.fetched == [("https://img/987.jpg", "4")]

    @pytest.mark.asyncio
    async def test_build_entries_keeps_listing_order(
        self, transit: MockTransitRepository
    ) -> None:
        """Given two listings, when building entries, then the order is kept."""
        service = _service(transit)

        entries = await service.build_entries(
            [_listing(street_address="Storgatan 1"), _listing(street_address="Okänd väg 9")]
        )

        assert [e.address for e in entries] == ["Storgatan 1", "Okänd väg 9"]
        assert [e.travel_time for e in entries] == ["47m", NOT_AVAILABLE]


class TestListings:
    """Tests for area resolution and listing search."""

    @pytest.mark.asyncio
    async def test_resolve_area_returns_repository_id(
        self, transit: MockTransitRepository
    ) -> None:
        """Given a known area, when resolving, then the repository id is returned."""
        service = _service(transit, MockListingRepository(area_id="23"))

        assert await service.resolve_area("Skåne län", "Län") == "23"

    @pytest.mark.asyncio
    async def test_resolve_area_returns_none_when_unknown(
        self, transit: MockTransitRepository
    ) -> None:
        """Given an unknown area, when resolving, then None is returned."""
        service = _service(transit, MockListingRepository(area_id=None))

        assert await service.resolve_area("Atlantis") is None

    @pytest.mark.asyncio
    async def test_find_listings_reads_records(self, transit: MockTransitRepository) -> None:
        """Given a search result, when finding listings, then records become views."""
        result = {
            "forSale": {
                "totalCount": 1,
                "pages": 1,
                "result": [
                    {
                        "booliId": 5551,
                        "streetAddress": "Storgatan 1",
                        "descriptiveAreaName": "Höör",
                        "objectType": "Villa",
                        "location": {"region": {"municipalityName": "Höörs kommun"}},
                        "listPrice": {"formatted": "2 495 000 kr"},
                        "url": "/annons/5551",
                        "primaryImage": {"id": 987},
                    },
                    "not a record",
                ],
            }
        }
        listing_repository = MockListingRepository(result=result)
        service = _service(transit, listing_repository)

        raw, listings = await service.find_listings(SearchInput(area_id="23"), limit=100)

        assert raw is result
        assert listings == [_listing()]
        assert listing_repository.searches == [(SearchInput(area_id="23"), 100)]

    @pytest.mark.asyncio
    async def test_find_listings_when_result_empty(self, transit: MockTransitRepository) -> None:
        """Given a result without forSale, when finding listings, then none are returned."""
        service = _service(transit, MockListingRepository(result={}))

        _, listings = await service.find_listings(SearchInput(area_id="23"))

        assert listings == []
