"""Tests for domain models."""

import base64

import pytest

from property_commute.domain.models import (
    GeocodedPoint,
    Line,
    Listing,
    ListingImage,
    ResolvedPoint,
    SearchFilter,
    SearchInput,
    TransitPoint,
    point_reference,
)


def test_point_reference_keeps_stop_area_id() -> None:
    """Given a stop area, when normalizing, then its id and type are kept."""
    point = TransitPoint(id2="9021012080040000", type="STOP_AREA", name="Malmö Hyllie")

    reference = point_reference(point)

    assert reference == ResolvedPoint(id="9021012080040000", type="STOP_AREA")
    assert reference.to_query() == ("9021012080040000", "STOP_AREA")


def test_point_reference_encodes_address_as_coordinates() -> None:
    """Given an address, when normalizing, then it becomes a lat#lon LOCATION."""
    point = TransitPoint(id2="x", type="ADDRESS", name="Storgatan 1", lat=55.605, lon=13.0038)

    reference = point_reference(point)

    assert reference == GeocodedPoint(lat=55.605, lon=13.0038)
    assert reference.to_query() == ("55.605#13.0038", "LOCATION")


def test_geocoded_point_drops_trailing_zero_on_whole_degrees() -> None:
    """Given whole-degree coordinates, when building the query, then no .0 is sent."""
    assert GeocodedPoint(lat=55.0, lon=13.0).to_query() == ("55#13", "LOCATION")
    assert GeocodedPoint(lat=55.5, lon=13.0).to_query() == ("55.5#13", "LOCATION")


def test_point_reference_passes_unknown_types_through() -> None:
    """Given an unknown point type, when normalizing, then it is sent as-is."""
    point = TransitPoint(id2="p", type="POI", name="Turning Torso")

    assert point_reference(point).to_query() == ("p", "POI")


def test_point_reference_rejects_address_without_coordinates() -> None:
    """Given an address lacking coordinates, when normalizing, then raises ValueError."""
    with pytest.raises(ValueError, match="Storgatan 1"):
        point_reference(TransitPoint(id2="x", type="ADDRESS", name="Storgatan 1", lat=55.6))


def test_point_reference_returns_references_unchanged() -> None:
    """Given an existing reference, when normalizing, then the same object is returned."""
    reference = GeocodedPoint(lat=1.0, lon=2.0)

    assert point_reference(reference) is reference


def test_search_input_rejects_page_below_one() -> None:
    """Given page 0, when creating a SearchInput, then raises ValueError."""
    with pytest.raises(ValueError, match="page"):
        SearchInput(area_id="1", page=0)


def test_search_input_keeps_duplicate_filter_keys() -> None:
    """Given repeated filter keys, when rendering variables, then both are sent."""
    search_input = SearchInput(
        area_id="1",
        filters=(SearchFilter(key="objectType", value="Villa"), SearchFilter("objectType", "Gård")),
    )

    assert search_input.to_variables()["filters"] == [
        {"key": "objectType", "value": "Villa"},
        {"key": "objectType", "value": "Gård"},
    ]


def test_listing_destination_query() -> None:
    """Given a listing, when building its transit query, then street and area are joined."""
    listing = Listing(
        booli_id="123",
        street_address="Storgatan 1",
        descriptive_area_name="Höör",
        object_type="Villa",
        municipality_name="Höörs kommun",
        list_price="2 495 000 kr",
        url="/annons/123",
        primary_image_id="456",
    )

    assert listing.destination_query == "Storgatan 1, Höör"


def test_listing_image_data_uri() -> None:
    """Given image bytes, when building a data URI, then it is base64 with the mime type."""
    image = ListingImage(
        content=b"\x89PNG",
        mime_type="image/png",
        cid="property-1",
        filename="property-1.png",
        original_url="https://bcdn.se/images/cache/1_420x0.jpg",
    )

    assert image.data_uri() == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()


def test_line_is_walk() -> None:
    """Given walk and bus lines, when checking is_walk, then only the walk leg matches."""
    assert Line(type="Walk", name="Gång").is_walk
    assert not Line(type="Bus", name="Stadsbuss", no="5").is_walk
