"""
Tests for the criteria <-> query string codec.
"""

from urllib.parse import parse_qs

import pytest
from pydantic import ValidationError

from afrihome.query_codec import (
    build_search_path,
    decode_criteria,
    encode_criteria,
    parse_number,
    split_sort,
)
from afrihome.schemas import SearchCriteria


def params(query):
    return parse_qs(query.split("?", 1)[-1], keep_blank_values=True)


class TestEncode:

    def test_only_present_fields(self):
        query = encode_criteria(SearchCriteria(country="Nigeria", min_price=300000))
        assert query == "country=Nigeria&minPrice=300000"

    def test_features_comma_joined(self):
        query = encode_criteria(SearchCriteria(features=["Pool", "Garden"]))
        assert params(query) == {"features": ["Pool,Garden"]}

    def test_spaces_and_decimals(self):
        query = encode_criteria(SearchCriteria(country="South Africa", min_area=72.5))
        assert params(query) == {"country": ["South Africa"], "minArea": ["72.5"]}

    def test_comma_in_feature_tag_rejected(self):
        with pytest.raises(ValidationError):
            SearchCriteria(features=["Pool,Spa"])

    def test_empty_criteria(self):
        assert encode_criteria(SearchCriteria()) == ""


class TestDecode:

    def test_numbers_and_features(self):
        criteria = decode_criteria("minPrice=300000&bedrooms=2&features=Pool,Gym&listingType=sale")
        assert criteria.min_price == 300000
        assert criteria.bedrooms == 2
        assert criteria.features == ["Pool", "Gym"]
        assert criteria.listing_type == "sale"

    def test_unparsable_numbers_are_absent_not_zero(self):
        criteria = decode_criteria("minPrice=abc&maxPrice=&yearBuilt=NaN")
        assert criteria.min_price is None
        assert criteria.max_price is None
        assert criteria.year_built is None

    def test_integer_fields(self):
        assert decode_criteria("bedrooms=2.0").bedrooms == 2
        assert decode_criteria("bedrooms=2.5").bedrooms is None

    def test_blank_values_and_unknown_keys_ignored(self):
        criteria = decode_criteria("country=&features=&utm_source=mail")
        assert criteria.is_empty()

    def test_absent_fields_stay_absent(self):
        criteria = decode_criteria("country=Kenya")
        assert criteria.active_fields() == ["country"]

    @pytest.mark.parametrize("query", [
        "?country=Kenya",
        "/properties?country=Kenya",
        "https://afrihome.com/properties?country=Kenya",
    ])
    def test_accepts_urls_and_leading_question_mark(self, query):
        assert decode_criteria(query).country == "Kenya"

    def test_first_value_wins(self):
        assert decode_criteria("country=Kenya&country=Ghana").country == "Kenya"

    def test_out_of_range_number_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            decode_criteria("minPrice=-5")

    def test_parse_number(self):
        assert parse_number("12") == 12.0
        assert parse_number(" 7 ", integral=True) == 7
        assert parse_number("inf") is None
        assert parse_number(None) is None


class TestRoundTrip:

    @pytest.mark.parametrize("criteria", [
        SearchCriteria(),
        SearchCriteria(country="Nigeria"),
        SearchCriteria(min_price=300000, max_price=400000),
        SearchCriteria(country="South Africa", property_type="house", bedrooms=3, bathrooms=2),
        SearchCriteria(min_area=55.5, max_area=120, year_built=2015),
        SearchCriteria(listing_type="rent", features=["Pool", "Air Conditioning"]),
    ])
    def test_decode_of_encode_is_identity(self, criteria):
        assert decode_criteria(encode_criteria(criteria)) == criteria

    @pytest.mark.parametrize("query", [
        "country=Nigeria",
        "maxPrice=400000&minPrice=300000",
        "features=Pool%2CGym&bedrooms=3",
        "propertyType=villa&listingType=sale&yearBuilt=2010&minArea=99.5",
    ])
    def test_encode_of_decode_is_equivalent(self, query):
        assert params(encode_criteria(decode_criteria(query))) == params(query)


class TestSearchPath:

    def test_empty_search_is_bare_path(self):
        assert build_search_path(SearchCriteria()) == "/properties"

    def test_path_with_sort(self):
        path = build_search_path(SearchCriteria(country="Kenya"), sort="price-asc")
        assert path == "/properties?country=Kenya&sort=price-asc"

    def test_split_sort(self):
        criteria, sort = split_sort("/properties?country=Kenya&sort=oldest")
        assert criteria == SearchCriteria(country="Kenya")
        assert sort == "oldest"
        assert split_sort("country=Kenya")[1] is None
