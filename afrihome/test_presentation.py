"""
Tests for sorting and display formatting.
"""

from datetime import datetime, timedelta, timezone

import pytest

from afrihome.payloads import decode_string_list, encode_string_list
from afrihome.presentation import format_price, gallery, sort_properties, summarize, time_since

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def iso(dt):
    return dt.isoformat().replace("+00:00", "Z")


def ago(**delta):
    return iso(NOW - timedelta(**delta))


class TestSorting:

    def test_price_ascending(self, make_property):
        props = [make_property(price=p) for p in (450000, 220000, 380000)]
        assert [p.price for p in sort_properties(props, "price-asc")] == [220000, 380000, 450000]

    def test_price_descending(self, make_property):
        props = [make_property(price=p) for p in (450000, 220000, 380000)]
        assert [p.price for p in sort_properties(props, "price-desc")] == [450000, 380000, 220000]

    def test_newest_first(self, make_property):
        old = make_property(created_at=ago(days=10))
        new = make_property(created_at=ago(hours=1))
        mid = make_property(created_at=ago(days=2))
        assert sort_properties([old, new, mid], "newest") == [new, mid, old]
        assert sort_properties([old, new, mid], "oldest") == [old, mid, new]

    def test_default_is_newest(self, make_property):
        old = make_property(created_at=ago(days=3))
        new = make_property(created_at=ago(days=1))
        assert sort_properties([old, new]) == [new, old]

    @pytest.mark.parametrize("sort", ["price-asc", "price-desc", "newest", "oldest"])
    def test_stable_on_ties(self, make_property, sort):
        props = [make_property(price=100, created_at=ago(days=1)) for _ in range(4)]
        assert [p.id for p in sort_properties(props, sort)] == [p.id for p in props]

    def test_does_not_mutate_input(self, make_property):
        props = [make_property(price=p) for p in (3, 1, 2)]
        sort_properties(props, "price-asc")
        assert [p.price for p in props] == [3, 1, 2]

    def test_unknown_sort_rejected(self, make_property):
        with pytest.raises(ValueError):
            sort_properties([make_property()], "cheapest")


class TestFormatting:

    @pytest.mark.parametrize("price,expected", [
        (450000, "$450,000"),
        (1234567.89, "$1,234,568"),
        (999, "$999"),
        (0, "$0"),
    ])
    def test_format_price(self, price, expected):
        assert format_price(price) == expected

    @pytest.mark.parametrize("delta,expected", [
        (timedelta(seconds=10), "less than a minute"),
        (timedelta(minutes=1), "1 minute"),
        (timedelta(minutes=5), "5 minutes"),
        (timedelta(minutes=60), "about 1 hour"),
        (timedelta(hours=3), "about 3 hours"),
        (timedelta(hours=30), "1 day"),
        (timedelta(days=3), "3 days"),
        (timedelta(days=35), "about 1 month"),
        (timedelta(days=100), "3 months"),
        (timedelta(days=400), "about 1 year"),
        (timedelta(days=880), "over 2 years"),
        (timedelta(days=1000), "almost 3 years"),
    ])
    def test_time_since(self, delta, expected):
        assert time_since(iso(NOW - delta), now=NOW) == expected

    def test_time_since_uses_wall_clock(self):
        created = iso(datetime.now(timezone.utc) - timedelta(days=3))
        assert time_since(created) == "3 days"

    def test_time_since_unparsable(self):
        assert time_since("yesterday", now=NOW) == ""
        assert time_since(None, now=NOW) == ""


class TestDecoding:

    def test_decode_valid_payload(self):
        assert decode_string_list(encode_string_list(["Pool", "Gym"])) == ["Pool", "Gym"]

    @pytest.mark.parametrize("payload", [None, "", "not json", "{\"a\": 1}", "42", "[unterminated"])
    def test_malformed_payload_decodes_to_empty(self, payload):
        assert decode_string_list(payload) == []

    def test_gallery_falls_back_to_main_image(self, make_property):
        prop = make_property(images=None, main_image="https://example.com/a.jpg")
        assert gallery(prop) == ["https://example.com/a.jpg"]
        broken = make_property(images="oops", main_image="https://example.com/b.jpg")
        assert gallery(broken) == ["https://example.com/b.jpg"]


class TestSummary:

    def test_summary_of_seeded_listing(self, store):
        lagos = store.get_property(1)
        summary = summarize(lagos)
        assert summary.formatted_price == "$450,000"
        assert summary.features == ["Pool", "Garden", "Security", "Garage"]
        assert len(summary.images) == 2
        assert summary.images[0] == lagos.main_image
        assert summary.listed_ago == "less than a minute"

    def test_summary_survives_bad_payloads(self, make_property):
        prop = make_property(features="[bad", images="also bad", created_at=ago(days=3))
        summary = summarize(prop, now=NOW)
        assert summary.features == []
        assert summary.images == [prop.main_image]
        assert summary.listed_ago == "3 days"
