"""
Geologis Backend — City Normalizer Unit Tests
===============================================

What:  Tests for concatenated-JSON splitting and City reshaping.
How:   Feeds raw upstream text and records directly; no network.

What we test:
    ✅ Splitting on `}` keeps only fragments that open with `{`
    ✅ Undecodable fragments are dropped, not raised
    ✅ City shape: country enrichment, region, maerskData, falsy omission
    ✅ Unknown countries keep only the code/name the upstream sent
    ✅ Non-list input raises; a bad record fails the whole batch with None
    ❌ Nested objects in records (known limitation of the splitter)
"""

import json

import pytest

from geologis.exceptions import InvalidDataError
from geologis.services.city_normalizer import (
    parse_records,
    parse_stream,
    split_concatenated_records,
    to_city_model,
)


class TestSplitConcatenatedRecords:

    def test_two_adjacent_objects(self):
        assert split_concatenated_records('{"a":1}{"b":2}') == ['{"a":1}', '{"b":2}']

    def test_garbage_between_objects_is_cut(self):
        assert split_concatenated_records('{"a":1}garbage{"b":2}') == ['{"a":1}', '{"b":2}']

    def test_newline_separated_objects(self):
        assert split_concatenated_records('{"a":1}\n{"b":2}\n') == ['{"a":1}', '{"b":2}']

    @pytest.mark.parametrize("text", ["", None, "no braces at all"])
    def test_nothing_to_split(self, text):
        assert split_concatenated_records(text) == []

    def test_nested_object_is_cut_short(self):
        """The inner `}` closes the fragment early; stray `}` pieces are dropped."""
        assert split_concatenated_records('{"a":{"b":1}}') == ['{"a":{"b":1}']


class TestParseRecords:

    def test_decodes_each_fragment(self):
        assert parse_records(['{"a":1}', '{"b":2}']) == [{"a": 1}, {"b": 2}]

    def test_undecodable_fragment_is_dropped(self):
        assert parse_records(['{"a":1}', '{broken}', '{"b":2}']) == [{"a": 1}, {"b": 2}]

    def test_no_fragments_returns_none(self):
        assert parse_records([]) is None

    def test_all_fragments_broken_returns_empty_list(self):
        assert parse_records(['{broken}']) == []

    def test_parse_stream_on_empty_body(self):
        assert parse_stream("") is None

    def test_parse_stream_nested_record_is_lost(self):
        assert parse_stream('{"a":{"b":1}}') == []

    def test_parse_stream_round_trip(self, stream_body, caracas_record, valencia_record):
        assert parse_stream(stream_body) == [caracas_record, valencia_record]


class TestToCityModel:

    def test_complete_record(self, caracas_record):
        [city] = to_city_model([caracas_record])

        assert city["id"] == "VECCS"
        assert city["name"] == "Caracas"
        assert city["continent"] == "SA"
        assert city["region"] == {"code": "DF", "name": "Distrito Federal"}
        assert city["timezoneId"] == "America/Caracas"
        assert city["maerskData"] == {
            "geolocationId": "1JUKSJ0EBH8ZB",
            "countryGeoId": "3P2ZPMKNMQ0ZB",
            "brands": ["MAEU", "SEAU"],
            "brandNames": ["Maersk Line", "Sealand"],
            "stCode": "VECCS",
            "tsCode": "VECCS",
        }

    def test_country_comes_from_local_dataset(self, caracas_record):
        [city] = to_city_model([caracas_record])
        country = city["country"]

        assert country["code"] == "VE"
        assert country["code_iso3"] == "VEN"
        assert country["flagURL"].endswith("/ve.svg")
        assert "continent" not in country

    def test_sparse_record_omits_falsy_fields(self, valencia_record):
        [city] = to_city_model([valencia_record])

        assert "region" not in city
        assert city["maerskData"] == {"geolocationId": "2KFYXN5BQR1CA", "stCode": "VEVLN"}

    def test_unknown_country_falls_back_to_upstream_names(self):
        [city] = to_city_model([{"cityName": "Atlantis", "countryCode": "ZZ", "countryName": "Nowhere"}])

        assert city == {"name": "Atlantis", "country": {"code": "ZZ", "name": "Nowhere"}}

    def test_present_but_falsy_values_are_omitted(self):
        """Empty strings, zero, None and empty lists all count as absent."""
        record = {
            "cityName": "X",
            "countryCode": "ZZ",
            "countryName": "Nowhere",
            "regionCode": "",
            "regionName": "",
            "timezoneId": "",
            "maerskRkstCode": "",
            "maerskRktsCode": None,
            "maerskGeoLocationId": 0,
            "countryGeoId": "",
            "brands": [],
            "brandNames": [],
        }

        assert to_city_model([record]) == [
            {"name": "X", "country": {"code": "ZZ", "name": "Nowhere"}}
        ]

    def test_country_without_code_or_name_is_empty(self):
        """No country data at all: `country` is an empty object, never nulls."""
        [city] = to_city_model([{"cityName": "Atlantis", "countryCode": "", "countryName": None}])

        assert city == {"name": "Atlantis", "country": {}}

    def test_unknown_country_keeps_only_what_was_sent(self):
        [city] = to_city_model([{"cityName": "Atlantis", "countryCode": "ZZ"}])

        assert city["country"] == {"code": "ZZ"}

    def test_empty_maersk_data_is_omitted(self):
        [city] = to_city_model([{"cityName": "Lima", "countryCode": "PE", "brands": []}])

        assert "maerskData" not in city
        assert "id" not in city
        assert city["continent"] == "SA"

    def test_keeps_input_order(self, caracas_record, valencia_record):
        cities = to_city_model([valencia_record, caracas_record])
        assert [c["name"] for c in cities] == ["Valencia", "Caracas"]

    def test_empty_list(self):
        assert to_city_model([]) == []

    @pytest.mark.parametrize("records", [None, "[]", {"cityName": "Caracas"}])
    def test_non_list_raises(self, records):
        with pytest.raises(InvalidDataError) as exc_info:
            to_city_model(records)
        assert exc_info.value.message == "invalid Data"

    def test_one_bad_record_fails_the_batch(self, caracas_record):
        assert to_city_model([caracas_record, "not a record"]) is None

    def test_does_not_mutate_input(self, caracas_record):
        snapshot = json.dumps(caracas_record, sort_keys=True)
        to_city_model([caracas_record])
        assert json.dumps(caracas_record, sort_keys=True) == snapshot
