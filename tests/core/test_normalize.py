"""Tests for mankey.core.normalize."""

from __future__ import annotations

import math

import pytest

from mankey.core.normalize import (
    normalize_fields,
    normalize_id,
    normalize_ids,
    normalize_success,
    normalize_tags,
)


class TestNormalizeId:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(123, 123), ("123", 123), (" 42", 42), ("1502298033753abc", 1502298033753), ("-7", -7), (1.5, 1.5)],
    )
    def test_parses(self, value, expected):
        assert normalize_id(value) == expected

    def test_unparseable_becomes_nan(self):
        assert math.isnan(normalize_id("abc"))
        assert math.isnan(normalize_id(""))

    def test_list_preserves_order(self):
        assert normalize_ids(["3", 1, "2"]) == [3, 1, 2]


class TestNormalizeTags:
    def test_list_passes_through(self):
        assert normalize_tags(["a", "b"]) == ["a", "b"]

    def test_space_separated(self):
        assert normalize_tags("vocab  japanese n5") == ["vocab", "japanese", "n5"]

    def test_json_list_string(self):
        assert normalize_tags('["a", "b c"]') == ["a", "b c"]

    def test_broken_json_falls_back_to_split(self):
        assert normalize_tags('["a", b') == ['["a",', "b"]

    def test_other_types(self):
        assert normalize_tags(None) == []
        assert normalize_tags(5) == []


class TestNormalizeFields:
    def test_mapping(self):
        assert normalize_fields({"Front": "a"}) == {"Front": "a"}

    def test_json_string(self):
        assert normalize_fields('{"Front": "a"}') == {"Front": "a"}

    def test_invalid(self):
        assert normalize_fields("not json") is None
        assert normalize_fields("[1]") is None
        assert normalize_fields({}) is None
        assert normalize_fields(None) is None


class TestNormalizeSuccess:
    def test_null_is_true(self):
        assert normalize_success(None) is True

    def test_other_results_unchanged(self):
        assert normalize_success(False) is False
        assert normalize_success([1]) == [1]
