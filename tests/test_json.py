"""Tests for JSON serialization."""

from __future__ import annotations

import json

import pytest

from caldate import Date, DateRange, DateRanges, Dates, Month, NullDate
from caldate.convert import dumps, from_json, loads, to_json
from caldate.errors import ParseError


class TestToJson:
    """Tests for to_json and dumps."""

    def test_scalars(self) -> None:
        """Test the scalar payloads."""
        assert to_json(Date.parse("2024-06-05")) == "2024-06-05"
        assert to_json(Month(2024, 6)) == "2024-06"
        assert to_json(NullDate.null()) is None
        assert to_json(NullDate.of(Date.parse("2024-06-05"))) == "2024-06-05"

    def test_range(self) -> None:
        """Test the range payload."""
        rng = DateRange.parse("2024-06-01", "2024-06-02")
        assert to_json(rng) == {"start": "2024-06-01", "end": "2024-06-02"}

    def test_collections(self) -> None:
        """Test the collection payloads."""
        assert to_json(Dates([Date.parse("2024-06-01")])) == ["2024-06-01"]
        assert to_json(DateRanges([DateRange.parse("2024-06-01", "2024-06-02")])) == [
            {"start": "2024-06-01", "end": "2024-06-02"}
        ]

    def test_unsupported(self) -> None:
        """Test that other values are rejected."""
        with pytest.raises(TypeError):
            to_json("2024-06-05")  # type: ignore[arg-type]

    def test_dumps(self) -> None:
        """Test the JSON document."""
        assert dumps(NullDate.null()) == "null"
        assert json.loads(dumps(DateRange.parse("2024-06-01", "2024-06-02"))) == {
            "start": "2024-06-01",
            "end": "2024-06-02",
        }


class TestFromJson:
    """Tests for from_json and loads."""

    def test_round_trip(self) -> None:
        """Test that each kind reads back what it wrote."""
        values = [
            Date.parse("2024-06-05"),
            Month(2024, 6),
            DateRange.parse("2024-06-01", "2024-06-02"),
            NullDate.null(),
            NullDate.of(Date.parse("2024-06-05")),
            Dates([Date.parse("2024-06-02"), Date.parse("2024-06-01")]),
            DateRanges([DateRange.parse("2024-06-01", "2024-06-02")]),
        ]
        for value in values:
            assert loads(type(value), dumps(value)) == value

    def test_wrong_shape(self) -> None:
        """Test payloads of the wrong shape."""
        with pytest.raises(ParseError):
            from_json(Dates, "2024-06-05")
        with pytest.raises(ParseError):
            from_json(Date, {"value": "2024-06-05"})

    def test_invalid_json(self) -> None:
        """Test malformed documents."""
        with pytest.raises(ParseError, match="invalid JSON"):
            loads(Date, "{")

    def test_unknown_kind(self) -> None:
        """Test that only calendar types are accepted."""
        with pytest.raises(TypeError):
            from_json(str, "x")
