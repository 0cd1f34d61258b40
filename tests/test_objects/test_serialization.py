"""Tests for the JSON helpers."""

from __future__ import annotations

import json

import pytest

from selectorkit.objects import Rectangle, attach_behavior, get_json, parse_json


class TestGetJson:
    def test_list(self) -> None:
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_key_order(self) -> None:
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_scalars(self) -> None:
        assert get_json(None) == "null"
        assert get_json(True) == "true"
        assert get_json("x") == '"x"'

    def test_dataclass(self) -> None:
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_typed_value_serialises_data(self) -> None:
        value = attach_behavior({"radius": 10}, {})
        assert get_json(value) == '{"radius":10}'

    def test_indent(self) -> None:
        assert get_json({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def test_unserialisable_raises(self) -> None:
        with pytest.raises(TypeError):
            get_json(object())


class TestParseJson:
    def test_object(self) -> None:
        assert parse_json('{"radius":10}') == {"radius": 10}

    def test_array(self) -> None:
        assert parse_json("[1, 2]") == [1, 2]

    def test_malformed_propagates(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            parse_json("{radius: 10")
