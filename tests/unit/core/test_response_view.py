"""Unit tests for ResponseView navigation and extractors."""

from __future__ import annotations

import pytest
from yarl import URL

from gramkit.api.core import DecodeError, ResponseView, snake_case


@pytest.fixture
def view():
    return ResponseView(
        {
            "user": {"pk": 12345, "full_name": "Jane", "is_private": False},
            "next_max_id": "12345",
            "items": [{"id": 1}, {"id": 2}],
            "ratio": 1.5,
            "count": 3.0,
            "flag": 1,
            "profile_pic_url": "https://cdn.example.com/a.jpg",
            "relative": "/a.jpg",
            "nothing": None,
        }
    )


class TestResponseViewNavigation:
    """Test key and index navigation."""

    def test_nested_keys(self, view):
        """Test chained lookups reach nested values."""
        assert view["user"]["pk"].int() == 12345

    def test_camel_case_falls_back_to_snake_case(self, view):
        """Test camelCase keys find snake_case fields."""
        assert view["user"]["fullName"].string() == "Jane"
        assert view["nextMaxId"].string() == "12345"

    def test_verbatim_key_preferred(self):
        """Test an exact key match wins over the snake_case fallback."""
        data = ResponseView({"fullName": "camel", "full_name": "snake"})
        assert data["fullName"].string() == "camel"

    def test_index_navigation(self, view):
        """Test integer indices address list elements."""
        assert view["items"][1]["id"].int() == 2

    def test_out_of_range_and_negative_indices_are_absent(self, view):
        """Test invalid indices yield null views."""
        assert view["items"][5].is_null
        assert view["items"][-1].is_null

    def test_missing_path_never_raises(self, view):
        """Test navigation through missing or mistyped values."""
        missing = view["nope"]["deeper"][0]["x"]
        assert missing.is_null
        assert missing.string() is None
        assert view["ratio"]["x"].int() is None

    def test_get_walks_path(self, view):
        """Test get() navigates several keys at once."""
        assert view.get("items", 0, "id").int() == 1

    def test_path_is_recorded(self, view):
        """Test views remember the path walked."""
        assert view["items"][0]["id"].path == ("items", 0, "id")


class TestResponseViewExtractors:
    """Test terminal extractors."""

    def test_int_from_string_and_number(self):
        """Test identifiers parse from both representations."""
        assert ResponseView("12345").int() == 12345
        assert ResponseView(12345).int() == 12345

    def test_int_rejects_non_integral(self, view):
        """Test int() refuses fractional and non-numeric values."""
        assert view["ratio"].int() is None
        assert view["count"].int() == 3
        assert ResponseView("abc").int() is None
        assert ResponseView(True).int() is None

    def test_double(self, view):
        """Test double() accepts numbers and numeric strings."""
        assert view["ratio"].double() == 1.5
        assert ResponseView("2.5").double() == 2.5
        assert ResponseView(False).double() is None

    def test_double_out_of_range_is_none(self):
        """Test double() returns None for integers too large for a float."""
        view = ResponseView.from_bytes(b'{"w": 1' + b"0" * 400 + b"}")
        assert view["w"].int() == 10**400
        assert view["w"].double() is None

    def test_string_is_strict(self, view):
        """Test string() does not stringify numbers."""
        assert view["user"]["pk"].string() is None

    def test_bool(self, view):
        """Test bool() accepts booleans and 0/1."""
        assert view["user"]["isPrivate"].bool() is False
        assert view["flag"].bool() is True
        assert ResponseView(2).bool() is None
        assert ResponseView("true").bool() is None

    def test_url_absolute_only(self, view):
        """Test url() parses absolute URLs and rejects relative ones."""
        assert view["profilePicUrl"].url() == URL("https://cdn.example.com/a.jpg")
        assert view["relative"].url() is None
        assert view["nothing"].url() is None

    def test_array_and_dictionary(self, view):
        """Test container extractors wrap children in views."""
        items = view["items"].array()
        assert [item["id"].int() for item in items] == [1, 2]
        assert set(view["user"].dictionary()) == {"pk", "full_name", "is_private"}
        assert view["user"].array() is None
        assert view["items"].dictionary() is None

    def test_equality_by_value(self):
        """Test views compare by wrapped value."""
        assert ResponseView({"a": 1}) == ResponseView({"a": 1})
        assert ResponseView({"a": 1}) != ResponseView({"a": 2})


class TestResponseViewDecoding:
    """Test from_bytes."""

    def test_from_bytes(self):
        """Test raw bodies are parsed."""
        assert ResponseView.from_bytes(b'{"status": "ok"}')["status"].string() == "ok"

    def test_invalid_json_raises_decode_error(self):
        """Test invalid bodies raise DecodeError carrying the payload."""
        with pytest.raises(DecodeError) as exc_info:
            ResponseView.from_bytes(b"<html>")
        assert exc_info.value.payload == b"<html>"

    def test_deeply_nested_json_raises_decode_error(self):
        """Test nesting beyond the parser recursion limit raises DecodeError."""
        with pytest.raises(DecodeError):
            ResponseView.from_bytes(b"[" * 100000)


class TestSnakeCase:
    """Test key conversion."""

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("fullName", "full_name"),
            ("hdProfilePicUrlInfo", "hd_profile_pic_url_info"),
            ("pk", "pk"),
            ("already_snake", "already_snake"),
        ],
    )
    def test_conversion(self, key, expected):
        assert snake_case(key) == expected
