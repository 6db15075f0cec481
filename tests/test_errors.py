"""Tests for courier.errors module."""

import json

import pytest
from courier.errors import CourierError, JsonDecodeError


class TestErrorHierarchy:
    """Tests for error class hierarchy."""

    def test_courier_error_is_exception(self):
        """Test CourierError inherits from Exception."""
        assert issubclass(CourierError, Exception)

    def test_json_decode_error_inherits_courier_error(self):
        """Test JsonDecodeError inherits from CourierError."""
        assert issubclass(JsonDecodeError, CourierError)

    def test_json_decode_error_is_value_error(self):
        """Test JsonDecodeError can be caught as ValueError."""
        assert issubclass(JsonDecodeError, ValueError)


class TestJsonDecodeError:
    """Tests for JsonDecodeError attributes."""

    def test_carries_decoder_message(self):
        """Test the decoder's message is kept."""
        try:
            json.loads("{oops")
        except json.JSONDecodeError as exc:
            error = JsonDecodeError(exc.msg, exc.doc, exc.pos)

        assert error.msg.startswith("Expecting property name")
        assert error.doc == "{oops"
        assert error.pos == 1
        assert "Expecting property name" in str(error)

    def test_raise_with_message(self):
        """Test JsonDecodeError can be raised with a message."""
        with pytest.raises(CourierError, match="Extra data"):
            raise JsonDecodeError("Extra data")
