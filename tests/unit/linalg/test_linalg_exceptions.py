import pytest

from mkv_chain.linalg import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    LinalgError,
)


class TestLinalgErrorBase:
    """LinalgError base class -- construction and attributes."""

    def test_construction_stores_message(self):
        exc = LinalgError(message="test message")
        assert exc.message == "test message"
        assert str(exc) == "test message"

    def test_defaults(self):
        exc = LinalgError(message="msg")
        assert exc.field_name == ""
        assert exc.value is None

    def test_empty_message_raises_value_error(self):
        with pytest.raises(ValueError, match="non-empty string"):
            LinalgError(message="")

    def test_non_string_field_name_raises_value_error(self):
        with pytest.raises(ValueError):
            LinalgError(message="msg", field_name=123)  # type: ignore[arg-type]

    def test_equality_same_type_same_values(self):
        a = LinalgError(message="msg", field_name="f", value=1)
        b = LinalgError(message="msg", field_name="f", value=1)
        assert a == b

    def test_equality_different_type(self):
        assert LinalgError(message="msg") != "not an exception"

    def test_hashable(self):
        assert isinstance(hash(LinalgError(message="msg")), int)

    def test_repr_contains_class_name(self):
        exc = LinalgError(message="msg", field_name="f", value=0)
        assert "LinalgError" in repr(exc)
        assert "field_name" in repr(exc)


class TestIndexOutOfBoundsError:
    """IndexOutOfBoundsError -- offending index and valid range."""

    def test_attributes(self):
        exc = IndexOutOfBoundsError("vector", 4, 3)
        assert exc.index == 4
        assert exc.bound == 3
        assert exc.value == 4
        assert exc.field_name == "vector"

    def test_message(self):
        exc = IndexOutOfBoundsError("row", 6, 6)
        assert exc.message == (
            "IndexOutOfBoundsError: row index 6 out of range for "
            "dimension 6 (valid: 0..5)"
        )

    def test_message_zero_bound(self):
        assert "valid: none" in IndexOutOfBoundsError("vector", 0, 0).message

    def test_is_index_error(self):
        assert issubclass(IndexOutOfBoundsError, IndexError)
        assert issubclass(IndexOutOfBoundsError, LinalgError)

    def test_equality(self):
        assert IndexOutOfBoundsError("row", 1, 1) == IndexOutOfBoundsError("row", 1, 1)
        assert IndexOutOfBoundsError("row", 1, 1) != IndexOutOfBoundsError("column", 1, 1)


class TestDimensionMismatchError:
    """DimensionMismatchError -- expected vs actual dimension."""

    def test_attributes(self):
        exc = DimensionMismatchError("init", 3, 2)
        assert exc.expected == 3
        assert exc.actual == 2
        assert exc.value == 2

    def test_message(self):
        exc = DimensionMismatchError("other", 2, 5)
        assert exc.message == (
            "DimensionMismatchError: other has dimension 5, expected 2"
        )

    def test_is_value_error(self):
        assert issubclass(DimensionMismatchError, ValueError)
        assert issubclass(DimensionMismatchError, LinalgError)

    def test_not_equal_to_index_error_with_same_fields(self):
        a = DimensionMismatchError("x", 1, 2)
        b = IndexOutOfBoundsError("x", 2, 1)
        assert a != b
