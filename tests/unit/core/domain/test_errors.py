# tests/unit/core/domain/test_errors.py

"""Tests for codec error types"""

# Third party imports
from pydantic import ValidationError
import pytest

# Local imports
from pandoc_filter import DecodeError
from pandoc_filter import DecodeErrorKind
from pandoc_filter import EncodeError
from pandoc_filter import Header
from pandoc_filter import PandocFilterError
from pandoc_filter import ParseError
from pandoc_filter.core.domain.errors import format_path


class TestFormatPath:
    """Test rendering of JSON paths"""

    def test_root(self):
        assert format_path(()) == "$"

    def test_mixed_path(self):
        """Indexes use brackets, keys use dots"""
        assert format_path((1, 0, "c", 2)) == "$[1][0].c[2]"
        assert format_path((0, "unMeta", "title")) == "$[0].unMeta.title"


class TestErrorHierarchy:
    """Test that every codec error shares one base"""

    @pytest.mark.parametrize("error_type", [ParseError, DecodeError, EncodeError])
    def test_subclasses(self, error_type):
        assert issubclass(error_type, PandocFilterError)
        assert not issubclass(error_type, ValueError)

    def test_parse_error_location(self):
        """Line and column are kept and shown"""
        error = ParseError("Invalid JSON: Expecting value", 3, 7)
        assert (error.line, error.column) == (3, 7)
        assert "line 3, column 7" in str(error)

    def test_parse_error_without_location(self):
        error = ParseError("Invalid JSON: NaN is not valid JSON")
        assert error.line is None
        assert str(error) == "Invalid JSON: NaN is not valid JSON"


class TestDecodeError:
    """Test DecodeError construction and translation"""

    def test_message_includes_kind_and_path(self):
        error = DecodeError(DecodeErrorKind.MALFORMED_TAG, "tag must be a string", (1, 0, "t"))
        assert error.kind is DecodeErrorKind.MALFORMED_TAG
        assert error.path == (1, 0, "t")
        assert error.location == "$[1][0].t"
        assert error.detail == "tag must be a string"
        assert str(error) == "malformed_tag at $[1][0].t: tag must be a string"

    def test_error_count_in_message(self):
        error = DecodeError(DecodeErrorKind.INVALID_SHAPE, "bad", error_count=3)
        assert "(and 2 more error(s))" in str(error)

    def test_from_validation_error_uses_pydantic_location(self):
        """Without an explicit path the pydantic location is kept"""
        with pytest.raises(ValidationError) as exc_info:
            Header.model_validate({"level": "1", "attr": ["", [], []], "content": []})

        error = DecodeError.from_validation_error(exc_info.value)

        assert error.kind is DecodeErrorKind.INVALID_SHAPE
        assert error.path == ("level",)

    def test_from_validation_error_with_path(self):
        with pytest.raises(ValidationError) as exc_info:
            Header.model_validate({"Header": [1, ["", [], []]]})

        error = DecodeError.from_validation_error(exc_info.value, path=(1, 0, "c"))

        assert error.kind is DecodeErrorKind.ARITY_MISMATCH
        assert error.location == "$[1][0].c"
        assert "3 fields" in error.detail
