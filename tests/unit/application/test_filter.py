# tests/unit/application/test_filter.py

"""Tests for the filter entry point"""

# Standard library imports
from json import loads

# Third party imports
import pytest

# Local imports
from pandoc_filter import DecodeError
from pandoc_filter import DecodeErrorKind
from pandoc_filter import EncodeError
from pandoc_filter import HorizontalRule
from pandoc_filter import ParseError
from pandoc_filter import Str
from pandoc_filter import filter as run_filter
from pandoc_filter.application.filter import parse_json
from pandoc_filter.infrastructure.config import OutputConfig
from tests.fixtures.documents import EMPTY_DOCUMENT
from tests.fixtures.documents import HEADER_DOCUMENT
from tests.fixtures.documents import SAMPLE_DOCUMENT
from tests.fixtures.transforms import failing
from tests.fixtures.transforms import uppercase


def identity(document):
    return document


class TestParseJson:
    """Test JSON parsing"""

    def test_valid(self):
        assert parse_json("[1, 2]") == [1, 2]

    def test_invalid_reports_position(self):
        with pytest.raises(ParseError) as exc_info:
            parse_json('[{"unMeta": {}},\n  [}')
        assert exc_info.value.line == 2
        assert exc_info.value.column is not None

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants(self, constant):
        with pytest.raises(ParseError, match=constant):
            parse_json(f"[{constant}]")


class TestFilter:
    """Test the decode, transform, encode pipeline"""

    def test_identity_header(self):
        """The header example passes through byte for byte"""
        assert run_filter(HEADER_DOCUMENT, identity) == HEADER_DOCUMENT

    def test_identity_sample(self):
        assert loads(run_filter(SAMPLE_DOCUMENT, identity)) == loads(SAMPLE_DOCUMENT)

    def test_transform_applied(self):
        output = run_filter(HEADER_DOCUMENT, uppercase)
        assert loads(output)[1][0]["c"][2] == [{"t": "Str", "c": "HI"}]

    def test_replace_document(self):
        def add_rule(document):
            return document.model_copy(update={"blocks": [*document.blocks, HorizontalRule()]})

        output = run_filter(EMPTY_DOCUMENT, add_rule)

        assert output == '[{"unMeta":{}},[{"t":"HorizontalRule","c":[]}]]'

    def test_non_ascii_kept(self):
        text = '[{"unMeta":{}},[{"t":"Plain","c":[{"t":"Str","c":"caf\\u00e9"}]}]]'
        output = run_filter(text, identity)
        assert "café" in output

    def test_output_options(self):
        options = OutputConfig(ensure_ascii=True, indent=2, sort_keys=True)
        text = '[{"unMeta":{}},[{"t":"Plain","c":[{"t":"Str","c":"é"}]}]]'
        output = run_filter(text, identity, output=options)
        assert "\\u00e9" in output
        assert output.startswith("[\n  {")
        assert output.index('"c"') < output.index('"t"')

    def test_parse_error(self):
        with pytest.raises(ParseError):
            run_filter("not json", identity)

    def test_decode_error(self):
        with pytest.raises(DecodeError) as exc_info:
            run_filter('[{"unMeta":{}},[{"t":"Banner","c":[]}]]', identity)
        assert exc_info.value.kind is DecodeErrorKind.UNKNOWN_VARIANT

    def test_transform_errors_propagate(self):
        """Failures in the transform are not wrapped"""
        with pytest.raises(RuntimeError, match="transform failed"):
            run_filter(HEADER_DOCUMENT, failing)

    def test_transform_not_returning_document(self):
        with pytest.raises(EncodeError):
            run_filter(HEADER_DOCUMENT, lambda document: Str("x"))
