# tests/unit/application/test_walk.py

"""Tests for bottom-up tree rewriting"""

# Third party imports
import pytest

# Local imports
from pandoc_filter import Attr
from pandoc_filter import Emph
from pandoc_filter import Header
from pandoc_filter import Meta
from pandoc_filter import MetaInlines
from pandoc_filter import MetaMap
from pandoc_filter import MetaString
from pandoc_filter import Note
from pandoc_filter import Pandoc
from pandoc_filter import Para
from pandoc_filter import Space
from pandoc_filter import Str
from pandoc_filter import Strong
from pandoc_filter import walk


def _document(*blocks) -> Pandoc:
    return Pandoc(Meta(), list(blocks))


class TestWalk:
    """Test replacement, splicing and deletion"""

    def test_identity(self, sample_document):
        assert walk(sample_document, lambda node: None) == sample_document

    def test_replace_leaves(self):
        document = _document(Para([Str("a"), Space(), Emph([Str("b")])]))

        result = walk(document, lambda node: Str(node.text * 2) if isinstance(node, Str) else None)

        assert result == _document(Para([Str("aa"), Space(), Emph([Str("bb")])]))

    def test_input_not_modified(self):
        document = _document(Para([Str("a")]))
        walk(document, lambda node: Str("z") if isinstance(node, Str) else None)
        assert document == _document(Para([Str("a")]))

    def test_splice_list(self):
        """Returning a list replaces the node by its elements"""
        document = _document(Para([Str("a"), Emph([Str("b"), Str("c")]), Str("d")]))

        result = walk(document, lambda node: node.content if isinstance(node, Emph) else None)

        assert result == _document(Para([Str("a"), Str("b"), Str("c"), Str("d")]))

    def test_delete_with_empty_list(self):
        document = _document(Para([Str("a"), Space()]), Para([]))

        result = walk(
            document,
            lambda node: [] if isinstance(node, Space) or node == Para([]) else None,
        )

        assert result == _document(Para([Str("a")]))

    def test_children_before_parents(self):
        """The action sees a node whose children were already rewritten"""
        seen = []

        def record(node):
            seen.append(type(node).__name__)
            if isinstance(node, Strong):
                assert node.content == [Str("X")]
            if isinstance(node, Str):
                return Str("X")
            return None

        walk(_document(Para([Strong([Str("x")])])), record)

        assert seen == ["Str", "Strong", "Para"]

    def test_records_not_passed_to_action(self):
        seen = []
        walk(_document(Header(1, Attr("id"), [])), lambda node: seen.append(node))
        assert [type(node) for node in seen] == [Header]

    def test_inside_notes_and_metadata(self):
        document = Pandoc(
            Meta({"title": MetaInlines([Str("t")]), "nested": MetaMap({"k": MetaString("v")})}),
            [Para([Note([Para([Str("n")])])])],
        )

        def upper(node):
            if isinstance(node, Str):
                return Str(node.text.upper())
            if isinstance(node, MetaString):
                return MetaString(node.text.upper())
            return None

        result = walk(document, upper)

        assert result.meta.un_meta["title"] == MetaInlines([Str("T")])
        assert result.meta.un_meta["nested"] == MetaMap({"k": MetaString("V")})
        assert result.blocks == [Para([Note([Para([Str("N")])])])]

    def test_splice_into_mapping_rejected(self):
        document = Pandoc(Meta({"k": MetaString("v")}), [])
        with pytest.raises(TypeError, match="mapping entry 'k'"):
            walk(document, lambda node: [] if isinstance(node, MetaString) else None)

    def test_walk_fragment(self):
        """Any node or list of nodes can be walked"""
        result = walk([Str("a"), Space()], lambda node: [] if isinstance(node, Space) else None)
        assert result == [Str("a")]
