"""Tests for the syntax tree node model."""

import pytest

from mdsyntax import (
    Blockquote, ContainerNode, FormattedNode, FormattingType, ListItem, SyntaxTree, TextNode,
    TextRange, UnorderedList
)


class TestTextRange:
    """Test text range helpers."""

    def test_length(self):
        """Test a range's length."""
        assert len(TextRange(3, 8)) == 5
        assert len(TextRange(4, 4)) == 0

    def test_contains_is_half_open(self):
        """Test containment includes the start but not the end."""
        text_range = TextRange(2, 5)
        assert text_range.contains(2)
        assert text_range.contains(4)
        assert not text_range.contains(5)
        assert not text_range.contains(1)

    def test_contains_range(self):
        """Test sub-range checks."""
        outer = TextRange(0, 10)
        assert outer.contains_range(TextRange(0, 10))
        assert outer.contains_range(TextRange(3, 4))
        assert not outer.contains_range(TextRange(5, 11))

    def test_overlaps(self):
        """Test overlap checks."""
        assert TextRange(0, 5).overlaps(TextRange(4, 6))
        assert not TextRange(0, 5).overlaps(TextRange(5, 6))
        assert not TextRange(0, 0).overlaps(TextRange(0, 5))


class TestFormattingType:
    """Test formatting type helpers."""

    def test_header_levels(self):
        """Test header types report their level."""
        assert FormattingType.HEADER1.header_level == 1
        assert FormattingType.HEADER6.header_level == 6
        assert FormattingType.BOLD.header_level is None

    def test_is_header(self):
        """Test header detection."""
        assert FormattingType.HEADER3.is_header
        assert not FormattingType.INLINE_CODE.is_header

    def test_header_from_level(self):
        """Test looking up a header type by level."""
        assert FormattingType.header(2) == FormattingType.HEADER2
        with pytest.raises(ValueError):
            FormattingType.header(7)


class TestNodes:
    """Test node accessors and immutability."""

    def test_text_node_accessors(self):
        """Test text node accessors."""
        node = TextNode(TextRange(0, 4))
        assert node.range == TextRange(0, 4)
        assert not node.is_formatted
        assert not node.is_container

    def test_formatted_node_accessors(self):
        """Test formatted node accessors."""
        node = FormattedNode(
            type=FormattingType.BOLD,
            full_range=TextRange(0, 8),
            content_range=TextRange(2, 6),
            marker_ranges=(TextRange(0, 2), TextRange(6, 8))
        )
        assert node.range == TextRange(0, 8)
        assert node.is_formatted
        assert not node.is_container
        assert node.children == ()

    def test_container_node_accessors(self):
        """Test container node accessors."""
        node = ContainerNode(
            type=ListItem(level=0, marker="-"),
            full_range=TextRange(0, 3),
            children=(TextNode(TextRange(2, 3)),),
            metadata={"level": 0}
        )
        assert node.range == TextRange(0, 3)
        assert node.is_container
        assert not node.is_formatted

    def test_nodes_are_frozen(self):
        """Test nodes can't be modified."""
        node = TextNode(TextRange(0, 1))
        with pytest.raises(AttributeError):
            node.text_range = TextRange(0, 2)

    def test_container_metadata_is_read_only(self):
        """Test container metadata can't be modified."""
        node = ContainerNode(
            type=UnorderedList(marker="-"),
            full_range=TextRange(0, 3),
            children=(),
            metadata={"item_count": 1}
        )
        with pytest.raises(TypeError):
            node.metadata["item_count"] = 2

    def test_container_metadata_copied(self):
        """Test changing the dict passed as metadata doesn't affect the node."""
        metadata = {"item_count": 1}
        node = ContainerNode(
            type=UnorderedList(marker="-"),
            full_range=TextRange(0, 3),
            children=(),
            metadata=metadata
        )
        metadata["item_count"] = 5
        assert node.metadata["item_count"] == 1

    def test_container_equality(self):
        """Test containers compare by value, including metadata."""
        def make(count):
            return ContainerNode(
                type=Blockquote(),
                full_range=TextRange(0, 3),
                children=(TextNode(TextRange(0, 3)),),
                metadata={"item_count": count}
            )

        assert make(1) == make(1)
        assert make(1) != make(2)

    def test_nodes_are_hashable(self):
        """Test nodes can be used in sets."""
        node = FormattedNode(
            type=FormattingType.ITALIC,
            full_range=TextRange(0, 3),
            content_range=TextRange(1, 2),
            marker_ranges=(TextRange(0, 1), TextRange(2, 3))
        )
        assert len({node, node, TextNode(TextRange(0, 3))}) == 2


class TestSyntaxTree:
    """Test syntax tree helpers."""

    def _make_tree(self):
        text = "**a** b"
        bold = FormattedNode(
            type=FormattingType.BOLD,
            full_range=TextRange(0, 5),
            content_range=TextRange(2, 3),
            marker_ranges=(TextRange(0, 2), TextRange(3, 5)),
            children=(TextNode(TextRange(2, 3)),)
        )
        return SyntaxTree(nodes=(bold, TextNode(TextRange(5, 7))), source_string=text)

    def test_text_of(self):
        """Test extracting the text for a range."""
        tree = self._make_tree()
        assert tree.text_of(TextRange(0, 5)) == "**a**"
        assert tree.text_of(TextRange(5, 7)) == " b"

    def test_walk_order(self):
        """Test walking visits parents before children, in document order."""
        tree = self._make_tree()
        ranges = [node.range for node in tree.walk()]
        assert ranges == [TextRange(0, 5), TextRange(2, 3), TextRange(5, 7)]

    def test_tree_equality(self):
        """Test trees compare by value."""
        assert self._make_tree() == self._make_tree()
