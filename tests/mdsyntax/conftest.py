"""Shared fixtures and utilities for syntax tree tests."""

from typing import Sequence

import pytest

from mdsyntax import (
    ContainerNode, FormattedNode, ListItem, MarkdownParser, SyntaxNode, SyntaxTree, TextRange
)


@pytest.fixture
def markdown_parser():
    """Fixture providing a parser with the standard formatters."""
    return MarkdownParser()


class SyntaxTreeTestHelpers:
    """Helper utilities for syntax tree testing."""

    @staticmethod
    def node_text(tree: SyntaxTree, node: SyntaxNode) -> str:
        """Get the source text covered by a node."""
        return tree.text_of(node.range)

    @staticmethod
    def content_text(tree: SyntaxTree, node: FormattedNode) -> str:
        """Get the source text of a formatted node's content."""
        return tree.text_of(node.content_range)

    @staticmethod
    def assert_tiles(nodes: Sequence[SyntaxNode], text_range: TextRange) -> None:
        """Check that nodes are contiguous, non-empty and exactly cover a range."""
        cursor = text_range.start
        for node in nodes:
            assert node.range.start == cursor, f"gap or overlap at {cursor}: {node}"
            assert node.range.end > node.range.start, f"empty node: {node}"
            cursor = node.range.end

        assert cursor == text_range.end, f"nodes end at {cursor}, expected {text_range.end}"

    @classmethod
    def assert_node_covers(cls, node: SyntaxNode) -> None:
        """Check the coverage rules for a node and everything below it."""
        if isinstance(node, FormattedNode):
            assert node.full_range.contains_range(node.content_range)
            for marker in node.marker_ranges:
                assert node.full_range.contains_range(marker)
                assert not marker.overlaps(node.content_range)

            cls.assert_tiles(node.children, node.content_range)
            for child in node.children:
                cls.assert_node_covers(child)

        elif isinstance(node, ContainerNode):
            if isinstance(node.type, ListItem):
                marker_range = node.metadata["marker_range"]
                assert marker_range.start == node.full_range.start
                cls.assert_tiles(node.children, TextRange(marker_range.end, node.full_range.end))

            else:
                cls.assert_tiles(node.children, node.full_range)

            for child in node.children:
                cls.assert_node_covers(child)

    @classmethod
    def assert_tree_covers(cls, tree: SyntaxTree) -> None:
        """Check the top-level nodes partition the source and every node is well formed."""
        cls.assert_tiles(tree.nodes, TextRange(0, len(tree.source_string)))
        for node in tree.nodes:
            cls.assert_node_covers(node)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return SyntaxTreeTestHelpers
