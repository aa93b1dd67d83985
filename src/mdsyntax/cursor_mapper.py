"""
Read-only position queries over a syntax tree.
"""

from typing import Iterator, List

from mdsyntax.syntax_tree import ContainerNode, FormattedNode, SyntaxNode, SyntaxTree, TextRange


class CursorMapper:
    """
    Maps between visual and logical cursor positions for a syntax tree.

    Marker characters are never hidden yet, so visual and logical positions are the same.  The
    marker queries let a renderer decide which delimiters to show around the cursor.
    """

    def __init__(self, syntax_tree: SyntaxTree) -> None:
        self._syntax_tree = syntax_tree

    def visual_to_logical_position(self, visual_position: int) -> int:
        return visual_position

    def logical_to_visual_position(self, logical_position: int) -> int:
        return logical_position

    def snap_to_valid_position(self, position: int) -> int:
        """
        Move a position to the nearest place the cursor may rest.

        Args:
            position: The requested position

        Returns:
            The position, clamped to the bounds of the document
        """
        return max(0, min(position, len(self._syntax_tree.source_string)))

    def _formatted_nodes_at(self, position: int) -> Iterator[FormattedNode]:
        """Yield formatted nodes containing a position, outermost first."""
        stack: List[SyntaxNode] = list(reversed(self._syntax_tree.nodes))
        while stack:
            node = stack.pop()
            if not node.range.contains(position):
                continue

            if isinstance(node, FormattedNode):
                yield node
                stack.extend(reversed(node.children))

            elif isinstance(node, ContainerNode):
                stack.extend(reversed(node.children))

    def markers_visible_at(self, position: int) -> List[TextRange]:
        """
        Get the marker ranges that should be visible with the cursor at a position.

        Args:
            position: Offset in the source text

        Returns:
            Marker ranges of every formatted node whose full range contains the position
        """
        markers: List[TextRange] = []
        for node in self._formatted_nodes_at(position):
            markers.extend(node.marker_ranges)

        return markers

    def formatted_node_at(self, position: int) -> FormattedNode | None:
        """
        Find the outermost formatted node wrapping a position.

        Args:
            position: Offset in the source text

        Returns:
            The formatted node, or None if the position is in plain text
        """
        return next(self._formatted_nodes_at(position), None)
