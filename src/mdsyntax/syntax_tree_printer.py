"""
Printer for syntax tree structures, for debugging.
"""

from typing import List

from mdsyntax.syntax_tree import (
    Blockquote, ContainerNode, FormattedNode, ListItem, OrderedList, SyntaxNode, SyntaxTree,
    TextNode, TextRange, UnorderedList
)


class SyntaxTreePrinter:
    """Renders a syntax tree as indented text, one node per line."""

    def __init__(self, indent: str = "  ") -> None:
        """
        Initialize the printer.

        Args:
            indent: String used for each level of indentation
        """
        self._indent = indent

    def _range(self, text_range: TextRange) -> str:
        return f"[{text_range.start}:{text_range.end}]"

    def _container_name(self, node: ContainerNode) -> str:
        container_type = node.type
        if isinstance(container_type, UnorderedList):
            return f"UnorderedList (marker {container_type.marker!r})"

        if isinstance(container_type, OrderedList):
            return f"OrderedList (start {container_type.start_number})"

        if isinstance(container_type, ListItem):
            return f"ListItem (level {container_type.level}, marker {container_type.marker!r})"

        assert isinstance(container_type, Blockquote)
        return "Blockquote"

    def _format_node(self, tree: SyntaxTree, node: SyntaxNode, depth: int, lines: List[str]) -> None:
        prefix = self._indent * depth

        if isinstance(node, TextNode):
            lines.append(f"{prefix}Text {self._range(node.text_range)}: {tree.text_of(node.text_range)!r}")
            return

        if isinstance(node, FormattedNode):
            markers = " ".join(self._range(r) for r in node.marker_ranges)
            lines.append(
                f"{prefix}{node.type.name} {self._range(node.full_range)} "
                f"content {self._range(node.content_range)} markers {markers}"
            )

        else:
            lines.append(f"{prefix}{self._container_name(node)} {self._range(node.full_range)}")

        for child in node.children:
            self._format_node(tree, child, depth + 1, lines)

    def format(self, tree: SyntaxTree) -> str:
        """
        Render a tree.

        Args:
            tree: The tree to render

        Returns:
            The rendered tree, one node per line
        """
        lines: List[str] = []
        for node in tree.nodes:
            self._format_node(tree, node, 0, lines)

        return "\n".join(lines)

    def print_tree(self, tree: SyntaxTree) -> None:
        """Print a tree to stdout."""
        print(self.format(tree))
