"""
Block pass: splits a document into header, list and plain text blocks.
"""

from typing import List, Sequence, overload

from mdsyntax.markdown_formatter import BlockFormatter, split_line_ending
from mdsyntax.syntax_tree import SyntaxNode, TextNode, TextRange


class _LineWindow(Sequence[str]):
    """Read-only view of the lines from some index onwards, without copying the list."""

    def __init__(self, lines: List[str], first: int) -> None:
        self._lines = lines
        self._first = first

    def __len__(self) -> int:
        return len(self._lines) - self._first

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[str]: ...

    def __getitem__(self, index: int | slice) -> str | Sequence[str]:
        if isinstance(index, slice):
            return self._lines[self._first:][index]

        if index < 0:
            index += len(self)

        if not 0 <= index < len(self):
            raise IndexError("line index out of range")

        return self._lines[self._first + index]


class BlockPass:
    """
    Line-oriented scan of a whole document.

    For each line not yet consumed, block formatters are tried in priority order and the first one
    that accepts the line consumes as many lines as it needs.  Lines no formatter accepts become
    text nodes.  Every line terminator outside a block becomes a text node of its own, so the
    output covers the document with no gaps.
    """

    def __init__(self, block_formatters: Sequence[BlockFormatter]) -> None:
        """
        Initialize the pass.

        Args:
            block_formatters: Formatters, already sorted by descending priority
        """
        self._formatters = tuple(block_formatters)

    def scan(self, text: str) -> List[SyntaxNode]:
        """
        Split a document into block-level nodes.

        Args:
            text: The document

        Returns:
            Block-level nodes covering the whole document, in order
        """
        lines = text.splitlines(keepends=True)
        nodes: List[SyntaxNode] = []
        offset = 0
        line_index = 0

        while line_index < len(lines):
            line = lines[line_index]
            body, _ = split_line_ending(line)

            consumed = 0
            for formatter in self._formatters:
                if not formatter.can_parse_line(body):
                    continue

                result = formatter.parse_block(_LineWindow(lines, line_index), offset)
                if result is None:
                    continue

                block_node, consumed = result
                assert 0 < consumed <= len(lines) - line_index, \
                    f"{formatter.__class__.__name__} consumed {consumed} lines"
                nodes.append(block_node)
                break

            if consumed == 0:
                consumed = 1
                if body:
                    nodes.append(TextNode(TextRange(offset, offset + len(body))))

            for consumed_line in lines[line_index:line_index + consumed]:
                offset += len(consumed_line)

            _, line_ending = split_line_ending(lines[line_index + consumed - 1])
            if line_ending:
                nodes.append(TextNode(TextRange(offset - len(line_ending), offset)))

            line_index += consumed

        return nodes
