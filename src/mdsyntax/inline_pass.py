"""
Inline pass: finds bold, italic, code and strikethrough spans inside a range of text.
"""

import dataclasses
from typing import List, Sequence, Tuple

from mdsyntax.markdown_formatter import InlineFormatter
from mdsyntax.syntax_tree import ContainerNode, FormattedNode, SyntaxNode, TextNode, TextRange


class InlinePass:
    """
    Scans ranges of text with a priority-ordered set of inline formatters.

    Every formatter's pattern runs once over a range.  Candidates are then swept left to right,
    longest first at each start position, and any candidate that starts inside one already
    accepted is dropped.  Overlapping formats are not supported.
    """

    def __init__(self, inline_formatters: Sequence[InlineFormatter]) -> None:
        """
        Initialize the pass.

        Args:
            inline_formatters: Formatters, already sorted by descending priority
        """
        self._formatters = tuple(inline_formatters)

    def scan(self, text: str, text_range: TextRange) -> List[SyntaxNode]:
        """
        Parse inline formatting within one range.

        Args:
            text: The full source text
            text_range: The range to scan

        Returns:
            Nodes that exactly cover the range, in order.  Empty if the range is empty
        """
        if text_range.start == text_range.end:
            return []

        candidates: List[Tuple[FormattedNode, InlineFormatter]] = []
        for formatter in self._formatters:
            for match in formatter.find_matches(text, text_range):
                assert isinstance(match, FormattedNode)
                candidates.append((match, formatter))

        # Stable sort: at equal start and length, the higher priority formatter stays first
        candidates.sort(key=lambda c: (c[0].full_range.start, -len(c[0].full_range)))

        nodes: List[SyntaxNode] = []
        cursor = text_range.start
        for candidate, formatter in candidates:
            start = candidate.full_range.start
            if start < cursor:
                continue

            if start > cursor:
                nodes.append(TextNode(TextRange(cursor, start)))

            nodes.append(self._fill_content(text, candidate, formatter.parses_content))
            cursor = candidate.full_range.end

        if cursor < text_range.end:
            nodes.append(TextNode(TextRange(cursor, text_range.end)))

        return nodes

    def _fill_content(self, text: str, node: FormattedNode, parses_content: bool) -> FormattedNode:
        """
        Attach child nodes covering a formatted node's content.

        Args:
            text: The full source text
            node: The formatted node
            parses_content: Whether the content may contain further formatting

        Returns:
            A copy of the node with its children set
        """
        if parses_content:
            children = tuple(self.scan(text, node.content_range))

        else:
            children = (TextNode(node.content_range),)

        return dataclasses.replace(node, children=children)

    def apply(self, text: str, nodes: Sequence[SyntaxNode]) -> List[SyntaxNode]:
        """
        Run the inline pass over the output of the block pass.

        Text nodes are replaced by the result of scanning them, formatted nodes get their content
        scanned, and containers are processed recursively.

        Args:
            text: The full source text
            nodes: Block-level nodes

        Returns:
            The nodes with inline formatting resolved
        """
        result: List[SyntaxNode] = []
        for node in nodes:
            if isinstance(node, TextNode):
                result.extend(self.scan(text, node.text_range))

            elif isinstance(node, FormattedNode):
                if node.children:
                    result.append(node)

                else:
                    result.append(self._fill_content(text, node, True))

            else:
                assert isinstance(node, ContainerNode)
                result.append(dataclasses.replace(node, children=tuple(self.apply(text, node.children))))

        return result
