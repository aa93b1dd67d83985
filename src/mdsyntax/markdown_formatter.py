"""
Formatter contracts.

A formatter recognizes one markdown construct and proposes syntax nodes for it.  Inline formatters
are driven by a single regular expression; block formatters work on whole lines.
"""

import re
from abc import ABC, abstractmethod
from typing import ClassVar, List, Sequence, Tuple

from mdsyntax.syntax_exceptions import FormatterPatternError
from mdsyntax.syntax_tree import FormattedNode, FormattingType, SyntaxNode, TextRange


def compile_pattern(pattern: str, owner: str) -> re.Pattern[str]:
    """
    Compile a formatter's regular expression.

    Args:
        pattern: The regular expression source
        owner: Name of the formatter, used in error reports

    Returns:
        The compiled pattern

    Raises:
        FormatterPatternError: If the pattern doesn't compile
    """
    try:
        return re.compile(pattern)

    except re.error as e:
        raise FormatterPatternError(
            f"{owner}: invalid pattern {pattern!r}: {e}",
            {"formatter": owner, "pattern": pattern, "position": e.pos}
        ) from e


def split_line_ending(line: str) -> Tuple[str, str]:
    """
    Split a line produced by str.splitlines(keepends=True) into its body and its terminator.

    Args:
        line: The line, possibly ending with a line boundary sequence

    Returns:
        A tuple of (body, terminator).  The terminator is empty for a final unterminated line
    """
    parts = line.splitlines()
    body = parts[0] if parts else ""
    return body, line[len(body):]


class MarkdownFormatter(ABC):
    """Base class for everything that can propose syntax nodes."""

    # Higher priorities are tried, and win ties, first
    priority: ClassVar[int] = 0

    @abstractmethod
    def can_parse(self, text: str, text_range: TextRange) -> bool:
        """
        Check if this formatter can parse the given range of text.

        Args:
            text: The full source text
            text_range: The range to examine

        Returns:
            True if the formatter recognizes something in the range
        """

    @abstractmethod
    def parse(self, text: str, text_range: TextRange) -> SyntaxNode | None:
        """
        Parse the range and return the first node found, if any.

        Args:
            text: The full source text
            text_range: The range to examine

        Returns:
            A syntax node, or None if nothing was recognized
        """

    @abstractmethod
    def find_matches(self, text: str, text_range: TextRange) -> List[SyntaxNode]:
        """
        Find every node this formatter recognizes in the range.

        Args:
            text: The full source text
            text_range: The range to examine

        Returns:
            Nodes in order of their start offsets
        """


class InlineFormatter(MarkdownFormatter):
    """
    Formatter for a span-level construct matched by one regular expression.

    The first participating capture group of each match is the content; everything else in the
    match is treated as delimiter characters.
    """

    priority: ClassVar[int] = 100
    formatting_type: ClassVar[FormattingType]
    pattern: ClassVar[str]

    # Whether the content of a match is scanned again for nested formatting
    parses_content: ClassVar[bool] = True

    def __init__(self) -> None:
        name = self.__class__.__name__
        self._regex = compile_pattern(self.pattern, name)
        if self._regex.groups < 1:
            raise FormatterPatternError(
                f"{name}: pattern {self.pattern!r} has no content group",
                {"formatter": name, "pattern": self.pattern}
            )

    def can_parse(self, text: str, text_range: TextRange) -> bool:
        return self._regex.search(text, text_range.start, text_range.end) is not None

    def parse(self, text: str, text_range: TextRange) -> SyntaxNode | None:
        match = self._regex.search(text, text_range.start, text_range.end)
        if match is None:
            return None

        return self._node_from_match(match)

    def find_matches(self, text: str, text_range: TextRange) -> List[SyntaxNode]:
        return [
            self._node_from_match(match)
            for match in self._regex.finditer(text, text_range.start, text_range.end)
        ]

    def _node_from_match(self, match: "re.Match[str]") -> FormattedNode:
        """
        Build a formatted node from a regular expression match.

        Args:
            match: A match of this formatter's pattern

        Returns:
            The formatted node, with one marker range either side of the content
        """
        group = 1
        while match.start(group) == -1:
            group += 1

        full_start, full_end = match.span()
        content_start, content_end = match.span(group)
        return FormattedNode(
            type=self.formatting_type,
            full_range=TextRange(full_start, full_end),
            content_range=TextRange(content_start, content_end),
            marker_ranges=(
                TextRange(full_start, content_start),
                TextRange(content_end, full_end)
            )
        )


class BlockFormatter(MarkdownFormatter):
    """
    Formatter for a line-level construct.

    Lines are handed over exactly as str.splitlines(keepends=True) produces them, so offsets can be
    advanced by the full length of each consumed line.
    """

    priority: ClassVar[int] = 200

    @abstractmethod
    def can_parse_line(self, line: str) -> bool:
        """
        Check if a line could start this block construct.

        Args:
            line: The line body, without its terminator

        Returns:
            True if the line looks like the start of this construct
        """

    @abstractmethod
    def parse_block(self, lines: Sequence[str], start_offset: int) -> Tuple[SyntaxNode, int] | None:
        """
        Parse a block starting at the first of the given lines.

        Args:
            lines: The remaining lines of the document, each with its terminator
            start_offset: Offset of the first line in the source text

        Returns:
            A tuple of (node, consumed_line_count), or None if no block starts here.  The node's
            range ends at the end of the last consumed line's body
        """

    def can_parse(self, text: str, text_range: TextRange) -> bool:
        body, _ = split_line_ending(text[text_range.start:text_range.end])
        return self.can_parse_line(body)

    def parse(self, text: str, text_range: TextRange) -> SyntaxNode | None:
        result = self.parse_block([text[text_range.start:text_range.end]], text_range.start)
        if result is None:
            return None

        return result[0]

    def find_matches(self, text: str, text_range: TextRange) -> List[SyntaxNode]:
        node = self.parse(text, text_range)
        if node is None:
            return []

        return [node]
