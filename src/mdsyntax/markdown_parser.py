"""
Parser that turns markdown text into an immutable syntax tree.
"""

import logging
import time
from typing import List, Sequence, Tuple

from mdsyntax.block_formatters import HeaderFormatter, ListFormatter
from mdsyntax.block_pass import BlockPass
from mdsyntax.inline_formatters import (
    BoldFormatter, InlineCodeFormatter, ItalicFormatter, StrikethroughFormatter
)
from mdsyntax.inline_pass import InlinePass
from mdsyntax.markdown_formatter import BlockFormatter, InlineFormatter, MarkdownFormatter
from mdsyntax.syntax_exceptions import FormatterRegistryError
from mdsyntax.syntax_tree import SyntaxTree


def default_block_formatters() -> List[BlockFormatter]:
    """Create the standard block formatters."""
    return [HeaderFormatter(), ListFormatter()]


def default_inline_formatters() -> List[InlineFormatter]:
    """Create the standard inline formatters."""
    return [BoldFormatter(), StrikethroughFormatter(), InlineCodeFormatter(), ItalicFormatter()]


class MarkdownParser:
    """
    Two-pass markdown parser.

    The block pass splits the document into headers, lists and lines of text.  The inline pass
    then resolves bold, italic, code and strikethrough spans inside every text range, every
    formatted node's content and every container's children.

    A parser holds no state between calls, so one instance can be shared freely and parsing the
    same text twice gives equal trees.
    """

    def __init__(
        self,
        block_formatters: Sequence[BlockFormatter] | None = None,
        inline_formatters: Sequence[InlineFormatter] | None = None,
        latency_budget_ms: float = 10.0
    ) -> None:
        """
        Initialize the parser.

        Args:
            block_formatters: Block formatters to use, or None for the standard set
            inline_formatters: Inline formatters to use, or None for the standard set
            latency_budget_ms: Parse time above which a warning is logged

        Raises:
            FormatterRegistryError: If a formatter is of the wrong kind
        """
        self._logger = logging.getLogger("MarkdownParser")
        self._latency_budget_ms = latency_budget_ms

        if block_formatters is None:
            block_formatters = default_block_formatters()

        if inline_formatters is None:
            inline_formatters = default_inline_formatters()

        self._block_formatters: Tuple[BlockFormatter, ...] = self._sort_formatters(
            block_formatters, BlockFormatter
        )
        self._inline_formatters: Tuple[InlineFormatter, ...] = self._sort_formatters(
            inline_formatters, InlineFormatter
        )

        self._block_pass = BlockPass(self._block_formatters)
        self._inline_pass = InlinePass(self._inline_formatters)

        self._logger.debug(
            "block formatters: %s; inline formatters: %s",
            [f.__class__.__name__ for f in self._block_formatters],
            [f.__class__.__name__ for f in self._inline_formatters]
        )

    def _sort_formatters(self, formatters: Sequence, kind: type) -> tuple:
        """
        Check formatters are of the expected kind and order them by descending priority.

        Args:
            formatters: The formatters to register
            kind: The formatter base class they must derive from

        Returns:
            The formatters, highest priority first.  Equal priorities keep their given order

        Raises:
            FormatterRegistryError: If any formatter is not an instance of kind
        """
        for formatter in formatters:
            if not isinstance(formatter, kind):
                raise FormatterRegistryError(
                    f"{formatter!r} is not a {kind.__name__}",
                    {"formatter": repr(formatter), "expected": kind.__name__}
                )

        return tuple(sorted(formatters, key=lambda f: f.priority, reverse=True))

    @property
    def block_formatters(self) -> Tuple[BlockFormatter, ...]:
        """Block formatters in the order they are tried."""
        return self._block_formatters

    @property
    def inline_formatters(self) -> Tuple[InlineFormatter, ...]:
        """Inline formatters in the order they are tried."""
        return self._inline_formatters

    @property
    def formatters(self) -> Tuple[MarkdownFormatter, ...]:
        """All registered formatters, block formatters first."""
        return self._block_formatters + self._inline_formatters

    def parse(self, text: str) -> SyntaxTree:
        """
        Parse a document.

        Args:
            text: The document text

        Returns:
            A syntax tree whose top-level nodes cover the whole text

        Raises:
            TypeError: If text is not a string
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        start_time = time.perf_counter()

        block_nodes = self._block_pass.scan(text)
        nodes = self._inline_pass.apply(text, block_nodes)
        tree = SyntaxTree(nodes=tuple(nodes), source_string=text)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        if elapsed_ms > self._latency_budget_ms:
            self._logger.warning(
                "parse of %d characters took %.2fms (budget %.2fms)",
                len(text), elapsed_ms, self._latency_budget_ms
            )

        self._logger.debug("parsed %d characters into %d nodes", len(text), len(tree.nodes))
        return tree


_default_parser: MarkdownParser | None = None


def parse(text: str) -> SyntaxTree:
    """
    Parse a document with the standard formatters.

    Args:
        text: The document text

    Returns:
        The syntax tree for the text
    """
    global _default_parser  # pylint: disable=global-statement
    if _default_parser is None:
        _default_parser = MarkdownParser()

    return _default_parser.parse(text)
