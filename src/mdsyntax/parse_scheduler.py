"""
Runs parses off the event loop thread, publishing only the newest result.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Callable

from mdsyntax.markdown_parser import MarkdownParser
from mdsyntax.syntax_tree import SyntaxTree


class ParseScheduler:
    """
    Schedules parses of successive document edits.

    Each submitted edit gets a sequence number one higher than the last.  When a parse finishes,
    its tree is published only if no newer edit has been submitted in the meantime; otherwise it
    is discarded.  An edit that is already superseded when the worker reaches it isn't parsed at
    all.  Published trees are never merged or partially applied.

    submit() must always be awaited from the same event loop.
    """

    def __init__(
        self,
        parser: MarkdownParser | None = None,
        on_tree: Callable[[int, SyntaxTree], None] | None = None
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            parser: Parser to use, or None for one with the standard formatters
            on_tree: Called with (sequence, tree) whenever a tree is published
        """
        self._parser = parser if parser is not None else MarkdownParser()
        self._on_tree = on_tree
        self._executor = ThreadPoolExecutor(max_workers=1)
        self._sequence = 0
        self._published_sequence = 0
        self._latest_tree: SyntaxTree | None = None
        self._logger = logging.getLogger("ParseScheduler")

    @property
    def latest_tree(self) -> SyntaxTree | None:
        """The most recently published tree."""
        return self._latest_tree

    @property
    def sequence(self) -> int:
        """Sequence number of the most recently submitted edit."""
        return self._sequence

    @property
    def published_sequence(self) -> int:
        """Sequence number of the most recently published tree, or 0 if none."""
        return self._published_sequence

    def _parse_if_current(self, sequence: int, text: str) -> SyntaxTree | None:
        """
        Parse on the worker thread, unless a newer edit arrived while this one was queued.

        Args:
            sequence: Sequence number of the edit
            text: The document text for the edit

        Returns:
            The tree, or None if the parse was skipped
        """
        if sequence != self._sequence:
            return None

        return self._parser.parse(text)

    async def submit(self, text: str) -> SyntaxTree | None:
        """
        Parse a new version of the document.

        Args:
            text: The document text after the edit

        Returns:
            The published tree, or None if a newer edit superseded this one
        """
        self._sequence += 1
        sequence = self._sequence

        loop = asyncio.get_running_loop()
        tree = await loop.run_in_executor(self._executor, self._parse_if_current, sequence, text)

        if tree is None or sequence != self._sequence:
            self._logger.debug("discarding parse %d, superseded by %d", sequence, self._sequence)
            return None

        self._latest_tree = tree
        self._published_sequence = sequence
        if self._on_tree is not None:
            self._on_tree(sequence, tree)

        return tree

    def close(self) -> None:
        """Shut down the worker thread."""
        self._executor.shutdown(wait=True)
