"""
Span-level formatters.

Each pattern captures its content non-greedily and excludes the delimiter character from the
content, so a delimiter never pairs across two separate runs.
"""

from mdsyntax.markdown_formatter import InlineFormatter
from mdsyntax.syntax_tree import FormattingType


class BoldFormatter(InlineFormatter):
    """Formatter for **bold** and __bold__ text."""
    formatting_type = FormattingType.BOLD
    pattern = r'\*\*([^*]+?)\*\*|__([^_]+?)__'

    # Must beat italic when both match at the same position
    priority = 150


class InlineCodeFormatter(InlineFormatter):
    """Formatter for `inline code`."""
    formatting_type = FormattingType.INLINE_CODE
    pattern = r'`([^`]+?)`'
    priority = 140

    # Code is literal, so nothing inside it is formatted
    parses_content = False


class StrikethroughFormatter(InlineFormatter):
    """Formatter for ~~struck through~~ text."""
    formatting_type = FormattingType.STRIKETHROUGH
    pattern = r'~~([^~]+?)~~'
    priority = 130


class ItalicFormatter(InlineFormatter):
    """Formatter for *italic* and _italic_ text."""
    formatting_type = FormattingType.ITALIC

    # A single delimiter never borrows a character from a "**" or "__" run
    pattern = r'(?<!\*)\*([^*]+?)\*(?!\*)|(?<!_)_([^_]+?)_(?!_)'
    priority = 100
