"""A markdown syntax tree builder for live highlighting."""

from mdsyntax.block_formatters import HeaderFormatter, ListFormatter
from mdsyntax.cursor_mapper import CursorMapper
from mdsyntax.inline_formatters import (
    BoldFormatter,
    InlineCodeFormatter,
    ItalicFormatter,
    StrikethroughFormatter
)
from mdsyntax.markdown_formatter import BlockFormatter, InlineFormatter, MarkdownFormatter
from mdsyntax.markdown_parser import MarkdownParser, parse
from mdsyntax.parse_scheduler import ParseScheduler
from mdsyntax.syntax_exceptions import FormatterPatternError, FormatterRegistryError, SyntaxTreeError
from mdsyntax.syntax_tree import (
    Blockquote,
    ContainerNode,
    ContainerType,
    FormattedNode,
    FormattingType,
    ListItem,
    OrderedList,
    SyntaxNode,
    SyntaxTree,
    TextNode,
    TextRange,
    UnorderedList
)
from mdsyntax.syntax_tree_printer import SyntaxTreePrinter


__all__ = [
    # Parsing
    "MarkdownParser",
    "ParseScheduler",
    "parse",
    # Tree
    "Blockquote",
    "ContainerNode",
    "ContainerType",
    "FormattedNode",
    "FormattingType",
    "ListItem",
    "OrderedList",
    "SyntaxNode",
    "SyntaxTree",
    "TextNode",
    "TextRange",
    "UnorderedList",
    # Formatters
    "BlockFormatter",
    "BoldFormatter",
    "HeaderFormatter",
    "InlineCodeFormatter",
    "InlineFormatter",
    "ItalicFormatter",
    "ListFormatter",
    "MarkdownFormatter",
    "StrikethroughFormatter",
    # Consumers
    "CursorMapper",
    "SyntaxTreePrinter",
    # Exceptions
    "FormatterPatternError",
    "FormatterRegistryError",
    "SyntaxTreeError",
]
