"""
Immutable syntax tree produced by the markdown parser.

All ranges are half-open code point offsets into the source string the tree was built from.  A tree
is only valid for that exact snapshot of the text.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Tuple, Union


@dataclass(frozen=True)
class TextRange:
    """
    A half-open range of code point offsets.

    Attributes:
        start: Offset of the first character in the range
        end: Offset one past the last character in the range
    """
    start: int
    end: int

    def __post_init__(self) -> None:
        assert 0 <= self.start <= self.end, f"Invalid range: {self.start}..{self.end}"

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        """
        Check if an offset lies within this range.

        Args:
            offset: The offset to check

        Returns:
            True if start <= offset < end
        """
        return self.start <= offset < self.end

    def contains_range(self, other: "TextRange") -> bool:
        """
        Check if another range lies entirely within this one.

        Args:
            other: The range to check

        Returns:
            True if the other range is a sub-range of this one
        """
        return self.start <= other.start and other.end <= self.end

    def overlaps(self, other: "TextRange") -> bool:
        """Check if two ranges share at least one character."""
        return self.start < other.end and other.start < self.end


class FormattingType(Enum):
    """Kind of formatting applied by a formatted node."""
    BOLD = auto()
    ITALIC = auto()
    HEADER1 = auto()
    HEADER2 = auto()
    HEADER3 = auto()
    HEADER4 = auto()
    HEADER5 = auto()
    HEADER6 = auto()
    INLINE_CODE = auto()
    STRIKETHROUGH = auto()

    @property
    def header_level(self) -> int | None:
        """
        Get the header level for header formatting types.

        Returns:
            The level (1-6) or None if this is not a header type
        """
        return _HEADER_LEVELS.get(self)

    @property
    def is_header(self) -> bool:
        """True if this is one of the header formatting types."""
        return self in _HEADER_LEVELS

    @classmethod
    def header(cls, level: int) -> "FormattingType":
        """
        Get the header formatting type for a level.

        Args:
            level: The header level (1-6)

        Returns:
            The matching header formatting type

        Raises:
            ValueError: If the level is outside 1-6
        """
        for formatting_type, header_level in _HEADER_LEVELS.items():
            if header_level == level:
                return formatting_type

        raise ValueError(f"Invalid header level: {level}")


_HEADER_LEVELS = {
    FormattingType.HEADER1: 1,
    FormattingType.HEADER2: 2,
    FormattingType.HEADER3: 3,
    FormattingType.HEADER4: 4,
    FormattingType.HEADER5: 5,
    FormattingType.HEADER6: 6,
}


@dataclass(frozen=True)
class UnorderedList:
    """Container type for a bulleted list."""
    marker: str


@dataclass(frozen=True)
class OrderedList:
    """Container type for a numbered list."""
    start_number: int


@dataclass(frozen=True)
class ListItem:
    """Container type for one item of a list."""
    level: int
    marker: str


@dataclass(frozen=True)
class Blockquote:
    """Container type for a blockquote (reserved, not produced by the default formatters)."""


ContainerType = Union[UnorderedList, OrderedList, ListItem, Blockquote]


@dataclass(frozen=True)
class TextNode:
    """Node representing an unformatted span of text."""
    text_range: TextRange

    @property
    def range(self) -> TextRange:
        return self.text_range

    @property
    def is_formatted(self) -> bool:
        return False

    @property
    def is_container(self) -> bool:
        return False


@dataclass(frozen=True)
class FormattedNode:
    """
    Node representing a span with formatting such as bold text or a header.

    Attributes:
        type: The kind of formatting
        full_range: The whole span, including the delimiter characters
        content_range: The span between the delimiters
        marker_ranges: The spans occupied by the delimiter characters
        children: Inline nodes covering content_range
    """
    type: FormattingType
    full_range: TextRange
    content_range: TextRange
    marker_ranges: Tuple[TextRange, ...]
    children: Tuple["SyntaxNode", ...] = ()

    @property
    def range(self) -> TextRange:
        return self.full_range

    @property
    def is_formatted(self) -> bool:
        return True

    @property
    def is_container(self) -> bool:
        return False


@dataclass(frozen=True)
class ContainerNode:
    """
    Node that owns an ordered sequence of child nodes, such as a list or a list item.

    Attributes:
        type: The kind of container
        full_range: The whole span of the container
        children: The nodes inside the container, in document order
        metadata: Read-only extra information about the container
    """
    type: ContainerType
    full_range: TextRange
    children: Tuple["SyntaxNode", ...]
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Freeze the metadata so callers can't mutate a published tree
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContainerNode):
            return NotImplemented

        return (
            self.type == other.type and
            self.full_range == other.full_range and
            self.children == other.children and
            dict(self.metadata) == dict(other.metadata)
        )

    @property
    def range(self) -> TextRange:
        return self.full_range

    @property
    def is_formatted(self) -> bool:
        return False

    @property
    def is_container(self) -> bool:
        return True


SyntaxNode = Union[TextNode, FormattedNode, ContainerNode]


@dataclass(frozen=True)
class SyntaxTree:
    """
    The result of parsing one snapshot of a document.

    Attributes:
        nodes: Top-level nodes.  Their ranges are sorted, don't overlap, and together cover the
            whole of source_string
        source_string: The exact text the tree was built from
    """
    nodes: Tuple[SyntaxNode, ...]
    source_string: str

    def text_of(self, text_range: TextRange) -> str:
        """
        Get the source text covered by a range.

        Args:
            text_range: The range to extract

        Returns:
            The substring of the source for the range
        """
        return self.source_string[text_range.start:text_range.end]

    def walk(self) -> Iterator[SyntaxNode]:
        """
        Iterate over every node in the tree, depth first, parents before children.

        Yields:
            Each node in document order
        """
        stack = list(reversed(self.nodes))
        while stack:
            node = stack.pop()
            yield node

            if isinstance(node, (FormattedNode, ContainerNode)):
                stack.extend(reversed(node.children))
