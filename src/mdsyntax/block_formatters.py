"""
Line-level formatters for headers and lists.
"""

from typing import List, Sequence, Tuple

from mdsyntax.markdown_formatter import BlockFormatter, compile_pattern, split_line_ending
from mdsyntax.syntax_tree import (
    ContainerNode, ContainerType, FormattedNode, FormattingType, ListItem, OrderedList,
    SyntaxNode, TextNode, TextRange, UnorderedList
)


class HeaderFormatter(BlockFormatter):
    """Formatter for ATX headers ("# Title" through "###### Title")."""

    priority = 200

    def __init__(self) -> None:
        self._header_pattern = compile_pattern(r'^(#{1,6})\s+(.+)$', self.__class__.__name__)

    def can_parse_line(self, line: str) -> bool:
        return self._header_pattern.match(line) is not None

    def parse_block(self, lines: Sequence[str], start_offset: int) -> Tuple[SyntaxNode, int] | None:
        if not lines:
            return None

        body, _ = split_line_ending(lines[0])
        match = self._header_pattern.match(body)
        if match is None:
            return None

        hash_start, hash_end = match.span(1)
        content_start, content_end = match.span(2)
        node = FormattedNode(
            type=FormattingType.header(hash_end - hash_start),
            full_range=TextRange(start_offset, start_offset + len(body)),
            content_range=TextRange(start_offset + content_start, start_offset + content_end),
            marker_ranges=(TextRange(start_offset + hash_start, start_offset + hash_end),)
        )
        return node, 1


class ListFormatter(BlockFormatter):
    """
    Formatter for runs of consecutive list item lines.

    Every immediately following line that is also a list item joins the list; a blank line or any
    other line ends it.  The list type comes from the first item's marker.
    """

    # Checked before headers
    priority = 250

    _UNORDERED_MARKERS = ("-", "*", "+")

    def __init__(self) -> None:
        self._ordered_pattern = compile_pattern(r'^(\d+)\. ', self.__class__.__name__)

    def can_parse_line(self, line: str) -> bool:
        trimmed = line.strip()
        if trimmed[:2] in ("- ", "* ", "+ "):
            return True

        return self._ordered_pattern.match(trimmed) is not None

    def _parse_list_item(self, body: str, start_offset: int) -> ContainerNode | None:
        """
        Parse one list item line.

        Args:
            body: The line, without its terminator
            start_offset: Offset of the line in the source text

        Returns:
            A list item container whose single child spans the item content, or None if the line
            isn't a list item
        """
        trimmed = body.strip()
        leading_whitespace = len(body) - len(body.lstrip())

        if trimmed[:2] in ("- ", "* ", "+ "):
            marker = trimmed[0]

        else:
            match = self._ordered_pattern.match(trimmed)
            if match is None:
                return None

            marker = match.group(1) + "."

        # Content starts after the marker and the single space that follows it
        content_start = start_offset + leading_whitespace + len(marker) + 1
        end = start_offset + len(body)
        level = leading_whitespace // 2

        return ContainerNode(
            type=ListItem(level=level, marker=marker),
            full_range=TextRange(start_offset, end),
            children=(TextNode(TextRange(content_start, end)),),
            metadata={
                "marker": marker,
                "level": level,
                "marker_range": TextRange(start_offset, content_start)
            }
        )

    def parse_block(self, lines: Sequence[str], start_offset: int) -> Tuple[SyntaxNode, int] | None:
        children: List[SyntaxNode] = []
        items: List[ContainerNode] = []
        offset = start_offset
        pending_line_ending: TextRange | None = None

        for line in lines:
            body, line_ending = split_line_ending(line)
            if not self.can_parse_line(body):
                break

            item = self._parse_list_item(body, offset)
            if item is None:
                break

            # The line break between two items belongs to the list
            if pending_line_ending is not None:
                children.append(TextNode(pending_line_ending))

            children.append(item)
            items.append(item)

            body_end = offset + len(body)
            offset += len(line)
            pending_line_ending = TextRange(body_end, offset) if line_ending else None

        if not items:
            return None

        first_marker = items[0].metadata["marker"]
        container_type: ContainerType
        if first_marker in self._UNORDERED_MARKERS:
            container_type = UnorderedList(marker=first_marker)

        else:
            container_type = OrderedList(start_number=1)

        node = ContainerNode(
            type=container_type,
            full_range=TextRange(start_offset, items[-1].full_range.end),
            children=tuple(children),
            metadata={"item_count": len(items)}
        )
        return node, len(items)
