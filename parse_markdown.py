#!/usr/bin/env python3
"""Parse and print markdown using mdsyntax."""

import sys
sys.path.insert(0, 'src')

from mdsyntax import CursorMapper, SyntaxTreePrinter, parse  # noqa: E402

# The markdown content to parse
markdown_content = r"""## Developer installation

1. Create and activate a **virtual environment**
2. Install `build` and the *development* extras
3. ~~Run the old setup script~~ use `pip install -e .`

- Unterminated **markers stay plain text
  - Nested items keep their *indent level*

Some __closing__ text with an emoji 👍🏽 and a _combining_ é.
"""

ast = parse(markdown_content)

# Print the tree
printer = SyntaxTreePrinter()
printer.print_tree(ast)

# Show which markers a renderer would reveal at the start of "virtual"
mapper = CursorMapper(ast)
position = markdown_content.index("virtual")
print(f"\nMarkers visible at {position}: {mapper.markers_visible_at(position)}")
