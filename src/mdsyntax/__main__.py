"""Command-line entry point: parse a markdown file and print its syntax tree."""

import argparse
import logging
import sys
import time
from typing import List

from mdsyntax.markdown_parser import MarkdownParser
from mdsyntax.syntax_tree_printer import SyntaxTreePrinter


def main(argv: List[str] | None = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command-line arguments, or None to use sys.argv

    Returns:
        Process exit status
    """
    parser = argparse.ArgumentParser(description="Print the markdown syntax tree for a file")
    parser.add_argument('file', nargs='?', default='-', help='Markdown file to parse ("-" for stdin)')
    parser.add_argument('--timing', action='store_true', help='Report how long the parse took')
    parser.add_argument('--latency-budget-ms', type=float, default=10.0,
                        help='Log a warning for parses slower than this')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        if args.file == '-':
            text = sys.stdin.read()

        else:
            with open(args.file, 'r', encoding='utf-8', newline='') as f:
                text = f.read()

    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    markdown_parser = MarkdownParser(latency_budget_ms=args.latency_budget_ms)

    start_time = time.perf_counter()
    tree = markdown_parser.parse(text)
    elapsed_ms = (time.perf_counter() - start_time) * 1000

    SyntaxTreePrinter().print_tree(tree)

    if args.timing:
        print(f"Parsed {len(text)} characters into {len(tree.nodes)} top-level nodes in {elapsed_ms:.2f}ms")

    return 0


if __name__ == '__main__':
    sys.exit(main())
