import argparse
import logging
import sys

from tagtree.constants import DEFAULT_MAX_DEPTH
from tagtree.errors import ParseFailure
from tagtree.parser import MarkupParser
from tagtree.serializer import print_tree

SAMPLE = """<html>
	<head><title>=HTML Parser</title></head>
	<body>
		<h1>Welcome to the Sample Page</h1>
		<p>This is a HTML parser.</p>
	</body>
</html>"""

argparser = argparse.ArgumentParser(
    description="Parse a markup string and print its tree."
)
argparser.add_argument("markup", nargs="?", default=SAMPLE)
argparser.add_argument("--strict", action="store_true")
argparser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH)
argparser.add_argument("--errors", action="store_true",
                       help="list recovered parse errors on stderr")
argparser.add_argument("--verbose", action="store_true")


def main(argv: list[str] | None = None) -> int:
    args = argparser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    parser = MarkupParser(
        body=args.markup,
        strict=args.strict,
        max_depth=args.max_depth,
    )
    try:
        root = parser.parse()
    except ParseFailure as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_tree(root)
    if args.errors:
        for error in parser.errors:
            print(error, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
