"""Command-line entry point."""

from __future__ import annotations

import sys
from typing import List, Optional

from fsearch.args import ArgumentError, HelpRequested, format_usage, parse_args
from fsearch.scan import ScanError
from fsearch.walk import walk

VERSION = "0.1.0"


def main(argv: Optional[List[str]] = None) -> int:
    """Run the search and return the process exit status."""
    prog_name = sys.argv[0] if sys.argv and sys.argv[0] else "fs"
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv, VERSION)
    except HelpRequested:
        sys.stdout.write(format_usage(prog_name, VERSION))
        return 0
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        walk(args)
    except ScanError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())