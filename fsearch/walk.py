"""Walk a tree, filter entry names and print matching paths."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

from fsearch.args import Args
from fsearch.filters import Filters, filter_entries
from fsearch.scan import ScanError, walk_tree


def walk(args: Args, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> None:
    """Print the path of every entry under ``args.path`` that passes the filters.

    Errors on subdirectories are written to ``err``; an error on the starting
    path raises :class:`~fsearch.scan.ScanError`.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    def report(exc: ScanError) -> None:
        print(exc, file=err)

    filters = Filters(name=args.name, iname=args.iname)
    entries = walk_tree(args.path, on_error=report, max_workers=(os.cpu_count() or 1) * 8)
    for entry in filter_entries(entries, filters):
        print(entry.path, file=out)