# fsearch

A small command-line tool that walks a directory tree, scanning subdirectories in parallel
threads, and prints every path whose entry name matches a regular expression.

## Installation

```
pip install .
```

This installs the `fs` command. The package has no dependencies outside the standard library.

## Usage

```
fs PATH [...OPTIONS] [...FILTERS]
```

`PATH` is where the walk starts; it defaults to the current directory. If several paths are
given, the last one wins.

### Filters

| Flag            | Meaning                                               |
|-----------------|-------------------------------------------------------|
| `-name REGEX`   | print only entries whose name matches `REGEX`         |
| `-iname REGEX`  | leave out entries whose name matches `REGEX`          |

Patterns use Python's `re` syntax. They are matched against the entry's own name, not its full
path, and may match anywhere in the name; use `^` and `$` to anchor them. Both filters may be
given together.

### Options

| Flag     | Meaning                                          |
|----------|--------------------------------------------------|
| `-help`  | print the help text to standard output and exit  |

### Examples

List every entry below the current directory:

```
fs
```

Find Python sources under `/usr/lib`, leaving out test files:

```
fs /usr/lib -name '\.py$' -iname '^test_'
```

## Output

Each matching entry is printed on its own line, as the starting path, a `/` and the entry's
relative path (for example `./src/main.py`). Because directories are scanned concurrently, the
lines do not come out in any fixed order. The entries `.` and `..` are never listed. Symbolic
links are listed but not followed, so the walk does not descend into a linked directory.

If a subdirectory cannot be opened or read, for example because permission is denied, an error
such as `open './secret': Permission denied` is written to standard error and the walk goes on
with the rest of the tree. If the starting path itself cannot be opened, the error is printed and
`fs` exits with status 1.

An unknown flag (any other argument starting with `-`), a missing regex value or a regex that does
not compile makes `fs` print an error to standard error and exit with status 1.

## Using it from Python

```python
import sys
from fsearch.args import parse_args
from fsearch.walk import walk

args = parse_args(["/tmp", "-name", r"\.log$"], version="0.1.0")
walk(args, sys.stdout, sys.stderr)
```

`parse_args` takes the arguments without the program name. It raises
`fsearch.args.ArgumentError` for bad input and `fsearch.args.HelpRequested` for `-help`;
`fsearch.args.format_usage(prog_name, version)` returns the help text.

To work with the entries themselves rather than printed paths:

```python
from fsearch.filters import Filters, filter_entries
from fsearch.scan import walk_tree
import re

entries = walk_tree("/tmp", on_error=print, max_workers=16)
for entry in filter_entries(entries, Filters(name=re.compile(r"\.log$"))):
    print(entry.name, entry.inode, entry.is_dir)
```

`fsearch.scan.scan_directory(path)` returns the `DirEntry` items of a single directory, and
raises `fsearch.scan.ScanError` if it cannot be opened or read. `walk_tree` raises `ScanError`
for the starting path and passes errors on subdirectories to `on_error`.