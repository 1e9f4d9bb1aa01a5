"""Directory scanning and concurrent recursive traversal."""

from __future__ import annotations

import os
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Optional, Set

_SKIPPED_NAMES = frozenset({".", ".."})


class ScanError(Exception):
    """Raised when a directory cannot be opened or read."""

    def __init__(self, operation: str, path: str, reason: str) -> None:
        super().__init__(f"{operation} '{path}': {reason}")
        self.operation = operation
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class DirEntry:
    """One entry found inside a directory."""

    name: str
    path: str
    inode: int
    is_dir: bool


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def scan_directory(path: str) -> List[DirEntry]:
    """Return the entries of ``path``, without ``.``, ``..`` and deleted entries.

    Entry paths are ``path + "/" + name``. Symbolic links are not followed,
    so a link to a directory is not reported as a directory.
    """
    try:
        iterator = os.scandir(path)
    except OSError as exc:
        raise ScanError("open", path, _reason(exc)) from exc

    entries: List[DirEntry] = []
    with iterator:
        try:
            for item in iterator:
                if item.name in _SKIPPED_NAMES or not item.name:
                    continue
                inode = item.inode()
                if inode == 0:
                    continue
                try:
                    is_dir = item.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append(
                    DirEntry(
                        name=item.name,
                        path=f"{path}/{item.name}",
                        inode=inode,
                        is_dir=is_dir,
                    )
                )
        except OSError as exc:
            raise ScanError("read", path, _reason(exc)) from exc
    return entries


def walk_tree(
    path: str,
    on_error: Optional[Callable[[ScanError], None]] = None,
    max_workers: Optional[int] = None,
) -> Iterator[DirEntry]:
    """Yield every entry below ``path``, scanning subdirectories in parallel.

    An error on ``path`` itself is raised; errors on subdirectories are passed
    to ``on_error`` (or dropped if it is None) and the walk goes on. The order
    of entries across directories is not fixed.
    """
    if max_workers is None:
        max_workers = (os.cpu_count() or 1) * 8
    if max_workers < 1:
        raise ValueError("max_workers must be at least 1")

    root_entries = scan_directory(path)
    pool = ThreadPoolExecutor(max_workers=max_workers)
    pending: Set[Future] = set()

    def emit(entries: Iterable[DirEntry]) -> Iterator[DirEntry]:
        for entry in entries:
            yield entry
            if entry.is_dir:
                pending.add(pool.submit(scan_directory, entry.path))

    try:
        yield from emit(root_entries)
        while pending:
            done, _ = wait(pending, return_when=FIRST_COMPLETED)
            for future in done:
                pending.discard(future)
                try:
                    entries = future.result()
                except ScanError as exc:
                    if on_error is not None:
                        on_error(exc)
                    continue
                yield from emit(entries)
    finally:
        pool.shutdown(wait=True, cancel_futures=True)