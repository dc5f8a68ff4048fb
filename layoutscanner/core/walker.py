"""
Directory walker for the layout scanner.

Enumerates source files depth-first in directory-listing order. The
order is whatever ``os.scandir`` returns and differs across platforms,
so callers must not rely on it.
"""

import os
from typing import Generator, Iterable, Collection

from layoutscanner.core.errors import TraversalError


DEFAULT_EXCLUDED_DIRS = frozenset({
    "node_modules",
    "dist",
    "build",
    ".git",
    "tools",
})

DEFAULT_EXTENSIONS = (".tsx", ".ts", ".jsx", ".js")

DEFAULT_TEST_SUFFIXES = (".test.tsx", ".test.ts")


def should_scan_file(
    filename: str,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    test_suffixes: Iterable[str] = DEFAULT_TEST_SUFFIXES,
) -> bool:
    """Check whether a file name is a scannable, non-test source file."""
    return (
        filename.endswith(tuple(extensions))
        and not filename.endswith(tuple(test_suffixes))
    )


def iter_source_files(
    root: str,
    excluded_dirs: Collection[str] = DEFAULT_EXCLUDED_DIRS,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    test_suffixes: Iterable[str] = DEFAULT_TEST_SUFFIXES,
) -> Generator[str, None, None]:
    """
    Yield every scannable file under ``root``.

    Directories whose name is in ``excluded_dirs`` are skipped at any
    depth. An unreadable directory raises TraversalError instead of
    being skipped.
    """
    extensions = tuple(extensions)
    test_suffixes = tuple(test_suffixes)

    if not os.path.exists(root):
        raise TraversalError(root, FileNotFoundError("no such file or directory"))
    if not os.path.isdir(root):
        raise TraversalError(root, NotADirectoryError("not a directory"))

    try:
        with os.scandir(root) as it:
            entries = list(it)
    except OSError as e:
        raise TraversalError(root, e) from e

    for entry in entries:
        if entry.name in excluded_dirs:
            continue

        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = entry.is_file()
        except OSError as e:
            raise TraversalError(entry.path, e) from e

        if is_dir:
            yield from iter_source_files(entry.path, excluded_dirs, extensions, test_suffixes)
        elif is_file and should_scan_file(entry.name, extensions, test_suffixes):
            yield entry.path
