"""Filesystem operations for source discovery.

Pure extraction lives in :mod:`layerguard.domain.references`
(correct dependency direction: infrastructure -> domain). This module
handles actual file I/O and file discovery.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

SFC_SUFFIXES = frozenset({".vue", ".svelte"})


def read_source_file(path: Path) -> str:
    """Read a source file as UTF-8."""
    return path.read_text(encoding="utf-8")


def is_single_file_component(path: Path) -> bool:
    """Whether *path* holds markup with embedded ``<script>`` blocks."""
    return path.suffix.lower() in SFC_SUFFIXES


def find_source_files(
    roots: Iterable[Path],
    *,
    extensions: Iterable[str],
    exclude: Iterable[str] = (),
) -> list[Path]:
    """Discover source files under *roots*.

    Each root may be a directory (walked recursively) or a single file
    (kept if its suffix matches). Any path containing an excluded
    directory name is skipped. Results are sorted and de-duplicated.
    """
    suffixes = {ext.lower() for ext in extensions}
    skip = frozenset(exclude)

    results: set[Path] = set()
    for root in roots:
        if root.is_file():
            if root.suffix.lower() in suffixes:
                results.add(root)
            continue
        if not root.is_dir():
            continue
        for path in root.rglob("*"):
            if not path.is_file():
                continue
            if any(part in skip for part in path.relative_to(root).parts):
                continue
            if path.suffix.lower() in suffixes:
                results.add(path)

    return sorted(results)
