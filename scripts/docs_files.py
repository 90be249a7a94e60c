#!/usr/bin/env python3
"""
Shared helpers for the docs rewriting scripts: collect MD/MDX files under a root
and run a content transform over each of them, writing back only changed files.

Collection order follows os.scandir() order, which depends on the platform and
filesystem; callers must not rely on it being sorted.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, NamedTuple, Sequence, Tuple

DOCS_ROOT = Path(__file__).resolve().parents[1]
DOC_EXTS = (".md", ".mdx")


class TransformResult(NamedTuple):
    text: str
    changed: bool
    counts: Dict[str, int]


def html_escape_attr(value: str) -> str:
    return (
        (value or "")
        .replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def collect_files(root, exts: Sequence[str] = DOC_EXTS, collected: List[Path] = None) -> List[Path]:
    """Return files under root whose lowercased name ends with one of exts.

    Names starting with '.' are skipped, directories included. Errors while listing
    a directory are not caught.
    """
    if collected is None:
        collected = []
    root = Path(root).absolute()
    with os.scandir(root) as it:
        entries = list(it)
    for entry in entries:
        if entry.name.startswith("."):
            continue
        path = root / entry.name
        if entry.is_dir(follow_symlinks=False):
            collect_files(path, exts, collected)
        elif any(entry.name.lower().endswith(e) for e in exts):
            collected.append(path)
    return collected


def root_from_argv(argv: Sequence[str] = None) -> Path:
    argv = sys.argv[1:] if argv is None else argv
    return Path(argv[0]) if argv else DOCS_ROOT


def run_batch(
    root,
    transform: Callable[[str], TransformResult],
    labels: Dict[str, str],
) -> Tuple[int, Dict[str, int]]:
    """Apply transform to every doc under root and print what was updated.

    labels maps each count kind to the text used in the final summary line.
    Returns (files_changed, totals).
    """
    files_changed = 0
    totals = {kind: 0 for kind in labels}
    for path in collect_files(root, DOC_EXTS):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Failed to read {path} {e}", file=sys.stderr)
            continue
        result = transform(text)
        if not result.changed:
            continue
        try:
            path.write_text(result.text, encoding="utf-8")
        except OSError as e:
            print(f"Failed to write {path} {e}", file=sys.stderr)
            continue
        files_changed += 1
        for kind, count in result.counts.items():
            totals[kind] = totals.get(kind, 0) + count
        details = ", ".join(f"{kind}: {count}" for kind, count in result.counts.items())
        print(f"Updated: {path} ({details})")

    summary = " ".join(f"{labels.get(kind, kind)}: {count}." for kind, count in totals.items())
    print(f"\nDone. Files changed: {files_changed}. {summary}")
    return files_changed, totals
