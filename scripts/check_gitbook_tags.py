#!/usr/bin/env python3
"""
Check MD/MDX docs for GitBook template tags ({% ... %}) left behind after migration,
e.g. {% tabs %}, {% content-ref %} or embeds without a url.

Each file is rendered with Python-Markdown; <pre> and <code> elements are dropped so
tags shown as examples in code are not reported, and the remaining HTML tags are
stripped before scanning.

Usage:
  ./scripts/check_gitbook_tags.py [root]

Exit codes:
  0: No leftover tags found (clean)
  1: Leftover tags found
  2: A file could not be read
"""
from __future__ import annotations

import argparse
import html
import re
import sys
from collections import Counter
from pathlib import Path
from typing import List, Tuple

from markdown import markdown

from docs_files import DOC_EXTS, DOCS_ROOT, collect_files

EXTENSIONS = ["fenced_code", "tables"]

CODE_RE = re.compile(r"<(pre|code)\b[^>]*>[\s\S]*?</\1>", re.IGNORECASE)
TAG_RE = re.compile(r"<[^>]*>")
GITBOOK_TAG_RE = re.compile(r"\{%\s*([\w-]+)(?:(?!%\}).)*%\}")
FENCE_RE = re.compile(r"^[ \t]*(`{3,}|~{3,})[^\n]*\n[\s\S]*?^[ \t]*\1[ \t]*$", re.MULTILINE)
INLINE_CODE_RE = re.compile(r"(`+)[^`\n][\s\S]*?\1")


def visible_text(md_text: str) -> str:
    rendered = markdown(md_text, extensions=EXTENSIONS)
    rendered = CODE_RE.sub("", rendered)
    return html.unescape(TAG_RE.sub("", rendered))


def mask_source_code(md_text: str) -> str:
    """Blank out fenced blocks and inline code spans, keeping newlines and offsets."""
    def blank(m):
        return re.sub(r"[^\n]", " ", m.group(0))

    return INLINE_CODE_RE.sub(blank, FENCE_RE.sub(blank, md_text))


def find_leftover_tags(md_text: str) -> List[Tuple[int, str, str]]:
    """Return (line_no, tag_name, tag_text) for each GitBook tag visible in the rendered page.

    line_no is the line of the tag in md_text. Tags are matched back to the source in
    order; a tag whose text rendering changed is located by its name instead.
    """
    source = mask_source_code(md_text)
    out = []
    pos = 0
    for m in GITBOOK_TAG_RE.finditer(visible_text(md_text)):
        name = m.group(1).lower()
        idx = source.find(m.group(0), pos)
        end = idx + len(m.group(0))
        if idx < 0:
            src_m = re.compile(r"\{%\s*" + re.escape(m.group(1)) + r"\b", re.IGNORECASE).search(source, pos)
            idx = src_m.start() if src_m else pos
            end = src_m.end() if src_m else pos
        pos = end
        out.append((source.count("\n", 0, idx) + 1, name, m.group(0)))
    return out


def check_tree(root) -> Tuple[Counter, int]:
    """Print leftover tags under root. Returns (tally by tag name, unreadable file count)."""
    tally: Counter = Counter()
    errors = 0
    for path in collect_files(root, DOC_EXTS):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"ERROR: Could not read {path}: {e}", file=sys.stderr)
            errors += 1
            continue
        for line_no, name, tag in find_leftover_tags(text):
            print(f"{path}:{line_no}: {tag}")
            tally[name] += 1
    return tally, errors


def main() -> None:
    parser = argparse.ArgumentParser(description="Report GitBook {% ... %} tags left in MD/MDX docs")
    parser.add_argument("root", nargs="?", default=str(DOCS_ROOT), help="Directory to scan (default: repository root)")
    args = parser.parse_args()

    print("Scanning markdown files under:", Path(args.root))
    tally, errors = check_tree(args.root)
    if tally:
        print("\nLeftover GitBook tags:")
        for name, count in tally.most_common():
            print(f" - {name}: {count}")
    else:
        print("No leftover GitBook tags found.")
    if errors:
        sys.exit(2)
    sys.exit(1 if tally else 0)


if __name__ == "__main__":
    main()
