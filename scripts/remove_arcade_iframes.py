#!/usr/bin/env python3
"""Replace iframes pointing to app.arcade.software with their raw URLs.

    <iframe src="https://app.arcade.software/share/xyz" ...></iframe>
becomes
    https://app.arcade.software/share/xyz

Usage: python3 scripts/remove_arcade_iframes.py [rootDir]
"""
import re

from docs_files import TransformResult, root_from_argv, run_batch

# whole iframe, possibly over several lines; group 1 is the indentation, group 2 the src
IFRAME_RE = re.compile(
    r"""^([ \t]*)<iframe\b[^>]*\ssrc=["'](https?://app\.arcade\.software/[^"']+)["'](?:(?!</iframe>)[\s\S])*?</iframe>[ \t]*(?=\r?$)""",
    re.MULTILINE | re.IGNORECASE,
)

LABELS = {"iframes": "Arcade iframes removed"}


def process_content(text: str) -> TransformResult:
    text, replaced = IFRAME_RE.subn(lambda m: m.group(1) + m.group(2), text)
    return TransformResult(text, replaced > 0, {"iframes": replaced})


def main():
    run_batch(root_from_argv(), process_content, LABELS)


if __name__ == "__main__":
    main()
