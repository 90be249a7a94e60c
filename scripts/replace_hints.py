#!/usr/bin/env python3
"""Replace GitBook hint blocks with Mintlify Note tags across MD/MDX files.

- {% hint style="info" %} (any style) -> <Note>
- {% endhint %}                       -> </Note>

Markers are replaced one by one; unbalanced hints are not detected.

Usage: python3 scripts/replace_hints.py [rootDir]
"""
import re

from docs_files import TransformResult, root_from_argv, run_batch

START_RE = re.compile(r"^([ \t]*)\{%\s*hint\b(?:(?!%\}).)*%\}", re.MULTILINE)
END_RE = re.compile(r"^([ \t]*)\{%\s*endhint\s*%\}", re.MULTILINE)

LABELS = {
    "start": "Hint starts replaced",
    "end": "Hint ends replaced",
}


def process_content(text: str) -> TransformResult:
    text, starts = START_RE.subn(r"\1<Note>", text)
    text, ends = END_RE.subn(r"\1</Note>", text)
    counts = {"start": starts, "end": ends}
    return TransformResult(text, bool(starts or ends), counts)


def main():
    run_batch(root_from_argv(), process_content, LABELS)


if __name__ == "__main__":
    main()
