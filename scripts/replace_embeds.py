#!/usr/bin/env python3
"""Replace GitBook embeds with Mintlify-compatible <iframe> tags in MD/MDX files.

Handles:
- blocks: {% embed url="..." %} optional caption text {% endembed %}
- one-liners: {% embed url="..." %}

Each embed becomes a single line, keeping the indentation of the start marker:
  <iframe className="w-full aspect-video rounded-xl" src="URL" title="Embedded content" frameBorder="0" allow="..." allowFullScreen></iframe>

Usage: python3 scripts/replace_embeds.py [rootDir]
"""
import re
from typing import Dict

from docs_files import TransformResult, html_escape_attr, root_from_argv, run_batch

BLOCK_RE = re.compile(
    r"^([ \t]*)\{%\s*embed\b((?:(?!%\}).)*)%\}((?:(?!\{%\s*embed\b)[\s\S])*?)\{%\s*endembed\s*%\}",
    re.MULTILINE | re.IGNORECASE,
)
SINGLE_RE = re.compile(r"^([ \t]*)\{%\s*embed\b((?:(?!%\}).)*)%\}[ \t]*(?=\r?$)", re.MULTILINE | re.IGNORECASE)
ATTR_RE = re.compile(r"""(\w+)\s*=\s*(?:"([\s\S]*?)"|'([\s\S]*?)')""")

IFRAME_ALLOW = "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
DEFAULT_TITLE = "Embedded content"

LABELS = {
    "blocks": "Embed blocks replaced",
    "singles": "Standalone embeds replaced",
}


def parse_embed_attrs(attr_text: str) -> Dict[str, str]:
    # later duplicates overwrite earlier ones
    attrs = {}
    for m in ATTR_RE.finditer(attr_text or ""):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = value.strip()
    return attrs


def build_iframe(url: str, title: str, indent: str) -> str:
    # the iframe must stay on one line
    title = " ".join((title or "").split()) or DEFAULT_TITLE
    return (
        f'{indent}<iframe className="w-full aspect-video rounded-xl" '
        f'src="{html_escape_attr(url.strip())}" title="{html_escape_attr(title)}" '
        f'frameBorder="0" allow="{IFRAME_ALLOW}" allowFullScreen></iframe>'
    )


def process_content(text: str) -> TransformResult:
    counts = {"blocks": 0, "singles": 0}

    def block_repl(m):
        indent, attr_text, inner = m.group(1), m.group(2), m.group(3)
        attrs = parse_embed_attrs(attr_text)
        url = attrs.get("url", "")
        if not url:
            return m.group(0)
        counts["blocks"] += 1
        return build_iframe(url, attrs.get("caption", "") or inner.strip(), indent)

    def single_repl(m):
        attrs = parse_embed_attrs(m.group(2))
        url = attrs.get("url", "")
        if not url:
            return m.group(0)
        counts["singles"] += 1
        return build_iframe(url, attrs.get("caption", ""), m.group(1))

    text = BLOCK_RE.sub(block_repl, text)
    text = SINGLE_RE.sub(single_repl, text)
    return TransformResult(text, any(counts.values()), counts)


def main():
    run_batch(root_from_argv(), process_content, LABELS)


if __name__ == "__main__":
    main()
