#!/usr/bin/env python3
"""
Fix images in MD/MDX docs:
- Unwrap <figure>...</figure> blocks containing an <img> and optional <figcaption>
- Move the figcaption text into the alt attribute of the <img>
- Deduplicate multiple alt attributes on <img>
- Ensure exactly one alt attribute on each <img> (empty if there is nothing to use)

Existing alt values are unescaped before being written back, so running the script
twice does not turn '&amp;' into '&amp;amp;'.

Usage: python3 scripts/fix_images.py [rootDir]
"""
import html
import re

from docs_files import TransformResult, html_escape_attr, root_from_argv, run_batch

FIGURE_RE = re.compile(r"<figure\b[^>]*>([\s\S]*?)</figure>")
IMG_RE = re.compile(r"<img\b[\s\S]*?>", re.IGNORECASE)
IMG_ATTRS_RE = re.compile(r"^<img\b([\s\S]*?)/?\s*>$", re.IGNORECASE)
CAPTION_RE = re.compile(r"<figcaption\b[^>]*>([\s\S]*?)</figcaption>", re.IGNORECASE)
ALT_RE = re.compile(r"""\salt\s*=\s*("[\s\S]*?"|'[\s\S]*?')""")
TAG_RE = re.compile(r"<[^>]*>")
# &nbsp; unescapes to \xa0 and is kept as part of the alt text
ASCII_SPACE = " \t\r\n\f"

LABELS = {
    "figures": "Figures unwrapped",
    "imgs": "Img tags normalized",
}


def strip_html_tags(text: str) -> str:
    return TAG_RE.sub("", text)


def normalize_img_tag(img_tag: str, fallback_alt: str = "") -> str:
    """Rewrite img_tag as '<img ATTRS alt="..." />' with exactly one alt.

    The first non-empty alt wins. A non-empty fallback_alt is used when there is no
    alt, or appended to the chosen alt when not already contained in it
    (case-insensitive).
    """
    m = IMG_ATTRS_RE.match(img_tag)
    if m:
        attrs = m.group(1)
    else:
        attrs = re.sub(r">\s*$", "", re.sub(r"^<img\b", "", img_tag, flags=re.IGNORECASE))

    alts = []
    for alt_m in ALT_RE.finditer(attrs):
        value = html.unescape(alt_m.group(1)[1:-1]).strip(ASCII_SPACE)
        if value:
            alts.append(value)
    chosen = alts[0] if alts else ""

    fallback = fallback_alt.strip(ASCII_SPACE)
    if fallback:
        if not chosen:
            chosen = fallback
        elif fallback.lower() not in chosen.lower():
            chosen = f"{chosen} {fallback}"

    attrs = ALT_RE.sub("", attrs)
    attrs = re.sub(r"\s*/\s*(?=>|\Z)", "", attrs)
    attrs = re.sub(r"\s{2,}", " ", attrs).strip()

    attrs_part = f" {attrs}" if attrs else ""
    return f'<img{attrs_part} alt="{html_escape_attr(chosen)}" />'


def process_content(text: str) -> TransformResult:
    counts = {"figures": 0, "imgs": 0}

    def unwrap_figure(m):
        inner = m.group(1)
        img_m = IMG_RE.search(inner)
        if not img_m:
            return m.group(0)
        caption = ""
        cap_m = CAPTION_RE.search(inner)
        if cap_m:
            caption = html.unescape(strip_html_tags(cap_m.group(1))).strip(ASCII_SPACE)
        counts["figures"] += 1
        # text before '<figure' is outside the match, so its indentation stays put
        return normalize_img_tag(img_m.group(0), caption)

    def normalize(m):
        normalized = normalize_img_tag(m.group(0))
        if normalized != m.group(0):
            counts["imgs"] += 1
        return normalized

    text = FIGURE_RE.sub(unwrap_figure, text)
    text = IMG_RE.sub(normalize, text)
    return TransformResult(text, any(counts.values()), counts)


def main():
    run_batch(root_from_argv(), process_content, LABELS)


if __name__ == "__main__":
    main()
