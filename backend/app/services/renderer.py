import html
import re
import markdown2

_TAG_SPLIT_RE = re.compile(r"(<[^>]+>)")


def _highlight_text(node: str, pattern: re.Pattern) -> str:
    # match against the decoded text so entities like &amp; are never split
    plain = html.unescape(node)
    if not pattern.search(plain):
        return node
    pieces = pattern.split(plain)
    return "".join(
        f"<mark>{html.escape(p, quote=False)}</mark>" if i % 2 else html.escape(p, quote=False)
        for i, p in enumerate(pieces)
    )


def render_markdown(content: str, search_term: str = "") -> str:
    """Markdown to HTML, wrapping case-insensitive matches of `search_term` in <mark>."""
    rendered = markdown2.markdown(content)
    if not search_term:
        return rendered
    pattern = re.compile(f"({re.escape(search_term)})", re.IGNORECASE)
    parts = _TAG_SPLIT_RE.split(rendered)
    # odd indices are tags; only text nodes are highlighted
    for i in range(0, len(parts), 2):
        parts[i] = _highlight_text(parts[i], pattern)
    return "".join(parts)
