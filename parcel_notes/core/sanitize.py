from __future__ import annotations

import bleach

# Export skeleton: h1 title, h2 folders, h3 notes, <em> footer lines.
# Everything else comes from Markdown written inside note bodies (fenced_code, lists, links).
EXPORT_TAGS = frozenset({
    "h1", "h2", "h3", "h4", "h5", "h6",
    "p", "br", "hr", "em", "strong",
    "blockquote", "ul", "ol", "li",
    "code", "pre", "a",
})
EXPORT_ATTRS = {"a": ["href", "title"]}
LINK_PROTOCOLS = frozenset({"http", "https", "mailto"})


def sanitize_export_html(rendered_html: str) -> str:
    """Strip anything a note body smuggled in as raw HTML (scripts, iframes, handlers)."""
    return bleach.clean(
        rendered_html,
        tags=EXPORT_TAGS,
        attributes=EXPORT_ATTRS,
        protocols=LINK_PROTOCOLS,
        strip=True,
        strip_comments=True,
    )
