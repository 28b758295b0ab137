"""Responsive-image URL templates.

Image URLs in the catalog may carry a placeholder path segment such as
``__w-400-600-800`` listing the widths the image host can serve. Rendering
and notification code needs one concrete URL, so the placeholder is replaced
with the first listed width (``w400``).
"""

import re

# "__w" followed by zero or more "-<token>" parts, as one whole path segment
_PLACEHOLDER_RE = re.compile(r"^__w((?:-[^-]*)*)$")


def _first_width(widths: str) -> str | None:
    """First width of a ``-400-600`` list as written, or None if unusable."""
    if not widths:
        return None
    tokens = widths[1:].split("-")
    if not all(t.isascii() and t.isdigit() for t in tokens):
        return None
    return tokens[0] if int(tokens[0]) > 0 else None


def resolve_thumbnail(url: str) -> str:
    """Rewrite the ``__w-<widths>`` segment of `url` to ``w<first width>``.

    URLs without a placeholder, with a bare ``__w``, or with a malformed
    width list are returned unchanged.
    """
    segments = url.split("/")
    for i, segment in enumerate(segments):
        match = _PLACEHOLDER_RE.match(segment)
        if match is None:
            continue
        width = _first_width(match.group(1))
        if width is None:
            return url
        segments[i] = f"w{width}"
        return "/".join(segments)
    return url
