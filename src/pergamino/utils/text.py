"""Text helpers for Pergamino."""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for use in attribute values.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Examples:
        >>> escape_html('say "hi" & <wave>')
        'say &quot;hi&quot; &amp; &lt;wave&gt;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)
