"""HTML snippets for showing document text verbatim in the Streamlit app.

``st.markdown`` would otherwise read ``*``, ``_``, ``#`` and paired ``$``
amounts in contract text as formatting or LaTeX.
"""

from __future__ import annotations

import html


def escape_text(text: str) -> str:
    """Escape *text* so Markdown, math and HTML parsing leave it unchanged."""
    escaped = html.escape(text)
    escaped = escaped.replace("$", "&#36;")
    return escaped.replace("\n", "<br>")


def html_block(text: str, css_class: str, label: str | None = None) -> str:
    """Wrap escaped *text* in a single-line ``<div>`` with an optional bold label."""
    prefix = f"<b>{html.escape(label)}</b> " if label else ""
    return f'<div class="{css_class}">{prefix}{escape_text(text)}</div>'
