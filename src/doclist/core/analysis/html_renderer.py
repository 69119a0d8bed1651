from __future__ import annotations

"""
HTML Renderer.

Converts directory groups into the heading-plus-list fragment pasted into
the CMS. Output is byte-significant: see the templates in
'doclist.domain.constants'.
"""

import html
from typing import Iterable, List

from doclist.domain.constants import HEADING_TEMPLATE, LIST_CLOSE, LIST_ITEM_TEMPLATE, LIST_OPEN
from doclist.domain.listing_models import DirectoryGroup

# Quotes use numeric entities
_QUOTE_ENTITIES = {'"': "&#34;", "'": "&#39;"}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_html(groups: Iterable[DirectoryGroup]) -> str:
    """
    Render groups as consecutive <h3>/<ul> blocks.

    Names are escaped independently (&, <, >, " and '). Blocks are joined
    without blank lines; no groups yields an empty string.

    Args:
        groups: Directory groups in output order.

    Returns:
        str: The complete fragment.
    """
    parts: List[str] = []

    for group in groups:
        parts.append(HEADING_TEMPLATE.format(name=escape_name(group.display_name)))
        parts.append(LIST_OPEN)
        for file_name in group.files:
            parts.append(LIST_ITEM_TEMPLATE.format(name=escape_name(file_name)))
        parts.append(LIST_CLOSE)

    return "".join(parts)


def escape_name(text: str) -> str:
    """Escape &, <, > as named entities and quotes as &#34; / &#39;."""
    escaped = html.escape(text, quote=False)
    for char, entity in _QUOTE_ENTITIES.items():
        escaped = escaped.replace(char, entity)
    return escaped
