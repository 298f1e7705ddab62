"""Markup for navigation elements.

Values are inserted verbatim; the output matches the fragments the
presentation templates already expect, byte for byte.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archview.domain.browse.model.nav import NavElementView

PREV_TEMPLATE = '<a class="prev-item" href="{uri}" title="{label}">prev</a>'
THIS_TEMPLATE = '<span class="this-item" data-uri="{uri}" data-title="{label}">{label}</span>'
NEXT_TEMPLATE = '<a class="next-item" href="{uri}" title="{label}">next</a>'


def render_nav(nav: "NavElementView") -> str:
    """Render prev, this and next fragments, omitting any whose URI is empty.

    Present fragments are joined by single spaces, left to right.
    """
    fragments = []
    if nav.prev_uri:
        fragments.append(PREV_TEMPLATE.format(uri=nav.prev_uri, label=nav.prev_label))
    if nav.this_uri:
        fragments.append(THIS_TEMPLATE.format(uri=nav.this_uri, label=nav.this_label))
    if nav.next_uri:
        fragments.append(NEXT_TEMPLATE.format(uri=nav.next_uri, label=nav.next_label))
    return " ".join(fragments)
