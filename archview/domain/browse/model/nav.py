"""Navigation value objects for browsable record lists."""

from typing import Any

from pydantic import BaseModel

from archview.domain.browse.render import render_nav
from archview.domain.shared.model.value import ValueObject


class NavElementView(ValueObject):
    """Previous/next links for one record within a sorted browsing sequence."""

    this_label: str = ""
    this_uri: str = ""
    prev_label: str = ""
    prev_uri: str = ""
    next_label: str = ""
    next_uri: str = ""
    weight: int = 0  # position in the sorted sequence

    def as_dict(self) -> dict[str, Any]:
        """JSON-ready dict; empty prev/next fields are left out."""
        data = self.model_dump()
        return {k: v for k, v in data.items() if v or k in ("this_label", "this_uri", "weight")}

    def __str__(self) -> str:
        return render_nav(self)


NavView = list[NavElementView]


class PageView(BaseModel):
    """A page of content with its navigation, for rendering."""

    nav: NavView = []
    content: list[Any] = []
