"""BrowseService - title index navigation over a datasets directory."""

import logging
from pathlib import Path

import logfire

from archview.domain.browse.model.nav import NavElementView, NavView
from archview.domain.browse.render import render_nav
from archview.domain.browse.service.title_index import (
    build_accession_title_index,
    log_index_event,
)
from archview.domain.shared.error import NotFoundError
from archview.domain.shared.service import Service

logger = logging.getLogger(__name__)


class BrowseService(Service):
    """Builds the accession title index and answers navigation lookups.

    The index is rebuilt from disk on every call.
    """

    root: Path

    def title_index(self) -> dict[str, NavElementView]:
        with logfire.span("BuildAccessionTitleIndex", root=str(self.root)):
            logger.info("Making accession title index for %s", self.root)
            return build_accession_title_index(self.root, observer=log_index_event)

    def nav_view(self) -> NavView:
        """Every navigation element in sorted order."""
        return list(self.title_index().values())

    def navigation(self, uri: str) -> NavElementView:
        """Navigation element for one accession."""
        nav = self.title_index().get(uri)
        if nav is None:
            raise NotFoundError(f"No accession with URI {uri} under {self.root}")
        return nav

    def render(self, uri: str) -> str:
        """Rendered navigation fragment for one accession."""
        return render_nav(self.navigation(uri))
