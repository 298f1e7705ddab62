"""Single-record navigation command."""

from pathlib import Path

import cyclopts

from archview.cli.util import datasets_for, fail
from archview.domain.browse.service.browse import BrowseService
from archview.domain.shared.error import ArchviewError

app = cyclopts.App(name="nav", help="Print the navigation fragment for one accession")


@app.default
def nav(uri: str, /, *, root: Path | None = None) -> None:
    """Print the prev/this/next markup for one accession.

    Args:
        uri: Accession URI, e.g. /repositories/2/accessions/1
        root: Datasets root to walk. Defaults to the configured root.
    """
    service = BrowseService(root=datasets_for(root).root)
    try:
        print(service.render(uri))
    except ArchviewError as e:
        fail(e)
