"""Title index commands."""

import json
from pathlib import Path

import cyclopts

from archview.cli.console import get_console
from archview.cli.util import datasets_for, fail
from archview.domain.browse.service.browse import BrowseService
from archview.domain.shared.error import ArchviewError

app = cyclopts.App(name="index", help="Build the alphabetical accession title index")


@app.default
def index(
    *,
    root: Path | None = None,
    html: bool = False,
    table: bool = False,
    output: Path | None = None,
) -> None:
    """Build the title index for every accession under the datasets root.

    Args:
        root: Datasets root to walk. Defaults to the configured root.
        html: Emit one rendered navigation fragment per line instead of JSON.
        table: Print a human-readable table of the sorted titles.
        output: Write the index to this file instead of stdout.
    """
    service = BrowseService(root=datasets_for(root).root)
    try:
        title_index = service.title_index()
    except ArchviewError as e:
        fail(e)

    if table:
        rows = [{"title": nav.this_label, "uri": nav.this_uri} for nav in title_index.values()]
        get_console().table(rows, [("title", "Title"), ("uri", "URI")], numbered=True)
        return

    if html:
        text = "\n".join(str(nav) for nav in title_index.values()) + "\n"
    else:
        payload = {uri: nav.as_dict() for uri, nav in title_index.items()}
        text = json.dumps(payload, indent=2, ensure_ascii=False) + "\n"

    if output is None:
        print(text, end="")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    get_console().success(f"Wrote {len(title_index)} entries to {output}")
