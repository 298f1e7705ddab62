"""Main CLI application using Cyclopts.

The CLI resolves configuration and paths, then hands them to the services.
"""

import cyclopts
import logfire

from archview.cli.commands import config, index, nav, view
from archview.config import Config, configure_logging

app = cyclopts.App(
    name="archview",
    help="Normalized views and title indexes for ArchivesSpace JSON exports",
)

app.command(index.app, name="index")
app.command(nav.app, name="nav")
app.command(view.app, name="view")
app.command(config.app, name="config")


def main() -> None:
    configure_logging(Config().logging)
    logfire.configure(send_to_logfire="if-token-present", console=False)
    app()


if __name__ == "__main__":
    main()
