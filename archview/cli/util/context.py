import sys
from pathlib import Path
from typing import NoReturn

from archview.cli.console import get_console
from archview.config import Config, DatasetsConfig
from archview.domain.shared.error import ArchviewError


def datasets_for(root: Path | None) -> DatasetsConfig:
    """Dataset layout from config, with `root` overriding the configured root."""
    datasets = Config().datasets
    if root is not None:
        datasets = datasets.model_copy(update={"root": root})
    return datasets


def fail(err: ArchviewError | str) -> NoReturn:
    """Report an error on stderr and exit 1."""
    message = err.message if isinstance(err, ArchviewError) else err
    get_console().error(message)
    sys.exit(1)
