"""Config management commands."""

import sys
from pathlib import Path

import cyclopts
import yaml

from archview.config import Config

app = cyclopts.App(name="config", help="Manage archview configuration")

TEMPLATE = """\
# archview configuration
# Point ARCHVIEW_CONFIG_FILE at this file to use it.

datasets:
  root: "datasets"              # ArchivesSpace JSON export
  subjects: "subjects"          # relative to root
  digital_objects: "digital_objects"

# logging:
#   level: "DEBUG"
"""

DEFAULT_CONFIG_NAME = "archview.yaml"


@app.command
def init(path: Path = Path(DEFAULT_CONFIG_NAME)) -> None:
    """Create a new config file from template.

    Args:
        path: Path for the config file. Defaults to ./archview.yaml
    """
    if path.is_dir():
        print(f"Error: {path} is a directory, not a file path", file=sys.stderr)
        sys.exit(1)

    if path.exists():
        print(f"Error: {path} already exists (refusing to overwrite)", file=sys.stderr)
        sys.exit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(TEMPLATE)
    print(f"Created config at {path}")
    print(f"Use it with: export ARCHVIEW_CONFIG_FILE={path}")


@app.command
def show() -> None:
    """Print the resolved configuration as YAML."""
    config = Config()
    print(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False), end="")
