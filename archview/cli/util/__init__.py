"""CLI utilities (config resolution, error exits)."""

from archview.cli.util.context import datasets_for, fail

__all__ = ["datasets_for", "fail"]
