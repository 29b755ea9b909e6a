"""CLI subcommand implementations."""

from . import (
    summary,
    transform,
    translate,
    extract,
)

__all__ = [
    "summary",
    "transform",
    "translate",
    "extract",
]
