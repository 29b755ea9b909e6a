"""Shared utility functions."""

from .sequences import (
    Sequence,
    complement,
    reverse_complement,
    transcribe,
    ungap,
    join,
    count,
    contains_any,
    index,
    get_gc_fraction,
)
from .params import parse_params, as_bool, get_translation_params, get_output_params

__all__ = [
    "Sequence",
    "complement",
    "reverse_complement",
    "transcribe",
    "ungap",
    "join",
    "count",
    "contains_any",
    "index",
    "get_gc_fraction",
    "parse_params",
    "as_bool",
    "get_translation_params",
    "get_output_params",
]
