"""
Safe extraction of JSON payloads from objects exposing ``async json()``.
"""

from .capability import JSONABLE, Jsonable
from .outcome import (
    ExtractionFailed,
    ExtractionOutcome,
    NotJsonCapable,
    Ok,
    Outcome,
    SchemaMismatch,
)
from .parse import extract, parse

__all__ = (
    "JSONABLE",
    "ExtractionFailed",
    "ExtractionOutcome",
    "Jsonable",
    "NotJsonCapable",
    "Ok",
    "Outcome",
    "SchemaMismatch",
    "extract",
    "parse",
)
