from __future__ import annotations

import re

from ..models.chip0007 import Attribute

"""Attribute cell parser.

Converts free text such as 'Teeth Color: Brown, Eye Color: Blue; Hair: None'
into ordered Attribute pairs. Teams separate entries with ';', ',' and
spacing variants of both; trait and value are always separated by ':'.
"""

__all__ = [
    "parse_attributes",
    "render_attributes",
]

# Any of ";", "; ", " ;", ",", ", " collapses to the single delimiter ";"
_ENTRY_SEPARATOR = re.compile(r" ?[;,] ?")
_DELIMITER = ";"


def parse_attributes(text: str) -> list[Attribute]:
    """Parse an attributes cell. Malformed entries are dropped silently.

    An entry must contain exactly one ':'; entries with none or several are
    skipped rather than failing the row.
    """
    result: list[Attribute] = []
    if not text:
        return result
    normalized = _ENTRY_SEPARATOR.sub(_DELIMITER, text)
    for entry in normalized.split(_DELIMITER):
        parts = entry.split(":")
        if len(parts) != 2:
            continue
        trait, value = parts
        result.append(Attribute(trait_type=trait.strip(), value=value.strip().strip(",")))
    return result


def render_attributes(attributes: list[Attribute]) -> str:
    """Inverse of parse_attributes for well-formed pairs (used by --inspect-data)."""
    return "; ".join(f"{a.trait_type}: {a.value}" for a in attributes)
