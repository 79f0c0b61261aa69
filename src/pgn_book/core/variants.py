"""
Variant name normalization.

Maps free-text variant labels (PGN ``Variant`` header, user input)
onto a fixed set of canonical keys. Anything unrecognized is
treated as standard chess.
"""

from __future__ import annotations

import re
from typing import Optional

STANDARD = "standard"

VARIANTS = (
    "antichess",
    "atomic",
    "chess960",
    "crazyhouse",
    "fromposition",
    "horde",
    "kingofthehill",
    "racingkings",
    "threecheck",
    STANDARD,
)

# Alternate spellings, compared after separators are removed
_ALIASES = {
    "giveaway": "antichess",
    "koth": "kingofthehill",
    "3check": "threecheck",
}

_SEPARATORS = re.compile(r"[\s\-_]+")


def _compact(label: str) -> str:
    return _SEPARATORS.sub("", label.strip().lower())


def normalize_variant(label: Optional[str]) -> str:
    """
    Return the canonical variant key for a label.

    Case and separators are ignored, so "Chess 960", "CHESS960" and
    "chess-960" all map to "chess960". Never raises.
    """
    if not label:
        return STANDARD

    key = _compact(str(label))
    if key in VARIANTS:
        return key
    return _ALIASES.get(key, STANDARD)
