from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class CanonicalBases(enum.Enum):
    """Groups of allowed DNA bases. Matching is uppercase only."""

    ACGT = "ACGT"
    # ACGT plus the somewhat standard N base
    ACGTN = "ACGTN"


_ALPHABETS = {
    CanonicalBases.ACGT: frozenset("ACGT"),
    CanonicalBases.ACGTN: frozenset("ACGTN"),
}


@dataclass(frozen=True)
class BaseCheck:
    """Result of ``are_canonical_bases``; truthy iff all bases were canonical."""

    ok: bool
    bad_position: Optional[int] = None

    def __bool__(self) -> bool:
        return self.ok


def is_canonical_base(base: str, canon: CanonicalBases = CanonicalBases.ACGT) -> bool:
    return base in _ALPHABETS[canon]


def are_canonical_bases(bases: str, canon: CanonicalBases = CanonicalBases.ACGT) -> BaseCheck:
    """Check that every base is in ``canon``, stopping at the first bad one.

    Raises ValueError if ``bases`` is empty.
    """
    if not bases:
        raise ValueError("bases must not be empty")
    allowed = _ALPHABETS[canon]
    for i, b in enumerate(bases):
        if b not in allowed:
            return BaseCheck(ok=False, bad_position=i)
    return BaseCheck(ok=True)
