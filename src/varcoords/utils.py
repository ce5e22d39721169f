from __future__ import annotations

import re
from typing import Iterable, Tuple

from .models import CigarOp, CigarUnit

_CIGAR_RE = re.compile(r"(\d+)([MIDNSHP=X])")


def unquote(s: str) -> str:
    """Strip one pair of matching quotes ('"foo"' -> 'foo'); otherwise return s."""
    if len(s) >= 2 and s[0] == s[-1] and s[0] in "\"'":
        return s[1:-1]
    return s


def ends_with(s: str, t: str) -> bool:
    return s.endswith(t)


def parse_cigar(text: str) -> Tuple[CigarUnit, ...]:
    """Parse SAM CIGAR text, e.g. '5M2I3D4S'. '*' is an empty CIGAR."""
    text = text.strip()
    if text in ("", "*"):
        return ()
    units = []
    pos = 0
    for m in _CIGAR_RE.finditer(text):
        if m.start() != pos:
            break
        units.append(CigarUnit(CigarOp.from_letter(m.group(2)), int(m.group(1))))
        pos = m.end()
    if pos != len(text):
        raise ValueError(f"Malformed CIGAR string: {text!r}")
    return tuple(units)


def format_cigar(units: Iterable[CigarUnit]) -> str:
    s = "".join(f"{u.operation_length}{u.operation.letter}" for u in units)
    return s or "*"
