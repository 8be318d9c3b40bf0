"""APFID grammars and the ordered matcher.

Two grammar versions coexist::

    v1   1ABC_A              1ABC_A5_A20
    v2   1ABC:2_A            1ABC:2_A5_B20    1ABC_A5_20

Each version has a full (chain + residue range) and a chain-only pattern.
Candidates are tried in the order of ``GRAMMARS``; a pattern is anchored at
the start of the string but may leave trailing text unconsumed, so a
string whose range does not fit either full pattern (``1YSI_A111-191``)
still matches a chain-only pattern and loses its range. This includes the
v2 form written for a range within one chain (``1ABC_A5_20``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from apfid.core.logging_utils import get_logger
from apfid.errors import InvalidIdentifierError

logger = get_logger(__name__)

# The second chain class of the v1 full pattern is [A-Zaz], not [A-Za-z]:
# lower-case second chains other than a/z do not match it.
RG_APFID_V1_FULL = re.compile(
    r"(?P<experiment_id>[A-Za-z0-9-]+)_(?P<chain_id>[A-Za-z]{1,2})(?P<start>\d+)"
    r"[-_](?P<chain2_id>[A-Zaz]{1,2})(?P<end>\d+)"
)
RG_APFID_V2_FULL = re.compile(
    r"(?P<experiment_id>[A-Za-z0-9-]+):?(?P<model>\d*)_(?P<chain_id>[A-Za-z]{1,2})_?(?P<start>\d+)"
    r"[-_](?P<chain2_id>[A-Za-z]{1,2})(?P<end>\d+)"
)
RG_APFID_V1_CHAIN = re.compile(r"(?P<experiment_id>[A-Za-z0-9-]+)_(?P<chain_id>[A-Za-z]{1,2})")
RG_APFID_V2_CHAIN = re.compile(
    r"(?P<experiment_id>[A-Za-z0-9-]+):?(?P<model>\d*)_(?P<chain_id>[A-Za-z]{1,2})"
)


@dataclass(frozen=True)
class Grammar:
    """A named candidate pattern and the APFID version it implies."""

    name: str
    pattern: re.Pattern
    version: int


GRAMMARS: tuple[Grammar, ...] = (
    Grammar("v1-full", RG_APFID_V1_FULL, 1),
    Grammar("v2-full", RG_APFID_V2_FULL, 2),
    Grammar("v1-chain", RG_APFID_V1_CHAIN, 1),
    Grammar("v2-chain", RG_APFID_V2_CHAIN, 2),
)


@dataclass(frozen=True)
class ApfidMatch:
    """Fields extracted from a raw APFID string, already coerced."""

    experiment_id: str
    chain_id: str
    version: int
    grammar: str
    model: int = 0
    start: Optional[int] = None
    end: Optional[int] = None
    chain2_id: Optional[str] = None

    def as_fields(self) -> dict:
        """Keyword arguments for the structured Apfid constructor."""
        return {
            "experiment_id": self.experiment_id,
            "chain_id": self.chain_id,
            "start": self.start,
            "end": self.end,
            "model": self.model,
            "chain2_id": self.chain2_id,
            "version": self.version,
        }


def _to_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


def match_apfid(apfid: str) -> ApfidMatch:
    """Match ``apfid`` against the grammars in priority order.

    Raises InvalidIdentifierError when nothing matches or the winning match
    has an empty experiment or chain id.
    """
    for grammar in GRAMMARS:
        m = grammar.pattern.match(apfid)
        if m is None:
            continue
        groups = m.groupdict()
        experiment_id = groups.get("experiment_id") or ""
        chain_id = groups.get("chain_id") or ""
        if not experiment_id or not chain_id:
            break
        logger.debug("APFID %s matched %s", apfid, grammar.name)
        return ApfidMatch(
            experiment_id=experiment_id,
            chain_id=chain_id,
            version=grammar.version,
            grammar=grammar.name,
            model=_to_int(groups.get("model")) or 0,
            start=_to_int(groups.get("start")),
            end=_to_int(groups.get("end")),
            chain2_id=groups.get("chain2_id") or None,
        )
    raise InvalidIdentifierError(f"Invalid apfid {apfid}")
