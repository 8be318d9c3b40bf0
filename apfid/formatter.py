"""Canonical APFID serialization for both grammar versions."""

from __future__ import annotations

from typing import Optional

from apfid.alphafold import AlphaFoldId
from apfid.errors import UnsupportedVersionError

SUPPORTED_VERSIONS = (1, 2)


def check_version(version: int) -> int:
    if version not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(version)
    return version


def format_apfid(
    experiment_id: str,
    chain_id: str,
    start: Optional[int] = None,
    end: Optional[int] = None,
    model: int = 0,
    chain2_id: Optional[str] = None,
    version: int = 1,
    lower: bool = False,
    af_id: Optional[AlphaFoldId] = None,
) -> str:
    """Build the canonical APFID string.

    The experiment token is ``af_id.psskb_id`` when an AlphaFold id is
    given, ``experiment_id`` otherwise; only the token is case-folded.

    Version 1 has no model and no second chain: a range is written as
    ``<chain><start>_<chain><end>`` with the first chain repeated.
    Version 2 writes ``:<model>`` for models above 0 and names the second
    chain only when it differs from the first.
    """
    check_version(version)

    token = af_id.psskb_id if af_id is not None else experiment_id
    token = token.lower() if lower else token.upper()

    if version == 1:
        if start == end or start is None or end is None:
            return f"{token}_{chain_id}"
        return f"{token}_{chain_id}{start}_{chain_id}{end}"

    out = token
    if model > 0:
        out += f":{model}"
    out += f"_{chain_id}"
    if start != end and start is not None and end is not None:
        out += f"{start}"
        if chain2_id is not None and chain2_id != chain_id:
            out += f"_{chain2_id}{end}"
        else:
            out += f"_{end}"
    return out
