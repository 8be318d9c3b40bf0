"""The ``Apfid`` record and its construction paths.

Three ways to obtain a record:

    Apfid("1abc", "A", start=5, end=20)     # structured fields
    parse_apfid("1ABC:2_A5_B20")            # grammar matching
    Apfid.from_legacy_string("1ABC_A5_A20") # deprecated positional split

The record caches its canonical string (``str(record)``) in its own
version, upper case. ``upper()``/``lower()``/``to_string()`` format on
demand.
"""

from __future__ import annotations

import warnings
from typing import Optional

from apfid.alphafold import AlphaFoldId
from apfid.core.logging_utils import get_logger
from apfid.errors import ApfidDeprecationWarning, InvalidIdentifierError
from apfid.formatter import check_version, format_apfid
from apfid.grammar import match_apfid
from apfid.source import AlphaFoldSource, Source, classify_experiment

logger = get_logger(__name__)


class Apfid:
    """Chain (and optional residue range) within a structure entry.

    Equality covers every field including ``version``; the hash leaves
    ``version`` out since ``set_version`` can change it.
    """

    def __init__(
        self,
        experiment_id: str,
        chain_id: str,
        start: Optional[int] = None,
        end: Optional[int] = None,
        model: int = 0,
        chain2_id: Optional[str] = None,
        version: int = 1,
    ):
        if model > 0:
            version = 2
        if start == end:
            start = end = None
        self._assign(experiment_id, chain_id, start, end, model, chain2_id, version)

    def _assign(
        self,
        experiment_id: str,
        chain_id: str,
        start: Optional[int],
        end: Optional[int],
        model: int,
        chain2_id: Optional[str],
        version: int,
    ) -> None:
        self.chain_id = chain_id
        self.chain2_id = chain2_id
        self.start = start
        self.end = end
        self.model = model
        self.version = check_version(version)
        self.experiment_id, self.source = classify_experiment(experiment_id)
        self.apfid = self.to_string()

    @classmethod
    def from_legacy_string(cls, apfid: str) -> "Apfid":
        """Deprecated: build from a formatted string by splitting on ``_``.

        No grammar matching happens: ``1ABC_A`` gives chain ``A``;
        ``1ABC_A5_B20`` gives chain ``A`` (first character only), start 5
        and end 20. Model and second chain are never read. Use
        ``parse_apfid`` instead.

        The cached string is reformatted, not the input: ``str(record)`` of
        ``1abc_A5_B20`` is ``1ABC_A5_A20``.
        """
        warnings.warn(
            "Apfid.from_legacy_string is deprecated, use parse_apfid() instead",
            ApfidDeprecationWarning,
            stacklevel=2,
        )
        logger.warning("Legacy APFID construction from %r", apfid)

        split = apfid.split("_")
        if len(split) < 2 or not split[1]:
            raise InvalidIdentifierError(f"Invalid apfid {apfid}")

        start = end = None
        if len(split) == 2:
            chain_id = split[1]
        else:
            chain_id = split[1][0]
            try:
                start = int(split[1][1:])
                end = int(split[2][1:])
            except ValueError as e:
                raise InvalidIdentifierError(f"Invalid apfid {apfid}: {e}") from e

        record = cls.__new__(cls)
        record._assign(split[0], chain_id, start, end, 0, None, 1)
        return record

    # -- accessors ----------------------------------------------------------

    @property
    def af_id(self) -> Optional[AlphaFoldId]:
        """Embedded AlphaFold id, or None for other sources."""
        if isinstance(self.source, AlphaFoldSource):
            return self.source.af_id
        return None

    @property
    def id_type(self) -> str:
        """Source kind as a string (PDB, AlphaFold, UserUpload, Unknown)."""
        return self.source.kind.value

    @property
    def has_range(self) -> bool:
        return self.start is not None and self.end is not None and self.start != self.end

    # -- formatting ---------------------------------------------------------

    def set_version(self, version: int) -> None:
        """Switch grammar version and recompute the cached string.

        A record with ``model > 0`` stays on version 2.
        """
        check_version(version)
        if self.model > 0 and version != 2:
            logger.debug("Keeping version 2 for %s (model %d)", self.apfid, self.model)
            version = 2
        self.version = version
        self.apfid = self.to_string()

    def to_string(self, lower: bool = False, version: Optional[int] = None) -> str:
        return format_apfid(
            self.experiment_id,
            self.chain_id,
            start=self.start,
            end=self.end,
            model=self.model,
            chain2_id=self.chain2_id,
            version=self.version if version is None else version,
            lower=lower,
            af_id=self.af_id,
        )

    def upper(self) -> str:
        return self.to_string(lower=False)

    def lower(self) -> str:
        return self.to_string(lower=True)

    def to_dict(self) -> dict:
        """Flat dict for table / JSON usage."""
        return {
            "apfid": self.apfid,
            "experiment_id": self.experiment_id,
            "chain_id": self.chain_id,
            "chain2_id": self.chain2_id,
            "start": self.start,
            "end": self.end,
            "model": self.model,
            "version": self.version,
            "source": self.id_type,
            "alphafold_id": str(self.af_id) if self.af_id is not None else None,
        }

    def __str__(self) -> str:
        return self.apfid

    def __repr__(self) -> str:
        return f"<Apfid {self.apfid} source={self.id_type} version={self.version}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Apfid):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key()[:-1])

    def _key(self) -> tuple:
        return (
            self.experiment_id,
            self.chain_id,
            self.chain2_id,
            self.start,
            self.end,
            self.model,
            self.version,
        )


def build_apfid(**fields) -> Apfid:
    """Build a record from structured fields (keyword form of ``Apfid``)."""
    return Apfid(**fields)


def parse_apfid(apfid: str) -> Apfid:
    """Parse a raw APFID string with the v1/v2 grammars.

    Raises InvalidIdentifierError when no grammar matches.
    """
    return Apfid(**match_apfid(apfid).as_fields())
