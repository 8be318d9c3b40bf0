"""Provenance of an APFID experiment id.

The source is a tagged variant: ``PDBSource``, ``UserUploadSource`` and
``UnknownSource`` carry nothing, ``AlphaFoldSource`` carries the parsed
``AlphaFoldId``. ``classify_experiment`` is the only constructor used by
``Apfid``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from apfid.alphafold import AlphaFoldId
from apfid.core.logging_utils import get_logger

logger = get_logger(__name__)


class SourceKind(str, Enum):
    PDB = "PDB"
    ALPHAFOLD = "AlphaFold"
    USER_UPLOAD = "UserUpload"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class PDBSource:
    kind: ClassVar[SourceKind] = SourceKind.PDB


@dataclass(frozen=True)
class AlphaFoldSource:
    af_id: AlphaFoldId
    kind: ClassVar[SourceKind] = SourceKind.ALPHAFOLD


@dataclass(frozen=True)
class UserUploadSource:
    kind: ClassVar[SourceKind] = SourceKind.USER_UPLOAD


@dataclass(frozen=True)
class UnknownSource:
    kind: ClassVar[SourceKind] = SourceKind.UNKNOWN


Source = Union[PDBSource, AlphaFoldSource, UserUploadSource, UnknownSource]


def classify_experiment(experiment_id: str) -> tuple[str, Source]:
    """Classify an experiment id.

    Returns the experiment id to store together with its source. AlphaFold
    ids are replaced by their download form; every other id is returned
    unchanged. Raises InvalidFormatError for an ``AF``-prefixed id that is
    not a valid AlphaFold identifier.
    """
    if len(experiment_id) == 4:
        source: Source = PDBSource()
    elif experiment_id.startswith("AF"):
        af_id = AlphaFoldId(experiment_id)
        source = AlphaFoldSource(af_id)
        experiment_id = af_id.dl_id
    elif experiment_id.startswith("USR"):
        source = UserUploadSource()
    else:
        source = UnknownSource()
    logger.debug("Experiment %s classified as %s", experiment_id, source.kind.value)
    return experiment_id, source
