"""AlphaFold model identifiers (``AF-<UniProt>-F<n>-v<n>``).

Accepts the separators ``-`` and ``_`` interchangeably, so the display form
(``AF-P69905-F1-v4``), the download form (``AF-P69905-F1-model_v4``) and
underscore variants (``AF_P69905_F1_v4``) all parse to the same value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from apfid.core.logging_utils import get_logger
from apfid.errors import InvalidFormatError

logger = get_logger(__name__)

_SPLIT_RE = re.compile(r"[_-]")
_FILE_NO_RE = re.compile(r"[Ff](?P<no>\d+)")
_VERSION_RE = re.compile(r"[vV](?P<no>\d+)")

DEFAULT_FILE_NO = 1
DEFAULT_VERSION = 4


@dataclass(frozen=True, init=False)
class AlphaFoldId:
    """Parsed AlphaFold identifier.

    ``file_no`` and ``version`` fall back to their defaults when the
    corresponding token is absent or does not look like ``F<n>``/``v<n>``.
    """

    uniprot_id: str
    file_no: int = DEFAULT_FILE_NO
    version: int = DEFAULT_VERSION
    prefix: str = "AF"

    def __init__(self, alphafold_id: str):
        params = _SPLIT_RE.split(alphafold_id)
        if params[0].upper() != "AF":
            raise InvalidFormatError(f"Alphafold id {alphafold_id} does not start with AF")
        if len(params) < 2 or not params[1]:
            raise InvalidFormatError(f"Alphafold id {alphafold_id} has no UniProt accession")

        file_no = DEFAULT_FILE_NO
        version = DEFAULT_VERSION

        if len(params) > 2:
            m = _FILE_NO_RE.search(params[2])
            if m:
                file_no = int(m.group("no"))

        if len(params) > 3:
            m = _VERSION_RE.search(params[-1])
            if m:
                version = int(m.group("no"))

        object.__setattr__(self, "uniprot_id", params[1])
        object.__setattr__(self, "file_no", file_no)
        object.__setattr__(self, "version", version)
        object.__setattr__(self, "prefix", "AF")
        logger.debug("Parsed AlphaFold id %s -> %s", alphafold_id, self)

    @property
    def dl_id(self) -> str:
        """Download id, as used in AlphaFold DB file names."""
        return f"{self.prefix}-{self.uniprot_id}-F{self.file_no}-model_v{self.version}"

    @property
    def psskb_id(self) -> str:
        """Form embedded as the experiment token of an APFID."""
        return f"{self.prefix}-{self.uniprot_id}-F{self.file_no}-V{self.version}"

    def __str__(self) -> str:
        return f"{self.prefix}-{self.uniprot_id}-F{self.file_no}-v{self.version}"


def parse_alphafold_id(alphafold_id: str) -> AlphaFoldId:
    """Parse an AlphaFold identifier. Raises InvalidFormatError on a bad prefix."""
    return AlphaFoldId(alphafold_id)
