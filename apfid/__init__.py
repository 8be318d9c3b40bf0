"""apfid — protein fragment identifiers for PDB, AlphaFold and uploaded structures.

Architecture:
    - alphafold.py: AlphaFoldId (AF-<UniProt>-F<n>-v<n>)
    - grammar.py: v1/v2 patterns and the ordered matcher
    - source.py: provenance variant (PDB, AlphaFold, UserUpload, Unknown)
    - formatter.py: canonical string for either grammar version
    - record.py: Apfid record, parse_apfid
    - table.py: pandas batch helpers

Usage::

    from apfid import Apfid, parse_apfid

    a = parse_apfid("1abc:2_A5_B20")
    print(a.experiment_id, a.chain_id, a.start, a.end, a.model)
    print(a.upper())          # 1ABC:2_A5_B20

    b = Apfid("AF-P69905-F1-v4", "A")
    print(b.id_type, b.upper())  # AlphaFold AF-P69905-F1-V4_A
"""

from apfid.alphafold import AlphaFoldId, parse_alphafold_id
from apfid.errors import (
    ApfidDeprecationWarning,
    ApfidError,
    InvalidFormatError,
    InvalidIdentifierError,
    UnsupportedVersionError,
)
from apfid.formatter import format_apfid
from apfid.grammar import GRAMMARS, ApfidMatch, match_apfid
from apfid.record import Apfid, build_apfid, parse_apfid
from apfid.source import (
    AlphaFoldSource,
    PDBSource,
    Source,
    SourceKind,
    UnknownSource,
    UserUploadSource,
    classify_experiment,
)

__all__ = [
    # Records
    "Apfid",
    "build_apfid",
    "parse_apfid",
    "AlphaFoldId",
    "parse_alphafold_id",
    # Grammar and formatting
    "GRAMMARS",
    "ApfidMatch",
    "match_apfid",
    "format_apfid",
    # Sources
    "Source",
    "SourceKind",
    "PDBSource",
    "AlphaFoldSource",
    "UserUploadSource",
    "UnknownSource",
    "classify_experiment",
    # Errors
    "ApfidError",
    "InvalidFormatError",
    "InvalidIdentifierError",
    "UnsupportedVersionError",
    "ApfidDeprecationWarning",
]
