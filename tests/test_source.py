"""Tests for experiment source classification."""

import pytest

from apfid.errors import InvalidFormatError
from apfid.source import (
    AlphaFoldSource,
    PDBSource,
    SourceKind,
    UnknownSource,
    UserUploadSource,
    classify_experiment,
)


def test_pdb() -> None:
    exp, source = classify_experiment("1abc")
    assert exp == "1abc"
    assert isinstance(source, PDBSource)
    assert source.kind is SourceKind.PDB


def test_four_characters_win_over_af_prefix() -> None:
    _, source = classify_experiment("AFXY")
    assert isinstance(source, PDBSource)


def test_alphafold_rewrites_experiment_id() -> None:
    exp, source = classify_experiment("AF-P69905-F1-v4")
    assert isinstance(source, AlphaFoldSource)
    assert source.kind.value == "AlphaFold"
    assert source.af_id.uniprot_id == "P69905"
    assert exp == "AF-P69905-F1-model_v4"


def test_alphafold_prefix_is_case_sensitive() -> None:
    exp, source = classify_experiment("af-P69905-F1-v4")
    assert isinstance(source, UnknownSource)
    assert exp == "af-P69905-F1-v4"


def test_malformed_alphafold_id() -> None:
    with pytest.raises(InvalidFormatError):
        classify_experiment("AFX12345")


def test_user_upload() -> None:
    _, source = classify_experiment("USR000123")
    assert isinstance(source, UserUploadSource)
    assert source.kind.value == "UserUpload"


def test_unknown() -> None:
    _, source = classify_experiment("EMD-1234")
    assert isinstance(source, UnknownSource)
    assert source.kind.value == "Unknown"
