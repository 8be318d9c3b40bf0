"""Tests for AlphaFold identifier parsing."""

import dataclasses

import pytest

from apfid.alphafold import AlphaFoldId, parse_alphafold_id
from apfid.errors import ApfidError, InvalidFormatError


def test_underscore_separated() -> None:
    af = parse_alphafold_id("AF_P12345_F2_v7")
    assert af.uniprot_id == "P12345"
    assert af.file_no == 2
    assert af.version == 7
    assert af.prefix == "AF"


def test_wrong_prefix() -> None:
    with pytest.raises(InvalidFormatError, match="does not start with AF"):
        AlphaFoldId("XY_P12345")


def test_missing_accession() -> None:
    with pytest.raises(InvalidFormatError):
        AlphaFoldId("AF")


def test_invalid_format_is_apfid_error() -> None:
    with pytest.raises(ApfidError):
        AlphaFoldId("PDB-1ABC")


def test_prefix_case_insensitive_and_defaults() -> None:
    af = AlphaFoldId("af-P69905")
    assert af.uniprot_id == "P69905"
    assert af.file_no == 1
    assert af.version == 4


def test_version_needs_fourth_token() -> None:
    af = AlphaFoldId("AF-P69905-F3")
    assert af.file_no == 3
    assert af.version == 4


def test_download_form_parses() -> None:
    af = AlphaFoldId("AF-P69905-F1-model_v4")
    assert af.file_no == 1
    assert af.version == 4
    assert af.dl_id == "AF-P69905-F1-model_v4"


def test_unrecognised_tokens_keep_defaults() -> None:
    af = AlphaFoldId("AF-P69905-X1-model")
    assert af.file_no == 1
    assert af.version == 4


def test_forms() -> None:
    af = AlphaFoldId("AF-Q8W3K0-F2-V3")
    assert str(af) == "AF-Q8W3K0-F2-v3"
    assert af.dl_id == "AF-Q8W3K0-F2-model_v3"
    assert af.psskb_id == "AF-Q8W3K0-F2-V3"


def test_frozen_and_comparable() -> None:
    af = AlphaFoldId("AF-P69905-F1-v4")
    assert af == AlphaFoldId("AF_P69905_F1_model_v4")
    with pytest.raises(dataclasses.FrozenInstanceError):
        af.version = 5
