"""Tests for the ordered v1/v2 grammar matcher."""

import pytest

from apfid.errors import InvalidIdentifierError
from apfid.grammar import GRAMMARS, match_apfid


def test_grammar_order() -> None:
    assert [g.name for g in GRAMMARS] == ["v1-full", "v2-full", "v1-chain", "v2-chain"]
    assert [g.version for g in GRAMMARS] == [1, 2, 1, 2]


def test_v1_full() -> None:
    m = match_apfid("1ABC_A5_B20")
    assert m.grammar == "v1-full"
    assert m.version == 1
    assert (m.experiment_id, m.chain_id, m.start, m.chain2_id, m.end) == ("1ABC", "A", 5, "B", 20)
    assert m.model == 0


def test_v1_full_dash_separator() -> None:
    m = match_apfid("1ABC_A5-B20")
    assert m.grammar == "v1-full"
    assert m.end == 20


def test_range_without_second_chain_falls_back_to_chain_only() -> None:
    m = match_apfid("1YSI_A111-191")
    assert m.grammar == "v1-chain"
    assert m.experiment_id == "1YSI"
    assert m.chain_id == "A"
    assert m.start is None
    assert m.end is None


def test_lowercase_second_chain_skips_v1_full() -> None:
    m = match_apfid("1abc_a5_b20")
    assert m.grammar == "v2-full"
    assert m.version == 2
    assert m.chain2_id == "b"


def test_v1_second_chain_class_admits_a_and_z() -> None:
    assert match_apfid("1abc_a5_z20").grammar == "v1-full"
    assert match_apfid("1abc_a5_a20").grammar == "v1-full"


def test_v2_full_with_model() -> None:
    m = match_apfid("1ABC:2_A5_B20")
    assert m.grammar == "v2-full"
    assert (m.experiment_id, m.model, m.chain_id, m.start, m.chain2_id, m.end) == ("1ABC", 2, "A", 5, "B", 20)


def test_v2_full_optional_range_separator() -> None:
    m = match_apfid("1ABC:2_A_5_B20")
    assert m.grammar == "v2-full"
    assert m.chain_id == "A"
    assert m.start == 5


def test_v2_chain_with_model() -> None:
    m = match_apfid("1ABC:3_A")
    assert m.grammar == "v2-chain"
    assert m.model == 3
    assert m.start is None


def test_two_letter_chain() -> None:
    m = match_apfid("1ABC_AB")
    assert m.chain_id == "AB"


def test_trailing_text_ignored() -> None:
    m = match_apfid("1ABC_A5_B20.cif")
    assert m.grammar == "v1-full"
    assert m.end == 20


def test_alphafold_experiment_id() -> None:
    m = match_apfid("AF-P69905-F1-V4_A")
    assert m.experiment_id == "AF-P69905-F1-V4"
    assert m.chain_id == "A"


def test_as_fields() -> None:
    fields = match_apfid("1ABC:2_A5_B20").as_fields()
    assert fields == {
        "experiment_id": "1ABC",
        "chain_id": "A",
        "start": 5,
        "end": 20,
        "model": 2,
        "chain2_id": "B",
        "version": 2,
    }


@pytest.mark.parametrize("raw", ["", "1ABC", "_A", "1ABC_", "1ABC_5", ":2_A"])
def test_invalid(raw: str) -> None:
    with pytest.raises(InvalidIdentifierError, match="Invalid apfid"):
        match_apfid(raw)


def test_same_chain_v2_range_reads_as_chain_only() -> None:
    m = match_apfid("1ABC_A5_20")
    assert m.grammar == "v1-chain"
    assert m.start is None
