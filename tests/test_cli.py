"""Tests for the ``chunkaddr`` command line inspector."""

from __future__ import annotations

import pytest
import tyro

from chunkaddr import ChunkID
from chunkaddr.cli import Config, describe, main, parse_chunk


def _rows(output: str) -> dict[str, str]:
    rows = {}
    for line in output.strip().splitlines():
        name, _, text = line.partition("|")
        rows[name.strip()] = text.strip()
    return rows


def test_describe_from_base10(capsys):
    assert main(Config(value="12345")) == 0
    rows = _rows(capsys.readouterr().out)
    assert rows["base10"] == "12345"
    assert rows["base10x10"] == "00.22.45"
    assert rows["scale_level"] == "3"
    assert rows["local_id"] == "45"
    assert rows["cluster.base10"] == "123"
    assert rows["base57"] == ChunkID.from_base10(12_345).global_id_base57


@pytest.mark.parametrize(
    "form, value, expected",
    [
        ("base10", "12345", 12_345),
        ("base10x10", "00.22.45", 12_345),
        ("base57", "dr", 3 * 57 + 17),
    ],
)
def test_parse_chunk_forms(form, value, expected):
    chunk = parse_chunk(value, form)
    assert chunk == ChunkID.from_base10(expected)
    assert dict(describe(chunk))["base10"] == str(expected)


@pytest.mark.parametrize(
    "form, value",
    [
        ("base10", "-3"),
        ("base10", "twelve"),
        ("base10x10", "0.22"),
        ("base10x10", "00.2a"),
        ("base57", "ABC"),
        ("base57", "=" * 73),
    ],
)
def test_invalid_input_exits_with_error(form, value, caplog):
    assert main(Config(value=value, form=form)) == 1
    assert "Cannot decode" in caplog.text


def test_tyro_parses_flags():
    cfg = tyro.cli(Config, args=["--value", "42", "--form", "base57"])
    assert cfg == Config(value="42", form="base57", verbose=False)

    cfg = tyro.cli(Config, args=["--value", "42", "--verbose", "True"])
    assert cfg.verbose is True


def test_tyro_booleans_need_explicit_value():
    with pytest.raises(SystemExit):
        tyro.cli(Config, args=["--value", "42", "--verbose"])
