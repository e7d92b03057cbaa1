from __future__ import annotations

from pathlib import Path

import pytest

from nft_hasher.cli import main as cli_main
from nft_hasher.services import pipeline
from nft_hasher.services.hasher import SerializationError
from nft_hasher.services.pipeline import EmptyInputError, InputOutputError, process_file

"""Failed runs: every fatal error aborts the run and leaves no output file."""


def test_empty_input_raises_and_creates_no_output(write_csv):
    path = write_csv("")
    with pytest.raises(EmptyInputError):
        process_file(path)
    assert not path.with_name("nfts.output.csv").exists()


def test_blank_lines_only_is_empty_input(write_csv):
    path = write_csv("\n\n\n")
    with pytest.raises(EmptyInputError):
        process_file(path)


def test_header_only_writes_header(write_csv):
    path = write_csv("Name,Gender\n")
    result = process_file(path)
    assert result.total_rows == 0
    assert result.output_path.read_text(encoding="utf-8") == "Name,Gender,Hash\n"


def test_undecodable_input_aborts(write_csv, temp_workdir: Path):
    path = temp_workdir / "data" / "bad.csv"
    path.write_bytes(b"Name,Gender\nx,\xff\n")
    with pytest.raises(InputOutputError):
        process_file(path)
    assert not path.with_name("bad.output.csv").exists()


def test_serialization_error_aborts_whole_run(sample_csv: Path, monkeypatch):
    calls = {"n": 0}
    real = pipeline.serialize

    def flaky(obj):
        calls["n"] += 1
        if calls["n"] == 2:
            raise SerializationError("boom")
        return real(obj)

    monkeypatch.setattr(pipeline, "serialize", flaky)
    with pytest.raises(SerializationError):
        process_file(sample_csv)
    assert not sample_csv.with_name("nfts.output.csv").exists()


def test_unwritable_output_is_io_error(sample_csv: Path, temp_workdir: Path):
    target = temp_workdir / "missing_dir" / "out.csv"
    with pytest.raises(InputOutputError):
        process_file(sample_csv, output_path=target)


def test_cli_empty_input_exit_code(write_csv, capsys):
    path = write_csv("")
    code = cli_main([str(path)])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR input: empty CSV file" in out
    assert not path.with_name("nfts.output.csv").exists()


def test_cli_serialization_error_exit_code(sample_csv: Path, monkeypatch, capsys):
    def boom(obj):
        raise SerializationError("cannot serialize")

    monkeypatch.setattr(pipeline, "serialize", boom)
    code = cli_main([str(sample_csv)])
    assert code == 1
    assert "ERROR processing: cannot serialize" in capsys.readouterr().out
