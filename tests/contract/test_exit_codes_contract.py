from __future__ import annotations

from pathlib import Path

from nft_hasher.cli import main as cli_main

"""Exit code contract: 0 success, 1 fatal, 2 usage."""


def test_exit_code_success(sample_csv: Path, capsys):
    assert cli_main([str(sample_csv)]) == 0


def test_exit_code_usage_wrong_extension(temp_workdir: Path, capsys):
    assert cli_main(["nfts.json"]) == 2


def test_exit_code_usage_no_arguments(temp_workdir: Path, capsys):
    assert cli_main([]) == 2


def test_exit_code_fatal_empty_input(write_csv, capsys):
    assert cli_main([str(write_csv(""))]) == 1


def test_exit_code_fatal_bad_config(sample_csv: Path, temp_workdir: Path, capsys):
    cfg = temp_workdir / "config" / "nft_hasher.yml"
    cfg.write_text("unknown: 1\n", encoding="utf-8")
    assert cli_main([str(sample_csv), "--config", str(cfg)]) == 1
