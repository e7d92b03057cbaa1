from __future__ import annotations

import csv
import re
from pathlib import Path

from nft_hasher.services.pipeline import process_file

"""Output CSV contract.

- header = input header + "Hash"
- named rows: exactly one extra cell, 64 uppercase hex chars
- unnamed rows: original cell count, unchanged
- file name: <input-stem>.output.csv, LF line endings
"""

HEX64 = re.compile(r"^[0-9A-F]{64}$")

INPUT = (
    "Series Number,Name,Gender,Attributes\n"
    "1,a,Male,hair: bald\n"
    "2,,Female\n"
    "3,c,Female,eyes: blue;hair: red;extra\n"
    ",,\n"
    "4,d\n"
)


def test_output_shape(write_csv):
    path = write_csv(INPUT, name="shape.csv")
    result = process_file(path)
    assert result.output_path.name == "shape.output.csv"

    raw = result.output_path.read_bytes()
    assert b"\r\n" not in raw

    in_rows = list(csv.reader(INPUT.splitlines()))
    with result.output_path.open(encoding="utf-8", newline="") as f:
        out_rows = list(csv.reader(f))

    assert out_rows[0] == in_rows[0] + ["Hash"]
    assert len(out_rows) == len(in_rows)
    for src, dst in zip(in_rows[1:], out_rows[1:]):
        name = src[1] if len(src) > 1 else ""
        if name:
            assert len(dst) == len(src) + 1
            assert dst[:-1] == src
            assert HEX64.match(dst[-1])
        else:
            assert dst == src
