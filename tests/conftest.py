# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from nft_hasher.logging.init import reset_logging

SAMPLE_CSV = (
    "TEAM NAMES,Series Number,Filename,Name,Description,Gender,Attributes,UUID\n"
    "Bevel,1,adewale-the-amebo,adewale-the-amebo,Adewale always want to be in everyone's business.,"
    "Male,\"hair: bald, eyes: black\",u1\n"
    ",2,alli-the-queeny,alli-the-queeny,Alli is an LA socialite.,Female,hair: curly; eyes: brown,u2\n"
    ",,,,,,,\n"
    "Headlight,3,aisha-the-bold,aisha-the-bold,Aisha never backs down.,Female,eyes: green,u3\n"
)


@pytest.fixture(autouse=True)
def fresh_logging():
    # Logging is configured by main() or the test body, never here
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_csv_text() -> str:
    return SAMPLE_CSV


@pytest.fixture()
def write_csv(temp_workdir: Path):
    def _write(text: str, name: str = "nfts.csv") -> Path:
        path = temp_workdir / "data" / name
        path.write_bytes(text.encode("utf-8"))
        return path
    return _write


@pytest.fixture()
def sample_csv(write_csv, sample_csv_text: str) -> Path:
    return write_csv(sample_csv_text)


@pytest.fixture()
def sample_config_yaml() -> str:
    return """format: CHIP-0007
hash_column: Hash
output_suffix: .output.csv
echo_json: false
collection:
  name: Test Collection
  id: 00000000-0000-0000-0000-000000000000
  attributes:
    type: description
    value: Test collection for unit tests.
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "nft_hasher.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
