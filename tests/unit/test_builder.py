from __future__ import annotations

import dataclasses

import pytest

from nft_hasher.config.loader import DEFAULT_COLLECTION, Settings, default_settings
from nft_hasher.models.chip0007 import Attribute
from nft_hasher.models.column_index import ColumnIndex
from nft_hasher.services.builder import build_attributes, build_canonical_object, is_qualifying

HEADER_POSITIONS = {
    "name": 0,
    "description": 1,
    "gender": 2,
    "attributes": 3,
    "series number": 4,
    "team names": 5,
}
COLUMNS = ColumnIndex(positions=HEADER_POSITIONS)


def _build(row, columns=COLUMNS, **overrides):
    kwargs = dict(minting_tool="Bevel", series_number=1, series_total=10, settings=default_settings())
    kwargs.update(overrides)
    return build_canonical_object(row, columns, **kwargs)


def test_is_qualifying_uses_raw_name_cell():
    assert is_qualifying(["x"], COLUMNS)
    assert not is_qualifying([""], COLUMNS)
    assert not is_qualifying([], COLUMNS)
    # whitespace-only still counts as a name
    assert is_qualifying(["  "], COLUMNS)


def test_build_fixed_fields():
    obj = _build(["  zuri  ", " desc ", " Male ", "Teeth Color: Brown, Eye Color: Blue", "1", "Bevel"])
    assert obj.format == "CHIP-0007"
    assert obj.name == "zuri"
    assert obj.description == "desc"
    assert obj.minting_tool == "Bevel"
    assert obj.sensitive_content is False
    assert obj.series_number == 1
    assert obj.series_total == 10
    assert obj.collection == DEFAULT_COLLECTION


def test_gender_attribute_always_first():
    obj = _build(["n", "", " Male ", "Teeth Color: Brown, Eye Color: Blue"])
    assert obj.attributes == (
        Attribute("gender", "Male"),
        Attribute("Teeth Color", "Brown"),
        Attribute("Eye Color", "Blue"),
    )


def test_gender_attribute_present_even_when_empty():
    assert build_attributes(["n"], COLUMNS) == (Attribute("gender", ""),)


def test_missing_attributes_column_yields_gender_only():
    columns = ColumnIndex(positions={"name": 0, "gender": 1, "attributes": -1})
    obj = _build(["n", "Female", "hair: bald"], columns=columns)
    assert obj.attributes == (Attribute("gender", "Female"),)


def test_settings_supply_format_and_collection():
    custom = dataclasses.replace(
        DEFAULT_COLLECTION, name="Other", id="1234"
    )
    settings = Settings(format="CHIP-0007-test", collection=custom)
    obj = _build(["n"], settings=settings)
    assert obj.format == "CHIP-0007-test"
    assert obj.collection.name == "Other"


def test_canonical_object_is_frozen():
    obj = _build(["n"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        obj.name = "other"  # type: ignore[misc]
