# tests/demos/test_ownership.py
"""Owner / Asset tests - the embedded asset is fully present or absent"""

import dataclasses

import pytest

from failmodes.core.option import NOTHING, Some
from failmodes.demos.ownership import Asset, Owner, with_asset, without_asset


def test_without_asset_is_absent():
    owner = without_asset()
    assert owner.name == "Brad"
    assert owner.age == 99
    assert owner.asset is NOTHING
    assert owner.asset.is_nothing()


def test_with_asset_is_fully_populated():
    owner = with_asset()
    assert owner.asset == Some(Asset(brand="bmw", year=2024))


def test_repr_matches_console_output():
    assert repr(with_asset()) == (
        "Owner(name='Brad', age=99, asset=Some(Asset(brand='bmw', year=2024)))"
    )
    assert repr(without_asset()) == "Owner(name='Brad', age=99, asset=Nothing)"


def test_value_equality():
    assert with_asset() == with_asset()
    assert with_asset() != without_asset()


def test_entities_are_immutable():
    owner = with_asset()
    with pytest.raises(dataclasses.FrozenInstanceError):
        owner.age = 100
    with pytest.raises(dataclasses.FrozenInstanceError):
        owner.asset.value.year = 1999


def test_default_asset_is_absent():
    assert Owner(name="Ann", age=30).asset is NOTHING


@pytest.mark.parametrize("bad", [None, Asset("audi", 2020), Some("audi")])
def test_asset_must_be_an_option_of_asset(bad):
    with pytest.raises(TypeError):
        Owner(name="Ann", age=30, asset=bad)


@pytest.mark.parametrize("age", [-1, 256])
def test_age_range(age):
    with pytest.raises(ValueError):
        Owner(name="Ann", age=age)


@pytest.mark.parametrize("year", [-1, 65536])
def test_year_range(year):
    with pytest.raises(ValueError):
        Asset(brand="bmw", year=year)


def test_bool_is_not_an_integer():
    with pytest.raises(TypeError):
        Asset(brand="bmw", year=True)
