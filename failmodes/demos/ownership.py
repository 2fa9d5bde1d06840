# failmodes/demos/ownership.py
"""Owner and Asset: an entity whose embedded record may be absent."""

from __future__ import annotations

from dataclasses import dataclass

from failmodes.core.option import NOTHING, Nothing, Option, Some

U8_MAX = 0xFF
U16_MAX = 0xFFFF

DEMO_NAME = "Brad"
DEMO_AGE = 99
DEMO_BRAND = "bmw"
DEMO_YEAR = 2024


def _check_unsigned(field_name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{field_name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= upper:
        raise ValueError(f"{field_name} must be in 0..{upper}, got {value}")


@dataclass(frozen=True)
class Asset:
    brand: str
    year: int

    def __post_init__(self) -> None:
        _check_unsigned("Asset.year", self.year, U16_MAX)


@dataclass(frozen=True)
class Owner:
    """
    An owner with at most one asset.

    ``asset`` is ``Some(Asset)`` or ``NOTHING``; ``None`` and bare Asset
    values are rejected so an owner never holds a half-made asset.
    """
    name: str
    age: int
    asset: Option[Asset] = NOTHING

    def __post_init__(self) -> None:
        _check_unsigned("Owner.age", self.age, U8_MAX)
        if isinstance(self.asset, Some):
            if not isinstance(self.asset.value, Asset):
                raise TypeError(f"Owner.asset must wrap an Asset, got {type(self.asset.value).__name__}")
        elif not isinstance(self.asset, Nothing):
            raise TypeError(f"Owner.asset must be Some(Asset) or NOTHING, got {self.asset!r}")


def without_asset() -> Owner:
    return Owner(name=DEMO_NAME, age=DEMO_AGE, asset=NOTHING)


def with_asset() -> Owner:
    return Owner(
        name=DEMO_NAME,
        age=DEMO_AGE,
        asset=Some(Asset(brand=DEMO_BRAND, year=DEMO_YEAR)),
    )
