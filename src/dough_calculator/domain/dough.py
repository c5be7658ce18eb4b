"""Dough domain models."""

from dataclasses import dataclass
from enum import Enum


class PoolishMode(str, Enum):
    """How the poolish flour quantity is specified."""

    PERCENT = "percent"
    FIXED = "fixed"


@dataclass(frozen=True)
class DoughInputs:
    """Recipe parameters as entered in the form.

    Numeric fields left as ``None`` (or zero) fall back to their defaults.
    """

    balls: float | None = None
    ball_weight_g: float | None = None
    hydration_pct: float | None = None
    use_poolish: bool = False
    poolish_mode: PoolishMode = PoolishMode.PERCENT
    poolish_percent: float | None = None
    poolish_flour_fixed_g: float | None = None
    poolish_hydration_pct: float | None = None
    poolish_yeast_g: float | None = None


@dataclass(frozen=True)
class PoolishPortion:
    """Quantities for the pre-ferment."""

    flour_g: float
    water_g: float
    yeast_g: float
    honey_g: float
    hydration_pct: float
    note: str | None = None


@dataclass(frozen=True)
class FinalMix:
    """Quantities mixed after the poolish has fermented."""

    flour_g: float
    water_g: float
    salt_g: float
    note: str | None = None


@dataclass(frozen=True)
class DoughResult:
    """Derived recipe for the whole batch."""

    total_dough_g: float
    flour_g: float
    water_g: float
    salt_g: float
    salt_rule: str
    final_mix: FinalMix
    poolish: PoolishPortion | None = None
