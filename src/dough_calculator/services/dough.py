"""Dough calculator based on baker's percentages."""

import logging
import math
from dataclasses import dataclass

from dough_calculator.domain.dough import (
    DoughInputs,
    DoughResult,
    FinalMix,
    PoolishMode,
    PoolishPortion,
)

# 45 g salt per 1000 ml water, 1 ml water ~ 1 g.
SALT_PER_WATER = 45 / 1000

# Honey is always added to the poolish and counts toward the total dough mass.
POOLISH_HONEY_G = 5.0

SALT_RULE = "Salt fixed: 45 g per 1000 ml water."
POOLISH_CAP_NOTE = (
    "Poolish reduced so the final-mix water does not go negative "
    "(hydration too low or poolish too large)."
)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputBounds:
    """Default and allowed range for a numeric input."""

    default: float
    minimum: float
    maximum: float | None


# A maximum of None means the bound is computed (poolish flour <= main flour).
INPUT_BOUNDS: dict[str, InputBounds] = {
    "balls": InputBounds(default=1, minimum=1, maximum=100),
    "ball_weight_g": InputBounds(default=250, minimum=150, maximum=450),
    "hydration_pct": InputBounds(default=65, minimum=50, maximum=80),
    "poolish_hydration_pct": InputBounds(default=100, minimum=60, maximum=130),
    "poolish_percent": InputBounds(default=50, minimum=0, maximum=100),
    "poolish_flour_fixed_g": InputBounds(default=300, minimum=0, maximum=None),
    "poolish_yeast_g": InputBounds(default=0, minimum=0, maximum=100),
}


def round1(value: float) -> float:
    """Round to one decimal place, halves away from zero."""
    rounded = math.floor(abs(value) * 10 + 0.5) / 10
    if value < 0 and rounded:
        return -rounded
    return rounded


def clamp(value: float, low: float, high: float) -> float:
    """Limit a value to the closed range [low, high]."""
    return min(high, max(low, value))


def _or_default(value: float | None, default: float) -> float:
    """Return the value, or the default when it is missing, zero or NaN."""
    if not value or math.isnan(value):
        return default
    return value


def _bounded(name: str, value: float | None, high: float | None = None) -> float:
    bounds = INPUT_BOUNDS[name]
    maximum = bounds.maximum if high is None else high
    return clamp(_or_default(value, bounds.default), bounds.minimum, maximum)


def compute(
    inputs: DoughInputs,
    *,
    salt_rule: str = SALT_RULE,
    cap_note: str = POOLISH_CAP_NOTE,
) -> DoughResult:
    """Compute flour, water, salt and the optional poolish split.

    Out-of-range inputs are clamped, never rejected. Headline totals are
    rounded for display while the poolish split works on the unrounded
    flour and water.
    """
    balls_bounds = INPUT_BOUNDS["balls"]
    balls = math.floor(
        clamp(
            _or_default(inputs.balls, balls_bounds.default),
            balls_bounds.minimum,
            balls_bounds.maximum,
        )
    )
    total_dough = balls * _bounded("ball_weight_g", inputs.ball_weight_g)
    hydration = _bounded("hydration_pct", inputs.hydration_pct) / 100

    honey = POOLISH_HONEY_G if inputs.use_poolish else 0.0
    effective_total = max(1.0, total_dough - honey)

    # total = flour + water + salt, water = h * flour, salt = r * water
    flour = effective_total / (1 + hydration * (1 + SALT_PER_WATER))
    water = flour * hydration
    salt = water * SALT_PER_WATER

    if not inputs.use_poolish:
        return DoughResult(
            total_dough_g=round1(total_dough),
            flour_g=round1(flour),
            water_g=round1(water),
            salt_g=round1(salt),
            salt_rule=salt_rule,
            final_mix=FinalMix(
                flour_g=round1(flour), water_g=round1(water), salt_g=round1(salt)
            ),
        )

    poolish_hydration = (
        _bounded("poolish_hydration_pct", inputs.poolish_hydration_pct) / 100
    )
    if inputs.poolish_mode == PoolishMode.FIXED:
        poolish_flour = _bounded(
            "poolish_flour_fixed_g", inputs.poolish_flour_fixed_g, high=flour
        )
    else:
        poolish_share = _bounded("poolish_percent", inputs.poolish_percent) / 100
        poolish_flour = poolish_share * flour

    note = None
    max_poolish_flour = water / poolish_hydration
    if poolish_flour > max_poolish_flour:
        poolish_flour = max_poolish_flour
        note = cap_note

    poolish_water = poolish_flour * poolish_hydration
    poolish_yeast = _bounded("poolish_yeast_g", inputs.poolish_yeast_g)

    return DoughResult(
        total_dough_g=round1(total_dough),
        flour_g=round1(flour),
        water_g=round1(water),
        salt_g=round1(salt),
        salt_rule=salt_rule,
        poolish=PoolishPortion(
            flour_g=round1(poolish_flour),
            water_g=round1(poolish_water),
            yeast_g=round1(poolish_yeast),
            honey_g=POOLISH_HONEY_G,
            hydration_pct=round1(poolish_hydration * 100),
            note=note,
        ),
        final_mix=FinalMix(
            flour_g=round1(flour - poolish_flour),
            water_g=round1(water - poolish_water),
            salt_g=round1(salt),
            note=note,
        ),
    )


@dataclass
class DoughCalculator:
    """Service exposing the dough calculation to the app."""

    salt_rule: str = SALT_RULE
    cap_note: str = POOLISH_CAP_NOTE
    debug: bool = False

    def compute(self, inputs: DoughInputs) -> DoughResult:
        """Compute a dough recipe from form inputs."""
        result = compute(inputs, salt_rule=self.salt_rule, cap_note=self.cap_note)
        if self.debug:
            _logger.info(
                "Dough computed: total=%s flour=%s water=%s salt=%s poolish=%s",
                result.total_dough_g,
                result.flour_g,
                result.water_g,
                result.salt_g,
                result.poolish is not None,
            )
            if result.final_mix.note:
                _logger.info("Poolish capped to keep final-mix water non-negative")
        return result
