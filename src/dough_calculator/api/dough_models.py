"""Pydantic models for the dough form payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from dough_calculator.domain.dough import DoughInputs, DoughResult, PoolishMode


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DoughRequest(_CamelModel):
    """Form fields submitted by the calculator UI."""

    balls: float | None = None
    ball_weight_g: float | None = None
    hydration_pct: float | None = None
    use_poolish: bool = False
    poolish_mode: PoolishMode = PoolishMode.PERCENT
    poolish_percent: float | None = None
    poolish_flour_fixed_g: float | None = None
    poolish_hydration_pct: float | None = None
    poolish_yeast_g: float | None = None

    def to_inputs(self) -> DoughInputs:
        """Convert the payload into domain inputs."""
        return DoughInputs(
            balls=self.balls,
            ball_weight_g=self.ball_weight_g,
            hydration_pct=self.hydration_pct,
            use_poolish=self.use_poolish,
            poolish_mode=self.poolish_mode,
            poolish_percent=self.poolish_percent,
            poolish_flour_fixed_g=self.poolish_flour_fixed_g,
            poolish_hydration_pct=self.poolish_hydration_pct,
            poolish_yeast_g=self.poolish_yeast_g,
        )


class PoolishResponse(_CamelModel):
    """Poolish quantities."""

    flour_g: float
    water_g: float
    yeast_g: float
    honey_g: float
    hydration_pct: float
    note: str | None = None


class FinalMixResponse(_CamelModel):
    """Final mix quantities."""

    flour_g: float
    water_g: float
    salt_g: float
    note: str | None = None


class DoughResponse(_CamelModel):
    """Computed recipe returned to the UI."""

    total_dough_g: float
    flour_g: float
    water_g: float
    salt_g: float
    salt_rule: str
    poolish: PoolishResponse | None
    final_mix: FinalMixResponse

    @classmethod
    def from_result(cls, result: DoughResult) -> "DoughResponse":
        """Build a response from a domain result."""
        poolish = None
        if result.poolish is not None:
            poolish = PoolishResponse(
                flour_g=result.poolish.flour_g,
                water_g=result.poolish.water_g,
                yeast_g=result.poolish.yeast_g,
                honey_g=result.poolish.honey_g,
                hydration_pct=result.poolish.hydration_pct,
                note=result.poolish.note,
            )
        return cls(
            total_dough_g=result.total_dough_g,
            flour_g=result.flour_g,
            water_g=result.water_g,
            salt_g=result.salt_g,
            salt_rule=result.salt_rule,
            poolish=poolish,
            final_mix=FinalMixResponse(
                flour_g=result.final_mix.flour_g,
                water_g=result.final_mix.water_g,
                salt_g=result.final_mix.salt_g,
                note=result.final_mix.note,
            ),
        )
