"""Schema for pricing table revisions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vistara.data.components import COMPONENT_ORDER
from vistara.models.enums import Component, ProjectType, QualityTier


class ScaleBand(BaseModel):
    """Premium applied to projects smaller than ``below_sqm``."""

    model_config = ConfigDict(frozen=True)

    below_sqm: float = Field(gt=0)
    factor: float = Field(ge=1.0)


class PricingTable(BaseModel):
    """A complete, self-consistent set of pricing constants.

    Several revisions of these constants have been used in production;
    each one is a ``PricingTable`` so the engine can be run against any
    of them without code changes.
    """

    model_config = ConfigDict(frozen=True)

    revision: str
    description: str
    currency: str = "INR"

    base_rates: dict[ProjectType, float]
    scale_bands: list[ScaleBand]
    civil_quality_multipliers: dict[QualityTier, float]
    component_prices: dict[Component, dict[QualityTier, float]]

    location_multipliers: dict[str, float]
    default_location_multiplier: float = Field(gt=0)

    project_type_multipliers: dict[ProjectType, float]
    complexity_step: float = Field(ge=0)
    contingency_rate: float = Field(ge=0)
    professional_fee_rate: float = Field(default=0.0, ge=0)
    gst_rate: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def every_component_is_priced(self) -> PricingTable:
        missing = [c.value for c in COMPONENT_ORDER if c not in self.component_prices]
        if missing:
            msg = f"Pricing table '{self.revision}' has no prices for: {', '.join(missing)}"
            raise ValueError(msg)
        if ProjectType.RESIDENTIAL not in self.base_rates:
            msg = f"Pricing table '{self.revision}' needs a residential base rate"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def scale_bands_ascending(self) -> PricingTable:
        bounds = [band.below_sqm for band in self.scale_bands]
        if bounds != sorted(bounds):
            msg = "scale_bands must be ordered by ascending below_sqm"
            raise ValueError(msg)
        return self
