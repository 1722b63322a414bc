"""Pricing repository for looking up rates from a pricing table."""

from __future__ import annotations

from typing import TYPE_CHECKING

from vistara.data.location_index import CITY_ALIASES
from vistara.models.enums import ProjectType, QualityTier

if TYPE_CHECKING:
    from vistara.data.pricing_tables import PricingTable
    from vistara.models.enums import Component


class PricingRepository:
    """Repository for looking up rates from one pricing revision.

    Wraps a ``PricingTable`` and provides lookup methods with documented
    fallbacks. Lookups that fall back return a reason string alongside
    the value so the engine can record it as an assumption; they never
    raise for an unknown key.
    """

    def __init__(self, table: PricingTable) -> None:
        self._table = table

    @property
    def table(self) -> PricingTable:
        return self._table

    @property
    def revision(self) -> str:
        return self._table.revision

    def get_base_rate(self, project_type: ProjectType) -> float:
        """Base construction rate per sqm; residential when the type is unpriced."""
        rate = self._table.base_rates.get(project_type)
        if rate is None:
            return self._table.base_rates[ProjectType.RESIDENTIAL]
        return rate

    def get_scale_factor(self, area_sqm: float) -> float:
        """Small-project premium for *area_sqm*.

        Bands are checked smallest first; the first band whose bound the
        area falls strictly below wins.
        """
        for band in self._table.scale_bands:
            if area_sqm < band.below_sqm:
                return band.factor
        return 1.0

    def get_civil_multiplier(self, tier: QualityTier) -> float:
        if tier == QualityTier.NOT_INCLUDED:
            return 0.0
        return self._table.civil_quality_multipliers.get(tier, 0.0)

    def get_component_price(self, component: Component, tier: QualityTier) -> float:
        """Price per sqm for *component* at *tier*; not included is always 0."""
        if tier == QualityTier.NOT_INCLUDED:
            return 0.0
        return self._table.component_prices.get(component, {}).get(tier, 0.0)

    def get_location_multiplier(self, city: str) -> tuple[float, str | None]:
        """Location multiplier for *city*.

        Lookup order:
        1. City name (case-insensitive, common alternate spellings resolved)
        2. The table's default multiplier

        Returns ``(multiplier, fallback_reason)``; the reason is None when
        the city was found.
        """
        key = " ".join(city.lower().split())
        key = CITY_ALIASES.get(key, key)
        default = self._table.default_location_multiplier

        if not key:
            return default, f"No city given; used default location multiplier {default}"

        multiplier = self._table.location_multipliers.get(key)
        if multiplier is not None:
            return multiplier, None

        return default, (
            f"City '{city.strip()}' not in location index; "
            f"used default location multiplier {default}"
        )

    def get_project_multiplier(self, project_type: ProjectType) -> float:
        return self._table.project_type_multipliers.get(project_type, 1.0)

    @property
    def complexity_step(self) -> float:
        return self._table.complexity_step

    @property
    def contingency_rate(self) -> float:
        return self._table.contingency_rate

    @property
    def professional_fee_rate(self) -> float:
        return self._table.professional_fee_rate

    @property
    def gst_rate(self) -> float:
        return self._table.gst_rate
