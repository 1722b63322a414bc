"""Tests for the pricing data layer."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from vistara.data.components import (
    COMPONENT_CATEGORIES,
    COMPONENT_DESCRIPTIONS,
    COMPONENT_ORDER,
    SCOPE_EXCLUSIONS,
    components_in,
)
from vistara.data.location_index import CITY_ALIASES, CITY_LOCATION_MULTIPLIERS
from vistara.data.pricing_tables import PricingTable, ScaleBand
from vistara.data.repository import PricingRepository
from vistara.data.revisions import (
    CANONICAL_PRICING,
    PRICING_REVISIONS,
    get_pricing_table,
)
from vistara.exceptions import UnknownPricingRevisionError
from vistara.models.enums import (
    Component,
    CostCategory,
    ProjectScope,
    ProjectType,
    QualityTier,
)

# ---------------------------------------------------------------------------
# Component taxonomy
# ---------------------------------------------------------------------------


class TestComponents:
    def test_order_covers_every_non_civil_component(self) -> None:
        assert set(COMPONENT_ORDER) == set(Component) - {Component.CIVIL_QUALITY}
        assert len(COMPONENT_ORDER) == len(set(COMPONENT_ORDER))

    def test_every_component_has_category_and_description(self) -> None:
        for component in Component:
            assert component in COMPONENT_CATEGORIES
            assert COMPONENT_DESCRIPTIONS[component]

    def test_category_membership(self) -> None:
        assert components_in(CostCategory.CORE) == [
            Component.PLUMBING, Component.ELECTRICAL, Component.AC, Component.ELEVATOR,
        ]
        assert len(components_in(CostCategory.FINISHES)) == 5
        assert len(components_in(CostCategory.INTERIORS)) == 5
        assert components_in(CostCategory.CONSTRUCTION) == []

    def test_every_scope_has_exclusions_entry(self) -> None:
        for scope in ProjectScope:
            assert scope in SCOPE_EXCLUSIONS

    def test_core_shell_excludes_interiors(self) -> None:
        assert SCOPE_EXCLUSIONS[ProjectScope.CORE_SHELL] == frozenset(
            components_in(CostCategory.INTERIORS)
        )


# ---------------------------------------------------------------------------
# Pricing revisions
# ---------------------------------------------------------------------------


class TestRevisions:
    def test_registered_revisions(self) -> None:
        assert set(PRICING_REVISIONS) == {"canonical", "enhanced-civil", "professional"}

    @pytest.mark.parametrize("table", list(PRICING_REVISIONS.values()))
    def test_not_included_always_free(self, table: PricingTable) -> None:
        assert table.civil_quality_multipliers[QualityTier.NOT_INCLUDED] == 0.0
        for prices in table.component_prices.values():
            assert prices[QualityTier.NOT_INCLUDED] == 0.0

    @pytest.mark.parametrize("table", list(PRICING_REVISIONS.values()))
    def test_tiers_are_ascending(self, table: PricingTable) -> None:
        order = [QualityTier.STANDARD, QualityTier.PREMIUM, QualityTier.LUXURY]
        for component, prices in table.component_prices.items():
            values = [prices[t] for t in order]
            assert values == sorted(values), f"{component} tiers out of order"
        civil = [table.civil_quality_multipliers[t] for t in order]
        assert civil == sorted(civil)

    def test_canonical_constants(self) -> None:
        t = CANONICAL_PRICING
        assert t.base_rates == {
            ProjectType.RESIDENTIAL: 850.0,
            ProjectType.COMMERCIAL: 1100.0,
            ProjectType.MIXED_USE: 1300.0,
        }
        assert t.civil_quality_multipliers[QualityTier.PREMIUM] == 1.35
        assert t.civil_quality_multipliers[QualityTier.LUXURY] == 1.80
        assert t.contingency_rate == 0.06
        assert t.professional_fee_rate == 0.0
        assert t.gst_rate == 0.0
        assert t.default_location_multiplier == 0.95

    def test_get_pricing_table_case_insensitive(self) -> None:
        assert get_pricing_table("  Professional ") is PRICING_REVISIONS["professional"]

    def test_unknown_revision_raises(self) -> None:
        with pytest.raises(UnknownPricingRevisionError) as exc_info:
            get_pricing_table("2019-draft")
        assert exc_info.value.available == sorted(PRICING_REVISIONS)
        assert "2019-draft" in str(exc_info.value)

    def test_unknown_revision_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            get_pricing_table("nope")


class TestPricingTableValidation:
    def _kwargs(self) -> dict[str, object]:
        return CANONICAL_PRICING.model_dump()

    def test_missing_component_rejected(self) -> None:
        kwargs = self._kwargs()
        prices = dict(kwargs["component_prices"])  # type: ignore[call-overload]
        del prices[Component.ARTEFACTS]
        kwargs["component_prices"] = prices
        with pytest.raises(ValidationError, match="artefacts"):
            PricingTable(**kwargs)  # type: ignore[arg-type]

    def test_missing_residential_base_rate_rejected(self) -> None:
        kwargs = self._kwargs()
        kwargs["base_rates"] = {ProjectType.COMMERCIAL: 1000.0}
        with pytest.raises(ValidationError, match="residential"):
            PricingTable(**kwargs)  # type: ignore[arg-type]

    def test_unordered_scale_bands_rejected(self) -> None:
        kwargs = self._kwargs()
        kwargs["scale_bands"] = [
            ScaleBand(below_sqm=100, factor=1.03),
            ScaleBand(below_sqm=30, factor=1.10),
        ]
        with pytest.raises(ValidationError, match="ascending"):
            PricingTable(**kwargs)  # type: ignore[arg-type]

    def test_scale_factor_below_one_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScaleBand(below_sqm=30, factor=0.9)


# ---------------------------------------------------------------------------
# Location index
# ---------------------------------------------------------------------------


class TestLocationIndex:
    def test_mumbai_is_most_expensive(self) -> None:
        assert CITY_LOCATION_MULTIPLIERS["mumbai"] == 1.30
        assert max(CITY_LOCATION_MULTIPLIERS.values()) == 1.30

    def test_multipliers_in_published_range(self) -> None:
        for city, multiplier in CITY_LOCATION_MULTIPLIERS.items():
            assert 0.95 <= multiplier <= 1.30, city

    def test_aliases_point_at_known_cities(self) -> None:
        for alias, city in CITY_ALIASES.items():
            assert city in CITY_LOCATION_MULTIPLIERS, alias


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------


@pytest.fixture()
def repo() -> PricingRepository:
    return PricingRepository(CANONICAL_PRICING)


class TestRepository:
    @pytest.mark.parametrize(
        ("area_sqm", "factor"),
        [
            (0.5, 1.10),
            (29.99, 1.10),
            (30.0, 1.06),
            (49.99, 1.06),
            (50.0, 1.03),
            (99.99, 1.03),
            (100.0, 1.0),
            (5000.0, 1.0),
        ],
    )
    def test_scale_factor_bands(
        self, repo: PricingRepository, area_sqm: float, factor: float,
    ) -> None:
        assert repo.get_scale_factor(area_sqm) == factor

    def test_component_price(self, repo: PricingRepository) -> None:
        assert repo.get_component_price(Component.WINDOWS, QualityTier.PREMIUM) == 450

    def test_not_included_price_is_zero(self, repo: PricingRepository) -> None:
        for component in COMPONENT_ORDER:
            assert repo.get_component_price(component, QualityTier.NOT_INCLUDED) == 0.0

    def test_unpriced_component_is_zero(self, repo: PricingRepository) -> None:
        assert repo.get_component_price(Component.CIVIL_QUALITY, QualityTier.LUXURY) == 0.0

    def test_civil_multiplier(self, repo: PricingRepository) -> None:
        assert repo.get_civil_multiplier(QualityTier.NOT_INCLUDED) == 0.0
        assert repo.get_civil_multiplier(QualityTier.STANDARD) == 1.0
        assert repo.get_civil_multiplier(QualityTier.LUXURY) == 1.80

    def test_location_exact(self, repo: PricingRepository) -> None:
        assert repo.get_location_multiplier("Mumbai") == (1.30, None)

    def test_location_case_and_whitespace(self, repo: PricingRepository) -> None:
        assert repo.get_location_multiplier("  new   DELHI ") == (1.25, None)

    def test_location_alias(self, repo: PricingRepository) -> None:
        assert repo.get_location_multiplier("Bangalore") == (1.22, None)

    def test_location_unknown(self, repo: PricingRepository) -> None:
        multiplier, reason = repo.get_location_multiplier("Ooty")
        assert multiplier == 0.95
        assert reason is not None
        assert "Ooty" in reason

    def test_location_empty(self, repo: PricingRepository) -> None:
        multiplier, reason = repo.get_location_multiplier("")
        assert multiplier == 0.95
        assert reason is not None

    def test_base_rate(self, repo: PricingRepository) -> None:
        assert repo.get_base_rate(ProjectType.MIXED_USE) == 1300.0

    def test_revision(self, repo: PricingRepository) -> None:
        assert repo.revision == "canonical"
        assert repo.table is CANONICAL_PRICING
