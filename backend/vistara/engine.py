"""Core cost estimation engine for the Vistara estimator.

The CostEngine prices a project with a tiered component, area-rate
methodology:

1. **Validation**: Reject inputs that cannot be priced (no area, no
   project type) before any arithmetic happens.
2. **Base construction cost**: Base rate for the typology, scaled up for
   small projects and by the civil quality tier.
3. **Component aggregation**: Price each of the 14 remaining components
   at its selected tier and sum them into core, finishes and interiors.
4. **Adjustment**: Apply the location multiplier, the project-type and
   complexity multiplier, contingency, and any professional fees / GST the
   pricing revision carries.
5. **Breakdowns**: Scale each category to the adjusted total and split the
   total across planning, construction and interiors phases.
6. **Timeline**: Derive phase durations independently of cost.
7. **Assumption documentation**: Record every fallback, clamp and scope
   exclusion so estimates are transparent and traceable.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from vistara.data.components import (
    COMPONENT_CATEGORIES,
    COMPONENT_DESCRIPTIONS,
    COMPONENT_ORDER,
    SCOPE_EXCLUSIONS,
)
from vistara.exceptions import InvalidAreaError, MissingProjectTypeError
from vistara.models.enums import (
    AreaUnit,
    Component,
    Confidence,
    CostCategory,
    Phase,
    ProjectType,
    QualityTier,
)
from vistara.models.estimate import (
    AdjustmentSummary,
    Assumption,
    ComponentCost,
    CostEstimate,
    EstimateMetadata,
    ProjectSummary,
)
from vistara.timeline import NOMINAL_COMPLEXITY, clamp_complexity, estimate_timeline

if TYPE_CHECKING:
    from vistara.data.pricing_tables import PricingTable
    from vistara.data.repository import PricingRepository
    from vistara.models.project import ProjectInput

logger = logging.getLogger(__name__)

SQM_PER_SQFT = 0.092903

# Share of the total cost carried by each phase.
PHASE_COST_SHARES: dict[Phase, float] = {
    Phase.PLANNING: 0.15,
    Phase.CONSTRUCTION: 0.60,
    Phase.INTERIORS: 0.25,
}

ENGINE_VERSION = "0.1.0"

# Largest footprint priced as given (100 hectares); larger areas are clamped.
MAX_AREA_SQM = 1_000_000.0


def to_square_meters(area: float, unit: AreaUnit) -> float:
    """Convert *area* in *unit* to square metres."""
    if unit == AreaUnit.SQFT:
        return area * SQM_PER_SQFT
    return area


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class CategoryTotals:
    """Unadjusted cost per category plus the component lines behind it."""

    construction: float
    core: float
    finishes: float
    interiors: float
    lines: tuple[ComponentCost, ...] = ()

    @property
    def subtotal(self) -> float:
        return self.construction + self.core + self.finishes + self.interiors

    def as_dict(self) -> dict[CostCategory, float]:
        return {
            CostCategory.CONSTRUCTION: self.construction,
            CostCategory.CORE: self.core,
            CostCategory.FINISHES: self.finishes,
            CostCategory.INTERIORS: self.interiors,
        }


class CostEngine:
    """Estimation engine that converts a ProjectInput into a CostEstimate.

    The engine holds only a read-only pricing repository, so a single
    instance can be shared between callers and threads.

    Args:
        repository: Pricing repository wrapping the revision to price with.

    Example::

        from vistara.data.repository import PricingRepository
        from vistara.data.revisions import CANONICAL_PRICING

        engine = CostEngine(PricingRepository(CANONICAL_PRICING))
        estimate = engine.estimate(project)
    """

    def __init__(self, repository: PricingRepository) -> None:
        self._repository = repository

    @property
    def pricing_revision(self) -> str:
        return self._repository.revision

    def estimate(self, project: ProjectInput) -> CostEstimate:
        """Produce a priced, time-phased estimate for *project*.

        Raises:
            InvalidAreaError: If the area is not a positive finite number.
            MissingProjectTypeError: If no project type was selected.
        """
        assumptions: list[Assumption] = []

        # 1. Validate
        self.validate(project)
        project_type = self._resolve_project_type(project.project_type, assumptions)
        complexity = clamp_complexity(project.complexity)
        if complexity != project.complexity:
            assumptions.append(
                Assumption(
                    parameter="complexity",
                    assumed_value=str(complexity),
                    reasoning=(
                        f"Complexity {project.complexity} is outside 0-10; "
                        f"clamped to {complexity}"
                    ),
                    confidence=Confidence.MEDIUM,
                )
            )

        area, area_sqm = self._clamp_area(project, assumptions)
        excluded = SCOPE_EXCLUSIONS[project.scope]
        self._collect_scope_assumptions(project, excluded, assumptions)

        # 2-3. Base construction cost and component aggregation
        civil_tier = (
            QualityTier.NOT_INCLUDED
            if Component.CIVIL_QUALITY in excluded
            else project.civil_quality
        )
        totals = self.component_costs(project, area_sqm, excluded=excluded)
        construction = self.construction_cost(project_type, area_sqm, civil_tier)
        civil_line = ComponentCost(
            component=Component.CIVIL_QUALITY,
            category=CostCategory.CONSTRUCTION,
            tier=project.civil_quality,
            rate=self._repository.get_civil_multiplier(civil_tier),
            rate_basis="base_rate_multiplier",
            cost=construction,
            excluded_by_scope=Component.CIVIL_QUALITY in excluded,
            description=COMPONENT_DESCRIPTIONS[Component.CIVIL_QUALITY],
        )
        totals = CategoryTotals(
            construction=construction,
            core=totals.core,
            finishes=totals.finishes,
            interiors=totals.interiors,
            lines=(civil_line, *totals.lines),
        )

        # 4. Adjustments
        location_multiplier, reason = self._repository.get_location_multiplier(
            project.location.city,
        )
        if reason is not None:
            logger.warning(reason)
            assumptions.append(
                Assumption(
                    parameter="location",
                    assumed_value=str(location_multiplier),
                    reasoning=reason,
                    confidence=Confidence.LOW,
                )
            )
        adjustments = self.adjust(
            totals,
            location_multiplier=location_multiplier,
            project_type=project_type,
            complexity=complexity,
        )
        total_unrounded = (
            adjustments.adjusted_subtotal
            + adjustments.contingency
            + adjustments.professional_fees
            + adjustments.gst
        )
        total_cost = round_half_up(total_unrounded)

        # 5. Breakdowns
        category_breakdown = self._scale_categories(totals, total_unrounded)
        phase_breakdown = {
            phase: round(total_cost * share, 2)
            for phase, share in PHASE_COST_SHARES.items()
        }

        # 6. Timeline
        timeline = estimate_timeline(
            project_type, area, project.area_unit, complexity,
        )

        estimate = CostEstimate(
            project_summary=ProjectSummary(
                project_type=project_type,
                scope=project.scope,
                area=area,
                area_unit=project.area_unit,
                area_sqm=area_sqm,
                location=project.location.display,
                complexity=complexity,
            ),
            total_cost=total_cost,
            cost_per_unit_area=round(total_cost / area, 2),
            category_breakdown=category_breakdown,
            phase_breakdown=phase_breakdown,
            component_breakdown=totals.lines,
            adjustments=adjustments,
            timeline=timeline,
            assumptions=tuple(assumptions),
            metadata=EstimateMetadata(
                engine_version=ENGINE_VERSION,
                pricing_revision=self._repository.revision,
                currency=self._repository.table.currency,
            ),
        )
        logger.info(
            "Estimated %s %.1f sqm in %s: total %d over %d months (revision %s)",
            project_type.value,
            area_sqm,
            project.location.display,
            total_cost,
            timeline.total_months,
            self._repository.revision,
        )
        return estimate

    @staticmethod
    def validate(project: ProjectInput) -> None:
        """Raise if *project* is missing the fields every estimate needs."""
        if not math.isfinite(project.area) or project.area <= 0:
            raise InvalidAreaError(project.area)
        if not project.project_type:
            raise MissingProjectTypeError()

    def construction_cost(
        self,
        project_type: ProjectType,
        area_sqm: float,
        civil_quality: QualityTier,
    ) -> float:
        """Shell/structure cost: base rate x scale factor x civil multiplier x area."""
        base_rate = self._repository.get_base_rate(project_type)
        scale_factor = self._repository.get_scale_factor(area_sqm)
        quality_multiplier = self._repository.get_civil_multiplier(civil_quality)
        return base_rate * scale_factor * quality_multiplier * area_sqm

    def component_costs(
        self,
        project: ProjectInput,
        area_sqm: float,
        excluded: frozenset[Component] = frozenset(),
    ) -> CategoryTotals:
        """Sum the 14 non-civil components into core, finishes and interiors.

        The construction category is left at zero; it is filled in from
        ``construction_cost``.
        """
        sums: dict[CostCategory, float] = {
            CostCategory.CORE: 0.0,
            CostCategory.FINISHES: 0.0,
            CostCategory.INTERIORS: 0.0,
        }
        lines: list[ComponentCost] = []

        for component in COMPONENT_ORDER:
            selected = project.tier_for(component)
            is_excluded = component in excluded
            tier = QualityTier.NOT_INCLUDED if is_excluded else selected
            rate = self._repository.get_component_price(component, tier)
            cost = rate * area_sqm
            category = COMPONENT_CATEGORIES[component]
            sums[category] += cost
            lines.append(
                ComponentCost(
                    component=component,
                    category=category,
                    tier=selected,
                    rate=rate,
                    cost=cost,
                    excluded_by_scope=is_excluded,
                    description=COMPONENT_DESCRIPTIONS[component],
                )
            )

        return CategoryTotals(
            construction=0.0,
            core=sums[CostCategory.CORE],
            finishes=sums[CostCategory.FINISHES],
            interiors=sums[CostCategory.INTERIORS],
            lines=tuple(lines),
        )

    def adjust(
        self,
        totals: CategoryTotals,
        location_multiplier: float,
        project_type: ProjectType,
        complexity: int = NOMINAL_COMPLEXITY,
    ) -> AdjustmentSummary:
        """Apply location, project/complexity, contingency, fees and GST."""
        subtotal = totals.subtotal
        project_multiplier = self.project_multiplier(project_type, complexity)

        adjusted = subtotal * location_multiplier * project_multiplier
        contingency = adjusted * self._repository.contingency_rate
        professional_fees = (adjusted + contingency) * self._repository.professional_fee_rate
        gst = (adjusted + contingency + professional_fees) * self._repository.gst_rate

        return AdjustmentSummary(
            subtotal=subtotal,
            location_multiplier=location_multiplier,
            project_multiplier=project_multiplier,
            adjusted_subtotal=adjusted,
            contingency=contingency,
            professional_fees=professional_fees,
            gst=gst,
        )

    def project_multiplier(self, project_type: ProjectType, complexity: int) -> float:
        """Typology multiplier scaled by how far complexity sits from nominal."""
        base = self._repository.get_project_multiplier(project_type)
        complexity_adj = (clamp_complexity(complexity) - NOMINAL_COMPLEXITY) * (
            self._repository.complexity_step
        )
        return base * (1 + complexity_adj)

    @staticmethod
    def _scale_categories(
        totals: CategoryTotals,
        total_unrounded: float,
    ) -> dict[CostCategory, float]:
        """Carry each raw category through the same adjustments as the total."""
        subtotal = totals.subtotal
        factor = total_unrounded / subtotal if subtotal > 0 else 0.0
        return {
            category: round(cost * factor, 2)
            for category, cost in totals.as_dict().items()
        }

    @staticmethod
    def _clamp_area(
        project: ProjectInput,
        assumptions: list[Assumption],
    ) -> tuple[float, float]:
        """Return (area in the project's unit, area in sqm), capped at MAX_AREA_SQM."""
        area_sqm = to_square_meters(project.area, project.area_unit)
        if area_sqm <= MAX_AREA_SQM:
            return project.area, area_sqm

        area = (
            MAX_AREA_SQM / SQM_PER_SQFT
            if project.area_unit == AreaUnit.SQFT
            else MAX_AREA_SQM
        )
        reason = (
            f"Area {project.area:g} {project.area_unit.value} exceeds the "
            f"{MAX_AREA_SQM:,.0f} sqm pricing ceiling; clamped to {area:,.0f} "
            f"{project.area_unit.value}"
        )
        logger.warning(reason)
        assumptions.append(
            Assumption(
                parameter="area",
                assumed_value=f"{area:g}",
                reasoning=reason,
                confidence=Confidence.LOW,
            )
        )
        return area, MAX_AREA_SQM

    @staticmethod
    def _resolve_project_type(
        raw: str,
        assumptions: list[Assumption],
    ) -> ProjectType:
        key = raw.strip().lower().replace("_", "-").replace(" ", "-")
        try:
            return ProjectType(key)
        except ValueError:
            pass
        reason = f"Project type '{raw}' is not priced; used residential rates"
        logger.warning(reason)
        assumptions.append(
            Assumption(
                parameter="project_type",
                assumed_value=ProjectType.RESIDENTIAL.value,
                reasoning=reason,
                confidence=Confidence.LOW,
            )
        )
        return ProjectType.RESIDENTIAL

    @staticmethod
    def _collect_scope_assumptions(
        project: ProjectInput,
        excluded: frozenset[Component],
        assumptions: list[Assumption],
    ) -> None:
        """Record components the scope of work left out despite a selection."""
        for component in (Component.CIVIL_QUALITY, *COMPONENT_ORDER):
            if component not in excluded:
                continue
            if project.tier_for(component) == QualityTier.NOT_INCLUDED:
                continue
            assumptions.append(
                Assumption(
                    parameter=component.value,
                    assumed_value=QualityTier.NOT_INCLUDED.value,
                    reasoning=(
                        f"Scope '{project.scope.value}' excludes {component.value}; "
                        f"selected tier '{project.tier_for(component).value}' ignored"
                    ),
                    confidence=Confidence.HIGH,
                )
            )


def compute_estimate(
    project: ProjectInput,
    pricing: PricingTable | None = None,
) -> CostEstimate:
    """Estimate *project* against *pricing* (the canonical revision by default).

    This is the single entry point collaborators call; it is pure and
    safe to call concurrently.
    """
    from vistara.factory import create_default_engine

    if pricing is None:
        return create_default_engine().estimate(project)

    from vistara.data.repository import PricingRepository

    return CostEngine(PricingRepository(pricing)).estimate(project)
