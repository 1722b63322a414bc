"""Component taxonomy: category membership, ordering and scope exclusions."""

from __future__ import annotations

from vistara.models.enums import Component, CostCategory, ProjectScope

# Fixed accumulation order so repeated runs sum identically.
COMPONENT_ORDER: tuple[Component, ...] = (
    Component.PLUMBING,
    Component.ELECTRICAL,
    Component.AC,
    Component.ELEVATOR,
    Component.BUILDING_ENVELOPE,
    Component.LIGHTING,
    Component.WINDOWS,
    Component.CEILING,
    Component.SURFACES,
    Component.FIXED_FURNITURE,
    Component.LOOSE_FURNITURE,
    Component.FURNISHINGS,
    Component.APPLIANCES,
    Component.ARTEFACTS,
)

COMPONENT_CATEGORIES: dict[Component, CostCategory] = {
    Component.CIVIL_QUALITY: CostCategory.CONSTRUCTION,
    Component.PLUMBING: CostCategory.CORE,
    Component.ELECTRICAL: CostCategory.CORE,
    Component.AC: CostCategory.CORE,
    Component.ELEVATOR: CostCategory.CORE,
    Component.BUILDING_ENVELOPE: CostCategory.FINISHES,
    Component.LIGHTING: CostCategory.FINISHES,
    Component.WINDOWS: CostCategory.FINISHES,
    Component.CEILING: CostCategory.FINISHES,
    Component.SURFACES: CostCategory.FINISHES,
    Component.FIXED_FURNITURE: CostCategory.INTERIORS,
    Component.LOOSE_FURNITURE: CostCategory.INTERIORS,
    Component.FURNISHINGS: CostCategory.INTERIORS,
    Component.APPLIANCES: CostCategory.INTERIORS,
    Component.ARTEFACTS: CostCategory.INTERIORS,
}

COMPONENT_DESCRIPTIONS: dict[Component, str] = {
    Component.CIVIL_QUALITY: "Structure, masonry and civil works",
    Component.PLUMBING: "Water supply, drainage and sanitary fittings",
    Component.ELECTRICAL: "Wiring, switchgear and distribution boards",
    Component.AC: "Air conditioning and ventilation",
    Component.ELEVATOR: "Passenger lifts",
    Component.BUILDING_ENVELOPE: "Facade, cladding and waterproofing",
    Component.LIGHTING: "Light fixtures and controls",
    Component.WINDOWS: "Windows, glazing and external doors",
    Component.CEILING: "False ceilings and bulkheads",
    Component.SURFACES: "Flooring, wall finishes and paint",
    Component.FIXED_FURNITURE: "Built-in wardrobes, kitchens and vanities",
    Component.LOOSE_FURNITURE: "Sofas, beds, tables and chairs",
    Component.FURNISHINGS: "Curtains, rugs and soft furnishings",
    Component.APPLIANCES: "Kitchen and household appliances",
    Component.ARTEFACTS: "Art, decor and accessories",
}


def components_in(category: CostCategory) -> list[Component]:
    """Return the components of *category* in accumulation order."""
    return [c for c in COMPONENT_ORDER if COMPONENT_CATEGORIES[c] == category]


# Components a scope of work leaves out entirely.
SCOPE_EXCLUSIONS: dict[ProjectScope, frozenset[Component]] = {
    ProjectScope.INTERIOR_ONLY: frozenset({
        Component.CIVIL_QUALITY,
        Component.BUILDING_ENVELOPE,
    }),
    ProjectScope.CORE_SHELL: frozenset(components_in(CostCategory.INTERIORS)),
    ProjectScope.FULL_PROJECT: frozenset(),
    ProjectScope.FULL_LANDSCAPE: frozenset(),
    ProjectScope.RENOVATION: frozenset(),
}
