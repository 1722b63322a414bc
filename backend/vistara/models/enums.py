"""Enums for the Vistara domain models.

These enums are the option taxonomy that indexes into the pricing
tables: quality tiers, project typologies, scopes of work and the
fifteen priced building components.
"""

from enum import StrEnum


class QualityTier(StrEnum):
    """Quality level selected for a priced component."""

    NOT_INCLUDED = "not_included"
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"


class ProjectType(StrEnum):
    """Building typology that drives the base construction rate."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    MIXED_USE = "mixed-use"


class ProjectScope(StrEnum):
    """Scope of work; decides which components are priced at all."""

    INTERIOR_ONLY = "interior-only"
    CORE_SHELL = "core-shell"
    FULL_PROJECT = "full-project"
    FULL_LANDSCAPE = "full-landscape"
    RENOVATION = "renovation"


class AreaUnit(StrEnum):
    """Unit the caller entered the floor area in."""

    SQFT = "sqft"
    SQM = "sqm"


class Component(StrEnum):
    """Priced building components.

    Values match the attribute names on ``ProjectInput``.
    """

    CIVIL_QUALITY = "civil_quality"

    # Core systems
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    AC = "ac"
    ELEVATOR = "elevator"

    # Finishes
    BUILDING_ENVELOPE = "building_envelope"
    LIGHTING = "lighting"
    WINDOWS = "windows"
    CEILING = "ceiling"
    SURFACES = "surfaces"

    # Interiors
    FIXED_FURNITURE = "fixed_furniture"
    LOOSE_FURNITURE = "loose_furniture"
    FURNISHINGS = "furnishings"
    APPLIANCES = "appliances"
    ARTEFACTS = "artefacts"


class CostCategory(StrEnum):
    """Reporting groups for the cost breakdown."""

    CONSTRUCTION = "construction"
    CORE = "core"
    FINISHES = "finishes"
    INTERIORS = "interiors"


class Phase(StrEnum):
    """Project phases used for both cost split and duration."""

    PLANNING = "planning"
    CONSTRUCTION = "construction"
    INTERIORS = "interiors"


class Confidence(StrEnum):
    """Confidence level for assumed values."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
