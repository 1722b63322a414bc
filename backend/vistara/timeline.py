"""Construction timeline estimation.

Durations are derived from the same inputs as cost (type, size and
complexity) but never from cost itself, so the timeline is unaffected
by pricing revisions or component tiers.
"""

from __future__ import annotations

import math

from vistara.models.enums import AreaUnit, Phase, ProjectType
from vistara.models.estimate import PHASE_MINIMUM_MONTHS, PhaseDurations, Timeline

_BASE_MONTHS: dict[Phase, int] = {
    Phase.PLANNING: 2,
    Phase.CONSTRUCTION: 6,
    Phase.INTERIORS: 2,
}

# Extra months per phase for the more involved typologies.
_TYPE_ADDITIONS: dict[ProjectType, dict[Phase, int]] = {
    ProjectType.RESIDENTIAL: {Phase.PLANNING: 0, Phase.CONSTRUCTION: 0, Phase.INTERIORS: 0},
    ProjectType.COMMERCIAL: {Phase.PLANNING: 1, Phase.CONSTRUCTION: 2, Phase.INTERIORS: 1},
    ProjectType.MIXED_USE: {Phase.PLANNING: 2, Phase.CONSTRUCTION: 4, Phase.INTERIORS: 1},
}

# Area that counts as one "size unit" in each input unit.
_SIZE_UNIT: dict[AreaUnit, float] = {
    AreaUnit.SQFT: 1000.0,
    AreaUnit.SQM: 100.0,
}

_COMPLEXITY_STEP = 0.08
MIN_COMPLEXITY = 0
MAX_COMPLEXITY = 10
NOMINAL_COMPLEXITY = 5


def clamp_complexity(complexity: int) -> int:
    return max(MIN_COMPLEXITY, min(MAX_COMPLEXITY, int(complexity)))


def estimate_timeline(
    project_type: ProjectType,
    area: float,
    area_unit: AreaUnit,
    complexity: int = NOMINAL_COMPLEXITY,
) -> Timeline:
    """Estimate phase durations in whole months.

    Args:
        project_type: Resolved project typology.
        area: Floor area in ``area_unit`` (must be positive).
        area_unit: Unit of ``area``.
        complexity: 0-10 rating; values outside the range are clamped.

    Returns:
        A Timeline whose phases each meet their minimum duration and
        whose total is the sum of the phases.
    """
    size_units = area / _SIZE_UNIT[area_unit]
    additions = _TYPE_ADDITIONS.get(project_type, _TYPE_ADDITIONS[ProjectType.RESIDENTIAL])

    planning = _BASE_MONTHS[Phase.PLANNING] + additions[Phase.PLANNING]
    construction = _BASE_MONTHS[Phase.CONSTRUCTION] + additions[Phase.CONSTRUCTION]
    interiors = _BASE_MONTHS[Phase.INTERIORS] + additions[Phase.INTERIORS]

    area_addition = math.floor(size_units / 2)
    construction += area_addition
    interiors += math.floor(area_addition / 2)

    factor = 1 + (clamp_complexity(complexity) - NOMINAL_COMPLEXITY) * _COMPLEXITY_STEP
    # Strip float noise before ceil, e.g. 25 * 1.16.
    construction = math.ceil(round(construction * factor, 9))
    interiors = math.ceil(round(interiors * factor, 9))

    phases = PhaseDurations(
        planning=max(PHASE_MINIMUM_MONTHS[Phase.PLANNING], planning),
        construction=max(PHASE_MINIMUM_MONTHS[Phase.CONSTRUCTION], construction),
        interiors=max(PHASE_MINIMUM_MONTHS[Phase.INTERIORS], interiors),
    )
    return Timeline(total_months=phases.total(), phases=phases)
