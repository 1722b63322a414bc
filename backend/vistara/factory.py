"""Factory functions for creating pre-configured CostEngine instances."""

from __future__ import annotations

from vistara.data.repository import PricingRepository
from vistara.data.revisions import DEFAULT_REVISION, get_pricing_table
from vistara.engine import CostEngine


def create_default_engine(revision: str = DEFAULT_REVISION) -> CostEngine:
    """Create a CostEngine wired up with a registered pricing revision.

    This is the recommended way to create a CostEngine for typical usage.
    It wires up a PricingRepository with the named revision (the
    canonical one unless told otherwise) so callers don't need to
    understand the internal wiring.

    Raises:
        UnknownPricingRevisionError: If *revision* is not registered.

    Example::

        from vistara import create_default_engine, ProjectInput

        engine = create_default_engine()
        estimate = engine.estimate(ProjectInput(project_type="residential", area=1200))
    """
    repository = PricingRepository(get_pricing_table(revision))
    return CostEngine(repository)
