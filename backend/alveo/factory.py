"""Factory functions for creating pre-configured CostEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from alveo.data.breakdown import COST_BREAKDOWN_CATEGORIES
from alveo.data.medical_gas import GAS_SYSTEM_RATES
from alveo.data.regional_multipliers import STATE_COST_MULTIPLIERS
from alveo.data.repository import CostDataRepository
from alveo.data.room_categories import ROOM_CATEGORIES
from alveo.engine import CostEngine
from alveo.models.project import RoomEntry

if TYPE_CHECKING:
    from alveo.models.enums import RoomCategory


def create_default_engine() -> CostEngine:
    """Create a CostEngine wired up with the built-in rate tables.

    This is the recommended way to create a CostEngine for typical usage.
    It wires up a CostDataRepository with the default room categories,
    regional multipliers, gas rates and breakdown categories so callers
    don't need to understand the internal wiring.

    Returns:
        A CostEngine ready to produce estimates.

    Example::

        from alveo import create_default_engine, ProjectConfiguration

        engine = create_default_engine()
        cost = engine.estimate_whole_building_cost(config)
    """
    repository = CostDataRepository(
        room_categories=ROOM_CATEGORIES,
        regional_multipliers=STATE_COST_MULTIPLIERS,
        gas_rates=GAS_SYSTEM_RATES,
        breakdown_categories=COST_BREAKDOWN_CATEGORIES,
    )
    return CostEngine(repository)


def default_room_configuration() -> dict[RoomCategory, RoomEntry]:
    """The room program the wizard starts from: default counts at recommended sizes."""
    return {
        spec.category: RoomEntry(count=spec.default_count, sqft=spec.recommended_sqft)
        for spec in ROOM_CATEGORIES
    }
