"""Project-level rates and adjustment factors.

Rates are illustrative 2025 figures for oral-surgery suite build-outs; they
are static configuration, not user input.
"""

from __future__ import annotations

from dataclasses import dataclass

from alveo.models.enums import BuildingType, ProjectTimeline, ProjectType

# Base construction cost per square foot by project type.
BASE_RATES_PER_SF: dict[ProjectType, float] = {
    ProjectType.NEW_CONSTRUCTION: 200.0,
    ProjectType.RENOVATION: 150.0,
    ProjectType.TENANT_IMPROVEMENT: 125.0,
}

# Used when the project type has not been chosen yet.
DEFAULT_BASE_RATE_PER_SF: float = BASE_RATES_PER_SF[ProjectType.RENOVATION]

# Premium for the suite's position in the building.
BUILDING_TYPE_FACTORS: dict[BuildingType, float] = {
    BuildingType.GROUND_FLOOR: 1.00,
    BuildingType.UPPER_FLOOR: 1.15,
    BuildingType.BASEMENT: 1.25,
}

# Fast-track premium / extended-schedule discount.
TIMELINE_FACTORS: dict[ProjectTimeline, float] = {
    ProjectTimeline.ACCELERATED: 1.20,
    ProjectTimeline.STANDARD: 1.00,
    ProjectTimeline.RELAXED: 0.95,
}

DEFAULT_FACTOR: float = 1.00


@dataclass(frozen=True)
class ReviewRates:
    """Rates used by the review-step estimate.

    The review step prices the project with its own simplified formula:
    a flat $/SF, a timeline adjustment, and fixed adders for the rooms and
    gas outlets that dominate an oral-surgery build-out.
    """

    new_construction_rate_per_sf: float = 150.0
    other_rate_per_sf: float = 125.0
    accelerated_factor: float = 1.15
    relaxed_factor: float = 0.95
    per_treatment_room: float = 25_000.0
    per_surgical_suite: float = 45_000.0
    central_sterile_per_sf: float = 200.0
    lab_per_sf: float = 300.0
    per_gas_outlet: float = 1_500.0
    gas_system_base: float = 25_000.0


REVIEW_RATES = ReviewRates()
