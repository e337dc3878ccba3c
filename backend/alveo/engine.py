"""Core cost estimation engine for the Alveo cost estimation library.

The CostEngine prices an oral-surgery build-out with three independent
strategies, one per wizard stage. The three figures are not reconciled:

1. **Whole-building**: base $/SF for the project type, adjusted for the
   suite's floor, the schedule and the state, times total square footage.
2. **Room-by-room**: each room category priced as count x area x base $/SF
   x the category's cost multiplier x the regional multiplier, rounded per
   category.
3. **Review**: the review step's simplified formula, a flat $/SF plus fixed
   adders for treatment rooms, surgical suites, sterile processing, lab
   space and medical gas.

Medical gas is priced separately per system, and any total can be
partitioned into construction categories with :meth:`build_cost_breakdown`.

Every operation is a pure function of its input. Missing sections and
unset choices fall back to documented defaults; nothing raises for a
configuration of the accepted shape.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from alveo.formatting import round_half_up
from alveo.models.enums import GasSystem, ProjectTimeline, ProjectType
from alveo.models.estimate import (
    CostBreakdown,
    GasSystemCost,
    MedicalGasEstimate,
    ProjectEstimate,
    RoomCostEstimate,
    RoomCostLine,
)
from alveo.models.project import MedicalGasRequirements, ProjectConfiguration

if TYPE_CHECKING:
    from alveo.data.repository import CostDataRepository

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"
COST_DATA_VERSION = "2025.1"

ConfigurationInput = ProjectConfiguration | Mapping[str, Any]


def as_configuration(config: ConfigurationInput) -> ProjectConfiguration:
    if isinstance(config, ProjectConfiguration):
        return config
    return ProjectConfiguration.model_validate(dict(config))


def _finite_or_zero(total: float) -> float:
    if math.isfinite(total):
        return total
    logger.debug("Non-finite total %r; treating it as zero", total)
    return 0.0


class CostEngine:
    """Stateless estimator over a cost data repository.

    Args:
        repository: The cost data repository providing rates, multipliers
            and breakdown fractions.

    Example::

        from alveo.data.repository import CostDataRepository

        engine = CostEngine(CostDataRepository())
        cost = engine.estimate_whole_building_cost(config)
    """

    def __init__(self, repository: CostDataRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> CostDataRepository:
        return self._repository

    # ------------------------------------------------------------------
    # Whole-building estimate
    # ------------------------------------------------------------------

    def adjusted_rate_per_sqft(self, config: ConfigurationInput) -> float:
        """Base $/SF after floor, timeline and regional adjustments."""
        config = as_configuration(config)
        repo = self._repository
        rate = repo.get_base_rate(config.project_type)
        rate *= repo.get_building_type_factor(config.building_type)
        rate *= repo.get_timeline_factor(config.timeline)
        rate *= repo.get_regional_multiplier(config.location.state)
        return rate

    def estimate_whole_building_cost(self, config: ConfigurationInput) -> int:
        """Coarse estimate: adjusted $/SF times total square footage."""
        config = as_configuration(config)
        rate = self.adjusted_rate_per_sqft(config)
        return round_half_up(config.total_square_footage * rate)

    # ------------------------------------------------------------------
    # Room-by-room estimate
    # ------------------------------------------------------------------

    def estimate_room_configuration_cost(
        self, config: ConfigurationInput,
    ) -> RoomCostEstimate:
        """Price each room category with at least one room.

        Lines follow the room-category table's order. Each line is rounded
        on its own and the total is the sum of the rounded lines.
        """
        config = as_configuration(config)
        repo = self._repository
        base_rate = repo.get_base_rate(config.project_type)
        regional = repo.get_regional_multiplier(config.location.state)

        lines: list[RoomCostLine] = []
        for spec in repo.get_room_categories():
            entry = config.room_configuration.get(spec.category)
            if entry is None or entry.count <= 0:
                continue
            sqft = repo.resolve_room_sqft(spec.category, entry)
            cost = entry.count * sqft * base_rate * spec.cost_multiplier * regional
            lines.append(RoomCostLine(
                category=spec.category,
                name=spec.name,
                space_category=spec.space_category,
                count=entry.count,
                sqft=sqft,
                total_sqft=entry.count * sqft,
                cost_multiplier=spec.cost_multiplier,
                cost=round_half_up(cost),
            ))

        return RoomCostEstimate(
            per_room=lines,
            total=sum(line.cost for line in lines),
        )

    # ------------------------------------------------------------------
    # Medical gas
    # ------------------------------------------------------------------

    def itemize_medical_gas(
        self, gas: MedicalGasRequirements | Mapping[str, Any] | None,
    ) -> MedicalGasEstimate:
        """Itemize the cost of every required gas system.

        Each system pays its per-outlet rate and its selected add-ons, plus
        installation and piping for each of its outlets. Systems that are
        not required are left out entirely.
        """
        if gas is None:
            return MedicalGasEstimate()
        if not isinstance(gas, MedicalGasRequirements):
            gas = MedicalGasRequirements.model_validate(dict(gas))

        install_rate = self._repository.installation_rate_per_outlet
        systems: list[GasSystemCost] = []
        for system in GasSystem:
            requirements = gas.system(system)
            if not requirements.required:
                continue
            rate = self._repository.get_gas_rate(system)
            outlets = requirements.outlet_total
            add_ons = sum(
                add_on.cost_when_selected
                if getattr(requirements, add_on.flag, False)
                else add_on.cost_when_not_selected
                for add_on in rate.add_ons
            )
            outlet_cost = round_half_up(outlets * rate.per_outlet_rate)
            add_on_cost = round_half_up(add_ons)
            installation_cost = round_half_up(outlets * install_rate)
            systems.append(GasSystemCost(
                system=system,
                name=rate.name,
                outlets=outlets,
                outlet_cost=outlet_cost,
                add_on_cost=add_on_cost,
                installation_cost=installation_cost,
                total=outlet_cost + add_on_cost + installation_cost,
            ))

        return MedicalGasEstimate(
            systems=systems,
            total_outlets=sum(s.outlets for s in systems),
            total=sum(s.total for s in systems),
        )

    def estimate_medical_gas_cost(
        self, gas: MedicalGasRequirements | Mapping[str, Any] | None,
    ) -> int:
        """Total medical gas cost across required systems."""
        return self.itemize_medical_gas(gas).total

    # ------------------------------------------------------------------
    # Review-step estimate
    # ------------------------------------------------------------------

    def estimate_review_cost(self, config: ConfigurationInput) -> int:
        """The review step's simplified estimate.

        Uses its own flat rates rather than the whole-building or
        room-by-room formulas; outlets are counted per outlet entry and the
        base gas system cost applies whenever gas has been configured.
        """
        config = as_configuration(config)
        rates = self._repository.review_rates
        total = 0.0

        if config.project_type == ProjectType.NEW_CONSTRUCTION:
            rate = rates.new_construction_rate_per_sf
        else:
            rate = rates.other_rate_per_sf
        total += config.total_square_footage * rate
        if config.timeline == ProjectTimeline.ACCELERATED:
            total *= rates.accelerated_factor
        elif config.timeline == ProjectTimeline.RELAXED:
            total *= rates.relaxed_factor

        program = config.space_program
        if program is not None:
            total += program.treatment_rooms.count * rates.per_treatment_room
            total += program.special_rooms.surgical_suites * rates.per_surgical_suite
            total += program.sterilization.central_sterile_sqft * rates.central_sterile_per_sf
            if program.lab_spaces.has_lab and program.lab_spaces.sqft:
                total += program.lab_spaces.sqft * rates.lab_per_sf

        gas = config.medical_gas
        if gas is not None:
            outlet_entries = sum(len(gas.system(system).outlets) for system in GasSystem)
            total += outlet_entries * rates.per_gas_outlet
            total += rates.gas_system_base

        return round_half_up(total)

    def summarize_review_cost(self, total: float) -> dict[str, int]:
        """Split a review total into the review step's four headline groups."""
        amount = _finite_or_zero(total)
        return {
            category.key: round_half_up(amount * fraction)
            for category, fraction in self._repository.get_review_summary_fractions()
        }

    # ------------------------------------------------------------------
    # Breakdown
    # ------------------------------------------------------------------

    def build_cost_breakdown(self, total: float) -> CostBreakdown:
        """Partition a total into construction categories.

        Each category is rounded independently; ``total`` is echoed as given.
        A non-finite total has nothing to partition and yields zero for
        every category.
        """
        amount = _finite_or_zero(total)
        values = {
            category.key: round_half_up(amount * fraction)
            for category, fraction in self._repository.get_breakdown_fractions()
        }
        return CostBreakdown(total=total, **values)

    # ------------------------------------------------------------------
    # Everything at once
    # ------------------------------------------------------------------

    def estimate(self, config: ConfigurationInput) -> ProjectEstimate:
        """Run every strategy on one configuration.

        The breakdown partitions the whole-building figure.
        """
        config = as_configuration(config)
        whole_building = self.estimate_whole_building_cost(config)
        sqft = config.total_square_footage
        regional = self._repository.get_regional_multiplier(config.location.state)

        result = ProjectEstimate(
            project_name=config.project_name,
            whole_building_cost=whole_building,
            cost_per_sqft=whole_building / sqft if sqft > 0 else None,
            regional_multiplier=regional,
            room_estimate=self.estimate_room_configuration_cost(config),
            medical_gas=self.itemize_medical_gas(config.medical_gas),
            review_cost=self.estimate_review_cost(config),
            breakdown=self.build_cost_breakdown(whole_building),
        )
        logger.debug(
            "Estimated %r: whole-building=%d rooms=%d gas=%d review=%d",
            config.project_name,
            result.whole_building_cost,
            result.room_estimate.total,
            result.medical_gas.total,
            result.review_cost,
        )
        return result
