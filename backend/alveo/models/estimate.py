"""Cost estimate output models for the Alveo cost estimation engine."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from alveo.models.enums import EstimateStatus, GasSystem, RoomCategory, SpaceCategory
from alveo.models.project import ProjectConfiguration  # noqa: TCH001


class RoomCostLine(BaseModel):
    """Cost of all rooms of one category in the room-by-room estimate."""

    category: RoomCategory
    name: str
    space_category: SpaceCategory
    count: int
    sqft: float
    total_sqft: float
    cost_multiplier: float
    cost: int


class RoomCostEstimate(BaseModel):
    """Room-by-room estimate; ``total`` is the sum of the rounded line costs."""

    per_room: list[RoomCostLine] = Field(default_factory=list)
    total: int = 0

    @property
    def total_sqft(self) -> float:
        return sum(line.total_sqft for line in self.per_room)


class GasSystemCost(BaseModel):
    """Itemized cost of one required gas system."""

    system: GasSystem
    name: str
    outlets: int
    outlet_cost: int
    add_on_cost: int
    installation_cost: int
    total: int


class MedicalGasEstimate(BaseModel):
    """Medical gas itemization; systems that are not required are omitted."""

    systems: list[GasSystemCost] = Field(default_factory=list)
    total_outlets: int = 0
    total: int = 0


class CostBreakdown(BaseModel):
    """A project total partitioned into construction categories.

    ``total`` echoes the figure that was partitioned; the rounded category
    values may differ from it by a few dollars in aggregate.
    """

    site_prep: int
    demolition: int
    framing_drywall_insulation: int
    hvac: int
    electrical: int
    plumbing: int
    millwork_surfaces: int
    flooring_doors: int
    paint: int
    medical_gas: int
    special_equipment: int
    permits: int
    general_conditions: int
    overhead: int
    profit: int
    contingency: int
    total: float

    def categories(self) -> dict[str, int]:
        """Category values keyed by field name, excluding ``total``."""
        return {
            name: value
            for name, value in self.model_dump().items()
            if name != "total"
        }

    @property
    def rounded_sum(self) -> int:
        return sum(self.categories().values())


class ProjectEstimate(BaseModel):
    """Every estimation strategy applied to one configuration.

    The whole-building, room-by-room and review figures are independent
    estimates and are not expected to agree.
    """

    project_name: str
    whole_building_cost: int
    cost_per_sqft: float | None = None
    regional_multiplier: float
    room_estimate: RoomCostEstimate
    medical_gas: MedicalGasEstimate
    review_cost: int
    breakdown: CostBreakdown
    generated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict of display strings for the wizard."""
        from alveo.formatting import (
            format_compact_currency,
            format_currency,
            format_multiplier,
            format_sf_cost,
        )

        return {
            "project_name": self.project_name,
            "whole_building_cost_formatted": format_currency(self.whole_building_cost),
            "cost_per_sqft_formatted": (
                format_sf_cost(self.cost_per_sqft)
                if self.cost_per_sqft is not None
                else None
            ),
            "regional_multiplier_formatted": format_multiplier(self.regional_multiplier),
            "room_cost_formatted": format_currency(self.room_estimate.total),
            "room_sqft_formatted": f"{self.room_estimate.total_sqft:,.0f} sq ft",
            "num_room_categories": len(self.room_estimate.per_room),
            "medical_gas_cost_formatted": format_compact_currency(self.medical_gas.total),
            "medical_gas_outlets": self.medical_gas.total_outlets,
            "review_cost_formatted": format_currency(self.review_cost),
            "generated_at_formatted": self.generated_at.strftime("%Y-%m-%d %H:%M"),
        }


class EstimateData(BaseModel):
    """A saved estimate: configuration, derived breakdown and timestamps.

    Storage is the caller's concern; this is only the record shape.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    configuration: ProjectConfiguration
    cost_breakdown: CostBreakdown | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    status: EstimateStatus = EstimateStatus.DRAFT

    @classmethod
    def create(
        cls,
        configuration: ProjectConfiguration,
        estimate: ProjectEstimate | None = None,
    ) -> EstimateData:
        now = datetime.now(UTC)
        return cls(
            configuration=configuration,
            cost_breakdown=estimate.breakdown if estimate is not None else None,
            created_at=now,
            updated_at=now,
        )

    def _touch(self, **update: Any) -> EstimateData:
        return self.model_copy(update={**update, "updated_at": datetime.now(UTC)})

    def with_configuration(
        self,
        configuration: ProjectConfiguration,
        estimate: ProjectEstimate | None = None,
    ) -> EstimateData:
        """Replace the configuration; the old breakdown is dropped if no estimate is given."""
        return self._touch(
            configuration=configuration,
            cost_breakdown=estimate.breakdown if estimate is not None else None,
        )

    def mark_completed(self) -> EstimateData:
        return self._touch(status=EstimateStatus.COMPLETED)

    def archive(self) -> EstimateData:
        return self._touch(status=EstimateStatus.ARCHIVED)
