"""Cost data repository for looking up rates, multipliers and fractions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from alveo.data.breakdown import COST_BREAKDOWN_CATEGORIES, REVIEW_SUMMARY_CATEGORIES
from alveo.data.medical_gas import GAS_SYSTEM_RATES, INSTALLATION_RATE_PER_OUTLET
from alveo.data.rates import (
    BASE_RATES_PER_SF,
    BUILDING_TYPE_FACTORS,
    DEFAULT_BASE_RATE_PER_SF,
    DEFAULT_FACTOR,
    REVIEW_RATES,
    TIMELINE_FACTORS,
)
from alveo.data.regional_multipliers import (
    DEFAULT_REGIONAL_MULTIPLIER,
    STATE_COST_MULTIPLIERS,
)
from alveo.data.room_categories import ROOM_CATEGORIES
from alveo.exceptions import CostDataError
from alveo.models.enums import GasSystem
from alveo.models.estimate import CostBreakdown

if TYPE_CHECKING:
    from alveo.data.breakdown import BreakdownCategory
    from alveo.data.medical_gas import GasSystemRate
    from alveo.data.rates import ReviewRates
    from alveo.data.room_categories import RoomCategorySpec
    from alveo.models.enums import (
        BuildingType,
        ProjectTimeline,
        ProjectType,
        RoomCategory,
    )
    from alveo.models.project import RoomEntry

logger = logging.getLogger(__name__)


class CostDataRepository:
    """Repository for looking up cost data.

    Wraps the static rate tables and provides lookups that fall back to the
    documented defaults instead of failing, so partially completed
    configurations can always be priced. The tables are checked for
    consistency once, at construction.

    Raises:
        CostDataError: If a table is internally inconsistent (duplicate room
            categories, a missing gas system, or non-positive breakdown shares).
    """

    def __init__(
        self,
        room_categories: list[RoomCategorySpec] | None = None,
        regional_multipliers: dict[str, float] | None = None,
        gas_rates: dict[GasSystem, GasSystemRate] | None = None,
        breakdown_categories: list[BreakdownCategory] | None = None,
        review_summary_categories: list[BreakdownCategory] | None = None,
        review_rates: ReviewRates | None = None,
    ) -> None:
        specs = list(ROOM_CATEGORIES if room_categories is None else room_categories)
        self._room_categories: dict[RoomCategory, RoomCategorySpec] = {}
        for spec in specs:
            if spec.category in self._room_categories:
                msg = f"Duplicate room category '{spec.category}'"
                raise CostDataError(msg)
            self._room_categories[spec.category] = spec

        multipliers = (
            STATE_COST_MULTIPLIERS if regional_multipliers is None else regional_multipliers
        )
        self._regional_multipliers = {
            code.strip().upper(): value for code, value in multipliers.items()
        }

        self._gas_rates = dict(GAS_SYSTEM_RATES if gas_rates is None else gas_rates)
        missing = [g.value for g in GasSystem if g not in self._gas_rates]
        if missing:
            msg = f"No gas rates for system(s): {', '.join(missing)}"
            raise CostDataError(msg)

        trade_categories = (
            COST_BREAKDOWN_CATEGORIES if breakdown_categories is None else breakdown_categories
        )
        self._breakdown = self._normalize(trade_categories)
        self._check_trade_keys(trade_categories)
        self._review_summary = self._normalize(
            REVIEW_SUMMARY_CATEGORIES
            if review_summary_categories is None
            else review_summary_categories
        )
        self._review_rates = REVIEW_RATES if review_rates is None else review_rates

    @staticmethod
    def _check_trade_keys(categories: list[BreakdownCategory]) -> None:
        """Trade categories must match the fields of CostBreakdown one to one."""
        expected = set(CostBreakdown.model_fields) - {"total"}
        keys = [c.key for c in categories]
        duplicates = sorted({k for k in keys if keys.count(k) > 1})
        missing = sorted(expected - set(keys))
        unexpected = sorted(set(keys) - expected)
        problems = []
        if duplicates:
            problems.append(f"duplicate {', '.join(duplicates)}")
        if missing:
            problems.append(f"missing {', '.join(missing)}")
        if unexpected:
            problems.append(f"unknown {', '.join(unexpected)}")
        if problems:
            msg = f"Breakdown categories do not match CostBreakdown: {'; '.join(problems)}"
            raise CostDataError(msg)

    @staticmethod
    def _normalize(
        categories: list[BreakdownCategory],
    ) -> list[tuple[BreakdownCategory, float]]:
        """Pair each category with its fraction of the total (shares / sum)."""
        if not categories:
            msg = "Breakdown table is empty"
            raise CostDataError(msg)
        for category in categories:
            if category.share <= 0:
                msg = f"Breakdown share for '{category.key}' must be positive"
                raise CostDataError(msg)
        total_share = sum(c.share for c in categories)
        return [(c, c.share / total_share) for c in categories]

    # ------------------------------------------------------------------
    # Project-level rates
    # ------------------------------------------------------------------

    def get_base_rate(self, project_type: ProjectType | None) -> float:
        """Base $/SF for a project type (renovation rate when unset)."""
        if project_type is None:
            return DEFAULT_BASE_RATE_PER_SF
        return BASE_RATES_PER_SF.get(project_type, DEFAULT_BASE_RATE_PER_SF)

    def get_building_type_factor(self, building_type: BuildingType | None) -> float:
        if building_type is None:
            return DEFAULT_FACTOR
        return BUILDING_TYPE_FACTORS.get(building_type, DEFAULT_FACTOR)

    def get_timeline_factor(self, timeline: ProjectTimeline | None) -> float:
        if timeline is None:
            return DEFAULT_FACTOR
        return TIMELINE_FACTORS.get(timeline, DEFAULT_FACTOR)

    def get_regional_multiplier(self, state: str | None) -> float:
        """Get the regional multiplier for a state code.

        Lookup is case-insensitive. Unknown or empty codes return the
        baseline multiplier (1.00).
        """
        code = (state or "").strip().upper()
        multiplier = self._regional_multipliers.get(code)
        if multiplier is None:
            logger.debug(
                "No regional multiplier for state %r; using %.2f",
                state,
                DEFAULT_REGIONAL_MULTIPLIER,
            )
            return DEFAULT_REGIONAL_MULTIPLIER
        return multiplier

    @property
    def regional_multipliers(self) -> dict[str, float]:
        return dict(self._regional_multipliers)

    @property
    def review_rates(self) -> ReviewRates:
        return self._review_rates

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------

    def get_room_categories(self) -> list[RoomCategorySpec]:
        """All room categories, in display order."""
        return list(self._room_categories.values())

    def get_room_category(self, category: RoomCategory) -> RoomCategorySpec | None:
        return self._room_categories.get(category)

    def resolve_room_sqft(self, category: RoomCategory, entry: RoomEntry) -> float:
        """Per-room area for an entry.

        An explicit ``sqft`` wins; otherwise the size tier is resolved
        against the category's area range; otherwise the recommended area.
        """
        if entry.sqft is not None:
            return entry.sqft
        spec = self._room_categories.get(category)
        if spec is None:
            return 0.0
        if entry.size is not None:
            return spec.sqft_for_size(entry.size)
        return spec.recommended_sqft

    # ------------------------------------------------------------------
    # Medical gas
    # ------------------------------------------------------------------

    def get_gas_rate(self, system: GasSystem) -> GasSystemRate:
        return self._gas_rates[system]

    @property
    def installation_rate_per_outlet(self) -> float:
        return INSTALLATION_RATE_PER_OUTLET

    # ------------------------------------------------------------------
    # Breakdowns
    # ------------------------------------------------------------------

    def get_breakdown_fractions(self) -> list[tuple[BreakdownCategory, float]]:
        """Trade categories paired with fractions that sum to 1.0."""
        return list(self._breakdown)

    def get_review_summary_fractions(self) -> list[tuple[BreakdownCategory, float]]:
        return list(self._review_summary)
