"""Tests for the static cost tables and CostDataRepository lookups."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from alveo.data.breakdown import COST_BREAKDOWN_CATEGORIES, BreakdownCategory
from alveo.data.medical_gas import GAS_SYSTEM_RATES
from alveo.data.regional_multipliers import (
    DEFAULT_REGIONAL_MULTIPLIER,
    STATE_COST_MULTIPLIERS,
    US_STATE_CODES,
)
from alveo.data.repository import CostDataRepository
from alveo.data.room_categories import ROOM_CATEGORIES, RoomCategorySpec
from alveo.exceptions import CostDataError
from alveo.models.enums import (
    BuildingType,
    GasSystem,
    ProjectTimeline,
    ProjectType,
    RoomCategory,
    RoomSize,
    SpaceCategory,
)
from alveo.models.project import RoomEntry


@pytest.fixture()
def repo() -> CostDataRepository:
    return CostDataRepository()


# ---------------------------------------------------------------------------
# Table integrity
# ---------------------------------------------------------------------------


class TestRoomCategoryTable:
    def test_every_category_has_an_entry(self) -> None:
        assert {spec.category for spec in ROOM_CATEGORIES} == set(RoomCategory)
        assert len(ROOM_CATEGORIES) == 15

    def test_area_ranges_are_ordered(self) -> None:
        for spec in ROOM_CATEGORIES:
            assert spec.min_sqft <= spec.recommended_sqft <= spec.max_sqft, spec.category

    def test_imaging_costs_the_most(self) -> None:
        by_multiplier = sorted(ROOM_CATEGORIES, key=lambda s: s.cost_multiplier)
        assert by_multiplier[-1].category == RoomCategory.CBCT
        assert by_multiplier[0].category == RoomCategory.STORAGE

    def test_rejects_inverted_area_range(self) -> None:
        with pytest.raises(ValidationError, match="min <= recommended <= max"):
            RoomCategorySpec(
                category=RoomCategory.OFFICE,
                name="Office",
                description="",
                space_category=SpaceCategory.ADMINISTRATIVE,
                min_sqft=150,
                recommended_sqft=120,
                max_sqft=180,
                cost_multiplier=1.5,
            )

    def test_sqft_for_size(self) -> None:
        spec = next(s for s in ROOM_CATEGORIES if s.category == RoomCategory.RECEPTION)
        assert spec.sqft_for_size(RoomSize.SMALL) == 200
        assert spec.sqft_for_size(RoomSize.STANDARD) == 300
        assert spec.sqft_for_size(RoomSize.LARGE) == 500


class TestRegionalTable:
    def test_listed_codes_are_valid_states(self) -> None:
        assert set(STATE_COST_MULTIPLIERS) <= set(US_STATE_CODES)

    def test_texas_is_baseline(self) -> None:
        assert STATE_COST_MULTIPLIERS["TX"] == DEFAULT_REGIONAL_MULTIPLIER

    def test_multipliers_are_positive(self) -> None:
        assert all(m > 0 for m in STATE_COST_MULTIPLIERS.values())


class TestGasTable:
    def test_every_system_is_priced(self) -> None:
        assert set(GAS_SYSTEM_RATES) == set(GasSystem)


# ---------------------------------------------------------------------------
# Repository lookups
# ---------------------------------------------------------------------------


class TestRepositoryLookups:
    def test_base_rates(self, repo: CostDataRepository) -> None:
        assert repo.get_base_rate(ProjectType.NEW_CONSTRUCTION) == 200
        assert repo.get_base_rate(ProjectType.RENOVATION) == 150
        assert repo.get_base_rate(ProjectType.TENANT_IMPROVEMENT) == 125
        assert repo.get_base_rate(None) == 150

    def test_factors(self, repo: CostDataRepository) -> None:
        assert repo.get_building_type_factor(BuildingType.BASEMENT) == pytest.approx(1.25)
        assert repo.get_building_type_factor(None) == 1.0
        assert repo.get_timeline_factor(ProjectTimeline.RELAXED) == pytest.approx(0.95)
        assert repo.get_timeline_factor(None) == 1.0

    @pytest.mark.parametrize(
        ("state", "expected"),
        [
            ("CA", 1.35),
            ("ca", 1.35),
            (" ny ", 1.30),
            ("MS", 0.78),
            ("WY", 1.00),
            ("", 1.00),
            (None, 1.00),
        ],
    )
    def test_regional_multiplier(
        self, repo: CostDataRepository, state: str | None, expected: float,
    ) -> None:
        assert repo.get_regional_multiplier(state) == pytest.approx(expected)

    def test_custom_regional_table_is_normalized(self) -> None:
        repo = CostDataRepository(regional_multipliers={"or": 1.07})
        assert repo.get_regional_multiplier("OR") == pytest.approx(1.07)
        assert repo.regional_multipliers == {"OR": 1.07}

    def test_room_categories_in_table_order(self, repo: CostDataRepository) -> None:
        assert [s.category for s in repo.get_room_categories()] == [
            s.category for s in ROOM_CATEGORIES
        ]

    def test_resolve_room_sqft(self, repo: CostDataRepository) -> None:
        assert repo.resolve_room_sqft(RoomCategory.XRAY, RoomEntry(count=1, sqft=72)) == 72
        assert repo.resolve_room_sqft(
            RoomCategory.XRAY, RoomEntry(count=1, size=RoomSize.LARGE),
        ) == 80
        assert repo.resolve_room_sqft(RoomCategory.XRAY, RoomEntry(count=1)) == 60

    def test_unknown_category_has_no_area(self) -> None:
        repo = CostDataRepository(room_categories=ROOM_CATEGORIES[:1])
        assert repo.get_room_category(RoomCategory.UTILITY) is None
        assert repo.resolve_room_sqft(RoomCategory.UTILITY, RoomEntry(count=1)) == 0.0


# ---------------------------------------------------------------------------
# Table consistency checks
# ---------------------------------------------------------------------------


class TestRepositoryValidation:
    def test_duplicate_room_category(self) -> None:
        with pytest.raises(CostDataError, match="Duplicate room category"):
            CostDataRepository(room_categories=[ROOM_CATEGORIES[0], ROOM_CATEGORIES[0]])

    def test_missing_gas_system(self) -> None:
        rates = {GasSystem.OXYGEN: GAS_SYSTEM_RATES[GasSystem.OXYGEN]}
        with pytest.raises(CostDataError, match="nitrous_oxide"):
            CostDataRepository(gas_rates=rates)

    def test_empty_breakdown(self) -> None:
        with pytest.raises(CostDataError, match="empty"):
            CostDataRepository(breakdown_categories=[])

    def test_non_positive_share(self) -> None:
        categories = [
            *COST_BREAKDOWN_CATEGORIES,
            BreakdownCategory("allowance", "Allowance", 0.0),
        ]
        with pytest.raises(CostDataError, match="allowance"):
            CostDataRepository(breakdown_categories=categories)

    def test_custom_shares_are_normalized(self) -> None:
        repo = CostDataRepository(
            review_summary_categories=[
                BreakdownCategory("a", "A", 1.0),
                BreakdownCategory("b", "B", 3.0),
            ],
        )
        fractions = [f for _, f in repo.get_review_summary_fractions()]
        assert fractions == pytest.approx([0.25, 0.75])

    def test_trade_keys_must_match_breakdown_fields(self) -> None:
        categories = [
            *COST_BREAKDOWN_CATEGORIES[:-1],
            BreakdownCategory("landscaping", "Landscaping", 0.10),
        ]
        with pytest.raises(CostDataError, match="missing contingency; unknown landscaping"):
            CostDataRepository(breakdown_categories=categories)

    def test_duplicate_trade_key(self) -> None:
        categories = [*COST_BREAKDOWN_CATEGORIES, COST_BREAKDOWN_CATEGORIES[0]]
        with pytest.raises(CostDataError, match="duplicate site_prep"):
            CostDataRepository(breakdown_categories=categories)

    def test_reordered_trade_table_is_accepted(self) -> None:
        repo = CostDataRepository(breakdown_categories=COST_BREAKDOWN_CATEGORIES[::-1])
        keys = [c.key for c, _ in repo.get_breakdown_fractions()]
        assert keys[0] == "contingency"
