"""Tests for cost breakdowns and the review-step summary split."""

from __future__ import annotations

import math

import pytest

from alveo.data.breakdown import COST_BREAKDOWN_CATEGORIES
from alveo.engine import CostEngine
from alveo.factory import create_default_engine


@pytest.fixture()
def engine() -> CostEngine:
    return create_default_engine()


class TestCostBreakdown:
    def test_fractions_sum_to_one(self, engine: CostEngine) -> None:
        fractions = engine.repository.get_breakdown_fractions()
        assert sum(f for _, f in fractions) == pytest.approx(1.0)

    def test_fractions_keep_relative_shares(self, engine: CostEngine) -> None:
        fractions = {
            category.key: f for category, f in engine.repository.get_breakdown_fractions()
        }
        assert fractions["framing_drywall_insulation"] == pytest.approx(
            3 * fractions["site_prep"],
        )
        assert fractions["site_prep"] == pytest.approx(0.05 / 1.26)

    def test_one_million(self, engine: CostEngine) -> None:
        result = engine.build_cost_breakdown(1_000_000)
        assert result.site_prep == 39_683
        assert result.framing_drywall_insulation == 119_048
        assert result.permits == 15_873
        assert result.contingency == 79_365
        assert result.total == 1_000_000

    def test_rounded_sum_close_to_total(self, engine: CostEngine) -> None:
        for total in (0, 1, 999, 375_000, 506_250, 1_234_567.89):
            result = engine.build_cost_breakdown(total)
            assert abs(result.rounded_sum - total) <= len(COST_BREAKDOWN_CATEGORIES)

    def test_total_is_echoed(self, engine: CostEngine) -> None:
        assert engine.build_cost_breakdown(1_234.56).total == 1_234.56

    def test_zero_total(self, engine: CostEngine) -> None:
        result = engine.build_cost_breakdown(0)
        assert all(v == 0 for v in result.categories().values())

    def test_categories_follow_table_order(self, engine: CostEngine) -> None:
        result = engine.build_cost_breakdown(100_000)
        assert list(result.categories()) == [c.key for c in COST_BREAKDOWN_CATEGORIES]

    def test_is_idempotent(self, engine: CostEngine) -> None:
        assert engine.build_cost_breakdown(506_250) == engine.build_cost_breakdown(506_250)

    @pytest.mark.parametrize("total", [math.nan, math.inf, -math.inf])
    def test_non_finite_total_yields_zero_categories(
        self, engine: CostEngine, total: float,
    ) -> None:
        result = engine.build_cost_breakdown(total)
        assert result.rounded_sum == 0
        assert set(result.categories().values()) == {0}


class TestReviewSummary:
    def test_four_way_split(self, engine: CostEngine) -> None:
        assert engine.summarize_review_cost(100_000) == {
            "construction": 35_000,
            "mep_systems": 30_000,
            "equipment": 20_000,
            "finishes": 15_000,
        }

    def test_zero_total(self, engine: CostEngine) -> None:
        assert set(engine.summarize_review_cost(0).values()) == {0}

    def test_non_finite_total(self, engine: CostEngine) -> None:
        assert set(engine.summarize_review_cost(math.nan).values()) == {0}
