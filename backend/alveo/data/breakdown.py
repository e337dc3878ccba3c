"""Construction cost breakdown categories.

A breakdown partitions a project total into trade categories. Each category
carries a relative share; the repository normalizes the shares of a table
so its fractions sum to exactly 1.0. The trade table's published shares add
up to 126%, so e.g. site preparation (5 shares) receives 5/126 of the total.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BreakdownCategory:
    """A named share of the project total."""

    key: str
    name: str
    share: float


COST_BREAKDOWN_CATEGORIES: list[BreakdownCategory] = [
    BreakdownCategory("site_prep", "Site Preparation", 0.05),
    BreakdownCategory("demolition", "Demolition", 0.08),
    BreakdownCategory("framing_drywall_insulation", "Framing, Drywall & Insulation", 0.15),
    BreakdownCategory("hvac", "HVAC", 0.12),
    BreakdownCategory("electrical", "Electrical", 0.10),
    BreakdownCategory("plumbing", "Plumbing", 0.08),
    BreakdownCategory("millwork_surfaces", "Millwork & Surfaces", 0.10),
    BreakdownCategory("flooring_doors", "Flooring & Doors", 0.06),
    BreakdownCategory("paint", "Paint", 0.04),
    BreakdownCategory("medical_gas", "Medical Gas", 0.06),
    BreakdownCategory("special_equipment", "Special Equipment", 0.08),
    BreakdownCategory("permits", "Permits", 0.02),
    BreakdownCategory("general_conditions", "General Conditions", 0.08),
    BreakdownCategory("overhead", "Overhead", 0.06),
    BreakdownCategory("profit", "Profit", 0.08),
    BreakdownCategory("contingency", "Contingency", 0.10),
]

# Four-way split shown on the review step.
REVIEW_SUMMARY_CATEGORIES: list[BreakdownCategory] = [
    BreakdownCategory("construction", "Construction", 0.35),
    BreakdownCategory("mep_systems", "MEP Systems", 0.30),
    BreakdownCategory("equipment", "Equipment", 0.20),
    BreakdownCategory("finishes", "Finishes", 0.15),
]
