"""Cost data layer for the Alveo cost estimation engine."""

from alveo.data.breakdown import BreakdownCategory
from alveo.data.medical_gas import GasAddOn, GasSystemRate
from alveo.data.repository import CostDataRepository
from alveo.data.room_categories import RoomCategorySpec

__all__ = [
    "BreakdownCategory",
    "CostDataRepository",
    "GasAddOn",
    "GasSystemRate",
    "RoomCategorySpec",
]
