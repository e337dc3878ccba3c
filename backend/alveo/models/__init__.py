"""Domain models for the Alveo cost estimation engine."""

from alveo.models.enums import (
    AlertSeverity,
    BuildingType,
    EstimateStatus,
    GasSystem,
    ProjectTimeline,
    ProjectType,
    RoomCategory,
    RoomSize,
    SpaceCategory,
)
from alveo.models.estimate import (
    CostBreakdown,
    EstimateData,
    GasSystemCost,
    MedicalGasEstimate,
    ProjectEstimate,
    RoomCostEstimate,
    RoomCostLine,
)
from alveo.models.project import (
    GasOutlet,
    GasSystemRequirements,
    Location,
    MedicalAirSystem,
    MedicalGasRequirements,
    NitrousOxideSystem,
    OxygenSystem,
    ProjectConfiguration,
    RoomEntry,
    VacuumSystem,
)
from alveo.models.sections import (
    AdaCompliance,
    EquipmentIntegration,
    FinishLevel,
    ItDataAvNeeds,
)
from alveo.models.space_program import SpaceProgram

__all__ = [
    "AdaCompliance",
    "AlertSeverity",
    "BuildingType",
    "CostBreakdown",
    "EquipmentIntegration",
    "EstimateData",
    "EstimateStatus",
    "FinishLevel",
    "GasOutlet",
    "GasSystem",
    "GasSystemCost",
    "GasSystemRequirements",
    "ItDataAvNeeds",
    "Location",
    "MedicalAirSystem",
    "MedicalGasEstimate",
    "MedicalGasRequirements",
    "NitrousOxideSystem",
    "OxygenSystem",
    "ProjectConfiguration",
    "ProjectEstimate",
    "ProjectTimeline",
    "ProjectType",
    "RoomCategory",
    "RoomCostEstimate",
    "RoomCostLine",
    "RoomEntry",
    "RoomSize",
    "SpaceCategory",
    "SpaceProgram",
    "VacuumSystem",
]
