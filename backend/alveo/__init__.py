"""Alveo cost estimation engine for oral-surgery office build-outs.

Usage::

    from alveo import create_default_engine, ProjectConfiguration

    engine = create_default_engine()
    config = ProjectConfiguration(project_type="renovation", total_square_footage=2500)
    cost = engine.estimate_whole_building_cost(config)
"""

from alveo.compliance import (
    ComplianceAlert,
    medical_gas_compliance_alerts,
    recommended_outlets,
)
from alveo.engine import CostEngine
from alveo.factory import create_default_engine, default_room_configuration
from alveo.models.enums import (
    AlertSeverity,
    BuildingType,
    GasSystem,
    ProjectTimeline,
    ProjectType,
    RoomCategory,
    RoomSize,
)
from alveo.models.estimate import (
    CostBreakdown,
    EstimateData,
    MedicalGasEstimate,
    ProjectEstimate,
    RoomCostEstimate,
)
from alveo.models.project import (
    Location,
    MedicalGasRequirements,
    ProjectConfiguration,
    RoomEntry,
)
from alveo.models.space_program import SpaceProgram

__all__ = [
    "AlertSeverity",
    "BuildingType",
    "ComplianceAlert",
    "CostBreakdown",
    "CostEngine",
    "EstimateData",
    "GasSystem",
    "Location",
    "MedicalGasEstimate",
    "MedicalGasRequirements",
    "ProjectConfiguration",
    "ProjectEstimate",
    "ProjectTimeline",
    "ProjectType",
    "RoomCategory",
    "RoomCostEstimate",
    "RoomEntry",
    "RoomSize",
    "SpaceProgram",
    "create_default_engine",
    "default_room_configuration",
    "medical_gas_compliance_alerts",
    "recommended_outlets",
]
