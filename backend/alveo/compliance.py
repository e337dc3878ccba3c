"""Medical gas compliance checks and outlet recommendations.

Rules follow NFPA 99 as applied to oral-surgery suites: nitrous oxide needs
scavenging, suites piping two or more gases need at least two emergency
shutoff locations, and oxygen should have a backup supply.

Recommended outlets are derived from the space program, one outlet group
per clinical room, so the medical gas step can be pre-filled.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from alveo.engine import as_configuration
from alveo.models.enums import AlertSeverity, GasSystem
from alveo.models.project import GasOutlet, MedicalGasRequirements

if TYPE_CHECKING:
    from alveo.engine import ConfigurationInput
    from alveo.models.space_program import SpaceProgram

logger = logging.getLogger(__name__)

MIN_EMERGENCY_SHUTOFFS = 2

DEFAULT_OUTLET_LOCATION = "Chair-side right"
CONSULTATION_OUTLET_LOCATION = "Wall mounted right"

# Outlets per room of each kind; gases not listed get none.
_OUTLETS_PER_ROOM: dict[str, dict[GasSystem, int]] = {
    "procedure": {
        GasSystem.OXYGEN: 2,
        GasSystem.NITROUS_OXIDE: 1,
        GasSystem.MEDICAL_AIR: 2,
        GasSystem.VACUUM: 3,
    },
    "consultation": {gas: 1 for gas in GasSystem},
    "recovery": {GasSystem.OXYGEN: 2, GasSystem.VACUUM: 1},
    "laboratory": {GasSystem.VACUUM: 1},
    "sterilization": {GasSystem.MEDICAL_AIR: 1},
}


class ComplianceAlert(BaseModel):
    """A single finding about the medical gas configuration."""

    model_config = ConfigDict(frozen=True)

    severity: AlertSeverity
    code: str
    message: str


def medical_gas_compliance_alerts(config: ConfigurationInput) -> list[ComplianceAlert]:
    """Check the medical gas section of a configuration.

    Alerts come back in a fixed order: missing room program, nitrous
    scavenging, oxygen backup, emergency shutoffs. An empty list means
    nothing to report.
    """
    config = as_configuration(config)
    gas = config.medical_gas or MedicalGasRequirements()
    alerts: list[ComplianceAlert] = []

    if config.space_program is None and not config.room_configuration:
        alerts.append(ComplianceAlert(
            severity=AlertSeverity.WARNING,
            code="room_configuration_missing",
            message=(
                "Complete room configuration first to get personalized "
                "gas recommendations."
            ),
        ))

    if gas.nitrous_oxide.required and not gas.nitrous_oxide.scavenging_system:
        alerts.append(ComplianceAlert(
            severity=AlertSeverity.ERROR,
            code="nitrous_oxide_scavenging",
            message="NFPA 99 requires scavenging systems for nitrous oxide installations.",
        ))

    if gas.oxygen.required and not gas.oxygen.backup_system:
        alerts.append(ComplianceAlert(
            severity=AlertSeverity.WARNING,
            code="oxygen_backup",
            message="Consider backup oxygen system for enhanced patient safety.",
        ))

    required = sum(1 for system in GasSystem if gas.system(system).required)
    if required >= 2 and gas.oxygen.emergency_shutoffs < MIN_EMERGENCY_SHUTOFFS:
        alerts.append(ComplianceAlert(
            severity=AlertSeverity.ERROR,
            code="emergency_shutoffs",
            message=(
                "Multiple gas systems require minimum 2 emergency shutoff "
                "locations per NFPA 99."
            ),
        ))

    if alerts:
        logger.debug(
            "Medical gas alerts for %r: %s",
            config.project_name,
            ", ".join(a.code for a in alerts),
        )
    return alerts


def _program_rooms(program: SpaceProgram) -> list[tuple[str, str]]:
    """(room label, room kind) for every room that can take gas outlets."""
    rooms: list[tuple[str, str]] = []
    rooms += [
        (f"Treatment Room {i}", "procedure")
        for i in range(1, program.treatment_rooms.count + 1)
    ]
    rooms += [
        (f"Surgical Suite {i}", "procedure")
        for i in range(1, program.special_rooms.surgical_suites + 1)
    ]
    rooms += [
        (f"Consultation Room {i}", "consultation")
        for i in range(1, program.consultation_rooms.count + 1)
    ]
    rooms += [
        (f"Recovery Room {i}", "recovery")
        for i in range(1, program.recovery_rooms.count + 1)
    ]
    if program.lab_spaces.has_lab:
        rooms += [
            (f"Laboratory {i}", "laboratory")
            for i in range(1, program.lab_spaces.count + 1)
        ]
    rooms.append(("Central Sterilization", "sterilization"))
    return rooms


def recommended_outlets(
    space_program: SpaceProgram | None,
    gas: GasSystem,
) -> tuple[GasOutlet, ...]:
    """Suggested outlet groups for one gas, derived from the room program.

    Rooms that get no outlets of this gas are left out. Without a space
    program there is nothing to recommend.
    """
    if space_program is None:
        return ()
    gas = GasSystem(gas)
    outlets: list[GasOutlet] = []
    for room, kind in _program_rooms(space_program):
        count = _OUTLETS_PER_ROOM[kind].get(gas, 0)
        if count <= 0:
            continue
        location = (
            CONSULTATION_OUTLET_LOCATION if kind == "consultation" else DEFAULT_OUTLET_LOCATION
        )
        outlets.append(GasOutlet(room=room, count=count, location=location))
    return tuple(outlets)
