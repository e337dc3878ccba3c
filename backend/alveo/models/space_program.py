"""Detailed clinical space program.

The space program is the fine-grained layout captured by the wizard's room
planning step: treatment rooms by size tier, sterilization, administrative,
staff, storage, waiting, restroom and special imaging/surgical spaces. It
sizes the suite (net and gross square footage) and feeds the review-step
estimate.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from alveo.formatting import round_half_up
from alveo.models.enums import (
    ConsultationRoomSize,
    LabEquipmentLevel,
    SecurityLevel,
    SterilizationEquipmentLevel,
    SurgicalSuiteSize,
    TreatmentRoomSize,
)

TREATMENT_ROOM_SQFT: dict[TreatmentRoomSize, float] = {
    TreatmentRoomSize.COMPACT: 100,
    TreatmentRoomSize.STANDARD: 140,
    TreatmentRoomSize.LARGE: 180,
    TreatmentRoomSize.PREMIUM: 220,
}

CONSULTATION_ROOM_SQFT: dict[ConsultationRoomSize, float] = {
    ConsultationRoomSize.SMALL: 80,
    ConsultationRoomSize.MEDIUM: 100,
    ConsultationRoomSize.LARGE: 120,
}

SURGICAL_SUITE_SQFT: dict[SurgicalSuiteSize, float] = {
    SurgicalSuiteSize.STANDARD: 250,
    SurgicalSuiteSize.LARGE: 350,
}

RECOVERY_ROOM_SQFT = 150
PRIVATE_OFFICE_SQFT = 120
SQFT_PER_SEAT = 15
SQFT_PER_LOCKER = 5
JANITORIAL_CLOSET_SQFT = 25
PRIVATE_WAITING_ROOM_SQFT = 80
RESTROOM_SQFT = 60
FAMILY_RESTROOM_SQFT = 80
XRAY_ROOM_SQFT = 100
PAN_ROOM_SQFT = 120
HVAC_ROOM_SQFT = 100
ELECTRICAL_ROOM_SQFT = 60
DATA_CLOSET_SQFT = 40
GAS_MANIFOLD_ROOM_SQFT = 50

# Corridors and wall thickness, as a multiple of net programmed area
CIRCULATION_FACTOR = 1.22


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class TreatmentRooms(_Section):
    count: int = Field(default=6, ge=0)
    size: TreatmentRoomSize = TreatmentRoomSize.STANDARD
    has_windows: bool = True
    ceiling_height_ft: float = Field(default=9, gt=0)
    special_features: tuple[str, ...] = ()


class ConsultationRooms(_Section):
    count: int = Field(default=2, ge=0)
    size: ConsultationRoomSize = ConsultationRoomSize.MEDIUM
    has_windows: bool = True


class RecoveryRooms(_Section):
    count: int = Field(default=2, ge=0)
    beds: int = Field(default=4, ge=0)
    private_rooms: int = Field(default=1, ge=0)
    shared_rooms: int = Field(default=1, ge=0)


class LabSpaces(_Section):
    count: int = Field(default=0, ge=0)
    has_lab: bool = False
    sqft: float = Field(default=0, ge=0)
    equipment_level: LabEquipmentLevel = LabEquipmentLevel.BASIC
    has_cad_cam: bool = False
    has_3d_printer: bool = False


class UtilityRoom(_Section):
    sqft: float = Field(default=75, ge=0)
    required: bool = True


class SterilizationAreas(_Section):
    central_sterile_sqft: float = Field(default=150, ge=0)
    equipment_level: SterilizationEquipmentLevel = SterilizationEquipmentLevel.ADVANCED
    dirty_utility: UtilityRoom = Field(default_factory=UtilityRoom)
    clean_utility: UtilityRoom = Field(default_factory=UtilityRoom)


class AdministrativeAreas(_Section):
    has_reception: bool = True
    reception_sqft: float = Field(default=200, ge=0)
    reception_workstations: int = Field(default=2, ge=0)
    private_offices: int = Field(default=2, ge=0)
    executive_office: bool = True
    manager_offices: int = Field(default=1, ge=0)
    has_open_work_area: bool = True
    open_work_area_sqft: float = Field(default=150, ge=0)
    open_workstations: int = Field(default=3, ge=0)
    has_conference_room: bool = True
    conference_capacity: int = Field(default=8, ge=0)
    has_records_room: bool = True
    records_room_sqft: float = Field(default=100, ge=0)
    records_room_fire_rated: bool = True


class StaffAreas(_Section):
    has_break_room: bool = True
    break_room_sqft: float = Field(default=120, ge=0)
    break_room_has_kitchen: bool = True
    has_lockers: bool = True
    lockers: int = Field(default=12, ge=0)
    has_lounge: bool = False
    lounge_sqft: float = Field(default=0, ge=0)


class MechanicalRooms(_Section):
    hvac_room: bool = True
    electrical_room: bool = True
    data_closet: bool = True
    medical_gas_manifold: bool = True

    def sqft(self) -> float:
        total = 0.0
        if self.hvac_room:
            total += HVAC_ROOM_SQFT
        if self.electrical_room:
            total += ELECTRICAL_ROOM_SQFT
        if self.data_closet:
            total += DATA_CLOSET_SQFT
        if self.medical_gas_manifold:
            total += GAS_MANIFOLD_ROOM_SQFT
        return total


class StorageUtilityRooms(_Section):
    general_storage_count: int = Field(default=2, ge=0)
    general_storage_sqft: float = Field(default=100, ge=0)
    medical_supply_sqft: float = Field(default=75, ge=0)
    medical_supply_temperature_controlled: bool = False
    medical_supply_security: SecurityLevel = SecurityLevel.STANDARD
    equipment_storage_sqft: float = Field(default=60, ge=0)
    equipment_storage_has_charging: bool = True
    janitorial_closets: int = Field(default=2, ge=0)
    janitorial_has_utility_sink: bool = True
    mechanical: MechanicalRooms = Field(default_factory=MechanicalRooms)


class WaitingAreas(_Section):
    main_waiting_sqft: float = Field(default=400, ge=0)
    main_seating_capacity: int = Field(default=16, ge=0)
    has_children_area: bool = True
    children_area_sqft: float = Field(default=80, ge=0)
    has_private_waiting: bool = False
    private_waiting_rooms: int = Field(default=0, ge=0)
    has_consult_waiting: bool = True
    consult_waiting_seats: int = Field(default=6, ge=0)


class Restrooms(_Section):
    patient_restrooms: int = Field(default=2, ge=0)
    patient_ada_compliant: bool = True
    family_restroom: bool = True
    staff_restrooms: int = Field(default=1, ge=0)
    staff_ada_compliant: bool = True


class SpecialRooms(_Section):
    xray_rooms: int = Field(default=1, ge=0)
    xray_lead_lined: bool = True
    xray_digital: bool = True
    surgical_suites: int = Field(default=1, ge=0)
    surgical_suite_size: SurgicalSuiteSize = SurgicalSuiteSize.STANDARD
    surgical_isolation_capable: bool = False
    has_pan_room: bool = True
    pan_room_lead_lined: bool = True
    has_cbct: bool = False
    cbct_lead_lined: bool = False
    cbct_sqft: float = Field(default=0, ge=0)


class SpaceProgram(_Section):
    """Room-by-room layout of an oral-surgery suite.

    Defaults describe the typical six-operatory practice the planning step
    starts from.
    """

    treatment_rooms: TreatmentRooms = Field(default_factory=TreatmentRooms)
    consultation_rooms: ConsultationRooms = Field(default_factory=ConsultationRooms)
    recovery_rooms: RecoveryRooms = Field(default_factory=RecoveryRooms)
    lab_spaces: LabSpaces = Field(default_factory=LabSpaces)
    sterilization: SterilizationAreas = Field(default_factory=SterilizationAreas)
    administrative: AdministrativeAreas = Field(default_factory=AdministrativeAreas)
    staff: StaffAreas = Field(default_factory=StaffAreas)
    storage: StorageUtilityRooms = Field(default_factory=StorageUtilityRooms)
    waiting: WaitingAreas = Field(default_factory=WaitingAreas)
    restrooms: Restrooms = Field(default_factory=Restrooms)
    special_rooms: SpecialRooms = Field(default_factory=SpecialRooms)

    def net_square_footage(self) -> float:
        """Sum of programmed room areas, before circulation."""
        total = 0.0

        total += self.treatment_rooms.count * TREATMENT_ROOM_SQFT[self.treatment_rooms.size]
        total += (
            self.consultation_rooms.count
            * CONSULTATION_ROOM_SQFT[self.consultation_rooms.size]
        )
        total += self.recovery_rooms.count * RECOVERY_ROOM_SQFT
        if self.lab_spaces.has_lab:
            total += self.lab_spaces.sqft

        ster = self.sterilization
        total += ster.central_sterile_sqft
        if ster.dirty_utility.required:
            total += ster.dirty_utility.sqft
        if ster.clean_utility.required:
            total += ster.clean_utility.sqft

        admin = self.administrative
        if admin.has_reception:
            total += admin.reception_sqft
        total += admin.private_offices * PRIVATE_OFFICE_SQFT
        if admin.has_open_work_area:
            total += admin.open_work_area_sqft
        if admin.has_conference_room:
            total += admin.conference_capacity * SQFT_PER_SEAT
        if admin.has_records_room:
            total += admin.records_room_sqft

        staff = self.staff
        if staff.has_break_room:
            total += staff.break_room_sqft
        if staff.has_lockers:
            total += staff.lockers * SQFT_PER_LOCKER
        if staff.has_lounge:
            total += staff.lounge_sqft

        storage = self.storage
        total += storage.general_storage_sqft
        total += storage.medical_supply_sqft
        total += storage.equipment_storage_sqft
        total += storage.janitorial_closets * JANITORIAL_CLOSET_SQFT
        total += storage.mechanical.sqft()

        waiting = self.waiting
        total += waiting.main_waiting_sqft
        if waiting.has_children_area:
            total += waiting.children_area_sqft
        if waiting.has_private_waiting:
            total += waiting.private_waiting_rooms * PRIVATE_WAITING_ROOM_SQFT
        if waiting.has_consult_waiting:
            total += waiting.consult_waiting_seats * SQFT_PER_SEAT

        restrooms = self.restrooms
        total += (restrooms.patient_restrooms + restrooms.staff_restrooms) * RESTROOM_SQFT
        if restrooms.family_restroom:
            total += FAMILY_RESTROOM_SQFT

        special = self.special_rooms
        total += special.xray_rooms * XRAY_ROOM_SQFT
        total += special.surgical_suites * SURGICAL_SUITE_SQFT[special.surgical_suite_size]
        if special.has_pan_room:
            total += PAN_ROOM_SQFT
        if special.has_cbct:
            total += special.cbct_sqft

        return total

    def gross_square_footage(self) -> int:
        """Net area plus circulation, rounded to a whole square foot."""
        return round_half_up(self.net_square_footage() * CIRCULATION_FACTOR)

    def room_summary(self) -> dict[str, int]:
        """Headline room counts shown on the planning step."""
        special = (
            self.special_rooms.xray_rooms + self.special_rooms.surgical_suites
        )
        return {
            "treatment_rooms": self.treatment_rooms.count,
            "total_rooms": (
                self.treatment_rooms.count
                + self.consultation_rooms.count
                + self.recovery_rooms.count
                + special
            ),
            "special_rooms": special,
        }
