"""Equipment, finishes, accessibility and IT/AV sections of a project.

These sections are captured by the wizard and saved with an estimate. The
estimation strategies do not price them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from alveo.models.enums import (
    AutoclaveSize,
    CabinetMaterial,
    CabinetStyle,
    CeilingType,
    ChairType,
    CountertopMaterial,
    DoorHardware,
    FinishCategory,
    LightingLevel,
    NetworkDropType,
    PaintGrade,
    PhoneSystemType,
    TvMounting,
    WifiCoverage,
)


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Equipment
# ---------------------------------------------------------------------------


class DentalChairs(_Section):
    count: int = Field(default=6, ge=0)
    type: ChairType = ChairType.MID_RANGE
    manufacturer: str = ""
    integrated_delivery: bool = True


class XrayUnit(_Section):
    count: int = Field(default=0, ge=0)
    digital: bool = True


class XrayUnits(_Section):
    intraoral: XrayUnit = Field(default_factory=lambda: XrayUnit(count=2))
    panoramic: XrayUnit = Field(default_factory=lambda: XrayUnit(count=1))
    cephalometric: XrayUnit = Field(default_factory=XrayUnit)


class CbctUnit(_Section):
    has_unit: bool = False
    model: str | None = None
    shielding_required: bool | None = None


class SterilizationEquipment(_Section):
    autoclaves: int = Field(default=2, ge=0)
    autoclave_size: AutoclaveSize = AutoclaveSize.MEDIUM
    ultrasonic_cleaners: int = Field(default=1, ge=0)
    sealers: int = Field(default=1, ge=0)


class SurgicalEquipment(_Section):
    surgical_lights: int = Field(default=1, ge=0)
    monitors: int = Field(default=1, ge=0)
    anesthesia_machines: int = Field(default=1, ge=0)
    surgical_tables: int = Field(default=1, ge=0)


class LabEquipment(_Section):
    models_3d_printer: bool = False
    scanners: int = Field(default=1, ge=0)
    milling_machine: bool = False


class EquipmentIntegration(_Section):
    dental_chairs: DentalChairs = Field(default_factory=DentalChairs)
    xray_units: XrayUnits = Field(default_factory=XrayUnits)
    cbct: CbctUnit = Field(default_factory=CbctUnit)
    sterilization: SterilizationEquipment = Field(default_factory=SterilizationEquipment)
    surgical: SurgicalEquipment = Field(default_factory=SurgicalEquipment)
    lab: LabEquipment = Field(default_factory=LabEquipment)


# ---------------------------------------------------------------------------
# Finishes
# ---------------------------------------------------------------------------


class Flooring(_Section):
    operatories: str = "luxury-vinyl"
    waiting_area: str = "carpet-tile"
    offices: str = "carpet-tile"
    corridors: str = "luxury-vinyl"


class WallFinishes(_Section):
    paint_grade: PaintGrade = PaintGrade.PREMIUM
    wallcovering: bool = False
    wainscoting: bool = False
    special_finishes: tuple[str, ...] = ()


class Ceilings(_Section):
    type: CeilingType = CeilingType.PREMIUM_ACM
    height_ft: float = Field(default=9, gt=0)
    special_features: tuple[str, ...] = ()


class Cabinetry(_Section):
    material: CabinetMaterial = CabinetMaterial.WOOD_VENEER
    style: CabinetStyle = CabinetStyle.MODERN
    custom_millwork: bool = False


class Countertops(_Section):
    material: CountertopMaterial = CountertopMaterial.QUARTZ
    edge_profile: str = "standard"


class Lighting(_Section):
    level: LightingLevel = LightingLevel.PREMIUM
    control_systems: bool = True
    emergency_lighting: bool = True


class FinishLevel(_Section):
    category: FinishCategory = FinishCategory.PREMIUM
    flooring: Flooring = Field(default_factory=Flooring)
    walls: WallFinishes = Field(default_factory=WallFinishes)
    ceilings: Ceilings = Field(default_factory=Ceilings)
    cabinetry: Cabinetry = Field(default_factory=Cabinetry)
    countertops: Countertops = Field(default_factory=Countertops)
    lighting: Lighting = Field(default_factory=Lighting)


# ---------------------------------------------------------------------------
# Accessibility
# ---------------------------------------------------------------------------


class AdaCompliance(_Section):
    accessible_entrance: bool = True
    accessible_path: bool = True
    accessible_restrooms: int = Field(default=1, ge=0)
    hearing_loop_system: bool = False
    accessible_parking_spaces: int = Field(default=2, ge=0)
    elevator_required: bool = False
    accessible_reception_counter: bool = True
    door_hardware: DoorHardware = DoorHardware.ACCESSIBLE
    signage_compliance: bool = True


# ---------------------------------------------------------------------------
# IT, data and AV
# ---------------------------------------------------------------------------


class NetworkDrop(_Section):
    room: str
    count: int = Field(default=1, ge=0)
    type: NetworkDropType = NetworkDropType.CAT6


class WifiAccess(_Section):
    commercial: bool = True
    guest_network: bool = True
    coverage: WifiCoverage = WifiCoverage.ENTERPRISE


class PhoneSystem(_Section):
    type: PhoneSystemType = PhoneSystemType.VOIP
    extensions: int = Field(default=8, ge=0)
    nurse_calls: bool = True


class SecuritySystem(_Section):
    cameras: int = Field(default=4, ge=0)
    access_control: bool = True
    alarm_system: bool = True


class Television(_Section):
    room: str
    size_in: float = Field(gt=0)
    mounting: TvMounting = TvMounting.WALL


class Audiovisual(_Section):
    tvs: tuple[Television, ...] = ()
    sound_system: bool = True
    intercom: bool = True


class ServerRoom(_Section):
    required: bool = True
    sqft: float | None = Field(default=50, ge=0)
    cooling: bool | None = True


class ItDataAvNeeds(_Section):
    network_drops: tuple[NetworkDrop, ...] = ()
    wifi: WifiAccess = Field(default_factory=WifiAccess)
    phone: PhoneSystem = Field(default_factory=PhoneSystem)
    security: SecuritySystem = Field(default_factory=SecuritySystem)
    audiovisual: Audiovisual = Field(default_factory=Audiovisual)
    server_room: ServerRoom = Field(default_factory=ServerRoom)

    @property
    def total_network_drops(self) -> int:
        return sum(d.count for d in self.network_drops)
