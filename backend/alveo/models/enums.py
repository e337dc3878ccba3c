"""Enums for the Alveo domain models.

Values match the option strings the estimate wizard submits, so a form
payload validates directly into these types.
"""

from enum import StrEnum


class ProjectType(StrEnum):
    """Kind of build-out; selects the base $/SF rate."""

    NEW_CONSTRUCTION = "new-construction"
    RENOVATION = "renovation"
    TENANT_IMPROVEMENT = "tenant-improvement"


class BuildingType(StrEnum):
    """Where the suite sits in the building."""

    GROUND_FLOOR = "ground-floor"
    UPPER_FLOOR = "upper-floor"
    BASEMENT = "basement"


class ProjectTimeline(StrEnum):
    """Schedule pressure on the build-out."""

    ACCELERATED = "accelerated"
    STANDARD = "standard"
    RELAXED = "relaxed"


class RoomCategory(StrEnum):
    """Functional room types priced by the room-by-room estimate."""

    OPERATORY = "operatory"
    CONSULTATION = "consultation"
    RECOVERY = "recovery"
    RECEPTION = "reception"
    OFFICE = "office"
    STERILIZATION = "sterilization"
    LABORATORY = "laboratory"
    XRAY = "xray"
    CBCT = "cbct"
    STORAGE = "storage"
    BREAK_ROOM = "break_room"
    RESTROOM = "restroom"
    MECHANICAL = "mechanical"
    IT = "it"
    UTILITY = "utility"


class SpaceCategory(StrEnum):
    """Grouping of room categories for display."""

    CLINICAL = "clinical"
    IMAGING = "imaging"
    SUPPORT = "support"
    ADMINISTRATIVE = "administrative"
    PUBLIC = "public"
    STAFF = "staff"
    FACILITIES = "facilities"
    INFRASTRUCTURE = "infrastructure"


class RoomSize(StrEnum):
    """Size tier resolved against a room category's min/recommended/max area."""

    SMALL = "small"
    STANDARD = "standard"
    LARGE = "large"


class GasSystem(StrEnum):
    """Piped medical gas systems."""

    OXYGEN = "oxygen"
    NITROUS_OXIDE = "nitrous_oxide"
    MEDICAL_AIR = "medical_air"
    VACUUM = "vacuum"


class AlertSeverity(StrEnum):
    """How strongly a compliance alert should be surfaced."""

    WARNING = "warning"
    ERROR = "error"


class EstimateStatus(StrEnum):
    """Lifecycle state of a saved estimate record."""

    DRAFT = "draft"
    COMPLETED = "completed"
    ARCHIVED = "archived"


# Detailed space program

class TreatmentRoomSize(StrEnum):
    COMPACT = "compact"
    STANDARD = "standard"
    LARGE = "large"
    PREMIUM = "premium"


class ConsultationRoomSize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class SurgicalSuiteSize(StrEnum):
    STANDARD = "standard"
    LARGE = "large"


class LabEquipmentLevel(StrEnum):
    BASIC = "basic"
    ADVANCED = "advanced"
    FULL_SERVICE = "full-service"


class SterilizationEquipmentLevel(StrEnum):
    BASIC = "basic"
    ADVANCED = "advanced"
    COMPREHENSIVE = "comprehensive"


class SecurityLevel(StrEnum):
    STANDARD = "standard"
    HIGH = "high"


# Equipment, finishes, accessibility and IT/AV sections

class ChairType(StrEnum):
    BASIC = "basic"
    MID_RANGE = "mid-range"
    PREMIUM = "premium"


class AutoclaveSize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class FinishCategory(StrEnum):
    STANDARD = "standard"
    PREMIUM = "premium"
    LUXURY = "luxury"
    CUSTOM = "custom"


class PaintGrade(StrEnum):
    STANDARD = "standard"
    PREMIUM = "premium"


class CeilingType(StrEnum):
    STANDARD_ACM = "standard-acm"
    PREMIUM_ACM = "premium-acm"
    GYPSUM = "gypsum"
    SPECIALTY = "specialty"


class CabinetMaterial(StrEnum):
    LAMINATE = "laminate"
    WOOD_VENEER = "wood-veneer"
    SOLID_WOOD = "solid-wood"
    METAL = "metal"


class CabinetStyle(StrEnum):
    TRADITIONAL = "traditional"
    MODERN = "modern"
    CONTEMPORARY = "contemporary"


class CountertopMaterial(StrEnum):
    LAMINATE = "laminate"
    SOLID_SURFACE = "solid-surface"
    QUARTZ = "quartz"
    GRANITE = "granite"


class LightingLevel(StrEnum):
    STANDARD = "standard"
    PREMIUM = "premium"
    ARCHITECTURAL = "architectural"


class DoorHardware(StrEnum):
    STANDARD = "standard"
    ACCESSIBLE = "accessible"


class NetworkDropType(StrEnum):
    CAT6 = "cat6"
    CAT6A = "cat6a"
    FIBER = "fiber"


class WifiCoverage(StrEnum):
    BASIC = "basic"
    ENTERPRISE = "enterprise"


class PhoneSystemType(StrEnum):
    VOIP = "voip"
    TRADITIONAL = "traditional"


class TvMounting(StrEnum):
    WALL = "wall"
    CEILING = "ceiling"
