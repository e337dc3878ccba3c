"""Project configuration models for the Alveo cost estimation engine.

A :class:`ProjectConfiguration` is an immutable value built up step by step
as the wizard progresses. Every section is optional so a partially
completed configuration can be priced at any time. Updates go through the
``with_*`` methods, each of which validates and returns a new configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date  # noqa: TCH003 (pydantic resolves at runtime)
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from alveo.models.enums import (
    BuildingType,
    GasSystem,
    ProjectTimeline,
    ProjectType,
    RoomCategory,
    RoomSize,
)
from alveo.models.sections import (  # noqa: TCH001
    AdaCompliance,
    EquipmentIntegration,
    FinishLevel,
    ItDataAvNeeds,
)
from alveo.models.space_program import SpaceProgram  # noqa: TCH001

logger = logging.getLogger(__name__)

_BASICS_FIELDS = frozenset({
    "project_name",
    "project_type",
    "building_type",
    "timeline",
    "total_square_footage",
    "desired_completion_date",
})

_CHOICE_FIELDS: dict[str, type[ProjectType | BuildingType | ProjectTimeline]] = {
    "project_type": ProjectType,
    "building_type": BuildingType,
    "timeline": ProjectTimeline,
}


class Location(BaseModel):
    """Project address; ``state`` drives the regional multiplier."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""

    @field_validator("street", "city", "state", "zip_code", mode="before")
    @classmethod
    def missing_text_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v


class RoomEntry(BaseModel):
    """Count and per-room size for one room category.

    Size is either an explicit ``sqft`` or a ``size`` tier; with neither,
    the category's recommended area applies.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    count: int = Field(default=0, ge=0)
    sqft: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    size: RoomSize | None = None

    @field_validator("count", mode="before")
    @classmethod
    def missing_count_is_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


# ---------------------------------------------------------------------------
# Medical gas
# ---------------------------------------------------------------------------


class GasOutlet(BaseModel):
    """Outlets of one gas type in one room."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    room: str = ""
    count: int = Field(default=0, ge=0)
    location: str = ""

    @field_validator("room", "location", mode="before")
    @classmethod
    def missing_text_is_blank(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("count", mode="before")
    @classmethod
    def missing_count_is_zero(cls, v: Any) -> Any:
        return 0 if v is None else v


class GasSystemRequirements(BaseModel):
    """Fields shared by every piped gas system."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    required: bool = False
    outlets: tuple[GasOutlet, ...] = ()
    manifold_location: str = ""

    @field_validator("outlets", mode="before")
    @classmethod
    def missing_outlets_are_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @field_validator("required", mode="before")
    @classmethod
    def missing_flag_is_unset(cls, v: Any) -> Any:
        return False if v is None else v

    @property
    def outlet_total(self) -> int:
        """Total outlet count across rooms."""
        return sum(o.count for o in self.outlets)


class OxygenSystem(GasSystemRequirements):
    central_supply: bool = False
    backup_system: bool = False
    emergency_shutoffs: int = Field(default=0, ge=0)


class NitrousOxideSystem(GasSystemRequirements):
    central_supply: bool = False
    scavenging_system: bool = False
    emergency_shutoffs: int = Field(default=0, ge=0)


class MedicalAirSystem(GasSystemRequirements):
    oil_free: bool = False
    backup_compressor: bool = False


class VacuumSystem(GasSystemRequirements):
    central_system: bool = False
    backup_pump: bool = False


class MedicalGasRequirements(BaseModel):
    """The four piped gas systems of the suite."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    oxygen: OxygenSystem = Field(default_factory=OxygenSystem)
    nitrous_oxide: NitrousOxideSystem = Field(default_factory=NitrousOxideSystem)
    medical_air: MedicalAirSystem = Field(default_factory=MedicalAirSystem)
    vacuum: VacuumSystem = Field(default_factory=VacuumSystem)

    @field_validator("oxygen", "nitrous_oxide", "medical_air", "vacuum", mode="before")
    @classmethod
    def missing_system_is_not_required(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return cls.model_fields[info.field_name].default_factory()
        return v

    def system(self, gas: GasSystem) -> GasSystemRequirements:
        return getattr(self, gas.value)

    def with_system(self, gas: GasSystem, **fields: Any) -> MedicalGasRequirements:
        """Return a copy with fields of one gas system replaced."""
        gas = GasSystem(gas)
        current = self.system(gas)
        updated = type(current).model_validate({**dict(current), **fields})
        return self.model_copy(update={gas.value: updated})

    def with_outlet(
        self,
        gas: GasSystem,
        room: str,
        count: int,
        location: str = "",
    ) -> MedicalGasRequirements:
        """Return a copy with an outlet group appended to one gas system."""
        current = self.system(GasSystem(gas))
        outlet = GasOutlet(room=room, count=count, location=location)
        return self.with_system(gas, outlets=(*current.outlets, outlet))


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------


class ProjectConfiguration(BaseModel):
    """Everything the wizard has collected about a project so far."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    project_name: str = ""
    location: Location = Field(default_factory=Location)
    project_type: ProjectType | None = None
    building_type: BuildingType | None = None
    timeline: ProjectTimeline | None = None
    total_square_footage: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    desired_completion_date: date | None = None
    room_configuration: dict[RoomCategory, RoomEntry] = Field(default_factory=dict)
    medical_gas: MedicalGasRequirements | None = None
    space_program: SpaceProgram | None = None
    equipment: EquipmentIntegration | None = None
    finishes: FinishLevel | None = None
    ada: AdaCompliance | None = None
    it_av: ItDataAvNeeds | None = None

    @field_validator("project_type", "building_type", "timeline", mode="before")
    @classmethod
    def unrecognized_choice_is_unset(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or v == "":
            return None
        enum_cls = _CHOICE_FIELDS[info.field_name]
        try:
            return enum_cls(v)
        except ValueError:
            logger.debug("Ignoring unrecognized %s %r", info.field_name, v)
            return None

    @field_validator("total_square_footage", mode="before")
    @classmethod
    def missing_size_is_zero(cls, v: Any) -> Any:
        return 0.0 if v is None or v == "" else v

    @field_validator("location", mode="before")
    @classmethod
    def missing_location_is_blank(cls, v: Any) -> Any:
        return Location() if v is None else v

    @field_validator("room_configuration", mode="before")
    @classmethod
    def drop_unknown_room_categories(cls, v: Any) -> Any:
        if v is None:
            return {}
        if not isinstance(v, Mapping):
            return v
        known = {c.value for c in RoomCategory}
        kept = {}
        for key, entry in v.items():
            if str(key) in known:
                kept[key] = entry
            else:
                logger.debug("Ignoring unknown room category %r", key)
        return kept

    # ------------------------------------------------------------------
    # Section updates
    # ------------------------------------------------------------------

    def _replace(self, **fields: Any) -> ProjectConfiguration:
        return type(self).model_validate({**dict(self), **fields})

    def with_basics(self, **fields: Any) -> ProjectConfiguration:
        """Update project-basics fields (name, type, timeline, size, ...)."""
        unknown = set(fields) - _BASICS_FIELDS
        if unknown:
            msg = f"Not a project-basics field: {', '.join(sorted(unknown))}"
            raise TypeError(msg)
        return self._replace(**fields)

    def with_location(self, **fields: Any) -> ProjectConfiguration:
        location = Location.model_validate({**dict(self.location), **fields})
        return self._replace(location=location)

    def with_room(
        self,
        category: RoomCategory,
        count: int | None = None,
        sqft: float | None = None,
        size: RoomSize | None = None,
    ) -> ProjectConfiguration:
        """Set the count and/or size of one room category.

        Choosing a size tier without an explicit ``sqft`` clears any
        previous ``sqft`` so the tier takes effect.
        """
        category = RoomCategory(category)
        current = self.room_configuration.get(category, RoomEntry())
        updates: dict[str, Any] = {}
        if count is not None:
            updates["count"] = count
        if size is not None:
            updates["size"] = size
            updates["sqft"] = sqft
        elif sqft is not None:
            updates["sqft"] = sqft
        entry = RoomEntry.model_validate({**dict(current), **updates})
        rooms = dict(self.room_configuration)
        rooms[category] = entry
        return self._replace(room_configuration=rooms)

    def without_room(self, category: RoomCategory) -> ProjectConfiguration:
        rooms = dict(self.room_configuration)
        rooms.pop(RoomCategory(category), None)
        return self._replace(room_configuration=rooms)

    def with_medical_gas(self, medical_gas: MedicalGasRequirements | None) -> ProjectConfiguration:
        return self._replace(medical_gas=medical_gas)

    def with_gas_system(self, gas: GasSystem, **fields: Any) -> ProjectConfiguration:
        current = self.medical_gas or MedicalGasRequirements()
        return self._replace(medical_gas=current.with_system(gas, **fields))

    def with_outlet(
        self,
        gas: GasSystem,
        room: str,
        count: int,
        location: str = "",
    ) -> ProjectConfiguration:
        current = self.medical_gas or MedicalGasRequirements()
        return self._replace(medical_gas=current.with_outlet(gas, room, count, location))

    def with_recommended_outlets(self, gas: GasSystem) -> ProjectConfiguration:
        """Replace one gas system's outlets with those suggested by the space program."""
        from alveo.compliance import recommended_outlets

        return self.with_gas_system(gas, outlets=recommended_outlets(self.space_program, gas))

    def with_space_program(self, space_program: SpaceProgram | None) -> ProjectConfiguration:
        return self._replace(space_program=space_program)

    def with_equipment(self, equipment: EquipmentIntegration | None) -> ProjectConfiguration:
        return self._replace(equipment=equipment)

    def with_finishes(self, finishes: FinishLevel | None) -> ProjectConfiguration:
        return self._replace(finishes=finishes)

    def with_ada(self, ada: AdaCompliance | None) -> ProjectConfiguration:
        return self._replace(ada=ada)

    def with_it_av(self, it_av: ItDataAvNeeds | None) -> ProjectConfiguration:
        return self._replace(it_av=it_av)
