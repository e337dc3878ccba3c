"""Tests for ProjectConfiguration and its step-by-step updates."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from alveo.models.enums import (
    BuildingType,
    GasSystem,
    ProjectTimeline,
    ProjectType,
    RoomCategory,
    RoomSize,
)
from alveo.models.project import (
    MedicalGasRequirements,
    ProjectConfiguration,
    RoomEntry,
)
from alveo.models.sections import (
    AdaCompliance,
    DentalChairs,
    EquipmentIntegration,
    FinishLevel,
    ItDataAvNeeds,
    NetworkDrop,
)
from alveo.models.space_program import SpaceProgram, TreatmentRooms


@pytest.fixture()
def config() -> ProjectConfiguration:
    return ProjectConfiguration(
        project_name="Lakeside OMS",
        project_type=ProjectType.RENOVATION,
        total_square_footage=2_500,
    )


class TestConstruction:
    def test_everything_optional(self) -> None:
        config = ProjectConfiguration()
        assert config.project_type is None
        assert config.total_square_footage == 0
        assert config.room_configuration == {}
        assert config.medical_gas is None
        assert config.space_program is None

    def test_parses_wizard_json(self) -> None:
        config = ProjectConfiguration.model_validate({
            "project_name": "Lakeside OMS",
            "location": {"city": "Tampa", "state": "FL", "zip_code": "33602"},
            "project_type": "tenant-improvement",
            "building_type": "upper-floor",
            "timeline": "relaxed",
            "total_square_footage": "3200",
            "desired_completion_date": "2027-03-01",
            "room_configuration": {"operatory": {"count": 3, "size": "large"}},
        })
        assert config.project_type == ProjectType.TENANT_IMPROVEMENT
        assert config.building_type == BuildingType.UPPER_FLOOR
        assert config.timeline == ProjectTimeline.RELAXED
        assert config.total_square_footage == 3_200
        assert config.desired_completion_date == date(2027, 3, 1)
        assert config.room_configuration[RoomCategory.OPERATORY] == RoomEntry(
            count=3, size=RoomSize.LARGE,
        )

    def test_unknown_room_categories_are_dropped(self) -> None:
        config = ProjectConfiguration(
            room_configuration={"operatory": {"count": 2}, "hot_tub": {"count": 1}},
        )
        assert list(config.room_configuration) == [RoomCategory.OPERATORY]

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration(stories=3)

    def test_negative_square_footage_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration(total_square_footage=-10)

    def test_negative_room_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProjectConfiguration(room_configuration={"operatory": {"count": -1}})

    def test_is_frozen(self, config: ProjectConfiguration) -> None:
        with pytest.raises(ValidationError):
            config.project_name = "Renamed"  # type: ignore[misc]


class TestBasicsAndLocation:
    def test_with_basics_returns_new_value(self, config: ProjectConfiguration) -> None:
        updated = config.with_basics(
            timeline=ProjectTimeline.ACCELERATED, total_square_footage=3_000,
        )
        assert updated.timeline == ProjectTimeline.ACCELERATED
        assert updated.total_square_footage == 3_000
        assert config.timeline is None
        assert config.total_square_footage == 2_500

    def test_with_basics_normalizes_blank_choice(self, config: ProjectConfiguration) -> None:
        assert config.with_basics(project_type="").project_type is None

    def test_with_basics_rejects_other_sections(self, config: ProjectConfiguration) -> None:
        with pytest.raises(TypeError, match="location"):
            config.with_basics(location={"state": "CA"})

    def test_with_location(self, config: ProjectConfiguration) -> None:
        updated = config.with_location(city="Sacramento", state="CA")
        assert updated.location.state == "CA"
        assert updated.location.city == "Sacramento"
        assert config.location.state == ""
        assert updated.project_name == "Lakeside OMS"


class TestRooms:
    def test_with_room_adds_entry(self, config: ProjectConfiguration) -> None:
        updated = config.with_room(RoomCategory.RECOVERY, count=2, sqft=110)
        assert updated.room_configuration[RoomCategory.RECOVERY] == RoomEntry(
            count=2, sqft=110,
        )
        assert config.room_configuration == {}

    def test_with_room_accepts_string_category(self, config: ProjectConfiguration) -> None:
        updated = config.with_room("xray", count=1)
        assert RoomCategory.XRAY in updated.room_configuration

    def test_with_room_updates_count_only(self, config: ProjectConfiguration) -> None:
        updated = (
            config
            .with_room(RoomCategory.OPERATORY, count=2, sqft=160)
            .with_room(RoomCategory.OPERATORY, count=4)
        )
        assert updated.room_configuration[RoomCategory.OPERATORY] == RoomEntry(
            count=4, sqft=160,
        )

    def test_choosing_size_clears_explicit_sqft(self, config: ProjectConfiguration) -> None:
        updated = (
            config
            .with_room(RoomCategory.OPERATORY, count=2, sqft=160)
            .with_room(RoomCategory.OPERATORY, size=RoomSize.LARGE)
        )
        entry = updated.room_configuration[RoomCategory.OPERATORY]
        assert entry.sqft is None
        assert entry.size == RoomSize.LARGE

    def test_with_room_rejects_negative_count(self, config: ProjectConfiguration) -> None:
        with pytest.raises(ValidationError):
            config.with_room(RoomCategory.OPERATORY, count=-1)

    def test_without_room(self, config: ProjectConfiguration) -> None:
        updated = config.with_room(RoomCategory.CBCT, count=1).without_room(RoomCategory.CBCT)
        assert updated.room_configuration == {}

    def test_without_missing_room_is_noop(self, config: ProjectConfiguration) -> None:
        assert config.without_room(RoomCategory.CBCT) == config


class TestMedicalGasUpdates:
    def test_with_gas_system_creates_section(self, config: ProjectConfiguration) -> None:
        updated = config.with_gas_system(GasSystem.OXYGEN, required=True)
        assert updated.medical_gas is not None
        assert updated.medical_gas.oxygen.required
        assert not updated.medical_gas.vacuum.required
        assert config.medical_gas is None

    def test_with_outlet_appends(self, config: ProjectConfiguration) -> None:
        updated = (
            config
            .with_outlet(GasSystem.VACUUM, "Operatory 1", 2, "Wall")
            .with_outlet(GasSystem.VACUUM, "Operatory 2", 1)
        )
        assert updated.medical_gas is not None
        vacuum = updated.medical_gas.vacuum
        assert [o.room for o in vacuum.outlets] == ["Operatory 1", "Operatory 2"]
        assert vacuum.outlet_total == 3

    def test_unknown_system_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MedicalGasRequirements().with_system(GasSystem.OXYGEN, oil_free=True)

    def test_negative_outlet_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MedicalGasRequirements().with_outlet(GasSystem.OXYGEN, "Operatory 1", -2)

    def test_with_medical_gas_none_clears(self, config: ProjectConfiguration) -> None:
        updated = config.with_gas_system(GasSystem.OXYGEN, required=True)
        assert updated.with_medical_gas(None).medical_gas is None


class TestSectionUpdates:
    def test_with_space_program(self, config: ProjectConfiguration) -> None:
        program = SpaceProgram(treatment_rooms=TreatmentRooms(count=8))
        updated = config.with_space_program(program)
        assert updated.space_program is not None
        assert updated.space_program.treatment_rooms.count == 8
        assert config.space_program is None

    def test_with_finishes_and_ada(self, config: ProjectConfiguration) -> None:
        updated = config.with_finishes(FinishLevel()).with_ada(
            AdaCompliance(elevator_required=True),
        )
        assert updated.finishes == FinishLevel()
        assert updated.ada is not None
        assert updated.ada.elevator_required

    def test_with_equipment(self, config: ProjectConfiguration) -> None:
        equipment = EquipmentIntegration(dental_chairs=DentalChairs(count=8))
        updated = config.with_equipment(equipment)
        assert updated.equipment is not None
        assert updated.equipment.dental_chairs.count == 8
        assert updated.equipment.xray_units.panoramic.count == 1

    def test_with_it_av(self, config: ProjectConfiguration) -> None:
        it_av = ItDataAvNeeds(
            network_drops=(
                NetworkDrop(room="Reception", count=4),
                NetworkDrop(room="Operatory 1", count=2),
            ),
        )
        updated = config.with_it_av(it_av)
        assert updated.it_av is not None
        assert updated.it_av.total_network_drops == 6
        assert config.with_it_av(ItDataAvNeeds()).it_av.total_network_drops == 0  # type: ignore[union-attr]
