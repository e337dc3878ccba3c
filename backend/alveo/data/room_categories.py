"""Room-category data for the room-by-room estimate.

Each category carries the area range the wizard offers and a cost multiplier
applied on top of the project's base $/SF. Imaging rooms cost the most
(lead lining, shielding, dedicated power); storage and janitorial space the
least.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from alveo.models.enums import RoomCategory, RoomSize, SpaceCategory


class RoomCategorySpec(BaseModel):
    """Static cost and sizing data for one room category."""

    category: RoomCategory
    name: str
    description: str
    space_category: SpaceCategory
    min_sqft: float = Field(gt=0)
    recommended_sqft: float = Field(gt=0)
    max_sqft: float = Field(gt=0)
    cost_multiplier: float = Field(gt=0)
    default_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def min_le_recommended_le_max(self) -> RoomCategorySpec:
        if not (self.min_sqft <= self.recommended_sqft <= self.max_sqft):
            msg = (
                f"{self.category}: must satisfy min <= recommended <= max, "
                f"got {self.min_sqft} <= {self.recommended_sqft} <= {self.max_sqft}"
            )
            raise ValueError(msg)
        return self

    def sqft_for_size(self, size: RoomSize) -> float:
        """Area for a size tier: small=min, standard=recommended, large=max."""
        if size == RoomSize.SMALL:
            return self.min_sqft
        if size == RoomSize.LARGE:
            return self.max_sqft
        return self.recommended_sqft


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

ROOM_CATEGORIES: list[RoomCategorySpec] = [
    RoomCategorySpec(
        category=RoomCategory.OPERATORY,
        name="Operatory Rooms",
        description=(
            "Primary surgical suites with medical gas, specialized lighting, "
            "and equipment prep"
        ),
        space_category=SpaceCategory.CLINICAL,
        min_sqft=120,
        recommended_sqft=150,
        max_sqft=200,
        cost_multiplier=2.5,
        default_count=2,
    ),
    RoomCategorySpec(
        category=RoomCategory.CONSULTATION,
        name="Consultation Rooms",
        description="Private patient consultation and examination rooms",
        space_category=SpaceCategory.CLINICAL,
        min_sqft=80,
        recommended_sqft=120,
        max_sqft=150,
        cost_multiplier=1.8,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.RECOVERY,
        name="Recovery Rooms",
        description="Post-operative patient recovery and monitoring areas",
        space_category=SpaceCategory.CLINICAL,
        min_sqft=80,
        recommended_sqft=100,
        max_sqft=150,
        cost_multiplier=2.0,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.RECEPTION,
        name="Reception/Waiting",
        description="Patient waiting area, reception desk, and check-in/out",
        space_category=SpaceCategory.PUBLIC,
        min_sqft=200,
        recommended_sqft=300,
        max_sqft=500,
        cost_multiplier=1.2,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.OFFICE,
        name="Doctor Offices",
        description="Private offices for consultations and administrative work",
        space_category=SpaceCategory.ADMINISTRATIVE,
        min_sqft=100,
        recommended_sqft=120,
        max_sqft=180,
        cost_multiplier=1.5,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.STERILIZATION,
        name="Sterilization",
        description="Instrument cleaning, sterilization, and storage",
        space_category=SpaceCategory.SUPPORT,
        min_sqft=60,
        recommended_sqft=80,
        max_sqft=120,
        cost_multiplier=2.2,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.LABORATORY,
        name="Laboratory",
        description="On-site lab for prosthetics and dental work",
        space_category=SpaceCategory.SUPPORT,
        min_sqft=100,
        recommended_sqft=150,
        max_sqft=250,
        cost_multiplier=2.8,
        default_count=0,
    ),
    RoomCategorySpec(
        category=RoomCategory.XRAY,
        name="X-Ray Rooms",
        description="Traditional radiography with lead-lined walls",
        space_category=SpaceCategory.IMAGING,
        min_sqft=50,
        recommended_sqft=60,
        max_sqft=80,
        cost_multiplier=3.0,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.CBCT,
        name="CBCT/3D Imaging",
        description="Cone beam CT and advanced 3D imaging suite",
        space_category=SpaceCategory.IMAGING,
        min_sqft=70,
        recommended_sqft=80,
        max_sqft=120,
        cost_multiplier=3.5,
        default_count=0,
    ),
    RoomCategorySpec(
        category=RoomCategory.STORAGE,
        name="Storage Rooms",
        description="Supply storage, inventory, and equipment storage",
        space_category=SpaceCategory.SUPPORT,
        min_sqft=30,
        recommended_sqft=50,
        max_sqft=100,
        cost_multiplier=0.8,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.BREAK_ROOM,
        name="Break Room",
        description="Staff break room, kitchen, and lounge area",
        space_category=SpaceCategory.STAFF,
        min_sqft=80,
        recommended_sqft=120,
        max_sqft=200,
        cost_multiplier=1.0,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.RESTROOM,
        name="Restrooms",
        description="Patient and staff restrooms (ADA compliant)",
        space_category=SpaceCategory.FACILITIES,
        min_sqft=30,
        recommended_sqft=40,
        max_sqft=60,
        cost_multiplier=1.8,
        default_count=2,
    ),
    RoomCategorySpec(
        category=RoomCategory.MECHANICAL,
        name="Mechanical Room",
        description="HVAC, water heater, electrical panel, and building systems",
        space_category=SpaceCategory.INFRASTRUCTURE,
        min_sqft=80,
        recommended_sqft=100,
        max_sqft=150,
        cost_multiplier=1.5,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.IT,
        name="IT/Server Room",
        description="Network equipment, servers, and telecommunications",
        space_category=SpaceCategory.INFRASTRUCTURE,
        min_sqft=20,
        recommended_sqft=30,
        max_sqft=50,
        cost_multiplier=2.0,
        default_count=1,
    ),
    RoomCategorySpec(
        category=RoomCategory.UTILITY,
        name="Utility/Janitorial",
        description="Cleaning supplies, mop sink, and utility storage",
        space_category=SpaceCategory.FACILITIES,
        min_sqft=25,
        recommended_sqft=40,
        max_sqft=60,
        cost_multiplier=0.9,
        default_count=1,
    ),
]

SPACE_CATEGORY_NAMES: dict[SpaceCategory, str] = {
    SpaceCategory.CLINICAL: "Clinical Spaces",
    SpaceCategory.IMAGING: "Imaging & Diagnostics",
    SpaceCategory.SUPPORT: "Support Spaces",
    SpaceCategory.ADMINISTRATIVE: "Administrative",
    SpaceCategory.PUBLIC: "Public Areas",
    SpaceCategory.STAFF: "Staff Areas",
    SpaceCategory.FACILITIES: "Facilities",
    SpaceCategory.INFRASTRUCTURE: "Infrastructure",
}
