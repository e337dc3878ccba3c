"""Medical gas system pricing.

Per-outlet rates cover the outlet assembly and zone valve share; add-ons are
system-level equipment priced once per system when the matching option is
selected. Installation and piping is charged per outlet across every
required system.
"""

from __future__ import annotations

from dataclasses import dataclass

from alveo.models.enums import GasSystem


@dataclass(frozen=True)
class GasAddOn:
    """A fixed-price option on a gas system, keyed by its boolean flag."""

    flag: str
    name: str
    cost_when_selected: float
    cost_when_not_selected: float = 0.0


@dataclass(frozen=True)
class GasSystemRate:
    """Pricing for one piped gas system."""

    system: GasSystem
    name: str
    per_outlet_rate: float
    add_ons: tuple[GasAddOn, ...] = ()


GAS_SYSTEM_RATES: dict[GasSystem, GasSystemRate] = {
    GasSystem.OXYGEN: GasSystemRate(
        system=GasSystem.OXYGEN,
        name="Oxygen",
        per_outlet_rate=1_200.0,
        add_ons=(
            GasAddOn("central_supply", "Central supply system", 15_000.0),
            GasAddOn("backup_system", "Backup system", 8_000.0),
        ),
    ),
    GasSystem.NITROUS_OXIDE: GasSystemRate(
        system=GasSystem.NITROUS_OXIDE,
        name="Nitrous Oxide",
        per_outlet_rate=1_400.0,
        add_ons=(
            GasAddOn("central_supply", "Central supply system", 12_000.0),
            GasAddOn("scavenging_system", "Scavenging system", 6_000.0),
        ),
    ),
    GasSystem.MEDICAL_AIR: GasSystemRate(
        system=GasSystem.MEDICAL_AIR,
        name="Medical Air",
        per_outlet_rate=1_000.0,
        # A required air system always gets a compressor; oil-free costs more.
        add_ons=(
            GasAddOn("oil_free", "Compressor", 18_000.0, 12_000.0),
        ),
    ),
    GasSystem.VACUUM: GasSystemRate(
        system=GasSystem.VACUUM,
        name="Vacuum",
        per_outlet_rate=800.0,
        add_ons=(
            GasAddOn("central_system", "Central vacuum system", 14_000.0),
        ),
    ),
}

INSTALLATION_RATE_PER_OUTLET: float = 300.0
