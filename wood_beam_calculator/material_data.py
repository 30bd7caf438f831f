"""
Wood material properties for board strength calculations.
Density in kg/m^3, modulus of elasticity (MOE) and modulus of rupture (MOR) in MPa.

MOR is not required to be below MOE (different scales); both must be
strictly positive finite numbers.
"""

from dataclasses import dataclass

from .utils import InvalidInputError, require_positive


@dataclass(frozen=True)
class MaterialProperties:
    """Read-only strength and stiffness record for one wood species."""
    density: float                # kg/m^3
    modulus_of_elasticity: float  # MOE, MPa (stiffness)
    modulus_of_rupture: float     # MOR, MPa (strength limit)
    name: str = ""
    description: str = ""

    def __post_init__(self):
        require_positive("density", self.density)
        require_positive("modulus_of_elasticity", self.modulus_of_elasticity)
        require_positive("modulus_of_rupture", self.modulus_of_rupture)

    @property
    def E_pa(self) -> float:
        """Modulus of elasticity in Pa."""
        return self.modulus_of_elasticity * 1e6

    @property
    def MOR_pa(self) -> float:
        """Modulus of rupture in Pa."""
        return self.modulus_of_rupture * 1e6


# Samanea saman (Rain Tree / Chamchuri), air-dry.
SAMANEA_SAMAN = MaterialProperties(
    density=530.0,
    modulus_of_elasticity=8500.0,
    modulus_of_rupture=60.0,
    name="Samanea Saman (Rain Tree)",
    description=(
        "Soft to medium hardwood. Air-dry density about 0.53 g/cm^3, "
        "very low shrinkage (tangential 1.8%, radial 1.0%), natural "
        "durability index 6. Kiln dried to 15-20% moisture content "
        "to limit warping."
    ),
)

WOOD_SPECIES = {
    SAMANEA_SAMAN.name: SAMANEA_SAMAN,
}

DEFAULT_SPECIES = SAMANEA_SAMAN.name


def get_material(name: str) -> MaterialProperties:
    """Return material properties for a given species name."""
    if name not in WOOD_SPECIES:
        raise InvalidInputError(
            f"Unknown species '{name}'. "
            f"Available: {', '.join(WOOD_SPECIES.keys())}"
        )
    return WOOD_SPECIES[name]


def get_species_names() -> list[str]:
    """Return list of species names for the selector."""
    return list(WOOD_SPECIES.keys())
