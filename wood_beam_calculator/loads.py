"""
Applied load on a board resting on two supports.
Loads are entered as a mass (kg) and converted to a force (N).
Two placements: a point load at midspan or the same total load spread
uniformly along the span.
"""

import enum
from dataclasses import dataclass

from .utils import InvalidInputError, require_finite, require_non_negative, require_positive

# Gravitational acceleration (m/s^2)
GRAVITY = 9.81


class LoadType(str, enum.Enum):
    """Where the load sits on the span."""
    CENTER = "center"
    DISTRIBUTED = "distributed"

    @classmethod
    def parse(cls, value) -> "LoadType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidInputError(
                f"Unknown load type {value!r}. "
                f"Available: {', '.join(t.value for t in cls)}"
            ) from None

    @property
    def label(self) -> str:
        return "Center Point" if self is LoadType.CENTER else "Distributed"


@dataclass(frozen=True)
class CalculationInputs:
    """Board geometry (cm) and applied load (kg) for one calculation."""
    length: float     # span between supports (cm)
    width: float      # cm
    thickness: float  # depth in the load direction (cm)
    load: float       # total applied mass (kg)
    load_type: LoadType = LoadType.CENTER

    def __post_init__(self):
        # frozen: bypass __setattr__ to normalise the enum
        object.__setattr__(self, "load_type", LoadType.parse(self.load_type))

    def validate(self) -> None:
        """Raise InvalidInputError unless every field is usable."""
        for name in ("length", "width", "thickness", "load"):
            require_finite(name, getattr(self, name))
        require_positive("length", self.length)
        require_positive("width", self.width)
        require_positive("thickness", self.thickness)
        require_non_negative("load", self.load)

    @property
    def force_n(self) -> float:
        """Applied load as a force (N)."""
        return kg_to_newtons(self.load)


def kg_to_newtons(mass_kg: float) -> float:
    return mass_kg * GRAVITY


def newtons_to_kg(force_n: float) -> float:
    return force_n / GRAVITY


def midspan_moment(force_n: float, span_m: float, load_type: LoadType) -> float:
    """
    Max bending moment (Nm) on a simply supported span.
    Point load at midspan: M = F*L/4.  Uniform load of the same total: M = F*L/8.
    """
    if load_type is LoadType.CENTER:
        return force_n * span_m / 4.0
    return force_n * span_m / 8.0


def force_for_moment(moment_nm: float, span_m: float, load_type: LoadType) -> float:
    """Inverse of midspan_moment: total force (N) producing moment_nm."""
    if load_type is LoadType.CENTER:
        return moment_nm * 4.0 / span_m
    return moment_nm * 8.0 / span_m
