"""
Rectangular board cross-section.
Dimensions are entered in cm; properties are returned in SI units (m).
The load acts along the thickness, so thickness is the section depth.
"""

from .utils import require_positive


class BoardSection:
    """Rectangular board with calculated section properties."""

    def __init__(self, length_cm: float, width_cm: float, thickness_cm: float):
        require_positive("length", length_cm)
        require_positive("width", width_cm)
        require_positive("thickness", thickness_cm)
        self.L = length_cm / 100.0
        self.b = width_cm / 100.0
        self.t = thickness_cm / 100.0

    @classmethod
    def from_inputs(cls, inputs) -> "BoardSection":
        return cls(inputs.length, inputs.width, inputs.thickness)

    @property
    def I(self) -> float:
        """Second moment of area about the bending axis (m^4). I = b*t^3/12."""
        return self.b * self.t ** 3 / 12.0

    @property
    def Z(self) -> float:
        """Elastic section modulus (m^3). Z = I / (t/2) = b*t^2/6."""
        return self.b * self.t ** 2 / 6.0

    @property
    def volume(self) -> float:
        """Board volume (m^3)."""
        return self.L * self.b * self.t

    def self_weight_kg(self, density_kg_m3: float) -> float:
        """Mass of the board itself (kg) = volume * density."""
        return self.volume * density_kg_m3

    def __repr__(self):
        return f"BoardSection({self.label()})"

    def label(self) -> str:
        return f"{self.L * 100:g}x{self.b * 100:g}x{self.t * 100:g} cm"
