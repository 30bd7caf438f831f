"""
Board analysis for a simply supported span.
Point load at midspan or uniformly distributed load, small-deflection
linear elastic theory.
Units: inputs in cm / kg / MPa, internal SI (m, N, Pa), results in mm / MPa / kg.

  support ---------------- L ---------------- support
              (point load at L/2, or w = F/L along the span)
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_SETTINGS, AnalysisSettings
from .loads import (
    CalculationInputs, LoadType,
    force_for_moment, midspan_moment, newtons_to_kg,
)
from .material_data import MaterialProperties
from .section_properties import BoardSection
from .utils import cap_finite, capped_ratio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of one board analysis. Recomputed on every input change."""
    deflection: float             # midspan deflection (mm)
    bending_stress: float         # extreme fibre stress (MPa)
    safety_factor: float          # MOR / stress, math.inf when unloaded
    is_safe: bool
    max_load_recommended: float   # load giving the target safety factor (kg)
    weight_of_board: float        # self-weight (kg)
    moment_of_inertia: float = 0.0  # m^4
    bending_moment: float = 0.0     # Nm


# ═══════════════════════════════════════════════════════════════════
# DEFLECTION FUNCTIONS
# ═══════════════════════════════════════════════════════════════════


def calc_deflection_center(F_n: float, span_m: float, E_pa: float, I_m4: float) -> float:
    """
    Midspan deflection for a point load at midspan.
    delta = F*L^3 / (48*E*I), returned in m.
    """
    return capped_ratio(F_n * span_m ** 3, 48.0 * E_pa * I_m4)


def calc_deflection_distributed(F_n: float, span_m: float, E_pa: float, I_m4: float) -> float:
    """
    Midspan deflection for a total load F spread uniformly along the span.
    delta = 5*F*L^3 / (384*E*I), i.e. 5wL^4/384EI with w = F/L. Returned in m.
    """
    return capped_ratio(5.0 * F_n * span_m ** 3, 384.0 * E_pa * I_m4)


def calc_deflection(F_n: float, span_m: float, E_pa: float, I_m4: float,
                    load_type: LoadType) -> float:
    """Midspan deflection (m) for either load placement."""
    if load_type is LoadType.CENTER:
        return calc_deflection_center(F_n, span_m, E_pa, I_m4)
    return calc_deflection_distributed(F_n, span_m, E_pa, I_m4)


# ═══════════════════════════════════════════════════════════════════
# STRESS AND CAPACITY
# ═══════════════════════════════════════════════════════════════════


def calc_bending_stress(M_nm: float, section: BoardSection) -> float:
    """Extreme fibre stress sigma = M*y/I = M/Z with y = t/2 (Pa)."""
    return capped_ratio(M_nm, section.Z)


def calc_safety_factor(MOR_pa: float, stress_pa: float) -> float:
    """MOR / stress. An unloaded board has no stress, so the factor is infinite."""
    if stress_pa <= 0:
        return math.inf
    return MOR_pa / stress_pa


def calc_max_load(section: BoardSection, material: MaterialProperties,
                  load_type: LoadType, target_safety_factor: float) -> float:
    """
    Reverse solve: load (kg) at which MOR / stress == target_safety_factor.
      target stress = MOR / target
      target M = target stress * I / y = target stress * Z
      target F = 4M/L (center) or 8M/L (distributed)
    """
    target_stress = material.MOR_pa / target_safety_factor
    target_M = target_stress * section.Z
    target_F = force_for_moment(target_M, section.L, load_type)
    return newtons_to_kg(target_F)


# ═══════════════════════════════════════════════════════════════════
# MAIN ANALYSIS
# ═══════════════════════════════════════════════════════════════════


def section_for(inputs: CalculationInputs) -> BoardSection:
    return BoardSection.from_inputs(inputs)


def analyse_board(inputs: CalculationInputs, material: MaterialProperties,
                  settings: Optional[AnalysisSettings] = None) -> CalculationResult:
    """
    Analyse a board on two supports under the given load.

    Raises InvalidInputError before computing anything if a geometry field
    is not positive, the load is negative, or any value is NaN/infinite.
    A vanishingly thin board gives results capped at the largest float.
    """
    settings = settings or DEFAULT_SETTINGS
    inputs.validate()
    section = section_for(inputs)

    L = section.L
    F = inputs.force_n
    E = material.E_pa
    I = section.I

    M = midspan_moment(F, L, inputs.load_type)
    delta_m = calc_deflection(F, L, E, I, inputs.load_type)
    stress = calc_bending_stress(M, section)

    safety_factor = calc_safety_factor(material.MOR_pa, stress)
    max_load = calc_max_load(section, material, inputs.load_type,
                             settings.target_safety_factor)

    result = CalculationResult(
        deflection=cap_finite(delta_m * 1000.0),
        bending_stress=stress / 1e6,
        safety_factor=safety_factor,
        is_safe=safety_factor > settings.min_safety_factor,
        max_load_recommended=max_load,
        weight_of_board=section.self_weight_kg(material.density),
        moment_of_inertia=I,
        bending_moment=M,
    )
    logger.debug(
        "%s %s load=%.2f kg: sigma=%.3f MPa, SF=%s, delta=%.2f mm",
        section.label(), inputs.load_type.value, inputs.load,
        result.bending_stress, result.safety_factor, result.deflection,
    )
    return result


analyze = analyse_board
