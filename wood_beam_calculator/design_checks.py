"""
Board design checks.
Returns utilisation ratios and pass/fail for each check.

  Strength:     sigma <= MOR / SF_min                 (governs is_safe)
  Load:         applied load <= recommended max load  (SF = target)
  Deflection:   delta <= L / limit                    (advisory only)
"""

from dataclasses import dataclass
from typing import Optional

from .beam_analysis import CalculationResult
from .config import DEFAULT_SETTINGS, AnalysisSettings
from .loads import CalculationInputs
from .material_data import MaterialProperties
from .utils import format_safety_factor


@dataclass
class CheckResult:
    """Result of a single design check."""
    name: str
    demand: float
    capacity: float
    utilisation: float  # demand/capacity as percentage
    passed: bool
    unit: str = ""
    details: str = ""


def _util(demand: float, capacity: float) -> float:
    return (demand / capacity * 100) if capacity > 0 else 999.0


def check_strength(result: CalculationResult, material: MaterialProperties,
                   min_safety_factor: float) -> CheckResult:
    """
    Bending strength check. Allowable stress = MOR / SF_min.
    Pass/fail follows result.is_safe so the two can never disagree.
    """
    allowable = material.modulus_of_rupture / min_safety_factor
    details = (
        f"MOR={material.modulus_of_rupture:g} MPa, SF_min={min_safety_factor:g}, "
        f"sigma={result.bending_stress:.2f} MPa, SF={format_safety_factor(result.safety_factor)}"
    )
    return CheckResult(
        name="Bending strength",
        demand=result.bending_stress,
        capacity=allowable,
        utilisation=_util(result.bending_stress, allowable),
        passed=result.is_safe,
        unit="MPa",
        details=details,
    )


def check_recommended_load(inputs: CalculationInputs, result: CalculationResult,
                           target_safety_factor: float) -> CheckResult:
    """Applied load against the load giving the target safety factor."""
    capacity = result.max_load_recommended
    util = _util(inputs.load, capacity)
    return CheckResult(
        name="Recommended load",
        demand=inputs.load,
        capacity=capacity,
        utilisation=util,
        passed=util <= 100.0,
        unit="kg",
        details=f"max load at SF={target_safety_factor:g}, {inputs.load_type.label.lower()}",
    )


def check_deflection(inputs: CalculationInputs, result: CalculationResult,
                     deflection_limit: int = 200) -> CheckResult:
    """
    Serviceability check, allowable = span / deflection_limit.
    Advisory: does not feed into is_safe.
    """
    span_mm = inputs.length * 10.0
    allowable = span_mm / deflection_limit
    util = _util(result.deflection, allowable)
    details = (
        f"I={result.moment_of_inertia:.3e} m^4, "
        f"delta={result.deflection:.2f} mm, "
        f"allow=L/{deflection_limit}={allowable:.1f} mm"
    )
    return CheckResult(
        name="Deflection",
        demand=result.deflection,
        capacity=allowable,
        utilisation=util,
        passed=util <= 100.0,
        unit="mm",
        details=details,
    )


def run_all_checks(inputs: CalculationInputs, material: MaterialProperties,
                   result: CalculationResult,
                   settings: Optional[AnalysisSettings] = None) -> list:
    """Run all design checks and return results."""
    settings = settings or DEFAULT_SETTINGS
    return [
        check_strength(result, material, settings.min_safety_factor),
        check_recommended_load(inputs, result, settings.target_safety_factor),
        check_deflection(inputs, result, settings.deflection_limit),
    ]
