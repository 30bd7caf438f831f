"""
Load vs. deflection curve for plotting.
Samples evenly spaced loads from zero up to a multiple of the recommended
maximum load and recomputes the midspan deflection at each one.
"""

import logging
import math
from dataclasses import dataclass, asdict
from typing import Optional

from .beam_analysis import CalculationResult, section_for, calc_deflection
from .config import DEFAULT_SETTINGS, AnalysisSettings
from .loads import CalculationInputs, kg_to_newtons
from .material_data import MaterialProperties
from .utils import InvalidInputError, cap_finite

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveSample:
    """One plotted point."""
    load: float          # kg, rounded to whole kg unless the step is finer
    deflection: float    # mm
    safe_limit: float    # recommended max load (kg), for the reference line


def sample_curve(inputs: CalculationInputs, material: MaterialProperties,
                 result: CalculationResult, sample_count: Optional[int] = None,
                 settings: Optional[AnalysisSettings] = None) -> tuple:
    """
    Return sample_count CurveSamples with ascending load, starting at zero.

    The upper bound is result.max_load_recommended * plot_load_multiplier.
    Deflection is recomputed per sample since it depends on the load;
    only the safe limit is taken from result.
    """
    settings = settings or DEFAULT_SETTINGS
    if sample_count is None:
        sample_count = settings.sample_count
    if isinstance(sample_count, bool) or not isinstance(sample_count, int) or sample_count < 2:
        raise InvalidInputError(f"sample_count must be an integer >= 2, got {sample_count!r}")

    safe_limit = result.max_load_recommended
    if not math.isfinite(safe_limit) or safe_limit <= 0:
        raise InvalidInputError(
            f"max_load_recommended must be positive and finite to plot, got {safe_limit!r}"
        )

    inputs.validate()
    section = section_for(inputs)
    E = material.E_pa

    max_plot_load = safe_limit * settings.plot_load_multiplier
    step = max_plot_load / (sample_count - 1)

    # whole kg, unless the step is below 1 kg and rounding would repeat loads
    ndigits = max(0, math.ceil(-math.log10(step)))

    samples = []
    for i in range(sample_count):
        load_kg = i * step
        delta_m = calc_deflection(kg_to_newtons(load_kg), section.L, E,
                                  section.I, inputs.load_type)
        samples.append(CurveSample(
            load=round(load_kg) if ndigits == 0 else round(load_kg, ndigits),
            deflection=cap_finite(delta_m * 1000.0),
            safe_limit=safe_limit,
        ))

    logger.debug("Sampled %d points up to %.1f kg", sample_count, max_plot_load)
    return tuple(samples)


def curve_to_rows(samples) -> list[dict]:
    """Samples as plain dicts, for tables and CSV export."""
    return [asdict(s) for s in samples]
