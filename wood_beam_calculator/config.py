"""
Analysis policy constants.

The pass threshold and the target safety factor used for the recommended
maximum load are policy values, not derived quantities. Defaults can be
overridden from the environment:

    WOOD_CALC_MIN_SAFETY_FACTOR     (default 1.5)
    WOOD_CALC_TARGET_SAFETY_FACTOR  (default 2.0)
    WOOD_CALC_PLOT_MULTIPLIER       (default 1.5)
    WOOD_CALC_SAMPLE_COUNT          (default 11)
    WOOD_CALC_DEFLECTION_LIMIT      (default 200, i.e. span/200)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .utils import InvalidInputError, require_positive

logger = logging.getLogger(__name__)

ENV_PREFIX = "WOOD_CALC_"


@dataclass(frozen=True)
class AnalysisSettings:
    min_safety_factor: float = 1.5      # is_safe when safety factor exceeds this
    target_safety_factor: float = 2.0   # reverse solve target for max recommended load
    plot_load_multiplier: float = 1.5   # curve upper bound = multiplier * max recommended load
    sample_count: int = 11
    deflection_limit: int = 200         # advisory serviceability limit, span / limit

    def __post_init__(self):
        require_positive("min_safety_factor", self.min_safety_factor)
        require_positive("target_safety_factor", self.target_safety_factor)
        require_positive("plot_load_multiplier", self.plot_load_multiplier)
        require_positive("deflection_limit", self.deflection_limit)
        if int(self.sample_count) != self.sample_count or self.sample_count < 2:
            raise InvalidInputError(
                f"sample_count must be an integer >= 2, got {self.sample_count!r}"
            )


DEFAULT_SETTINGS = AnalysisSettings()


def _read(env: Mapping[str, str], key: str, cast, default):
    raw = env.get(ENV_PREFIX + key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise InvalidInputError(
            f"{ENV_PREFIX + key} must be a {cast.__name__}, got {raw!r}"
        ) from None


def load_settings(env: Optional[Mapping[str, str]] = None) -> AnalysisSettings:
    """Build settings from environment variables, falling back to defaults."""
    if env is None:
        env = os.environ
    d = DEFAULT_SETTINGS
    settings = AnalysisSettings(
        min_safety_factor=_read(env, "MIN_SAFETY_FACTOR", float, d.min_safety_factor),
        target_safety_factor=_read(env, "TARGET_SAFETY_FACTOR", float, d.target_safety_factor),
        plot_load_multiplier=_read(env, "PLOT_MULTIPLIER", float, d.plot_load_multiplier),
        sample_count=_read(env, "SAMPLE_COUNT", int, d.sample_count),
        deflection_limit=_read(env, "DEFLECTION_LIMIT", int, d.deflection_limit),
    )
    if settings != d:
        logger.info("Using non-default analysis settings: %s", settings)
    return settings
