"""Tests for analysis settings and environment overrides."""
import logging

import pytest

from wood_beam_calculator.config import DEFAULT_SETTINGS, AnalysisSettings, load_settings
from wood_beam_calculator.logging_config import PACKAGE_LOGGER, setup_logging
from wood_beam_calculator.utils import InvalidInputError


class TestAnalysisSettings:

    def test_defaults(self):
        assert DEFAULT_SETTINGS.min_safety_factor == 1.5
        assert DEFAULT_SETTINGS.target_safety_factor == 2.0
        assert DEFAULT_SETTINGS.plot_load_multiplier == 1.5
        assert DEFAULT_SETTINGS.sample_count == 11
        assert DEFAULT_SETTINGS.deflection_limit == 200

    @pytest.mark.parametrize("field", ["min_safety_factor", "target_safety_factor",
                                       "plot_load_multiplier", "deflection_limit"])
    def test_non_positive_rejected(self, field):
        with pytest.raises(InvalidInputError, match=field):
            AnalysisSettings(**{field: 0})

    @pytest.mark.parametrize("count", [1, 0, 3.5])
    def test_bad_sample_count_rejected(self, count):
        with pytest.raises(InvalidInputError, match="sample_count"):
            AnalysisSettings(sample_count=count)


class TestLoadSettings:

    def test_empty_environment_gives_defaults(self):
        assert load_settings({}) == DEFAULT_SETTINGS

    def test_blank_values_ignored(self):
        assert load_settings({"WOOD_CALC_SAMPLE_COUNT": "  "}) == DEFAULT_SETTINGS

    def test_overrides(self):
        env = {
            "WOOD_CALC_MIN_SAFETY_FACTOR": "1.8",
            "WOOD_CALC_TARGET_SAFETY_FACTOR": "3",
            "WOOD_CALC_PLOT_MULTIPLIER": "2.0",
            "WOOD_CALC_SAMPLE_COUNT": "21",
            "WOOD_CALC_DEFLECTION_LIMIT": "300",
        }
        s = load_settings(env)
        assert s == AnalysisSettings(1.8, 3.0, 2.0, 21, 300)

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("WOOD_CALC_TARGET_SAFETY_FACTOR", "2.5")
        assert load_settings().target_safety_factor == 2.5

    def test_malformed_value_raises(self):
        with pytest.raises(InvalidInputError, match="WOOD_CALC_SAMPLE_COUNT"):
            load_settings({"WOOD_CALC_SAMPLE_COUNT": "eleven"})

    def test_override_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="wood_beam_calculator.config"):
            load_settings({"WOOD_CALC_DEFLECTION_LIMIT": "250"})
        assert "non-default" in caplog.text


class TestLogging:

    def test_setup_is_idempotent(self, tmp_path):
        """Algorithm: calling twice leaves one console and one file handler."""
        log_file = tmp_path / "calc.log"
        setup_logging(logging.DEBUG, str(log_file))
        logger = setup_logging(logging.DEBUG, str(log_file))
        assert logger.name == PACKAGE_LOGGER
        assert len(logger.handlers) == 2
        logging.getLogger("wood_beam_calculator.beam_analysis").debug("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
