# Fractify - Configuration Tests
# Copyright (c) 2024 Fractify Contributors. All rights reserved.

"""Tests for the Config dataclass, its presets and validation."""

import math
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from fractify.config import Config
from fractify.exceptions import ConfigError, FractifyError


class TestConfig:
    """Tests for the main Config class."""

    def test_default_values(self):
        """Test default configuration values."""
        cfg = Config()
        assert cfg.acceptable_error == 1e-7
        assert cfg.value_ceiling == 10000

    def test_custom_values(self):
        cfg = Config(acceptable_error=1e-3, value_ceiling=50)
        assert cfg.acceptable_error == 1e-3
        assert cfg.value_ceiling == 50

    def test_zero_error_allowed(self):
        cfg = Config(acceptable_error=0)
        assert cfg.acceptable_error == 0.0
        assert isinstance(cfg.acceptable_error, float)

    def test_numpy_scalars(self):
        cfg = Config(acceptable_error=np.float64(1e-4), value_ceiling=np.int64(100))
        assert cfg.value_ceiling == 100
        assert type(cfg.value_ceiling) is int
        assert type(cfg.acceptable_error) is float

    def test_numpy_ceiling_used_by_approximator(self):
        from fractify import fractify, Fractional

        cfg = Config(value_ceiling=np.int64(100))
        assert fractify(math.pi, cfg) == Fractional(22, 7)

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(FrozenInstanceError):
            cfg.value_ceiling = 5


class TestConfigPresets:
    """Tests for Config factory methods."""

    def test_default_preset(self):
        assert Config.default() == Config()

    def test_coarse_preset(self):
        cfg = Config.coarse()
        assert cfg.acceptable_error == 1e-4
        assert cfg.value_ceiling == 100

    def test_fine_preset(self):
        cfg = Config.fine()
        assert cfg.acceptable_error == 1e-10
        assert cfg.value_ceiling == 1_000_000


class TestConfigValidation:
    """Invalid tunables raise ConfigError."""

    @pytest.mark.parametrize("err", [-1e-7, math.nan, math.inf, "small", None, True])
    def test_bad_acceptable_error(self, err):
        with pytest.raises(ConfigError) as exc_info:
            Config(acceptable_error=err)
        assert exc_info.value.field == 'acceptable_error'

    @pytest.mark.parametrize("ceiling", [1, 0, -10, 2.5, "100", False])
    def test_bad_value_ceiling(self, ceiling):
        with pytest.raises(ConfigError) as exc_info:
            Config(value_ceiling=ceiling)
        assert exc_info.value.field == 'value_ceiling'

    def test_config_error_hierarchy(self):
        with pytest.raises(FractifyError):
            Config(value_ceiling=1)
        with pytest.raises(ValueError):
            Config(value_ceiling=1)


class TestConfigSerialization:

    def test_to_dict(self):
        assert Config().to_dict() == {'acceptableError': 1e-7, 'valueCeiling': 10000}

    def test_repr(self):
        assert repr(Config()) == "Config(acceptable_error=1e-07, value_ceiling=10000)"
