"""Tests for config module."""
import pytest
from rocket_flight import config
from rocket_flight import constants as C


def test_rocket_config_defaults():
    cfg = config.RocketConfig()
    assert cfg.resolve() == (C.DEFAULT_DRY_MASS, C.DEFAULT_THRUST_SCALE, C.DEFAULT_FUEL_MASS)


def test_rocket_config_custom_values():
    cfg = config.RocketConfig(mass=1500, thrust=2.0, fuel=250)
    assert cfg.resolve() == (1500.0, 2.0, 250.0)


def test_rocket_config_honours_zero_fuel_and_thrust():
    cfg = config.RocketConfig(thrust=0.0, fuel=0.0)
    assert cfg.resolve() == (C.DEFAULT_DRY_MASS, 0.0, 0.0)


def test_rocket_config_rejects_non_positive_mass():
    with pytest.raises(ValueError):
        config.RocketConfig(mass=0.0)
    with pytest.raises(ValueError):
        config.RocketConfig(mass=-10.0)


def test_rocket_config_rejects_negative_fuel():
    with pytest.raises(ValueError):
        config.RocketConfig(fuel=-1.0)


def test_falsy_defaults_replace_zero():
    cfg = config.RocketConfig(mass=0, thrust=0, fuel=0, falsy_defaults=True)
    assert cfg.resolve() == (C.DEFAULT_DRY_MASS, C.DEFAULT_THRUST_SCALE, C.DEFAULT_FUEL_MASS)


def test_from_mapping_partial():
    cfg = config.RocketConfig.from_mapping({'fuel': 80, 'colour': 'red'})
    assert cfg.resolve() == (C.DEFAULT_DRY_MASS, C.DEFAULT_THRUST_SCALE, 80.0)


def test_from_mapping_none_and_empty():
    assert config.RocketConfig.from_mapping(None).resolve() == config.RocketConfig().resolve()
    assert config.RocketConfig.from_mapping({}).resolve() == config.RocketConfig().resolve()


def test_from_mapping_falsy_mode():
    cfg = config.RocketConfig.from_mapping({'mass': 0, 'fuel': 0}, falsy_defaults=True)
    assert cfg.resolve() == (C.DEFAULT_DRY_MASS, C.DEFAULT_THRUST_SCALE, C.DEFAULT_FUEL_MASS)


def test_rocket_config_frozen():
    cfg = config.RocketConfig()
    with pytest.raises(Exception):  # FrozenInstanceError
        cfg.mass = 10.0


def test_simulation_config_defaults():
    cfg = config.SimulationConfig()
    assert cfg.dt == C.DT
    assert cfg.max_time == C.MAX_TIME
    assert cfg.throttle == 1.0
    assert cfg.enable_stochastic_wind is False
    assert cfg.strict_inputs is True


def test_simulation_config_frozen():
    cfg = config.SimulationConfig()
    with pytest.raises(Exception):  # FrozenInstanceError
        cfg.dt = 0.5


def test_create_default_config():
    cfg = config.create_default_config()
    assert isinstance(cfg, config.SimulationConfig)
    assert cfg.dt == C.DT


def test_create_test_config():
    cfg = config.create_test_config()
    assert cfg.dt == 0.05
    assert cfg.max_time == 5.0
    assert cfg.verbose is False


def test_create_test_config_overrides():
    cfg = config.create_test_config(dt=0.01, max_time=2.0, wind_speed=4.0)
    assert cfg.dt == 0.01
    assert cfg.max_time == 2.0
    assert cfg.wind_speed == 4.0


def test_launch_angle_default_and_override():
    assert config.SimulationConfig().launch_angle == C.INITIAL_ANGLE
    assert config.create_test_config(launch_angle=0.0).launch_angle == 0.0
