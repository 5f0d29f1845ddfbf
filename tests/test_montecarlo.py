import pytest
from rocket_flight import montecarlo
from rocket_flight.config import RocketConfig, create_test_config
from rocket_flight.main import SimulationLog
from rocket_flight.physics import create_rocket


def test_monte_carlo_small_campaign():
    cfg = create_test_config(max_time=1.0, mc_wind_dispersion=2.0, mc_fuel_dispersion=0.1)
    results = montecarlo.run_monte_carlo(cfg, n_runs=4, seed=3, verbose=False)
    assert results.n_runs == 4
    assert results.config is cfg
    for run in results.runs:
        assert set(run.dispersions_applied) == {'wind_speed_ms', 'fuel_scale'}
        assert run.flight_time_s == pytest.approx(1.0, abs=0.051)
        assert run.fuel_remaining_kg >= 0.0


def test_monte_carlo_reproducible():
    cfg = create_test_config(max_time=0.5)
    a = montecarlo.run_monte_carlo(cfg, n_runs=3, seed=9, verbose=False)
    b = montecarlo.run_monte_carlo(cfg, n_runs=3, seed=9, verbose=False)
    assert [r.dispersions_applied for r in a.runs] == [r.dispersions_applied for r in b.runs]
    assert [r.downrange_m for r in a.runs] == [r.downrange_m for r in b.runs]


def test_monte_carlo_custom_run_function():
    seen = []

    def fake_run(rocket_config, sim_config):
        seen.append((rocket_config, sim_config))
        physics = create_rocket(rocket_config)
        physics.state.max_altitude = 10.0
        return physics, SimulationLog(), "stub"

    results = montecarlo.run_monte_carlo(create_test_config(), RocketConfig(fuel=50.0),
                                         n_runs=5, seed=1, run_function=fake_run,
                                         verbose=False)
    assert len(seen) == 5
    assert all(sc.verbose is False for _, sc in seen)
    stats = results.get_statistic('max_altitude_m')
    assert stats == {'mean': 10.0, 'std': 0.0, 'min': 10.0, 'max': 10.0}
    assert all(r.final_reason == "stub" for r in results.runs)


def test_get_statistic_empty():
    results = montecarlo.MCResults()
    assert results.get_statistic('downrange_m') == {'mean': 0, 'std': 0, 'min': 0, 'max': 0}


def test_summary_contains_fields():
    results = montecarlo.run_monte_carlo(create_test_config(max_time=0.2), n_runs=2,
                                         seed=5, verbose=False)
    text = results.summary()
    assert "Monte Carlo Results: 2 runs" in text
    assert "max_altitude_m" in text
    assert "downrange_m" in text


@pytest.mark.slow
def test_monte_carlo_wind_spread_drives_downrange_spread():
    calm = montecarlo.run_monte_carlo(create_test_config(max_time=10.0, mc_wind_dispersion=0.0,
                                                         mc_fuel_dispersion=0.0),
                                      n_runs=5, seed=2, verbose=False)
    windy = montecarlo.run_monte_carlo(create_test_config(max_time=10.0, mc_wind_dispersion=10.0,
                                                          mc_fuel_dispersion=0.0),
                                       n_runs=20, seed=2, verbose=False)
    assert calm.get_statistic('downrange_m')['std'] == pytest.approx(0.0, abs=1e-9)
    assert windy.get_statistic('downrange_m')['std'] > 0.0


def test_monte_carlo_vertical_launch_reaches_altitude():
    cfg = create_test_config(max_time=3.0, launch_angle=0.0)
    results = montecarlo.run_monte_carlo(cfg, n_runs=3, seed=4, verbose=False)
    stats = results.get_statistic('max_altitude_m')
    assert stats['min'] > 0.0
