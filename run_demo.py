"""Demo script: fly one rocket in a gusty crosswind and print its timeline."""
from rocket_flight.config import RocketConfig, SimulationConfig
from rocket_flight.main import run_simulation
import numpy as np

config = SimulationConfig(launch_angle=0.0, wind_speed=5.0, enable_stochastic_wind=True,
                          wind_gust_sigma=1.5, seed=7, burn_time=12.0,
                          verbose=True)
physics, log, reason = run_simulation(RocketConfig(mass=900.0, fuel=120.0), config)

print("\n\n===== FLIGHT TRACKING DETAILS =====")
if len(log.time) > 0:
    times = np.array(log.time)
    alts = np.array(log.altitude)
    speeds = np.array(log.speed)
    fuel = np.array(log.fuel)
    print(f"Log entries: {len(log.time)}")
    print(f"Time range: {times[0]:.2f}s - {times[-1]:.2f}s")
    print(f"Peak altitude: {np.max(alts):.1f} m")
    print(f"Peak speed: {np.max(speeds):.1f} m/s")
    print(f"Final downrange: {log.x[-1]:.1f} m")
    print(f"Peak gust: {np.max(np.abs(log.wind_gust)):.2f} m/s")
    print()
    print("Engine Timeline:")
    prev_throttle = None
    for i in range(len(times)):
        engine_on = log.throttle[i] > 0 and fuel[i] > 0
        if engine_on != prev_throttle:
            print(f"  t={times[i]:7.2f}s | Alt={alts[i]:8.1f} m | "
                  f"V={speeds[i]:7.1f} m/s | Engine: {'ON' if engine_on else 'OFF'}")
            prev_throttle = engine_on

print()
print(f"Termination: {reason}")
print(f"Telemetry: {physics.get_telemetry()}")
