"""
Rocket Flight 2D Simulation Package

A fixed-step simulation of a rocket flying in a vertical plane under
thrust, gravity, wind and drag, with display telemetry for a render loop.

Modules:
    - constants: Physical constants, vehicle defaults, integrator limits
    - config: Vehicle and driver configuration dataclasses
    - state: Flight state dataclass
    - mass: Fuel consumption
    - forces: Thrust, wind, gravity and drag accelerations
    - integrators: Semi-implicit Euler step with ground contact
    - physics: RocketPhysics facade (launch, update, reset, wind, telemetry)
    - validation: Input and state checks
    - main: Headless driver and flight log
    - montecarlo: Wind/fuel dispersion campaign
    - plotting: Summary plots
"""

from .config import RocketConfig, SimulationConfig, create_default_config, create_test_config
from .state import RocketState, create_initial_state
from .physics import RocketPhysics, create_rocket
from .main import run_simulation, SimulationLog
from .validation import ValidationError

__version__ = "1.0.0"
__author__ = "Rocket Flight Simulation Team"

__all__ = [
    'RocketConfig',
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
    'RocketState',
    'create_initial_state',
    'RocketPhysics',
    'create_rocket',
    'run_simulation',
    'SimulationLog',
    'ValidationError',
]
