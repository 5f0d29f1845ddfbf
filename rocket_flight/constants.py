"""
Rocket Flight 2D Simulation - Physical Constants and Vehicle Parameters

This module defines all physical constants, vehicle defaults, wind model
coefficients and integrator limits used throughout the simulation.
"""

import numpy as np

# =============================================================================
# PHYSICAL CONSTANTS
# =============================================================================

# Gravitational acceleration (m/s^2), constant with altitude
G = 9.81

# Air density (kg/m^3), sea level value used at every altitude
AIR_DENSITY = 1.225

# =============================================================================
# VEHICLE DEFAULTS
# =============================================================================

DEFAULT_DRY_MASS = 1000.0     # kg
DEFAULT_THRUST_SCALE = 1.0    # nominal thrust scale (not used in force calc)
DEFAULT_FUEL_MASS = 100.0     # kg (also the tank capacity)

FUEL_CONSUMPTION_RATE = 5.0   # kg/s at thrust multiplier 1.0
ROCKET_RADIUS = 1.1           # m
ROCKET_HEIGHT = 18.0          # m (descriptive only)
DRAG_COEFFICIENT = 0.3        # Cd

# Cross-sectional area A = pi * r^2 (m^2)
CROSS_SECTIONAL_AREA = np.pi * ROCKET_RADIUS ** 2

# =============================================================================
# PROPULSION
# =============================================================================

# Thrust force at multiplier 1.0 (N)
THRUST_FORCE = 50000.0

# =============================================================================
# WIND MODEL
# =============================================================================

# Empirical coupling between air-relative horizontal speed and wind force
WIND_FORCE_COEFFICIENT = 500.0

# Fraction of the accumulated gust retained per decay tick
GUST_DECAY_FACTOR = 0.98

# =============================================================================
# INTEGRATOR LIMITS
# =============================================================================

# Maximum step applied by a single update (s)
MAX_DT = 0.05

# Speeds at or below this are treated as rest (m/s)
SPEED_EPSILON = 0.1

# Horizontal velocity retained per step while resting on the ground
GROUND_FRICTION_FACTOR = 0.95

# Ground plane altitude (m)
GROUND_LEVEL = 0.0

# Orientation at construction and reset: pi/2 rad
INITIAL_ANGLE = np.pi / 2

# Display offset: telemetry angle = degrees(angle) - 90
ANGLE_DISPLAY_OFFSET_DEG = 90.0

# =============================================================================
# DRIVER DEFAULTS
# =============================================================================

DT = 1.0 / 60.0               # Frame time of a 60 Hz driver (s)
MAX_TIME = 60.0               # Maximum simulation time (s)
LANDED_SPEED_THRESHOLD = 0.5  # m/s
MIN_FLIGHT_TIME = 1.0         # s before a landing can end the run
WIND_GUST_SIGMA = 2.0         # m/s, 1-sigma stochastic gust impulse
PRINT_INTERVAL = 5.0          # s between verbose status rows
