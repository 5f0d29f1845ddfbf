"""
Rocket Flight 2D Simulation - Fuel consumption and mass.
"""

from . import constants as C


def compute_fuel_burn(thrust_multiplier: float, dt: float,
                      consumption_rate: float = C.FUEL_CONSUMPTION_RATE) -> float:
    """
    Fuel requested by one step (kg). Negative when the multiplier is negative.
    """
    return consumption_rate * thrust_multiplier * dt


def update_fuel(fuel_mass: float, thrust_multiplier: float, dt: float,
                consumption_rate: float = C.FUEL_CONSUMPTION_RATE) -> float:
    """
    Euler update for fuel mass with a floor at zero.

    Only a positive burn is applied; fuel never increases.
    """
    burn = compute_fuel_burn(thrust_multiplier, dt, consumption_rate)
    if burn > 0:
        return max(0.0, fuel_mass - burn)
    return fuel_mass


def compute_total_mass(dry_mass: float, fuel_mass: float) -> float:
    """Dry mass plus remaining fuel (kg)."""
    return dry_mass + fuel_mass


def is_fuel_exhausted(fuel_mass: float) -> bool:
    """True if no fuel remains."""
    return fuel_mass <= 0.0


def get_fuel_fraction(fuel_mass: float, max_fuel: float) -> float:
    """
    Fraction of tank capacity remaining, in [0, 1].
    """
    if max_fuel <= 0.0:
        return 0.0
    return min(1.0, max(0.0, fuel_mass) / max_fuel)
