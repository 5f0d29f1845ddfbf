"""
Rocket Flight 2D Simulation - Trajectory Visualization

Static summary plots of a SimulationLog, written as PNG files with the
non-interactive Agg backend.
"""

import os
from dataclasses import dataclass
from typing import List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class TrajectoryData:
    """Container for trajectory arrays used in plotting.

    Attributes:
        time: Time in seconds
        x: Downrange position in metres
        altitude: Altitude in metres
        vx: Horizontal velocity in m/s
        vy: Vertical velocity in m/s
        speed: Speed magnitude in m/s
        fuel: Remaining fuel in kg
        mass: Total mass in kg
        throttle: Thrust multiplier
        thrust_ax, thrust_ay: Thrust acceleration in m/s^2
        wind_ax: Wind acceleration in m/s^2
        drag_ax, drag_ay: Drag acceleration in m/s^2
        gravity_ay: Gravity acceleration in m/s^2 (negative)
        net_ay: Net vertical acceleration in m/s^2
    """
    time: np.ndarray
    x: np.ndarray
    altitude: np.ndarray
    vx: np.ndarray
    vy: np.ndarray
    speed: np.ndarray
    fuel: np.ndarray
    mass: np.ndarray
    throttle: np.ndarray
    thrust_ax: np.ndarray
    thrust_ay: np.ndarray
    wind_ax: np.ndarray
    drag_ax: np.ndarray
    drag_ay: np.ndarray
    gravity_ay: np.ndarray
    net_ay: np.ndarray


# =============================================================================
# Configuration
# =============================================================================

def configure_plot_style() -> None:
    """Configure matplotlib defaults for the summary plots."""
    plt.rcParams.update({
        'figure.figsize': (10, 6),
        'savefig.dpi': 150,
        'axes.grid': True,
        'axes.axisbelow': True,
        'grid.alpha': 0.3,
        'grid.linestyle': '-',
        'grid.linewidth': 0.5,
        'font.size': 11,
        'axes.titlesize': 13,
        'axes.labelsize': 12,
        'legend.fontsize': 10,
        'lines.linewidth': 1.8,
    })


# =============================================================================
# Data Processing
# =============================================================================

def extract_log_data(log) -> TrajectoryData:
    """Convert a SimulationLog into numpy arrays.

    Raises:
        ValueError: If the log holds no samples
    """
    if len(log.time) == 0:
        raise ValueError("Cannot plot an empty simulation log")

    return TrajectoryData(
        time=np.array(log.time),
        x=np.array(log.x),
        altitude=np.array(log.altitude),
        vx=np.array(log.vx),
        vy=np.array(log.vy),
        speed=np.array(log.speed),
        fuel=np.array(log.fuel),
        mass=np.array(log.mass),
        throttle=np.array(log.throttle),
        thrust_ax=np.array(log.thrust_ax),
        thrust_ay=np.array(log.thrust_ay),
        wind_ax=np.array(log.wind_ax),
        drag_ax=np.array(log.drag_ax),
        drag_ay=np.array(log.drag_ay),
        gravity_ay=np.array(log.gravity_ay),
        net_ay=np.array(log.net_ay),
    )


def find_burnout_index(data: TrajectoryData) -> int:
    """Index of the first sample with an empty tank (last sample if never)."""
    empty = np.nonzero(data.fuel <= 0.0)[0]
    if len(empty) == 0:
        return len(data.time) - 1
    return int(empty[0])


# =============================================================================
# Plots
# =============================================================================

def _save(fig, output_dir: str, name: str) -> str:
    plt.tight_layout()
    path = os.path.join(output_dir, name)
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_altitude_profile(data: TrajectoryData, output_dir: str) -> str:
    """Altitude vs time with the burnout point marked.

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots()
    burnout = find_burnout_index(data)

    ax.fill_between(data.time, 0, data.altitude, alpha=0.25, color='#1f77b4')
    ax.plot(data.time, data.altitude, 'b-', linewidth=2, label='Altitude')
    ax.scatter([data.time[burnout]], [data.altitude[burnout]],
               c='red', s=80, marker='x', zorder=5,
               label=f'Burnout ({data.altitude[burnout]:.1f} m)')

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Altitude (m)')
    ax.set_title('Altitude Profile', fontweight='bold')
    ax.legend(loc='upper right')
    ax.set_ylim(0, None)
    return _save(fig, output_dir, '01_altitude_profile.png')


def plot_velocity_profile(data: TrajectoryData, output_dir: str) -> str:
    """Speed and velocity components vs time."""
    fig, ax = plt.subplots()

    ax.plot(data.time, data.speed, 'k-', linewidth=2, label='Speed')
    ax.plot(data.time, data.vx, 'r--', label='Horizontal (vx)')
    ax.plot(data.time, data.vy, 'g--', label='Vertical (vy)')

    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Velocity (m/s)')
    ax.set_title('Velocity Profile', fontweight='bold')
    ax.legend(loc='best')
    return _save(fig, output_dir, '02_velocity_profile.png')


def plot_mass_profile(data: TrajectoryData, output_dir: str) -> str:
    """Fuel and total mass vs time on twin axes."""
    fig, ax = plt.subplots()

    ax.plot(data.time, data.mass, 'b-', label='Total mass')
    ax.set_xlabel('Time (s)')
    ax.set_ylabel('Total mass (kg)', color='b')

    ax2 = ax.twinx()
    ax2.plot(data.time, data.fuel, 'm--', label='Fuel')
    ax2.set_ylabel('Fuel (kg)', color='m')
    ax2.set_ylim(0, None)

    ax.set_title('Mass Depletion', fontweight='bold')
    return _save(fig, output_dir, '03_mass_profile.png')


def plot_trajectory(data: TrajectoryData, output_dir: str) -> str:
    """Altitude vs downrange."""
    fig, ax = plt.subplots()

    ax.plot(data.x, data.altitude, 'b-', linewidth=2)
    ax.scatter([data.x[0]], [data.altitude[0]], c='green', s=60, zorder=5, label='Launch')
    ax.scatter([data.x[-1]], [data.altitude[-1]], c='darkorange', s=80,
               marker='*', zorder=5, label='Final')

    ax.set_xlabel('Downrange (m)')
    ax.set_ylabel('Altitude (m)')
    ax.set_title('Trajectory', fontweight='bold')
    ax.legend(loc='best')
    ax.set_ylim(0, None)
    return _save(fig, output_dir, '04_trajectory.png')


def plot_acceleration_breakdown(data: TrajectoryData, output_dir: str) -> str:
    """Per-source accelerations on both axes, with gravity and net on the vertical."""
    fig, (ax_x, ax_y) = plt.subplots(2, 1, sharex=True)

    ax_x.plot(data.time, data.thrust_ax, label='Thrust')
    ax_x.plot(data.time, data.wind_ax, label='Wind')
    ax_x.plot(data.time, data.drag_ax, label='Drag')
    ax_x.set_ylabel('a_x (m/s²)')
    ax_x.legend(loc='best')

    ax_y.plot(data.time, data.thrust_ay, label='Thrust')
    ax_y.plot(data.time, data.drag_ay, label='Drag')
    ax_y.plot(data.time, data.gravity_ay, label='Gravity')
    ax_y.plot(data.time, data.net_ay, 'k--', label='Net')
    ax_y.set_xlabel('Time (s)')
    ax_y.set_ylabel('a_y (m/s²)')
    ax_y.legend(loc='best')

    ax_x.set_title('Acceleration Breakdown', fontweight='bold')
    return _save(fig, output_dir, '05_acceleration_breakdown.png')


def generate_all_plots(log, output_dir: str = "plots") -> List[str]:
    """Generate every summary plot for a simulation log.

    Args:
        log: SimulationLog (or any object with the same list attributes)
        output_dir: Directory to save plots (created if it doesn't exist)

    Returns:
        List of paths to saved plot files
    """
    os.makedirs(output_dir, exist_ok=True)
    configure_plot_style()
    data = extract_log_data(log)

    plot_functions = [
        plot_altitude_profile,
        plot_velocity_profile,
        plot_mass_profile,
        plot_trajectory,
        plot_acceleration_breakdown,
    ]
    return [fn(data, output_dir) for fn in plot_functions]
