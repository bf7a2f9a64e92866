"""
Relativistic Rocket Kinematics - Plotting

Plots of a SimulationLog: speed, clock drift and Lorentz factor against
observer time. Uses the non-interactive Agg backend so it runs headless.
"""

import os
from dataclasses import dataclass
from typing import List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

from . import constants as C


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class TrajectoryData:
    """Container for processed log data used in plotting.

    Attributes:
        time_years: Coordinate time in years
        proper_time_years: Proper time in years
        beta: Coordinate speed as a fraction of c
        lorentz_factor: Lorentz factor
    """
    time_years: np.ndarray
    proper_time_years: np.ndarray
    beta: np.ndarray
    lorentz_factor: np.ndarray


# =============================================================================
# Configuration
# =============================================================================

def configure_plot_style() -> None:
    """Configure matplotlib defaults for the report plots."""
    plt.rcParams.update({
        'figure.figsize': (10, 6),
        'savefig.dpi': 150,
        'axes.grid': True,
        'axes.axisbelow': True,
        'grid.alpha': 0.3,
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
    """Convert a SimulationLog into arrays in plotting units."""
    return TrajectoryData(
        time_years=np.asarray(log.coordinate_time, dtype=np.float64) / C.YEAR,
        proper_time_years=np.asarray(log.proper_time, dtype=np.float64) / C.YEAR,
        beta=np.asarray(log.beta, dtype=np.float64),
        lorentz_factor=np.asarray(log.lorentz_factor, dtype=np.float64),
    )


# =============================================================================
# Plots
# =============================================================================

def plot_velocity_profile(data: TrajectoryData, output_dir: str) -> str:
    """Generate coordinate speed vs observer time plot.

    Args:
        data: TrajectoryData object
        output_dir: Directory to save the plot

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots()

    ax.plot(data.time_years, data.beta, 'r-', linewidth=2, label='Coordinate speed')
    ax.axhline(1.0, color='gray', linestyle='--', linewidth=1, label='c')

    ax.set_xlabel('Coordinate time (years)')
    ax.set_ylabel('Speed (c)')
    ax.set_title('Velocity Profile', fontweight='bold')
    ax.legend(loc='lower right')
    ax.set_ylim(0, 1.05)

    plt.tight_layout()
    path = os.path.join(output_dir, '01_velocity_profile.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


def plot_time_dilation(data: TrajectoryData, output_dir: str) -> str:
    """Generate proper time vs coordinate time plot."""
    fig, ax = plt.subplots()

    ax.plot(data.time_years, data.proper_time_years, 'b-', linewidth=2, label='Shipboard clock')
    ax.plot(data.time_years, data.time_years, 'k--', linewidth=1, label='Observer clock')

    ax.set_xlabel('Coordinate time (years)')
    ax.set_ylabel('Elapsed time (years)')
    ax.set_title('Time Dilation', fontweight='bold')
    ax.legend(loc='upper left')

    plt.tight_layout()
    path = os.path.join(output_dir, '02_time_dilation.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


def plot_lorentz_factor(data: TrajectoryData, output_dir: str) -> str:
    """Generate Lorentz factor vs coordinate time plot."""
    fig, ax = plt.subplots()

    ax.plot(data.time_years, data.lorentz_factor, 'g-', linewidth=2)

    ax.set_xlabel('Coordinate time (years)')
    ax.set_ylabel('Lorentz factor')
    ax.set_title('Lorentz Factor', fontweight='bold')
    ax.set_ylim(1.0, None)

    plt.tight_layout()
    path = os.path.join(output_dir, '03_lorentz_factor.png')
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)

    return path


def generate_all_plots(log, output_dir: str = "plots") -> List[str]:
    """Generate all plots for a simulation log.

    Args:
        log: SimulationLog (or any object with the same list attributes)
        output_dir: Directory to save plots (created if doesn't exist)

    Returns:
        List of paths to saved plot files
    """
    os.makedirs(output_dir, exist_ok=True)
    configure_plot_style()
    data = extract_log_data(log)

    return [
        plot_velocity_profile(data, output_dir),
        plot_time_dilation(data, output_dir),
        plot_lorentz_factor(data, output_dir),
    ]
