"""
Relativistic Rocket Kinematics - Physical Constants and Simulation Defaults

This module defines the physical constants, unit conversions and numerical
defaults used throughout the package. All values are SI.
"""

# =============================================================================
# PHYSICAL CONSTANTS
# =============================================================================

# Speed of light in vacuum (m/s)
C = 299792458.0

# Speed of light squared (m^2/s^2)
C_SQUARED = C * C

# Reference proper acceleration (m/s^2), "one gee" for travel-time tables
G = 9.8

# =============================================================================
# UNIT CONVERSIONS
# =============================================================================

# Light-year (m)
LIGHT_YEAR = 9460730472580800.0

# Defined year: 365 days of 24 hours (s)
YEAR = float(365 * 24 * 3600)

# =============================================================================
# NUMERICAL TOLERANCES
# =============================================================================

# Magnitude at or below which a vector normalizes to zero.
# Single-precision rendering of 1e-5.
NORMALIZE_EPSILON = 9.99999974737875e-06

# Relative tolerance for agreement with closed-form solutions
KNOWN_VALUE_TOLERANCE = 0.01

# =============================================================================
# SIMULATION DEFAULTS
# =============================================================================

# Number of integration steps for a default run
DEFAULT_STEPS = 10000

# Default simulated span (s)
DEFAULT_DURATION = YEAR

# Record one log sample every N steps
DEFAULT_LOG_INTERVAL = 100

# Run state checks every N steps
DEFAULT_VALIDATE_EVERY = 1000

# Step modes understood by the integrator dispatcher
STEP_MODE_COORDINATE = "coordinate"
STEP_MODE_PROPER = "proper"
STEP_MODES = (STEP_MODE_COORDINATE, STEP_MODE_PROPER)
