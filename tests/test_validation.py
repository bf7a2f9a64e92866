import pytest
import numpy as np
from relrocket import validation
from relrocket import constants as C
from relrocket.config import SimulationConfig
from relrocket.state import RocketState


# ============================================================================
# Known values and tolerance helpers
# ============================================================================

def test_known_values_table_shape():
    assert len(validation.KNOWN_VALUES) == 5
    for row in validation.KNOWN_VALUES:
        assert row.a == C.G
        assert row.tau < row.t
        assert row.v < C.C
        assert row.lorentz >= 1.0

def test_check_known_values_all_pass():
    results = validation.check_known_values()
    assert len(results) == len(validation.KNOWN_VALUES)
    for r in results:
        assert r['velocity'], r
        assert r['lorentz_factor'], r
        assert r['proper_time'], r
        assert r['coordinate_time'], r
        assert r['round_trip'], r

def test_check_known_values_tight_tolerance_fails():
    results = validation.check_known_values(tolerance=1e-9)
    assert not all(r['velocity'] for r in results)

def test_approximately():
    assert validation.approximately(100.5, 100.0)
    assert not validation.approximately(102.0, 100.0)
    assert validation.approximately(102.0, 100.0, tolerance=0.05)
    # Band is open
    assert not validation.approximately(101.0, 100.0)

def test_relative_error():
    assert validation.relative_error(110.0, 100.0) == pytest.approx(0.1)
    assert validation.relative_error(90.0, 100.0) == pytest.approx(0.1)
    assert validation.relative_error(0.5, 0.0) == 0.5


# ============================================================================
# State checks
# ============================================================================

def test_check_finite_state_valid():
    assert validation.check_finite_state(RocketState())

def test_check_finite_state_nan():
    s = RocketState(proper_velocity=[np.nan, 0.0, 0.0])
    with pytest.raises(validation.ValidationError):
        validation.check_finite_state(s)

def test_check_time_ordering_from_rest():
    s = RocketState(coordinate_time=10.0, proper_time=8.0)
    assert validation.check_time_ordering(s)

def test_check_time_ordering_proper_ahead():
    s = RocketState(coordinate_time=10.0, proper_time=12.0)
    with pytest.raises(validation.ValidationError):
        validation.check_time_ordering(s)

def test_check_time_ordering_uses_increments():
    # Caller-chosen initial clocks may have tau > t; only increments matter
    previous = RocketState(coordinate_time=0.0, proper_time=100.0)
    s = RocketState(coordinate_time=10.0, proper_time=105.0)
    assert validation.check_time_ordering(s, previous)

def test_check_time_ordering_backwards():
    previous = RocketState(coordinate_time=10.0, proper_time=8.0)
    with pytest.raises(validation.ValidationError):
        validation.check_time_ordering(RocketState(coordinate_time=9.0, proper_time=8.0), previous)
    with pytest.raises(validation.ValidationError):
        validation.check_time_ordering(RocketState(coordinate_time=11.0, proper_time=7.0), previous)

def test_check_subluminal_valid():
    s = RocketState(proper_velocity=[100 * C.C, 0.0, 0.0])
    assert validation.check_subluminal(s)

@pytest.mark.filterwarnings("ignore::RuntimeWarning")
def test_check_subluminal_infinite_proper_velocity():
    s = RocketState(proper_velocity=[np.inf, 0.0, 0.0])
    with pytest.raises(validation.ValidationError):
        validation.check_subluminal(s)

def test_validate_state_valid():
    ok, msg = validation.validate_state(RocketState())
    assert ok
    assert msg is None

def test_validate_state_no_abort():
    s = RocketState(coordinate_time=np.nan)
    ok, msg = validation.validate_state(s, abort_on_error=False)
    assert not ok
    assert "Non-finite" in msg

def test_validate_state_abort():
    s = RocketState(coordinate_time=np.nan)
    with pytest.raises(validation.ValidationError):
        validation.validate_state(s)


# ============================================================================
# Config checks
# ============================================================================

def test_validate_config_default():
    assert validation.validate_config(SimulationConfig())

@pytest.mark.parametrize('overrides', [
    {'steps': 0},
    {'duration': -1.0},
    {'step_mode': 'sideways'},
    {'log_interval': 0},
    {'validate_every': 0},
    {'direction': (0.0, 0.0, 0.0)},
])
def test_validate_config_invalid(overrides):
    with pytest.raises(validation.ValidationError):
        validation.validate_config(SimulationConfig(**overrides))

def test_validate_config_coasting_without_direction():
    cfg = SimulationConfig(acceleration=0.0, direction=(0.0, 0.0, 0.0))
    assert validation.validate_config(cfg)
