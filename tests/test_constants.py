import pytest
import relrocket.constants as C

def test_speed_of_light():
    assert C.C == 299792458.0
    assert C.C_SQUARED == pytest.approx(C.C * C.C)

def test_year_is_365_days():
    assert C.YEAR == 31536000.0

def test_light_year():
    assert C.LIGHT_YEAR == 9460730472580800.0
    # A light-year is a Julian year of light travel, not a 365-day one
    assert C.LIGHT_YEAR / C.C > C.YEAR

def test_reference_acceleration():
    assert C.G == 9.8

def test_normalize_epsilon():
    assert 0 < C.NORMALIZE_EPSILON < 1e-4
    assert C.NORMALIZE_EPSILON == pytest.approx(1e-5, rel=1e-6)

def test_simulation_defaults():
    assert C.DEFAULT_STEPS > 0
    assert C.DEFAULT_DURATION > 0
    assert C.DEFAULT_LOG_INTERVAL > 0
    assert C.STEP_MODE_COORDINATE in C.STEP_MODES
    assert C.STEP_MODE_PROPER in C.STEP_MODES
