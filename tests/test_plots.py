"""Tests for plot generation."""

import os

import numpy as np

from relrocket import constants as C
from relrocket.config import create_test_config
from relrocket.main import run_simulation
from relrocket.plotting import TrajectoryData, extract_log_data, generate_all_plots


class MockLog:
    """Mock simulation log with a synthetic hyperbolic trajectory."""

    def __init__(self, n_points: int = 50):
        t = np.linspace(0.0, 2 * C.YEAR, n_points)
        w = C.G * t
        gamma = np.sqrt(1 + (w / C.C) ** 2)
        self.coordinate_time = list(t)
        self.proper_time = list((C.C / C.G) * np.arcsinh(w / C.C))
        self.coordinate_speed = list(w / gamma)
        self.beta = list(w / gamma / C.C)
        self.proper_speed = list(w)
        self.lorentz_factor = list(gamma)


def test_extract_log_data_units():
    data = extract_log_data(MockLog())
    assert isinstance(data, TrajectoryData)
    assert data.time_years[0] == 0.0
    assert data.time_years[-1] == 2.0
    assert np.all(data.proper_time_years <= data.time_years + 1e-12)
    assert data.beta.shape == data.lorentz_factor.shape

def test_generate_all_plots_mock(tmp_path):
    paths = generate_all_plots(MockLog(), str(tmp_path))
    assert len(paths) == 3
    for p in paths:
        assert os.path.exists(p)
        assert p.endswith('.png')
        assert os.path.getsize(p) > 0

def test_generate_all_plots_creates_directory(tmp_path):
    out = tmp_path / "nested" / "plots"
    state, log, reason = run_simulation(create_test_config(steps=100, log_interval=5))
    paths = generate_all_plots(log, str(out))
    assert out.is_dir()
    assert all(os.path.dirname(p) == str(out) for p in paths)
