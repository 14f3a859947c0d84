import numpy as np
import pytest

import gravsim as gs
from gravsim.display import ScatterDisplay


@pytest.fixture
def display():
    d = ScatterDisplay(interactive=False)
    yield d
    d.close()


def test_fixed_viewport(display):
    assert display.ax.get_xlim() == (-75.0, 75.0)
    assert display.ax.get_ylim() == (-75.0, 75.0)
    np.testing.assert_allclose(display.ax.get_xticks(), [-75, -45, -15, 15, 45, 75])
    assert display.ax.get_title() == "N-body problem"
    assert display.ax.get_xlabel() == "x"
    assert display.ax.get_ylabel() == "y"


def test_frames_accumulate_positions(display, two_body_sim):
    two_body_sim.run(3, observers=[display])

    pts = display.plotted_points()
    assert display.frames == 3
    assert pts.shape == (6, 2)
    np.testing.assert_allclose(pts[-2:], two_body_sim.positions)


def test_no_frames_no_points(display):
    assert display.plotted_points().shape == (0, 2)


def test_custom_bounds():
    d = ScatterDisplay(bounds=30.0, interactive=False)
    try:
        assert d.ax.get_xlim() == (-30.0, 30.0)
    finally:
        d.close()
