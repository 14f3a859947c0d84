import numpy as np
import pytest

import gravsim as gs


@pytest.fixture
def state():
    s = gs.SimulationState()
    s.build_state([gs.Body(2.0, 1.0, 2.0, 3.0, 4.0), gs.Body(5.0, -1.0, -2.0)])
    return s


def test_body_defaults():
    b = gs.Body(1.5, 2.0, 3.0)

    assert b.velocity == (0.0, 0.0)
    assert b.force == (0.0, 0.0)
    assert b.position == (2.0, 3.0)
    assert repr(b) == "Body(mass=1.5, x=2.0, y=3.0, vx=0.0, vy=0.0)"


def test_build_state_from_bodies(state):
    assert state.n_bodies == 2
    np.testing.assert_array_equal(state.mass, [2.0, 5.0])
    np.testing.assert_array_equal(state.pos, [[1.0, 2.0], [-1.0, -2.0]])
    np.testing.assert_array_equal(state.vel, [[3.0, 4.0], [0.0, 0.0]])
    np.testing.assert_array_equal(state.force, 0.0)


def test_build_state_from_arrays_defaults_velocity():
    s = gs.SimulationState()

    assert s.build_state(None, [1.0, 2.0], [(0.0, 0.0), (1.0, 1.0)])
    np.testing.assert_array_equal(s.vel, 0.0)


@pytest.mark.parametrize("masses", [[1.0, 0.0], [-1.0, 1.0], [np.nan, 1.0]])
def test_build_state_rejects_bad_masses(masses):
    assert not gs.SimulationState().build_state(None, masses, [(0.0, 0.0), (1.0, 1.0)])


def test_build_state_rejects_shape_mismatch():
    assert not gs.SimulationState().build_state(None, [1.0, 1.0], [(0.0, 0.0)])


@pytest.mark.parametrize(
    "body",
    [
        gs.Body(1.0, float("nan"), 0.0),
        gs.Body(1.0, 0.0, float("inf")),
        gs.Body(1.0, 0.0, 0.0, vx=float("nan")),
        gs.Body(1.0, 0.0, 0.0, vy=float("-inf")),
    ],
)
def test_build_state_rejects_non_finite_bodies(body):
    assert not gs.SimulationState().build_state([gs.Body(1.0, 1.0, 1.0), body])


def test_view_reads_state(state):
    b = state.body(0)

    assert (b.mass, b.x, b.y, b.vx, b.vy) == (2.0, 1.0, 2.0, 3.0, 4.0)
    assert (b.fx, b.fy) == (0.0, 0.0)
    assert b.index == 0


def test_view_writes_through(state):
    b = state.body(1)
    b.x = 10.0
    b.vy = -7.0

    assert state.pos[1, 0] == 10.0
    assert state.vel[1, 1] == -7.0


def test_vector_properties_are_live_views(state):
    b = state.body(0)
    b.position[...] += 1.0

    np.testing.assert_array_equal(state.pos[0], [2.0, 3.0])


def test_mass_is_read_only(state):
    with pytest.raises(AttributeError):
        state.body(0).mass = 4.0


def test_negative_index(state):
    assert state.body(-1).index == 1


def test_index_out_of_range(state):
    with pytest.raises(IndexError):
        state.body(2)


def test_assignments_keep_storage(state):
    pos = state.pos
    state.pos = [[0.0, 0.0], [1.0, 1.0]]

    assert state.pos is pos
    np.testing.assert_array_equal(pos, [[0.0, 0.0], [1.0, 1.0]])

    with pytest.raises(ValueError):
        state.vel = np.zeros((3, 2))


def test_snapshot_rows(state):
    rows = list(state.snapshot(iteration=2, time=0.5).rows())

    assert rows == [(2.0, 1.0, 2.0, 3.0, 4.0), (5.0, -1.0, -2.0, 0.0, 0.0)]
