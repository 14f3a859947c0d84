import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

import gravsim as gs


@pytest.fixture(scope="function")
def cfg():
    return gs.SimConfig(n_bodies=10, iterations=5, dt=1.0, seed=1234)


@pytest.fixture(scope="function", params=["pairwise", "vectorized"])
def kernel(request):
    return request.param


@pytest.fixture(scope="function")
def two_body_sim(kernel):
    return gs.NBodySimulation(
        masses=[1.0, 1.0],
        positions=[(-10.0, 0.0), (10.0, 0.0)],
        velocities=[(0.0, 0.0), (0.0, 0.0)],
        cfg=gs.SimConfig(force_kernel=kernel),
    )


@pytest.fixture(scope="function")
def random_state():
    m, p, v = gs.InitialConditionGenerator(gs.GeneratorConfig(seed=7)).generate_single(12)
    state = gs.SimulationState()
    assert state.build_state(None, m, p, v)
    return state
