import numpy as np
import pytest

from pdesolutions import ReturnCode, wrap_solution
from toy_discretizer import (
    GridMetadata,
    RawNonlinearSolution,
    RawODESolution,
    SteadyGridMetadata,
)


@pytest.fixture
def x_grid():
    return np.linspace(0.0, 1.0, 5)


@pytest.fixture
def t_samples():
    return np.array([0.0, 1.0, 2.0])


@pytest.fixture
def raw_ode(t_samples, x_grid):
    """u(t, x) = t + x on a (3, 5) grid."""
    u = t_samples[:, None] + x_grid[None, :]
    return RawODESolution(t=t_samples, u=u, stats={"nf": 12, "naccept": 3})


@pytest.fixture
def raw_nonlinear(x_grid):
    """u(x) = x**2, v(x) = 1 - x stacked into one state vector."""
    return RawNonlinearSolution(
        u=np.concatenate([x_grid**2, 1.0 - x_grid]),
        stats={"nsteps": 4},
    )


@pytest.fixture
def time_solution(raw_ode, x_grid):
    return wrap_solution(raw_ode, GridMetadata(x_grid, ["u"]))


@pytest.fixture
def steady_solution(raw_nonlinear, x_grid):
    return wrap_solution(raw_nonlinear, SteadyGridMetadata(x_grid, ["u", "v"]))


@pytest.fixture
def failed_raw_ode(raw_ode):
    raw_ode.retcode = ReturnCode.FAILURE
    return raw_ode
