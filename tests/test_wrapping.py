import logging

import pytest

from pdesolutions import (
    DiscretizationMetadata,
    PDENoTimeSolution,
    PDETimeSeriesSolution,
    ReturnCode,
    TimeDependence,
    UnrecognizedMetadataError,
    wrap_solution,
)
from toy_discretizer import GridMetadata, SteadyGridMetadata


def test_time_series_metadata_yields_time_series(raw_ode, x_grid):
    metadata = GridMetadata(x_grid, ["u"])
    sol = wrap_solution(raw_ode, metadata)

    assert type(sol) is PDETimeSeriesSolution
    assert sol.original_sol is raw_ode
    assert sol.disc_data is metadata


def test_no_time_metadata_yields_no_time(raw_nonlinear, x_grid):
    metadata = SteadyGridMetadata(x_grid, ["u", "v"])
    sol = wrap_solution(raw_nonlinear, metadata)

    assert type(sol) is PDENoTimeSolution
    assert sol.original_sol is raw_nonlinear
    assert sol.dvs == ["u", "v"]


def test_variant_selection_is_deterministic(raw_ode, raw_nonlinear, x_grid):
    for _ in range(3):
        assert type(wrap_solution(raw_ode, GridMetadata(x_grid, ["u"]))) is PDETimeSeriesSolution
        assert type(wrap_solution(raw_nonlinear, SteadyGridMetadata(x_grid, ["u"]))) is PDENoTimeSolution


def test_metadata_has_time(x_grid):
    assert GridMetadata(x_grid, ["u"]).has_time
    assert not SteadyGridMetadata(x_grid, ["u"]).has_time


def test_rejects_foreign_metadata(raw_ode):
    with pytest.raises(UnrecognizedMetadataError, match="dict"):
        wrap_solution(raw_ode, {"time_dependence": TimeDependence.TIME_SERIES})


def test_rejects_untagged_metadata(raw_ode):
    class UntaggedMetadata(DiscretizationMetadata):
        time_dependence = "yes"

        def solution_fields(self, raw):
            return {}

    with pytest.raises(TypeError, match="time_dependence"):
        wrap_solution(raw_ode, UntaggedMetadata())


def test_failed_solve_is_wrapped_with_warning(failed_raw_ode, x_grid, caplog):
    with caplog.at_level(logging.WARNING, logger="pdesolutions"):
        sol = wrap_solution(failed_raw_ode, GridMetadata(x_grid, ["u"]))

    assert sol.retcode is ReturnCode.FAILURE
    assert not sol.successful
    assert "Failure" in caplog.text


def test_has_time_without_tag():
    class UntaggedMetadata(DiscretizationMetadata):
        def solution_fields(self, raw):
            return {}

    assert UntaggedMetadata().has_time is False
