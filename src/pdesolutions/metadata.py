"""Discretization metadata and domain descriptors.

Discretizer packages subclass :class:`DiscretizationMetadata` to describe how a
problem was discretized. The subclass fixes whether the resulting solution
carries a time axis, which selects the solution variant when wrapping.
"""

from abc import ABC, abstractmethod
from enum import Enum
from numbers import Real
from typing import ClassVar, NamedTuple

import numpy as np


class TimeDependence(Enum):
    """Whether a discretization produces a trajectory or a steady state."""
    TIME_SERIES = "time_series"
    NO_TIME = "no_time"


class Interval(NamedTuple):
    """Continuous domain of an independent variable."""
    lower: float
    upper: float


class DiscretizationMetadata(ABC):
    """Base class for producer-defined discretization metadata.

    Subclasses must:
    - Set the ``time_dependence`` class attribute
    - Implement solution_fields() - build the record fields from a raw result

    The metadata type is also the dispatch key for calling a solution, see
    :func:`pdesolutions.solutions.register_evaluator`.
    """

    time_dependence: ClassVar[TimeDependence]

    @property
    def has_time(self) -> bool:
        return getattr(self, "time_dependence", None) is TimeDependence.TIME_SERIES

    @abstractmethod
    def solution_fields(self, raw) -> dict:
        """Build solution fields from a raw numeric solve result.

        Parameters
        ----------
        raw : object
            The lower-level solve result (ODE or nonlinear solution).

        Returns
        -------
        dict
            Keyword arguments for the solution record, excluding
            ``original_sol`` and ``disc_data``.
        """


def is_interval(domain) -> bool:
    """Whether a domain descriptor is a continuous interval pair."""
    if isinstance(domain, Interval):
        return True
    return (
        isinstance(domain, tuple)
        and len(domain) == 2
        and all(isinstance(bound, Real) for bound in domain)
    )


def grid_length(domain):
    """Number of points of a discrete grid, or None for a continuous domain."""
    if is_interval(domain):
        return None
    grid = np.asarray(domain)
    if grid.ndim != 1:
        return None
    return grid.shape[0]
