"""Solution records for PDEs solved by a discretizer.

These types are shared by every discretizer package that hands results back to
callers. Records are built once by the producing package, after (or while
checkpointing) the numeric solve, and are read-only afterwards.

Record Hierarchy:
-----------------
PDESolution (union alias)
├── PDETimeSeriesSolution (from an ODE-style solve, time is the first axis)
└── PDENoTimeSolution (from a nonlinear / steady-state solve)
"""

import logging
from dataclasses import dataclass
from functools import singledispatch
from typing import Any, Generic, Mapping, Optional, Sequence, TypeVar, Union

import numpy as np

from .display import render, show
from .exceptions import (
    EvaluationNotImplementedError,
    SolutionShapeError,
    UnrecognizedMetadataError,
)
from .metadata import DiscretizationMetadata, grid_length
from .retcodes import ReturnCode, successful_retcode
from . import storage

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=DiscretizationMetadata)


# ========================================================
# Evaluation hook
# ========================================================


@singledispatch
def evaluate(disc_data, sol, *args, **kwargs):
    """Evaluate ``sol`` at a point, dispatching on the metadata type.

    Each discretizer package registers an implementation for its own metadata
    type with :func:`register_evaluator`. Without one the call fails.
    """
    raise EvaluationNotImplementedError(type(sol), type(disc_data))


def register_evaluator(metadata_type, func=None):
    """Register how solutions carrying ``metadata_type`` are evaluated.

    Usable as ``register_evaluator(MyMetadata, func)`` or as a decorator::

        @register_evaluator(MyMetadata)
        def _(disc_data, sol, x, t):
            return sol.interp(x, t)

    Parameters
    ----------
    metadata_type : type
        A :class:`DiscretizationMetadata` subclass.
    func : callable, optional
        Called as ``func(disc_data, sol, *args, **kwargs)``.
    """
    if not (isinstance(metadata_type, type) and issubclass(metadata_type, DiscretizationMetadata)):
        raise UnrecognizedMetadataError(
            f"Evaluators are keyed by DiscretizationMetadata subclasses, got {metadata_type!r}"
        )
    return evaluate.register(metadata_type, func)


# ========================================================
# Shared behaviour
# ========================================================


class _SolutionBase:
    """Accessors shared by both solution variants."""

    def __post_init__(self):
        _check_fields(self)

    def __call__(self, *args, **kwargs):
        return evaluate(self.disc_data, self, *args, **kwargs)

    def __getitem__(self, name):
        """Values of a dependent variable, or the domain of an independent one."""
        if name in self.u:
            return self.u[name]
        for iv, domain in zip(self.ivs, self.ivdomain):
            if iv == name:
                return domain
        raise KeyError(name)

    def __str__(self):
        return render(self)

    @property
    def has_time(self) -> bool:
        return isinstance(self, PDETimeSeriesSolution)

    @property
    def successful(self) -> bool:
        return successful_retcode(self.retcode)

    def show(self, file=None, options=None):
        """Print a summary of the solution, see :func:`pdesolutions.display.show`."""
        show(self, file=file, options=options)

    def to_dataframe(self):
        """Long-format DataFrame of the solution, see :func:`pdesolutions.storage.to_dataframe`."""
        return storage.to_dataframe(self)

    def save(self, filepath):
        """Save the solution arrays to HDF5, see :func:`pdesolutions.storage.save`."""
        storage.save(self, filepath)


def _check_fields(sol):
    """Check array shapes against the time samples and domains."""
    if len(sol.ivs) != len(sol.ivdomain):
        raise SolutionShapeError(
            f"{len(sol.ivs)} independent variables but {len(sol.ivdomain)} domains"
        )

    lengths = [grid_length(domain) for domain in sol.ivdomain]
    discrete = all(n is not None for n in lengths)
    leading = (len(sol.t),) if isinstance(sol, PDETimeSeriesSolution) else ()
    expected = leading + tuple(lengths)

    mappings = [("u", sol.u)]
    if getattr(sol, "errors", None) is not None:
        mappings.append(("errors", sol.errors))

    for label, mapping in mappings:
        for name, values in mapping.items():
            shape = np.shape(values)
            if leading and shape[:1] != leading:
                raise SolutionShapeError(
                    f"{label}[{name!r}] has leading extent {shape[:1]}, "
                    f"expected {leading[0]} time samples"
                )
            if discrete and shape != expected:
                raise SolutionShapeError(
                    f"{label}[{name!r}] has shape {shape}, domains imply {expected}"
                )

    logger.debug("%s fields consistent with domain shape %s", type(sol).__name__, expected)


# ========================================================
# Records
# ========================================================


@dataclass(frozen=True, eq=False)
class PDETimeSeriesSolution(_SolutionBase, Generic[D]):
    """Solution to a PDE, solved from an ODE problem generated by a discretizer.

    Parameters
    ----------
    u : Mapping
        Dependent variable -> array of values. Arrays have the shape of the
        domain with time as the first axis.
    original_sol : object
        The ODE solution this record was generated from.
    t : Sequence[float]
        Time points of the saved values.
    ivdomain : Sequence
        One domain per independent variable, in the order of ``ivs``. Either a
        grid (1-D array) or an :class:`Interval` for a continuous solution.
    ivs : Sequence
        Independent variables.
    dvs : Sequence
        Dependent variables.
    disc_data : DiscretizationMetadata
        Metadata about the discretization process and type.
    retcode : ReturnCode
        Whether the solve succeeded, was terminated by a callback, or failed.
    prob : object, optional
        The ODE problem that was solved.
    alg : object, optional
        The algorithm used to solve it.
    interp : object, optional
        Interpolation of the solution, built by the discretizer.
    errors : Mapping, optional
        Per-variable error estimates, shaped like ``u``.
    dense : bool, optional
        Whether ``interp`` supports continuous evaluation. Default is False.
    tslocation : int, optional
        Index of the current time step for callback-driven solves. Default is 0.
    stats : object, optional
        Solver statistics such as the number of function evaluations.
    """
    u: Mapping[Any, Any]
    original_sol: Any
    t: Sequence[float]
    ivdomain: Sequence[Any]
    ivs: Sequence[Any]
    dvs: Sequence[Any]
    disc_data: D
    retcode: ReturnCode
    prob: Any = None
    alg: Any = None
    interp: Any = None
    errors: Optional[Mapping[Any, Any]] = None
    dense: bool = False
    tslocation: int = 0
    stats: Any = None


@dataclass(frozen=True, eq=False)
class PDENoTimeSolution(_SolutionBase, Generic[D]):
    """Solution to a PDE, solved from a nonlinear problem generated by a discretizer.

    Same fields as :class:`PDETimeSeriesSolution` without ``t``, ``errors``,
    ``dense`` and ``tslocation``. Arrays in ``u`` have the shape of the domain.
    """
    u: Mapping[Any, Any]
    original_sol: Any
    ivdomain: Sequence[Any]
    ivs: Sequence[Any]
    dvs: Sequence[Any]
    disc_data: D
    retcode: ReturnCode
    prob: Any = None
    alg: Any = None
    interp: Any = None
    stats: Any = None


PDESolution = Union[PDETimeSeriesSolution[D], PDENoTimeSolution[D]]
