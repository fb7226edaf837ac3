"""Result containers for PDE solves produced by discretizer packages.

Records:
--------
PDESolution (union alias)
├── PDETimeSeriesSolution (trajectory, time is the first axis)
└── PDENoTimeSolution (steady state)

Discretizer packages subclass DiscretizationMetadata, build records with
wrap_solution() and make them callable with register_evaluator().
"""

import logging

from .config import DisplayOptions, LogConfig, setup_logging
from .display import render, show
from .exceptions import (
    EvaluationNotImplementedError,
    PDESolutionError,
    SolutionShapeError,
    UnrecognizedMetadataError,
)
from .metadata import DiscretizationMetadata, Interval, TimeDependence
from .retcodes import ReturnCode, successful_retcode
from .solutions import (
    PDENoTimeSolution,
    PDESolution,
    PDETimeSeriesSolution,
    evaluate,
    register_evaluator,
)
from .storage import StoredSolution, load, save, to_dataframe
from .wrapping import wrap_solution

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Records
    "PDESolution",
    "PDETimeSeriesSolution",
    "PDENoTimeSolution",
    "wrap_solution",
    # Evaluation hook
    "evaluate",
    "register_evaluator",
    # Metadata
    "DiscretizationMetadata",
    "TimeDependence",
    "Interval",
    # Return codes
    "ReturnCode",
    "successful_retcode",
    # Display
    "render",
    "show",
    "DisplayOptions",
    # Persistence
    "StoredSolution",
    "to_dataframe",
    "save",
    "load",
    # Logging
    "LogConfig",
    "setup_logging",
    # Errors
    "PDESolutionError",
    "EvaluationNotImplementedError",
    "UnrecognizedMetadataError",
    "SolutionShapeError",
]
