"""Wrap raw numeric solve results in the matching solution record."""

import logging

from .exceptions import UnrecognizedMetadataError
from .metadata import DiscretizationMetadata, TimeDependence
from .retcodes import ReturnCode
from .solutions import PDENoTimeSolution, PDETimeSeriesSolution

logger = logging.getLogger(__name__)

_VARIANTS = {
    TimeDependence.TIME_SERIES: PDETimeSeriesSolution,
    TimeDependence.NO_TIME: PDENoTimeSolution,
}


def wrap_solution(raw, metadata):
    """Build the solution record for a raw solve result.

    Metadata tagged ``TIME_SERIES`` yields a :class:`PDETimeSeriesSolution`,
    ``NO_TIME`` yields a :class:`PDENoTimeSolution`. The field values come
    from ``metadata.solution_fields(raw)``.

    Parameters
    ----------
    raw : object
        Raw ODE or nonlinear solve result.
    metadata : DiscretizationMetadata
        Discretization metadata of the producing package.

    Returns
    -------
    PDESolution
    """
    if not isinstance(metadata, DiscretizationMetadata):
        raise UnrecognizedMetadataError(
            f"Cannot wrap a solution with metadata of type {type(metadata).__qualname__}; "
            f"expected a DiscretizationMetadata subclass"
        )

    time_dependence = getattr(metadata, "time_dependence", None)
    if time_dependence not in _VARIANTS:
        raise UnrecognizedMetadataError(
            f"{type(metadata).__qualname__}.time_dependence must be a TimeDependence, "
            f"got {time_dependence!r}"
        )

    variant = _VARIANTS[time_dependence]
    fields = metadata.solution_fields(raw)
    sol = variant(original_sol=raw, disc_data=metadata, **fields)

    logger.debug("Wrapped %s as %s", type(raw).__name__, variant.__name__)
    if sol.retcode is ReturnCode.FAILURE:
        logger.warning("Wrapped %s has retcode %s", variant.__name__, sol.retcode)
    return sol
