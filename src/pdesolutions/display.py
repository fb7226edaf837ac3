"""Human-readable summaries of solution records."""

import sys
from dataclasses import asdict
from io import StringIO

import numpy as np

from .config import DisplayOptions


def _format(value) -> str:
    if isinstance(value, np.ndarray):
        return np.array2string(value, separator=", ")
    return repr(value)


def _format_mapping(mapping) -> str:
    entries = [f"{name!r}: {_format(values)}" for name, values in mapping.items()]
    return "{" + ", ".join(entries) + "}"


def render(sol, options=None) -> str:
    """Multi-line summary of a solution.

    Lines are, in order: return code, interpolation type, time points (time
    series only), independent variables, domains, values.

    Parameters
    ----------
    sol : PDESolution
        Solution to summarise. It is not modified.
    options : DisplayOptions, optional
        numpy print options for the arrays. Defaults to ``DisplayOptions()``.

    Returns
    -------
    str
    """
    options = options or DisplayOptions()
    buffer = StringIO()
    with np.printoptions(**asdict(options)):
        buffer.write(f"retcode: {sol.retcode}\n")
        buffer.write(f"Interpolation: {type(sol.interp).__name__}\n")
        if sol.has_time:
            buffer.write(f"t: {_format(np.asarray(sol.t))}\n")
        buffer.write(f"ivs: {list(sol.ivs)!r}\n")
        buffer.write(f"domain: [{', '.join(_format(domain) for domain in sol.ivdomain)}]\n")
        buffer.write(f"u: {_format_mapping(sol.u)}\n")
    return buffer.getvalue()


def show(sol, file=None, options=None):
    """Write :func:`render` output to ``file`` (default ``sys.stdout``)."""
    file = sys.stdout if file is None else file
    file.write(render(sol, options))
