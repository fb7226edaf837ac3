"""Tabular export and HDF5 persistence of solution records.

Only array data and descriptors are written. The interpolant, problem,
algorithm, raw result and metadata object belong to the producing package and
are not persisted.
"""

import logging
from dataclasses import asdict, dataclass, field, is_dataclass
from numbers import Number
from pathlib import Path
from typing import Any, Dict, List, Optional

import h5py
import numpy as np
import pandas as pd

from .exceptions import SolutionShapeError
from .metadata import Interval, grid_length, is_interval
from .retcodes import ReturnCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class StoredSolution:
    """Solution data read back from an HDF5 file written by :func:`save`.

    Parameters
    ----------
    u : Dict[str, np.ndarray]
        Values per dependent variable.
    ivdomain : List
        Grids as arrays, continuous domains as :class:`Interval`.
    ivs : List[str]
        Independent variable names.
    dvs : List[str]
        Dependent variable names.
    retcode : ReturnCode
        Return code of the original solve.
    variant : str
        Class name of the saved record.
    metadata_type : str
        Qualified class name of the saved record's metadata.
    t : np.ndarray, optional
        Time points, time series only.
    errors : Dict[str, np.ndarray], optional
        Error estimates, if the record had any.
    dense : bool, optional
        Time series only. Default is False.
    tslocation : int, optional
        Time series only. Default is 0.
    stats : Dict[str, Any], optional
        Scalar solver statistics.
    """
    u: Dict[str, np.ndarray]
    ivdomain: List[Any]
    ivs: List[str]
    dvs: List[str]
    retcode: ReturnCode
    variant: str
    metadata_type: str
    t: Optional[np.ndarray] = None
    errors: Optional[Dict[str, np.ndarray]] = None
    dense: bool = False
    tslocation: int = 0
    stats: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_time(self) -> bool:
        return self.t is not None


def to_dataframe(sol) -> pd.DataFrame:
    """Convert a solution on discrete grids to a long-format DataFrame.

    Parameters
    ----------
    sol : PDESolution
        Solution whose domains are all discrete grids.

    Returns
    -------
    pd.DataFrame
        One row per grid point (and time sample). Columns: ``t`` for time
        series, one per independent variable, one per dependent variable.
    """
    grids = []
    for iv, domain in zip(sol.ivs, sol.ivdomain):
        if grid_length(domain) is None:
            raise SolutionShapeError(
                f"Domain of {iv!r} is continuous, only grids can be tabulated"
            )
        grids.append(np.asarray(domain))

    names = [str(iv) for iv in sol.ivs]
    if sol.has_time:
        grids.insert(0, np.asarray(sol.t))
        names.insert(0, "t")

    columns = names + [str(dv) for dv in sol.u]
    repeated = sorted({name for name in columns if columns.count(name) > 1})
    if repeated:
        raise SolutionShapeError(
            f"Column names {repeated} are shared between time, independent and "
            f"dependent variables"
        )

    data = {}
    for name, coords in zip(names, np.meshgrid(*grids, indexing="ij")):
        data[name] = coords.ravel()
    for dv, values in sol.u.items():
        data[str(dv)] = np.asarray(values).ravel()
    return pd.DataFrame(data)


def _stats_dict(stats) -> dict:
    if stats is None:
        return {}
    if is_dataclass(stats):
        return asdict(stats)
    if isinstance(stats, dict):
        return stats
    if hasattr(stats, "_asdict"):
        return dict(stats._asdict())
    if hasattr(stats, "__dict__"):
        return dict(vars(stats))
    logger.debug("Cannot read stats of type %s, not saving them", type(stats).__name__)
    return {}


def _strings(values):
    return np.array([str(v) for v in values], dtype=h5py.string_dtype())


def _decode(value):
    return value.decode() if isinstance(value, bytes) else str(value)


def save(sol, filepath):
    """Save a solution to an HDF5 file.

    Parameters
    ----------
    sol : PDESolution
        Solution to save.
    filepath : str or Path
        Output file path. Parent directories are created.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with h5py.File(filepath, "w") as f:
        # Descriptors as root-level attributes
        f.attrs["retcode"] = str(sol.retcode)
        f.attrs["variant"] = type(sol).__name__
        f.attrs["metadata_type"] = type(sol.disc_data).__qualname__
        f.attrs["ivs"] = _strings(sol.ivs)
        f.attrs["dvs"] = _strings(sol.dvs)

        u_grp = f.create_group("u", track_order=True)
        for dv, values in sol.u.items():
            u_grp.create_dataset(str(dv), data=np.asarray(values))

        dom_grp = f.create_group("ivdomain")
        for iv, domain in zip(sol.ivs, sol.ivdomain):
            dset = dom_grp.create_dataset(str(iv), data=np.asarray(domain, dtype=float))
            dset.attrs["kind"] = "interval" if is_interval(domain) else "grid"

        if sol.has_time:
            f.create_dataset("t", data=np.asarray(sol.t))
            f.attrs["dense"] = sol.dense
            f.attrs["tslocation"] = sol.tslocation
            if sol.errors is not None:
                err_grp = f.create_group("errors", track_order=True)
                for dv, values in sol.errors.items():
                    err_grp.create_dataset(str(dv), data=np.asarray(values))

        stats_grp = f.create_group("stats")
        for key, val in _stats_dict(sol.stats).items():
            # Only scalar counters fit in attributes
            if isinstance(val, (Number, str, np.number)):
                stats_grp.attrs[key] = val
            else:
                logger.debug("Skipping non-scalar stat %r", key)

    logger.info("Saved %s to %s", type(sol).__name__, filepath)


def load(filepath) -> StoredSolution:
    """Read a solution written by :func:`save`.

    Parameters
    ----------
    filepath : str or Path
        HDF5 file path.

    Returns
    -------
    StoredSolution
    """
    filepath = Path(filepath)
    with h5py.File(filepath, "r") as f:
        ivs = [_decode(v) for v in f.attrs["ivs"]]
        dvs = [_decode(v) for v in f.attrs["dvs"]]
        u = {name: dset[()] for name, dset in f["u"].items()}

        ivdomain = []
        for iv in ivs:
            dset = f["ivdomain"][iv]
            if _decode(dset.attrs["kind"]) == "interval":
                lower, upper = dset[()]
                ivdomain.append(Interval(float(lower), float(upper)))
            else:
                ivdomain.append(dset[()])

        t = f["t"][()] if "t" in f else None
        errors = None
        if "errors" in f:
            errors = {name: dset[()] for name, dset in f["errors"].items()}

        stats = {}
        for key, val in f["stats"].attrs.items():
            stats[key] = val.item() if isinstance(val, np.generic) else val

        stored = StoredSolution(
            u=u,
            ivdomain=ivdomain,
            ivs=ivs,
            dvs=dvs,
            retcode=ReturnCode(_decode(f.attrs["retcode"])),
            variant=_decode(f.attrs["variant"]),
            metadata_type=_decode(f.attrs["metadata_type"]),
            t=t,
            errors=errors,
            dense=bool(f.attrs.get("dense", False)),
            tslocation=int(f.attrs.get("tslocation", 0)),
            stats=stats,
        )

    logger.debug("Loaded %s from %s", stored.variant, filepath)
    return stored
