"""Display and logging configuration."""
import logging
from dataclasses import dataclass


@dataclass
class DisplayOptions:
    """numpy print options used when rendering a solution.

    Parameters
    ----------
    precision : int, optional
        Digits after the decimal point. Default is 6.
    threshold : int, optional
        Array size above which arrays are summarised. Default is 50.
    edgeitems : int, optional
        Items shown at each end of a summarised axis. Default is 3.
    linewidth : int, optional
        Characters per line. Default is 88.
    """
    precision: int = 6
    threshold: int = 50
    edgeitems: int = 3
    linewidth: int = 88


@dataclass
class LogConfig:
    """Logging setup for the pdesolutions logger.

    Parameters
    ----------
    level : str, optional
        Level name. Default is 'WARNING'.
    format : str, optional
        Format string for the console handler.
    """
    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config=None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling it again replaces the handler instead of adding a second one.

    Parameters
    ----------
    config : LogConfig, optional
        Defaults to ``LogConfig()``.

    Returns
    -------
    logging.Logger
        The ``pdesolutions`` logger.
    """
    config = config or LogConfig()
    valid_levels = {"debug", "info", "warning", "error", "critical"}
    if config.level.lower() not in valid_levels:
        raise ValueError(f"Invalid log level: {config.level}")

    logger = logging.getLogger("pdesolutions")
    logger.setLevel(getattr(logging, config.level.upper()))

    for handler in list(logger.handlers):
        if getattr(handler, "_pdesolutions_console", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    handler._pdesolutions_console = True
    logger.addHandler(handler)
    return logger
