from __future__ import annotations

"""
Project utilities.

Logging design (project-only)
-----------------------------
- All project loggers live under the "data_tabulate" namespace.
- Handlers are attached ONLY to the "data_tabulate" logger (not to root), so the
  library never changes logging of the host application unless asked to.
"""

import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from data_tabulate.config import DEFAULT_LOGGING, LoggingConfig

__all__ = ["log_stage", "setup_logging"]

_LOGGER_ROOT_NAME = "data_tabulate"


def _level_from_str(level: str) -> int:
    """Convert 'INFO'/'DEBUG'/... to logging level integer."""
    lvl = getattr(logging, str(level).upper(), None)
    if not isinstance(lvl, int):
        raise ValueError(f"Invalid logging level: {level!r}")
    return int(lvl)


def _close_and_clear_handlers(lg: logging.Logger) -> None:
    """Close existing handlers to avoid file descriptor leaks across repeated setup_logging() calls."""
    for h in list(lg.handlers):
        h.close()
    lg.handlers.clear()


@contextmanager
def log_stage(
    stage_logger: logging.Logger, stage_name: str, *, level: int = logging.INFO
) -> Iterator[None]:
    """
    Log a stage boundary with duration.

    Format:
        ==> [START] <name>
        <== [END] <name> (time taken: X.XXX sec)

    On exception (re-raised unchanged):
        <!! [FAIL] <name> (time taken: X.XXX sec): <error>
    """
    t0 = time.perf_counter()
    stage_logger.log(level, "==> [START] %s", str(stage_name))
    try:
        yield
    except Exception as e:
        dt = time.perf_counter() - t0
        stage_logger.log(
            level,
            "<!! [FAIL] %s (time taken: %.3f sec): %s",
            str(stage_name),
            float(dt),
            e,
        )
        raise
    else:
        dt = time.perf_counter() - t0
        stage_logger.log(
            level, "<== [END] %s (time taken: %.3f sec)", str(stage_name), float(dt)
        )


def setup_logging(cfg: LoggingConfig = DEFAULT_LOGGING) -> logging.Logger:
    """
    Configure the project logger.

    Parameters
    ----------
    cfg:
        LoggingConfig with:
          - level_console
          - level_file
          - log_file (empty string: no file handler)

    Returns
    -------
    logging.Logger
        The configured "data_tabulate" logger.
    """
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(_level_from_str(cfg.level_console))
    console_handler.setFormatter(fmt)

    project_logger = logging.getLogger(_LOGGER_ROOT_NAME)
    _close_and_clear_handlers(project_logger)
    project_logger.setLevel(logging.DEBUG)
    project_logger.propagate = False
    project_logger.addHandler(console_handler)

    log_file = str(cfg.log_file).strip()
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(_level_from_str(cfg.level_file))
        file_handler.setFormatter(fmt)
        project_logger.addHandler(file_handler)
        project_logger.debug("Log file: %s", str(path.resolve()))

    return project_logger
