from __future__ import annotations

"""
Central configuration for the project.

Defaults live in frozen dataclasses so library code, tests and YAML configs agree
on a single source of truth.

YAML config loading
-------------------
Configs are OmegaConf-compatible YAML files (see `conf/config.yaml`). A minimal
composition mechanism is supported:

- `extends: <path-or-list>` at the top level of a YAML file.
- `extends` paths are resolved relative to the extending file.
- Configs are merged in the given order; later configs override earlier ones.

Example::

    extends: ../config.yaml
    tabulate:
      max_columns: 4
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_LOGGING",
    "DEFAULT_TABULATE",
    "LoggingConfig",
    "TabulateConfig",
    "load_project_config",
    "logging_config_from",
    "tabulate_config_from",
]


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging defaults used by `data_tabulate.utils.setup_logging`.

    `log_file` is optional; an empty string disables the file handler.
    """

    level_console: str = "INFO"
    level_file: str = "DEBUG"
    log_file: str = ""


@dataclass(frozen=True)
class TabulateConfig:
    """Initial column bounds and fill value of a `Tabulator`."""

    min_columns: int = 1
    max_columns: int = 100_000
    fill_value: Any = None


DEFAULT_LOGGING = LoggingConfig()
DEFAULT_TABULATE = TabulateConfig()


def _resolve_path(p: str | Path, *, base_dir: Path | None = None) -> Path:
    """Resolve `p` against `base_dir` (default: CWD) unless it is already absolute."""
    path = Path(p).expanduser()
    if not path.is_absolute():
        path = (base_dir if base_dir is not None else Path.cwd()) / path
    return path.resolve()


def _extends_targets(node: DictConfig, *, origin: Path) -> list[Path]:
    """Return the files named by `extends:` in `node`, relative to `origin`'s folder."""
    raw = node.get("extends")
    if raw is None:
        return []
    if isinstance(raw, str):
        entries = [raw]
    elif OmegaConf.is_list(raw):
        entries = [str(x) for x in raw if x is not None]
    else:
        raise TypeError(f"extends must be a string or a list of strings; got {type(raw)}")

    targets: list[Path] = []
    for entry in (e.strip() for e in entries):
        if not entry:
            continue
        target = _resolve_path(entry, base_dir=origin.parent)
        if not target.exists():
            raise FileNotFoundError(
                f"Extended config not found: {target} (referenced from {origin})"
            )
        targets.append(target)
    return targets


def _compose(path: Path, *, chain: tuple[Path, ...]) -> DictConfig:
    """Load `path` merged on top of everything it extends (depth-first, in order)."""
    if path in chain:
        cycle = " -> ".join(str(x) for x in (*chain, path))
        raise ValueError(f"Cyclic config extends detected: {cycle}")

    node = OmegaConf.load(path)
    if not isinstance(node, DictConfig):
        raise ValueError(f"Config root must be a mapping, got {type(node)} in {path}")

    parents = [
        _compose(t, chain=(*chain, path)) for t in _extends_targets(node, origin=path)
    ]
    own = OmegaConf.masked_copy(node, [k for k in node.keys() if k != "extends"])

    logger.debug("Loaded config: %s (%d parent config(s))", str(path), len(parents))
    return OmegaConf.merge(*parents, own)


def load_project_config(path: str | Path, *, allow_missing: bool = True) -> Any:
    """
    Load a project YAML config, following `extends:` chains.

    Returns None when the file is missing and `allow_missing` is True, so callers
    can fall back to `DEFAULT_TABULATE` / `DEFAULT_LOGGING`.

    Raises
    ------
    FileNotFoundError
        Missing file (with allow_missing=False) or missing `extends` target.
    ValueError
        Cyclic `extends` chain or a non-mapping config root.
    """
    cfg_path = _resolve_path(path)
    if cfg_path.exists():
        return _compose(cfg_path, chain=())
    if not allow_missing:
        raise FileNotFoundError(str(cfg_path))

    logger.info("Config file not found, using built-in defaults: %s", str(cfg_path))
    return None


def _cfg_get(cfg: Any, key: str, default: Any) -> Any:
    """Config lookup returning `default` for missing keys or a missing config."""
    if cfg is None:
        return default
    if isinstance(cfg, dict):
        cfg = OmegaConf.create(cfg)
    v = OmegaConf.select(cfg, key, default=None)
    return default if v is None else v


def tabulate_config_from(cfg: Any) -> TabulateConfig:
    """
    Build a `TabulateConfig` from the `tabulate:` section of a loaded config.

    Missing keys (or `cfg=None`) fall back to `DEFAULT_TABULATE`. Bounds are passed
    through unchanged; the tabulator ignores invalid values.
    """
    return TabulateConfig(
        min_columns=_cfg_get(cfg, "tabulate.min_columns", DEFAULT_TABULATE.min_columns),
        max_columns=_cfg_get(cfg, "tabulate.max_columns", DEFAULT_TABULATE.max_columns),
        fill_value=_cfg_get(cfg, "tabulate.fill_value", DEFAULT_TABULATE.fill_value),
    )


def logging_config_from(cfg: Any) -> LoggingConfig:
    """Build a `LoggingConfig` from the `logging:` section of a loaded config."""
    return LoggingConfig(
        level_console=str(
            _cfg_get(cfg, "logging.level_console", DEFAULT_LOGGING.level_console)
        ),
        level_file=str(_cfg_get(cfg, "logging.level_file", DEFAULT_LOGGING.level_file)),
        log_file=str(_cfg_get(cfg, "logging.log_file", DEFAULT_LOGGING.log_file)),
    )
