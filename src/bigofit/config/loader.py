from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from .schema import OUTPUT_FORMATS, BigOFitConfig

log = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = ".bigofit.yml"


def _load_raw_config(path: Path) -> dict[str, Any]:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception as e:
        log.warning("Failed to load %s (%s). Skipping.", path, e)
        return {}


def _get_optional_int(raw: dict[str, Any], key: str) -> int | None:
    if key not in raw:
        return None
    v = raw.get(key)
    if v is None or isinstance(v, bool):
        return None
    try:
        return int(v)
    except (TypeError, ValueError):
        log.warning("Config key %s=%r is not an integer; using default.", key, v)
        return None


def _get_optional_choice(raw: dict[str, Any], key: str, choices: set[str]) -> str | None:
    if key not in raw:
        return None
    v = raw.get(key)
    if v is None:
        return None
    value = str(v).strip().lower()
    if value not in choices:
        log.warning("Config key %s=%r is not one of %s; using default.", key, v, sorted(choices))
        return None
    return value


def _merge_config(base: BigOFitConfig, raw: dict[str, Any]) -> BigOFitConfig:
    min_samples = _get_optional_int(raw, "min_samples")
    if min_samples is None:
        min_samples = base.min_samples
    parallel_workers = _get_optional_int(raw, "parallel_workers")
    if parallel_workers is None:
        parallel_workers = base.parallel_workers
    output_format = _get_optional_choice(raw, "output_format", OUTPUT_FORMATS)
    if output_format is None:
        output_format = base.output_format
    precision = _get_optional_int(raw, "precision")
    if precision is None:
        precision = base.precision

    return BigOFitConfig(
        min_samples=max(1, min_samples),
        parallel_workers=max(0, parallel_workers),
        output_format=output_format,
        precision=max(0, precision),
    )


def _resolve_config_paths(root: Path, config_paths: Iterable[Path] | None) -> list[Path]:
    if config_paths is None:
        return [root / DEFAULT_CONFIG_NAME]
    resolved: list[Path] = []
    for path in config_paths:
        p = path
        if not p.is_absolute():
            p = root / p
        resolved.append(p)
    return resolved


def load_config(root: Path, config_paths: Iterable[Path] | None = None) -> BigOFitConfig:
    paths = _resolve_config_paths(root, config_paths)
    if config_paths is None and not paths[0].exists():
        return BigOFitConfig()

    cfg = BigOFitConfig()
    for path in paths:
        if not path.exists():
            log.warning("Config %s not found; skipping.", path)
            continue
        raw = _load_raw_config(path)
        if not isinstance(raw, dict):
            log.warning("Config %s is not a mapping; skipping.", path)
            continue
        cfg = _merge_config(cfg, raw)
    return cfg
