from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from .schema import OUTPUT_FORMATS

KNOWN_KEYS = {
    "min_samples",
    "parallel_workers",
    "output_format",
    "precision",
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_optional_int(raw: dict[str, Any], key: str, minimum: int, errors: list[str]) -> None:
    if key not in raw:
        return
    value = raw.get(key)
    if value is None:
        return
    if not _is_int(value):
        errors.append(f"{key} must be an integer")
        return
    if value < minimum:
        errors.append(f"{key} must be >= {minimum}")


def _validate_optional_str_choice(raw: dict[str, Any], key: str, choices: set[str], errors: list[str]) -> None:
    if key not in raw:
        return
    value = raw.get(key)
    if value is None:
        return
    if not isinstance(value, str):
        errors.append(f"{key} must be a string")
        return
    if value.lower() not in choices:
        errors.append(f"{key} must be one of: {', '.join(sorted(choices))}")


def validate_raw_config(raw: dict[str, Any]) -> list[str]:
    errors: list[str] = []
    for key in raw.keys():
        if key not in KNOWN_KEYS:
            errors.append(f"Unknown key: {key}")

    _validate_optional_int(raw, "min_samples", 1, errors)
    _validate_optional_int(raw, "parallel_workers", 0, errors)
    _validate_optional_int(raw, "precision", 0, errors)
    _validate_optional_str_choice(raw, "output_format", OUTPUT_FORMATS, errors)
    return errors


def validate_config_path(path: Path) -> list[str]:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception as exc:
        return [f"{path}: failed to read ({exc})"]
    if not isinstance(raw, dict):
        return [f"{path}: config must be a mapping"]
    errors = validate_raw_config(raw)
    return [f"{path}: {err}" for err in errors]


def validate_config_paths(paths: Iterable[Path]) -> list[str]:
    errors: list[str] = []
    for path in paths:
        if not path.exists():
            errors.append(f"{path}: file not found")
            continue
        errors.extend(validate_config_path(path))
    return errors
