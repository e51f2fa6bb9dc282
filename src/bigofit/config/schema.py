from __future__ import annotations

from dataclasses import dataclass

OUTPUT_FORMATS = {"text", "json"}


@dataclass(frozen=True)
class BigOFitConfig:
    min_samples: int = 1
    parallel_workers: int = 0
    output_format: str = "text"
    precision: int = 6
