from __future__ import annotations

import json

from .models import ScoresReport


def to_json(report: ScoresReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


def to_text(report: ScoresReport, precision: int = 6) -> str:
    width = max(len(s.name) for s in report.scores)
    lines = []
    for s in report.scores:
        marker = "*" if s.name == report.selected else " "
        lines.append(f"{marker} {s.name:<{width}}  {s.residual:.{precision}f}")
    return "\n".join(lines)
