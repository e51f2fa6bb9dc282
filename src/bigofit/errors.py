"""Error kinds raised by the fitting core and the series reader."""

from __future__ import annotations


class BigOFitError(ValueError):
    """Base class for every deterministic input error."""


class ParseFailure(BigOFitError):
    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class ModelNotFoundError(BigOFitError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No model with name {name!r}")


class DomainError(BigOFitError):
    def __init__(self, index: int, size: int, cost: int) -> None:
        self.index = index
        self.size = size
        self.cost = cost
        super().__init__(
            f"sample {index} has size={size}, cost={cost}; both must be positive"
        )


class MinimumSampleSizeError(BigOFitError):
    def __init__(self, count: int, required: int = 1) -> None:
        self.count = count
        self.required = required
        super().__init__(f"need at least {required} sample(s), got {count}")
