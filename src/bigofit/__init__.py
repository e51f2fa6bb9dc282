from importlib.metadata import PackageNotFoundError, version

from bigofit.errors import (
    BigOFitError,
    DomainError,
    MinimumSampleSizeError,
    ModelNotFoundError,
    ParseFailure,
)
from bigofit.fit.catalog import CATALOG, get_model, model_names
from bigofit.fit.fitter import score
from bigofit.fit.models import GrowthModel, Sample, ScoredModel
from bigofit.fit.selector import evaluate, select
from bigofit.ingest.series import read_series, run

__all__ = [
    "CATALOG",
    "BigOFitError",
    "DomainError",
    "GrowthModel",
    "MinimumSampleSizeError",
    "ModelNotFoundError",
    "ParseFailure",
    "Sample",
    "ScoredModel",
    "__version__",
    "evaluate",
    "get_model",
    "model_names",
    "read_series",
    "run",
    "score",
    "select",
]

try:
    __version__ = version("bigofit")
except PackageNotFoundError:  # pragma: no cover - fallback for editable source trees
    __version__ = "0.1.0"
