from .context import CompareContext
from .exceptions import (
    CompareExecutionError,
    NoIndividualsFoundError,
    PipelineError,
    SessionNotFoundError,
)
from .pipeline import Pipeline, load_record_set

__all__ = [
    "CompareContext",
    "CompareExecutionError",
    "NoIndividualsFoundError",
    "Pipeline",
    "PipelineError",
    "SessionNotFoundError",
    "load_record_set",
]
