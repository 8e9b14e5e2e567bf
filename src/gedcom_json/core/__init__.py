"""
Orchestration layer: per-run context, error types and the conversion pipeline.
"""

from gedcom_json.core.context import ParseContext
from gedcom_json.core.exceptions import (
    InputAccessError,
    OutputAccessError,
    ParseExecutionError,
    PipelineError,
    SerializationError,
)
from gedcom_json.core.pipeline import Pipeline

__all__ = [
    "ParseContext",
    "Pipeline",
    "PipelineError",
    "InputAccessError",
    "OutputAccessError",
    "ParseExecutionError",
    "SerializationError",
]
