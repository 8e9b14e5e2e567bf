class PipelineError(Exception):
    """Base exception for pipeline failures."""


class InputAccessError(PipelineError):
    """Raised when the GEDCOM source cannot be read."""


class OutputAccessError(PipelineError):
    """Raised when the JSON destination cannot be written."""


class ParseExecutionError(PipelineError):
    """Raised when parsing fails."""


class SerializationError(PipelineError):
    """Raised when the built tree cannot be rendered as JSON."""
