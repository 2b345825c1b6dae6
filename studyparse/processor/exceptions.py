class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class DocumentReadError(ProcessorError):
    """Raised when a document's bytes cannot be read at all."""
