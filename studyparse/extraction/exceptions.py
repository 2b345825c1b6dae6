class ExtractionError(Exception):
    """Base exception for all text-extraction errors."""


class ContainerFormatError(ExtractionError):
    """Raised when an Office Open XML container is not a readable zip archive."""


class DecodeError(ExtractionError):
    """Raised when the input cannot be treated as a byte sequence at all."""
