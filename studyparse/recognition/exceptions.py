class EnhancementUnavailable(Exception):
    """Base exception: the optional text-recognition step produced nothing usable."""


class TextRecognitionError(EnhancementUnavailable):
    """Raised when the recognition provider returns an unusable answer."""


class TextRecognitionNetworkError(TextRecognitionError):
    """Raised when the provider call fails due to network/infrastructure issues or times out."""
