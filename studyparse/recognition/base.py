from abc import ABC, abstractmethod


class BaseTextRecognizer(ABC):
    """Contract for higher-accuracy text recognition providers used on PDFs."""

    @abstractmethod
    def recognize_text(self, public_url: str) -> str | None:
        """Recognize the text of the document published at ``public_url``.

        Args:
            public_url: URL the provider can fetch the document from.

        Returns:
            Recognized text, or None when the provider has nothing to offer.

        Raises:
            TextRecognitionError: on any provider failure.
        """
