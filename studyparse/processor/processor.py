from pathlib import Path

from studyparse.config.settings import Settings
from studyparse.extraction.exceptions import DecodeError
from studyparse.extraction.pipeline import DocumentTextExtractionPipeline, build_pipeline
from studyparse.logging.logger import Log
from studyparse.processor.exceptions import DocumentReadError
from studyparse.storage.base import BaseBlobStore
from studyparse.storage.exceptions import StorageError
from studyparse.storage.factory import BlobStoreFactory


class Processor:
    """Parses a stored document into plain text.

    Pipeline: download -> extract -> return text for persistence elsewhere.
    """

    def __init__(
        self,
        blob_store: BaseBlobStore,
        pipeline: DocumentTextExtractionPipeline,
    ) -> None:
        self._blob_store = blob_store
        self._pipeline = pipeline

    def parse(self, key: str, mime_type: str | None = None) -> str:
        """Return the extracted text, or placeholder text, for the blob at ``key``.

        Raises:
            DocumentReadError: if the document bytes cannot be read.
        """
        Log.info(f"Parsing document {key} ({mime_type or 'no declared type'})")

        # Step 1: Download
        try:
            data = self._blob_store.get(key)
            public_url = self._blob_store.public_url(key)
        except StorageError as exc:
            raise DocumentReadError(f"Failed to download file {key}: {exc}") from exc
        Log.info(f"Loaded {len(data)} bytes for document {key}")

        # Step 2: Extract
        try:
            content = self._pipeline.extract(data, key, mime_type, public_url=public_url)
        except DecodeError as exc:
            raise DocumentReadError(f"Failed to read document {key}: {exc}") from exc

        Log.info(f"Final extracted content length for {key}: {len(content)}")
        Log.debug(f"Content preview: {Log.preview(content)}")
        return content


def build_processor(
    settings: Settings,
    files_root: Path | None = None,
) -> Processor:
    """Build a Processor with the configured blob store and pipeline."""
    return Processor(
        blob_store=BlobStoreFactory.create(settings, root=files_root),
        pipeline=build_pipeline(settings),
    )
