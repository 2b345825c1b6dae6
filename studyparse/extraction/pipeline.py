from studyparse.config.settings import Settings
from studyparse.extraction.container import ContainerUnpacker
from studyparse.extraction.exceptions import ContainerFormatError, DecodeError
from studyparse.extraction.models import (
    DocumentKind,
    ExtractionMethod,
    ExtractionResult,
    OfficeRole,
    SourceBlob,
)
from studyparse.extraction.pdf_stream import PdfStreamTextExtractor
from studyparse.extraction.text_utils import decode_permissive
from studyparse.extraction.xml_runs import XmlTextRunExtractor
from studyparse.logging.logger import Log
from studyparse.recognition.base import BaseTextRecognizer
from studyparse.recognition.factory import TextRecognizerFactory


class DocumentTextExtractionPipeline:
    """Turns one uploaded file into a best-effort plain-text representation.

    Dispatch is on the filename extension:

    * txt, md: UTF-8 passthrough;
    * pdf: optional text recognition, then the heuristic byte scan;
    * docx, pptx: zip container + XML text runs;
    * anything else: unsupported-type placeholder.

    Extraction failures never escape; text that is too short to be real
    content is replaced with a placeholder naming the file and its type.
    """

    def __init__(
        self,
        *,
        recognizer: BaseTextRecognizer | None = None,
        pdf_min_length: int = 50,
        office_min_length: int = 50,
        recognition_min_length: int = 100,
        unpacker: ContainerUnpacker | None = None,
        xml_extractor: XmlTextRunExtractor | None = None,
        pdf_extractor: PdfStreamTextExtractor | None = None,
    ) -> None:
        self._recognizer = recognizer
        self._pdf_min_length = pdf_min_length
        self._office_min_length = office_min_length
        self._recognition_min_length = recognition_min_length
        self._unpacker = unpacker or ContainerUnpacker()
        self._xml_extractor = xml_extractor or XmlTextRunExtractor()
        self._pdf_extractor = pdf_extractor or PdfStreamTextExtractor()

    def extract(
        self,
        data: bytes,
        filename: str,
        mime_type: str | None = None,
        public_url: str | None = None,
    ) -> str:
        """Extract text from ``data``; always returns a non-empty string."""
        blob = SourceBlob(data=data, filename=filename, mime_type=mime_type)
        return self.run(blob, public_url).text

    def run(self, blob: SourceBlob, public_url: str | None = None) -> ExtractionResult:
        """Extract text from ``blob``.

        Raises:
            DecodeError: if ``blob.data`` is not a byte sequence.
        """
        if not isinstance(blob.data, (bytes, bytearray, memoryview)):
            raise DecodeError(
                f"Expected bytes for {blob.filename}, got {type(blob.data).__name__}"
            )
        kind = blob.kind
        Log.debug(
            f"Extracting {blob.filename} as {kind.value} "
            f"(extension '{blob.extension}', declared type {blob.mime_type})"
        )
        if kind is DocumentKind.PLAIN_TEXT:
            return self._extract_plain_text(blob)
        if kind is DocumentKind.PDF:
            return self._extract_pdf(blob, public_url)
        if kind is DocumentKind.OFFICE:
            return self._extract_office(blob)
        Log.info(f"Unsupported file type for {blob.filename}, using placeholder")
        return self._placeholder(blob, unsupported_placeholder(blob))

    def _extract_plain_text(self, blob: SourceBlob) -> ExtractionResult:
        text = decode_permissive(blob.data)
        if not text:
            return self._placeholder(blob, empty_text_placeholder(blob))
        return ExtractionResult(
            text=text, kind=blob.kind, method=ExtractionMethod.PASSTHROUGH
        )

    def _extract_pdf(self, blob: SourceBlob, public_url: str | None) -> ExtractionResult:
        text = self._recognize(blob, public_url)
        method = ExtractionMethod.TEXT_RECOGNITION
        if len(text) < self._recognition_min_length:
            fallback = self._pdf_extractor.extract(blob.data)
            Log.info(f"Heuristic PDF scan found {len(fallback)} chars in {blob.filename}")
            if len(fallback) > len(text):
                text = fallback
                method = ExtractionMethod.PDF_STREAM

        if len(text) < self._pdf_min_length:
            Log.info(
                f"PDF extraction too short for {blob.filename} "
                f"({len(text)} < {self._pdf_min_length} chars), using placeholder"
            )
            return self._placeholder(blob, pdf_placeholder(blob))
        return ExtractionResult(text=text, kind=blob.kind, method=method)

    def _recognize(self, blob: SourceBlob, public_url: str | None) -> str:
        """Run the optional recognizer; '' whenever it is unavailable."""
        if self._recognizer is None or not public_url:
            return ""
        try:
            text = self._recognizer.recognize_text(public_url) or ""
        except Exception as exc:
            Log.warning(f"Text recognition failed for {blob.filename}, falling back: {exc}")
            return ""
        text = text.strip()
        Log.info(f"Text recognition returned {len(text)} chars for {blob.filename}")
        return text

    def _extract_office(self, blob: SourceBlob) -> ExtractionResult:
        role = OfficeRole.from_extension(blob.extension)
        try:
            entries = self._unpacker.unpack(blob.data)
        except ContainerFormatError as exc:
            Log.warning(f"Could not open {blob.filename} as OOXML container: {exc}")
            return self._placeholder(blob, office_placeholder(blob, failed=True))

        text = self._xml_extractor.extract_from_container(entries, role)
        Log.debug(f"Extracted content from {blob.extension}: {Log.preview(text, 500)}")
        if len(text) < self._office_min_length:
            Log.info(
                f"Office extraction too short for {blob.filename} "
                f"({len(text)} < {self._office_min_length} chars), using placeholder"
            )
            return self._placeholder(blob, office_placeholder(blob, failed=False))
        return ExtractionResult(text=text, kind=blob.kind, method=ExtractionMethod.OFFICE_XML)

    @staticmethod
    def _placeholder(blob: SourceBlob, text: str) -> ExtractionResult:
        return ExtractionResult(
            text=text,
            kind=blob.kind,
            method=ExtractionMethod.PLACEHOLDER,
            is_placeholder=True,
        )


def pdf_placeholder(blob: SourceBlob) -> str:
    return (
        f'This is a PDF document titled "{blob.filename}". The document contains '
        "academic content that could not be fully extracted. Please try uploading "
        "a text-based version of this document for better results."
    )


def office_placeholder(blob: SourceBlob, *, failed: bool) -> str:
    detail = "Could not extract content." if failed else "Content extraction was limited."
    return f'This is a {blob.extension.upper()} document titled "{blob.filename}". {detail}'


def empty_text_placeholder(blob: SourceBlob) -> str:
    return (
        f'This is a {blob.extension.upper()} document titled "{blob.filename}". '
        "The file is empty."
    )


def unsupported_placeholder(blob: SourceBlob) -> str:
    declared = blob.extension.upper() or blob.mime_type or "unknown"
    return (
        f"Document: {blob.filename} - Unsupported file type ({declared}) "
        "for content extraction."
    )


def build_pipeline(settings: Settings) -> DocumentTextExtractionPipeline:
    """Build a pipeline with thresholds and recognizer from settings."""
    return DocumentTextExtractionPipeline(
        recognizer=TextRecognizerFactory.create(settings),
        pdf_min_length=settings.pdf_min_content_length,
        office_min_length=settings.office_min_content_length,
        recognition_min_length=settings.recognition_min_content_length,
    )
