from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath


class DocumentKind(Enum):
    """Closed set of dispatch branches of the extraction pipeline."""

    PLAIN_TEXT = "plain_text"
    PDF = "pdf"
    OFFICE = "office"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_extension(cls, extension: str) -> "DocumentKind":
        return _KIND_BY_EXTENSION.get(extension.lower(), cls.UNSUPPORTED)


_KIND_BY_EXTENSION: dict[str, DocumentKind] = {
    "txt": DocumentKind.PLAIN_TEXT,
    "md": DocumentKind.PLAIN_TEXT,
    "pdf": DocumentKind.PDF,
    "docx": DocumentKind.OFFICE,
    "pptx": DocumentKind.OFFICE,
}


class OfficeRole(Enum):
    """Which parts of an OOXML container carry the visible text."""

    DOCUMENT_BODY = "docx"
    SLIDE = "pptx"

    @classmethod
    def from_extension(cls, extension: str) -> "OfficeRole":
        return cls(extension.lower())


class ExtractionMethod(Enum):
    PASSTHROUGH = "passthrough"
    PDF_STREAM = "pdf_stream"
    TEXT_RECOGNITION = "text_recognition"
    OFFICE_XML = "office_xml"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class SourceBlob:
    """An uploaded file handed to the pipeline for a single extraction."""

    data: bytes
    filename: str
    mime_type: str | None = None

    @property
    def extension(self) -> str:
        """Lower-cased trailing extension without the dot, '' if none."""
        name = PurePosixPath(self.filename.replace("\\", "/")).name
        if "." not in name:
            return ""
        return name.rsplit(".", 1)[1].lower()

    @property
    def kind(self) -> DocumentKind:
        return DocumentKind.from_extension(self.extension)


@dataclass(frozen=True)
class ExtractionResult:
    """Final output of the pipeline; ``text`` is never empty."""

    text: str
    kind: DocumentKind
    method: ExtractionMethod
    is_placeholder: bool = False
