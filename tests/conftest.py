import io
import zipfile
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

LONG_LINE = "Photosynthesis converts light energy into chemical energy in plants"


def _uncompressed_canvas(buf: io.BytesIO) -> canvas.Canvas:
    # Content streams stay readable by the heuristic scan only when uncompressed.
    return canvas.Canvas(buf, pagesize=letter, pageCompression=0, invariant=1)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = _uncompressed_canvas(buf)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def long_pdf_bytes() -> bytes:
    """Generate a two-page PDF with enough text to pass the acceptance threshold."""
    buf = io.BytesIO()
    c = _uncompressed_canvas(buf)
    c.drawString(72, 720, LONG_LINE)
    c.showPage()
    c.drawString(72, 720, "Chlorophyll absorbs mostly blue and red light")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = _uncompressed_canvas(buf)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def make_container() -> Callable[[dict[str, str | bytes]], bytes]:
    """Return a builder for zip containers from a {path: content} mapping."""

    def _build(parts: dict[str, str | bytes]) -> bytes:
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for path, content in parts.items():
                archive.writestr(path, content)
        return buf.getvalue()

    return _build


def word_document(*runs: str) -> str:
    body = "".join(
        f'<w:p><w:r><w:rPr><w:b/></w:rPr><w:t xml:space="preserve">{run}</w:t></w:r></w:p>'
        for run in runs
    )
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        f"<w:body>{body}</w:body></w:document>"
    )


def slide(*runs: str) -> str:
    body = "".join(f'<a:p><a:r><a:rPr lang="en-US"/><a:t>{run}</a:t></a:r></a:p>' for run in runs)
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<p:sld xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
        'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main">'
        f"<p:cSld><p:spTree><p:sp><p:txBody>{body}</p:txBody></p:sp></p:spTree></p:cSld>"
        "</p:sld>"
    )


@pytest.fixture()
def docx_bytes(make_container: Callable[[dict[str, str | bytes]], bytes]) -> bytes:
    """A DOCX container whose body holds enough text to pass the threshold."""
    return make_container(
        {
            "[Content_Types].xml": "<Types/>",
            "word/document.xml": word_document(
                "Cell biology studies the structure of cells.",
                "Mitochondria produce most of the chemical energy.",
            ),
            "word/styles.xml": word_document("Style text must be ignored"),
        }
    )


@pytest.fixture()
def pptx_bytes(make_container: Callable[[dict[str, str | bytes]], bytes]) -> bytes:
    """A PPTX container with two slides and a slide layout."""
    return make_container(
        {
            "[Content_Types].xml": "<Types/>",
            "ppt/slides/slide1.xml": slide("Lecture 3: The French Revolution"),
            "ppt/slides/slide2.xml": slide("The storming of the Bastille in 1789"),
            "ppt/slideLayouts/slideLayout1.xml": slide("Click to edit Master title"),
        }
    )


@pytest.fixture()
def word_xml() -> Callable[..., str]:
    """Return a builder for word/document.xml bodies from text runs."""
    return word_document


@pytest.fixture()
def slide_xml() -> Callable[..., str]:
    """Return a builder for ppt/slides/slide<N>.xml parts from text runs."""
    return slide
