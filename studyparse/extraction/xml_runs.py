import re
from collections.abc import Mapping
from html import unescape

from studyparse.extraction.models import OfficeRole
from studyparse.extraction.text_utils import decode_permissive, join_fragments

DOCUMENT_BODY_PATH = "word/document.xml"

_SLIDE_PATH_RE = re.compile(r"ppt/slides/slide[1-9]\d*\.xml")
_TEXT_RUN_RE = re.compile(r"<[aw]:t(?:\s[^>]*)?>([^<]*)</[aw]:t>")


class XmlTextRunExtractor:
    """Pulls visible text runs (<w:t>, <a:t>) out of DOCX/PPTX XML parts.

    A regular-expression pass, not an XML parser: it is not namespace aware
    and self-closing runs yield nothing.
    """

    def select_parts(
        self, entries: Mapping[str, bytes], role: OfficeRole
    ) -> list[tuple[str, bytes]]:
        """Return the container parts that carry text for ``role``.

        Slides come back in container enumeration order, which is not
        necessarily numeric slide order.
        """
        if role is OfficeRole.DOCUMENT_BODY:
            return [
                (path, data) for path, data in entries.items() if path == DOCUMENT_BODY_PATH
            ]
        return [
            (path, data) for path, data in entries.items() if _SLIDE_PATH_RE.fullmatch(path)
        ]

    def extract_fragments(self, xml_bytes: bytes) -> list[str]:
        xml = decode_permissive(xml_bytes)
        fragments: list[str] = []
        for match in _TEXT_RUN_RE.finditer(xml):
            text = unescape(match.group(1)).strip()
            if text:
                fragments.append(text)
        return fragments

    def extract(self, xml_bytes: bytes) -> str:
        """Extract normalized text from one XML part; '' when it has no runs."""
        return join_fragments(self.extract_fragments(xml_bytes))

    def extract_from_container(self, entries: Mapping[str, bytes], role: OfficeRole) -> str:
        fragments: list[str] = []
        for _, data in self.select_parts(entries, role):
            fragments.extend(self.extract_fragments(data))
        return join_fragments(fragments)
