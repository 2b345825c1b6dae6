import re

from studyparse.extraction.text_utils import decode_permissive, join_fragments

_TEXT_OBJECT_RE = re.compile(r"BT.*?ET", re.DOTALL)
_TJ_ARRAY_RE = re.compile(r"\[([^\]]+)\]\s*TJ")
_LITERAL_RE = re.compile(r"\(([^)]+)\)")
_PRINTABLE_RE = re.compile(r"[\x20-\x7E\t\n\r\f\v]+")


class PdfStreamTextExtractor:
    """Heuristic text scan over raw PDF bytes.

    The file is not parsed as an object graph. Two passes look for literal
    string operands of text-showing operators:

    1. every ``BT ... ET`` text object, collecting each ``(...)`` literal;
    2. every ``[...] TJ`` array, collecting each ``(...)`` literal.

    Flate-compressed content streams are invisible to both passes.
    """

    def extract(self, pdf_bytes: bytes) -> str:
        raw = decode_permissive(pdf_bytes)
        candidates = self._scan_text_objects(raw) + self._scan_tj_arrays(raw)
        return join_fragments([text for text in candidates if self._is_text(text)])

    @staticmethod
    def _scan_text_objects(raw: str) -> list[str]:
        candidates: list[str] = []
        for block in _TEXT_OBJECT_RE.finditer(raw):
            candidates.extend(_LITERAL_RE.findall(block.group(0)))
        return candidates

    @staticmethod
    def _scan_tj_arrays(raw: str) -> list[str]:
        candidates: list[str] = []
        for array in _TJ_ARRAY_RE.finditer(raw):
            candidates.extend(_LITERAL_RE.findall(array.group(1)))
        return candidates

    @staticmethod
    def _is_text(candidate: str) -> bool:
        # Rejects control bytes and binary stream data misread as literals.
        return len(candidate) > 1 and _PRINTABLE_RE.fullmatch(candidate) is not None
