import re

from studyparse.extraction.exceptions import DecodeError

_WHITESPACE_RE = re.compile(r"\s+")


def decode_permissive(data: bytes) -> str:
    """Decode bytes as UTF-8, replacing invalid sequences instead of raising.

    Raises:
        DecodeError: if ``data`` is not a bytes-like object.
    """
    if isinstance(data, memoryview):
        data = data.tobytes()
    if not isinstance(data, (bytes, bytearray)):
        raise DecodeError(f"Expected bytes, got {type(data).__name__}")
    return bytes(data).decode("utf-8", errors="replace")


def join_fragments(fragments: list[str]) -> str:
    """Join fragments with single spaces, collapse whitespace and trim."""
    return collapse_whitespace(" ".join(fragments))


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()
