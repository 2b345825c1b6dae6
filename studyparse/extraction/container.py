import io
import zipfile
import zlib

from studyparse.extraction.exceptions import ContainerFormatError


class ContainerUnpacker:
    """Reads every stored entry of an Office Open XML (zip) container."""

    def unpack(self, data: bytes) -> dict[str, bytes]:
        """Map each entry's internal path to its decompressed bytes.

        Entries keep the order in which the container lists them. Directory
        entries carry no bytes and are left out; no other path is filtered.

        Raises:
            ContainerFormatError: if the bytes are not a readable zip archive
                (bad central directory, truncated data, unsupported compression,
                encrypted or corrupt entries).
        """
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                return {
                    info.filename: archive.read(info)
                    for info in archive.infolist()
                    if not info.is_dir()
                }
        except (
            zipfile.BadZipFile,
            zipfile.LargeZipFile,
            NotImplementedError,
            RuntimeError,
            EOFError,
            ValueError,
            OSError,
            zlib.error,
        ) as exc:
            raise ContainerFormatError(f"Invalid OOXML container: {exc}") from exc
