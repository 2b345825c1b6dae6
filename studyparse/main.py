import argparse
import sys

from studyparse.config.settings import Settings
from studyparse.logging.logger import Log
from studyparse.processor.exceptions import DocumentReadError
from studyparse.processor.processor import build_processor


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> build processor -> print extracted text."""
    parser = argparse.ArgumentParser(
        prog="studyparse",
        description="Extract plain text from a stored course document.",
    )
    parser.add_argument("key", help="storage key of the document, e.g. 10/notes.pdf")
    parser.add_argument("--mime-type", default=None, help="declared content type")
    args = parser.parse_args(argv)

    settings = Settings()
    # stdout carries the extracted text
    Log.configure(settings.log_level, stream=sys.stderr)

    processor = build_processor(settings)
    try:
        content = processor.parse(args.key, mime_type=args.mime_type)
    except DocumentReadError as exc:
        Log.error(f"Parse document error: {exc}")
        return 1
    sys.stdout.write(content + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
