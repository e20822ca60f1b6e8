import argparse
import json
import sys
from pathlib import Path

from labextract.config.settings import Settings
from labextract.extraction.extractor import build_extractor
from labextract.logging.logger import Log


def main(argv: list[str] | None = None) -> int:
    """Entry point: read report text -> extract markers -> print JSON records."""
    parser = argparse.ArgumentParser(
        prog="labextract",
        description="Extract lab markers from plain report text.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Text file to read; standard input when omitted.",
    )
    args = parser.parse_args(argv)

    settings = Settings()
    Log.configure(settings.log_level)

    if args.path is None:
        text = sys.stdin.read()
    else:
        try:
            text = args.path.read_text(encoding="utf-8")
        except OSError as exc:
            Log.error(f"Cannot read {args.path}: {exc}")
            return 1

    extractor = build_extractor(settings)
    records = extractor.extract(text)
    json.dump([r.to_dict() for r in records], sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
