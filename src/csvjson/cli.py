from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .converter import CsvJsonConverter
from .errors import ConfigError, ProcessingError


def main(argv: Optional[Sequence[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Convert a delimited CSV file to a JSON array")
    p.add_argument("--csv", required=True, type=Path, help="Input CSV")
    p.add_argument("--out", required=True, type=Path, help="Output JSON path")
    p.add_argument("--delimiter", help="Field delimiter (default ';')")
    p.add_argument("--config", type=Path, help="Converter JSON config (optional)")
    p.add_argument("--indent", type=int, help="JSON indentation (default 2)")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        conv = CsvJsonConverter.from_paths(args.config, delimiter=args.delimiter, indent=args.indent)
        out = conv.convert(args.csv, args.out)
    except (ConfigError, ProcessingError) as e:
        print(e, file=sys.stderr)
        raise SystemExit(1)
    print(f"Generated JSON: {out}")
