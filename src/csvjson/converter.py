from __future__ import annotations
import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .config import ConverterConfig
from .domain import Record
from .errors import EmptyFileError, ProcessingError
from .fileio import FileIO, LocalFileIO, PathLike
from .parser import parse_lines

log = logging.getLogger(__name__)


def to_json(records: Sequence[Record], indent: int = 2) -> str:
    return json.dumps(list(records), indent=indent, ensure_ascii=False, allow_nan=False)


def split_lines(text: str) -> List[str]:
    return [line for line in text.split("\n") if line.strip() != ""]


async def convert_file(
    input_path: PathLike,
    output_path: PathLike,
    delimiter: str,
    *,
    io: Optional[FileIO] = None,
    encoding: str = "utf-8",
    indent: int = 2,
) -> None:
    """
    Read a delimited text file, convert it to records and write them as JSON.

    Any failure is re-raised as ProcessingError and nothing is written:
    the payload is fully built before the single write call.
    """
    io = io or LocalFileIO()
    try:
        text = await asyncio.to_thread(io.read_text, input_path, encoding)
        if text.startswith("\ufeff"):
            text = text[1:]

        lines = split_lines(text)
        if not lines:
            raise EmptyFileError()
        log.debug("read %d non-blank lines from %s", len(lines), input_path)

        records = parse_lines(lines, delimiter)
        payload = to_json(records, indent=indent)

        await asyncio.to_thread(io.write_text, output_path, payload, encoding)
        log.debug("wrote %d records to %s", len(records), output_path)
    except Exception as e:
        raise ProcessingError.wrap(e) from e


@dataclass
class CsvJsonConverter:
    cfg: ConverterConfig = field(default_factory=ConverterConfig)
    io: FileIO = field(default_factory=LocalFileIO)

    @classmethod
    def from_paths(cls, cfg_path: Optional[Path] = None, **overrides) -> "CsvJsonConverter":
        cfg = ConverterConfig.load(cfg_path) if cfg_path else ConverterConfig()
        return cls(cfg=cfg.override(**overrides))

    def convert(self, input_path: Path, out_path: Path) -> Path:
        asyncio.run(
            convert_file(
                input_path,
                out_path,
                self.cfg.delimiter,
                io=self.io,
                encoding=self.cfg.encoding,
                indent=self.cfg.indent,
            )
        )
        return out_path
