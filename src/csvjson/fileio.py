from __future__ import annotations
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Union

PathLike = Union[str, Path]


class FileIO(Protocol):
    def read_text(self, path: PathLike, encoding: str) -> str: ...

    def write_text(self, path: PathLike, payload: str, encoding: str) -> None: ...


@dataclass
class LocalFileIO:
    """Reads and writes whole text files on the local disk."""

    def read_text(self, path: PathLike, encoding: str) -> str:
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: PathLike, payload: str, encoding: str) -> None:
        """Write via a sibling temp file so the target is either replaced whole or left untouched."""
        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=out_path.parent, prefix=f".{out_path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding=encoding) as f:
                f.write(payload)
            os.replace(tmp_name, out_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
