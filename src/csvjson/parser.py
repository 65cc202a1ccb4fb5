from __future__ import annotations
import math
import re
from typing import Iterator, List, Optional, Sequence

from .domain import Record, Value
from .errors import ColumnMismatchError, EmptyInputError, InvalidDelimiterError, InvalidHeaderError

_INT_RE = re.compile(r"-?[0-9]+")
_FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]+")


def coerce_value(raw: str) -> Value:
    """Trim a field and turn plain integer/decimal literals into numbers."""
    value = raw.strip()
    if _INT_RE.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            # past the interpreter's int digit limit
            return value
    if _FLOAT_RE.fullmatch(value):
        number = float(value)
        return number if math.isfinite(number) else value
    return value


def parse_headers(line: str, delimiter: str) -> List[str]:
    headers = [h.strip() for h in line.split(delimiter)]
    if not headers or any(h == "" for h in headers):
        raise InvalidHeaderError()
    return headers


def iter_records(lines: Sequence[str], delimiter: str) -> Iterator[Record]:
    """
    Yield one record per non-blank data line.
    - lines[0] is the header line; it is validated before anything is yielded.
    - Blank lines are skipped without checking their column count.
    - Line numbers in errors are 1-based positions in `lines`.
    """
    if not lines:
        raise EmptyInputError()
    if not delimiter:
        raise InvalidDelimiterError()

    headers = parse_headers(lines[0], delimiter)

    for i in range(1, len(lines)):
        line = lines[i]
        if line.strip() == "":
            continue

        values = line.split(delimiter)
        if len(values) != len(headers):
            raise ColumnMismatchError(i + 1, len(headers), len(values))

        yield {h: coerce_value(v) for h, v in zip(headers, values)}


def parse_lines(lines: Optional[Sequence[str]], delimiter: str) -> List[Record]:
    if not lines:
        raise EmptyInputError()
    return list(iter_records(lines, delimiter))
