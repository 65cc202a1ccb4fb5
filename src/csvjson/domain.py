from __future__ import annotations
from typing import Dict, Union

# A parsed field: numeric when the trimmed text is a plain int/float literal.
Value = Union[str, int, float]

# One CSV data line keyed by header, in header order.
Record = Dict[str, Value]
