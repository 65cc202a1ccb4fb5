
from __future__ import annotations
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

from .errors import ConfigError


def resolve_macros(value: Any) -> Any:
    if not isinstance(value, str):
        return value

    # {ENV:VAR} or {ENV:VAR:default}
    if value.startswith("{ENV:") and value.endswith("}"):
        _, var, *rest = value[1:-1].split(":", 2)
        default = rest[0] if rest else ""
        return os.getenv(var, default)

    return value


@dataclass
class ConverterConfig:
    delimiter: str = ";"
    encoding: str = "utf-8"
    indent: int = 2

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or self.delimiter == "":
            raise ConfigError("delimiter must be a non-empty string")
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ConfigError("encoding must be a non-empty string")
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
            raise ConfigError("indent must be a non-negative integer")

    @classmethod
    def load(cls, path: Path) -> "ConverterConfig":
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a JSON object")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys in {path}: {', '.join(unknown)}")

        resolved = {k: resolve_macros(v) for k, v in data.items()}
        # ENV macros always yield strings
        if isinstance(resolved.get("indent"), str):
            try:
                resolved["indent"] = int(resolved["indent"])
            except ValueError as e:
                raise ConfigError(f"indent must be an integer, got {resolved['indent']!r}") from e
        return cls(**resolved)

    def override(self, **values: Optional[Any]) -> "ConverterConfig":
        """Return a copy with every non-None value applied (CLI flags win over the file)."""
        changes: Dict[str, Any] = {k: v for k, v in values.items() if v is not None}
        return replace(self, **changes) if changes else self
