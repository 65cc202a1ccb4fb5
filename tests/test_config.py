import json
from pathlib import Path

import pytest

from csvjson.config import ConverterConfig, resolve_macros
from csvjson.errors import ConfigError


def _write(tmp_path: Path, data) -> Path:
    p = tmp_path / "config.json"
    p.write_text(json.dumps(data))
    return p


def test_defaults():
    cfg = ConverterConfig()
    assert (cfg.delimiter, cfg.encoding, cfg.indent) == (";", "utf-8", 2)


def test_env_macros(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("CSVJSON_DELIM", "|")
    monkeypatch.delenv("CSVJSON_INDENT", raising=False)
    cfg = ConverterConfig.load(_write(tmp_path, {"delimiter": "{ENV:CSVJSON_DELIM}", "indent": "{ENV:CSVJSON_INDENT:4}"}))
    assert cfg.delimiter == "|"
    assert cfg.indent == 4


def test_resolve_macros_passthrough():
    assert resolve_macros(3) == 3
    assert resolve_macros(";") == ";"


@pytest.mark.parametrize(
    "data",
    [
        {"separator": ","},
        {"delimiter": ""},
        {"indent": -1},
        {"indent": "wide"},
        ["not", "an", "object"],
    ],
)
def test_bad_config(tmp_path: Path, data):
    with pytest.raises(ConfigError):
        ConverterConfig.load(_write(tmp_path, data))


def test_missing_config(tmp_path: Path):
    with pytest.raises(ConfigError, match="Cannot read config"):
        ConverterConfig.load(tmp_path / "nope.json")
