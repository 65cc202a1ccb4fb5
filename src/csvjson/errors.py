from __future__ import annotations


class CsvJsonError(Exception):
    """Base class for every error raised by csvjson."""


class EmptyInputError(CsvJsonError, ValueError):
    def __init__(self, message: str = "Input array is empty") -> None:
        super().__init__(message)


class InvalidHeaderError(CsvJsonError, ValueError):
    def __init__(self, message: str = "Invalid headers") -> None:
        super().__init__(message)


class InvalidDelimiterError(CsvJsonError, ValueError):
    def __init__(self, message: str = "Delimiter must be a non-empty string") -> None:
        super().__init__(message)


class ColumnMismatchError(CsvJsonError, ValueError):
    """A data line does not have as many fields as the header line."""

    def __init__(self, line: int, expected: int, actual: int) -> None:
        self.line = line  # 1-based
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Line {line}: Column count mismatch. Expected {expected}, got {actual}"
        )


class EmptyFileError(CsvJsonError):
    def __init__(self, message: str = "Input file is empty") -> None:
        super().__init__(message)


class ProcessingError(CsvJsonError):
    PREFIX = "Failed to process CSV file: "

    @classmethod
    def wrap(cls, exc: BaseException) -> "ProcessingError":
        return cls(f"{cls.PREFIX}{exc}")


class ConfigError(CsvJsonError):
    pass
