"""Errors raised by the station catalog pipeline."""


class StationCatalogError(Exception):
    """Base class for errors that end a run."""

    exit_code = 1


class InputNotFound(StationCatalogError, FileNotFoundError):
    """The stops file does not exist."""

    exit_code = 2

    def __init__(self, path: str, listing: list[str]) -> None:
        super().__init__(f"Input file not found: {path}")
        self.path = path
        self.listing = listing


class MalformedRow(StationCatalogError, ValueError):
    """The stops file could not be parsed."""

    exit_code = 3

    def __init__(self, path: str, line_num: int, reason: str) -> None:
        super().__init__(f"Malformed CSV in {path} at line {line_num}: {reason}")
        self.path = path
        self.line_num = line_num


class WriteFailure(StationCatalogError, OSError):
    """An output artifact could not be written."""

    exit_code = 4

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path
