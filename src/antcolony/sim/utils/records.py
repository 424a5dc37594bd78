from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

END_MARKER = "END"


class RecordFormatError(ValueError):
    pass


class RecordReader:
    """Sequential reader over a whitespace-delimited record file."""

    def __init__(self, text: str):
        self._tokens: List[str] = text.split()
        self._index = 0

    @classmethod
    def from_path(cls, path: Path | str) -> "RecordReader":
        return cls(Path(path).read_text())

    def _next_token(self) -> str:
        if self._index >= len(self._tokens):
            raise RecordFormatError("unexpected end of file")
        token = self._tokens[self._index]
        self._index += 1
        return token

    def next_float(self) -> float:
        token = self._next_token()
        try:
            return float(token)
        except ValueError:
            raise RecordFormatError(f"expected a number, got {token!r}") from None

    def next_int(self) -> int:
        token = self._next_token()
        try:
            return int(token)
        except ValueError:
            raise RecordFormatError(f"expected an integer, got {token!r}") from None

    def next_count(self) -> int:
        value = self.next_int()
        if value < 0:
            raise RecordFormatError(f"expected a non-negative count, got {value}")
        return value

    def expect_end(self) -> None:
        token = self._next_token()
        if token != END_MARKER:
            raise RecordFormatError(f"expected {END_MARKER!r} marker, got {token!r}")


def format_record(values: Iterable[object]) -> str:
    return "\t".join(repr(value) if isinstance(value, float) else str(value) for value in values)


def write_records(path: Path | str, header: Iterable[str], rows: Iterable[Iterable[object]]) -> None:
    lines = list(header)
    lines.extend(format_record(row) for row in rows)
    lines.append(END_MARKER)
    Path(path).write_text("\n".join(lines) + "\n")
