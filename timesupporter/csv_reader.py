"""Reading the game's comma separated data files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike

ENCODING = "utf-8"


def csv_to_list(line: str) -> list[str]:
    """Split one line on commas; quoting is not supported."""
    return line.split(",")


def _clean(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield line.rstrip("\r\n")


def _read_lines(file_name: str | PathLike) -> list[str]:
    with open(file_name, encoding=ENCODING) as handle:
        return handle.read().splitlines()


class CsvReader:
    """A table whose first line holds the column names."""

    def __init__(self, file_name: str | PathLike) -> None:
        self._load(_read_lines(file_name))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> CsvReader:
        """Build a reader from lines of text instead of a file."""
        reader = cls.__new__(cls)
        reader._load(lines)
        return reader

    def _load(self, lines: Iterable[str]) -> None:
        rows = _clean(lines)
        self.column_names = csv_to_list(next(rows, ""))
        self._data = [dict(zip(self.column_names, csv_to_list(row))) for row in rows]

    @property
    def data(self) -> list[dict[str, str]]:
        """All rows, as column name to value."""
        return [dict(row) for row in self._data]

    def find_one(self, column_name: str, value: str) -> dict[str, str]:
        """First row whose ``column_name`` equals ``value``, or an empty dict."""
        for row in self._data:
            if row.get(column_name) == value:
                return dict(row)
        return {}


class DomainCsvReader:
    """A file split into domains, each with its own header line.

    A line whose first cell contains ':' and whose second cell is empty, or
    whose first cell is empty, names a domain; the line after it holds that
    domain's column names.
    """

    def __init__(self, file_name: str | PathLike) -> None:
        self._load(_read_lines(file_name))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> DomainCsvReader:
        """Build a reader from lines of text instead of a file."""
        reader = cls.__new__(cls)
        reader._load(lines)
        return reader

    def _load(self, lines: Iterable[str]) -> None:
        self._columns: dict[str, list[str]] = {}
        self._data: dict[str, list[dict[str, str]]] = {}
        domain = ""
        rows = _clean(lines)
        for line in rows:
            cells = csv_to_list(line)
            second = cells[1] if len(cells) > 1 else ""
            if (second == "" and ":" in cells[0]) or cells[0] == "":
                domain = cells[0]
                self._columns[domain] = csv_to_list(next(rows, ""))
            else:
                columns = self._columns.get(domain, [])
                self._data.setdefault(domain, []).append(dict(zip(columns, cells)))

    def get_domain_data(self, domain_name: str) -> list[dict[str, str]]:
        """Rows of one domain; empty if the domain is absent."""
        return [dict(row) for row in self._data.get(domain_name, [])]