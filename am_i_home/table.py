"""Plain-text table rendering for CLI output."""

from dataclasses import fields, is_dataclass
from typing import Any, Iterable, Sequence, TextIO


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_table(rows: Iterable[Sequence[Any]], headers: Sequence[str] | None = None,
                 columns: int | None = None) -> list[str]:
    """
    Render *rows* as aligned text lines.

    Every column is padded to its widest cell (header included) and columns
    are joined with " | ".  With *headers*, a header line and a dashed
    separator as wide as a full row come first.

    Raises:
        ValueError: header count differs from the column count
    """
    table = [[_cell(v) for v in row] for row in rows]
    if columns is None:
        columns = len(headers) if headers is not None else max((len(r) for r in table), default=0)
    if headers is not None and len(headers) != columns:
        raise ValueError(
            f"headers length ({len(headers)}) must match number of columns ({columns})"
        )
    for row in table:
        if len(row) != columns:
            raise ValueError(f"row has {len(row)} cells, expected {columns}")

    widths = [len(h) for h in headers] if headers is not None else [0] * columns
    for row in table:
        widths = [max(w, len(c)) for w, c in zip(widths, row)]

    def line(cells: Sequence[str]) -> str:
        return " | ".join(c.ljust(w) for c, w in zip(cells, widths))

    out = []
    if headers is not None:
        header = line(headers)
        out.append(header)
        out.append("-" * len(header))
    out.extend(line(row) for row in table)
    return out


def print_records(stream: TextIO, records: Sequence[Any], attrs: Sequence[str],
                  headers: Sequence[str] | None = None) -> None:
    """Print dataclass *records* as a table of the given attribute columns."""
    for record in records:
        if not is_dataclass(record):
            raise TypeError(f"expected dataclass instances, got {type(record).__name__}")
        known = {f.name for f in fields(record)}
        missing = [a for a in attrs if a not in known]
        if missing:
            raise ValueError(f"unknown columns: {', '.join(missing)}")
    rows = [[getattr(r, a) for a in attrs] for r in records]
    for text in render_table(rows, headers=headers, columns=len(attrs)):
        print(text, file=stream)
