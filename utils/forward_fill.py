"""
Merged-Cell Reconstruction

Spreadsheet cells merged across several physical rows only carry a value on
the first row. Forward-fill copies the last non-blank value down so every
physical row sees the value of its logical entry.
"""

from typing import Any, Dict, Iterable, Iterator, List, Sequence

from models.record import RawRow, is_blank

# Columns that are merged vertically in the tracking sheet
FILL_DOWN_COLUMNS = ('NO', 'AJL/DMI', 'DEFECT/TASK', 'BOOK')


def iter_forward_filled(
    rows: Iterable[RawRow],
    columns: Sequence[str] = FILL_DOWN_COLUMNS
) -> Iterator[Dict[str, Any]]:
    """
    Yield the effective value of each fill-down column, row by row

    Args:
        rows: Rows in the order they will be shown (already filtered)
        columns: Columns to fill

    Yields:
        Dict of column -> effective value for the matching row
    """
    last = {column: '' for column in columns}
    for row in rows:
        for column in columns:
            value = row.get(column)
            if not is_blank(value):
                last[column] = value
        yield dict(last)


def forward_fill(
    rows: Iterable[RawRow],
    columns: Sequence[str] = FILL_DOWN_COLUMNS
) -> List[Dict[str, Any]]:
    """Effective fill-down values for every row; state starts empty per call"""
    return list(iter_forward_filled(rows, columns))
