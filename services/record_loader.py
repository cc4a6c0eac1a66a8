"""
Record Loader

Reads the tracking spreadsheet (data.xlsx, falling back to data.csv) into
RawRow records. Any failure to read is logged and yields an empty data set.
"""

from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional
import logging

import pandas as pd

from models.record import LoadResult, RawRow
from services.base_service import IRecordSource

logger = logging.getLogger(__name__)


def clean_cell(value: Any) -> Any:
    """Normalize one spreadsheet cell for JSON output; blanks become ''"""
    if value is None:
        return ''
    try:
        if pd.isna(value):
            return ''
    except (TypeError, ValueError):
        pass

    if isinstance(value, (datetime, pd.Timestamp)):
        if value.hour == value.minute == value.second == 0:
            return value.strftime('%Y-%m-%d')
        return value.strftime('%Y-%m-%d %H:%M:%S')
    if isinstance(value, (date, time)):
        return value.isoformat()

    # numpy scalars -> plain Python
    if hasattr(value, 'item') and not isinstance(value, (str, bytes)):
        value = value.item()
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def drop_blank_rows(frame: pd.DataFrame) -> pd.DataFrame:
    """Remove spacer rows where every cell is NaN or ''"""
    if frame.empty:
        return frame
    blank = frame.isna() | frame.apply(lambda column: column.map(lambda v: isinstance(v, str) and v == ''))
    return frame[~blank.all(axis=1)]


def build_rows(records: Iterable[Mapping[str, Any]]) -> List[RawRow]:
    """Tag records with their zero-based position and clean every cell"""
    rows = []
    for row_id, record in enumerate(records):
        cleaned = {str(column): clean_cell(value) for column, value in record.items()}
        rows.append(RawRow.from_mapping(row_id, cleaned))
    return rows


class SpreadsheetRecordLoader(IRecordSource):
    """Loads rows from the first sheet of data.xlsx or from data.csv"""

    def __init__(self, xlsx_path: Path, csv_path: Path):
        self.xlsx_path = Path(xlsx_path)
        self.csv_path = Path(csv_path)

    def resolve_source(self) -> Optional[Path]:
        """Active data file, checked on every call"""
        if self.xlsx_path.exists():
            return self.xlsx_path
        if self.csv_path.exists():
            return self.csv_path
        return None

    def load(self) -> LoadResult:
        source = self.resolve_source()
        if source is None:
            logger.debug("No data file found - returning empty data set")
            return LoadResult(rows=[], source=None)

        try:
            frame = drop_blank_rows(self._read_frame(source))
            rows = build_rows(frame.to_dict(orient='records'))
        except Exception as e:
            logger.error(f"Failed to read data file {source}: {e}")
            return LoadResult(rows=[], source=None)

        logger.debug(f"Loaded {len(rows)} rows from {source.name}")
        return LoadResult(rows=rows, source=source)

    @staticmethod
    def _read_frame(source: Path) -> pd.DataFrame:
        """Header row gives the column names; first sheet only"""
        if source.suffix.lower() == '.csv':
            return pd.read_csv(source, dtype=str, keep_default_na=False)
        return pd.read_excel(source, sheet_name=0, dtype=object, engine='openpyxl')


class InMemoryRecordLoader(IRecordSource):
    """Serves a fixed list of header -> value mappings"""

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None):
        self.records = list(records or [])

    def load(self) -> LoadResult:
        if not self.records:
            return LoadResult(rows=[], source=None)
        return LoadResult(rows=build_rows(self.records), source='memory')
