"""
Tracker Record Models

Defines data structures for rows loaded from the tracking spreadsheet,
the rows returned to the client, and the per-group status summary.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional
from enum import Enum


# Columns shown in the client table, in display order (status is separate)
DISPLAY_COLUMNS = [
    'NO', 'AJL/DMI', 'DEFECT/TASK', 'SPARES', 'DFP', 'REMARKS',
    'ROBBING DECLARATION', 'RECEIVING AIRCRAFT', '9M-LDJ Compatibility',
    'MATPLAN UPDATE', 'SPARE EDD', 'OPTION', 'BOOK'
]

AIRCRAFT_COLUMN = 'Aircraft'
SYSTEM_COLUMN = 'System'
GROUP_KEY_COLUMN = 'AJL/DMI'

# Spreadsheet header -> RawRow attribute
COLUMN_FIELDS = {
    'NO': 'no',
    'AJL/DMI': 'ajl',
    'DEFECT/TASK': 'defect_task',
    'SPARES': 'spares',
    'DFP': 'dfp',
    'REMARKS': 'remarks',
    'ROBBING DECLARATION': 'robbing_declaration',
    'RECEIVING AIRCRAFT': 'receiving_aircraft',
    '9M-LDJ Compatibility': 'ldj_compatibility',
    'MATPLAN UPDATE': 'matplan_update',
    'SPARE EDD': 'spare_edd',
    'OPTION': 'option',
    'BOOK': 'book',
    AIRCRAFT_COLUMN: 'aircraft',
    SYSTEM_COLUMN: 'system',
}


class GroupStatus(Enum):
    """Status of one AJL/DMI group"""
    OPEN = "OPEN"
    CLOSED = "CLOSED"

    @classmethod
    def is_closed(cls, value: Any) -> bool:
        """Only the exact string CLOSED closes a group"""
        return value == cls.CLOSED.value


def cell_text(value: Any) -> str:
    """Cell value as trimmed text, blank for None"""
    if value is None:
        return ''
    return str(value).strip()


def is_blank(value: Any) -> bool:
    """Blank means None or an empty string; 0 is a real value"""
    return value is None or value == ''


@dataclass
class RawRow:
    """One physical spreadsheet row"""
    row_id: int
    no: Any = ''
    ajl: Any = ''
    defect_task: Any = ''
    spares: Any = ''
    dfp: Any = ''
    remarks: Any = ''
    robbing_declaration: Any = ''
    receiving_aircraft: Any = ''
    ldj_compatibility: Any = ''
    matplan_update: Any = ''
    spare_edd: Any = ''
    option: Any = ''
    book: Any = ''
    aircraft: Any = ''
    system: Any = ''
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, row_id: int, data: Mapping[str, Any]) -> 'RawRow':
        """Create from a header -> value mapping; unknown headers go to extra"""
        known = {}
        extra = {}
        for column, value in data.items():
            if value is None:
                value = ''
            attr = COLUMN_FIELDS.get(column)
            if attr:
                known[attr] = value
            else:
                extra[str(column)] = value
        return cls(row_id=row_id, extra=extra, **known)

    def get(self, column: str, default: Any = '') -> Any:
        """Value by spreadsheet header name"""
        attr = COLUMN_FIELDS.get(column)
        if attr:
            return getattr(self, attr)
        return self.extra.get(column, default)

    @property
    def aircraft_key(self) -> str:
        return cell_text(self.aircraft)

    @property
    def system_key(self) -> str:
        return cell_text(self.system)


@dataclass
class DisplayRow:
    """Row as returned by the search endpoint"""
    row_id: int
    values: Dict[str, Any]
    system: Any
    aircraft: Any
    status: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape the client table expects"""
        out = {'__id': self.row_id}
        for column in DISPLAY_COLUMNS:
            out[column] = self.values.get(column, '')
        out[SYSTEM_COLUMN] = self.system
        out[AIRCRAFT_COLUMN] = self.aircraft
        out['Status'] = self.status
        return out


@dataclass
class SearchResult:
    """Search response: fixed column list plus matching rows"""
    rows: List[DisplayRow]
    columns: List[str] = field(default_factory=lambda: list(DISPLAY_COLUMNS))

    @property
    def count(self) -> int:
        return len(self.rows)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'columns': list(self.columns),
            'count': self.count,
            'rows': [row.to_dict() for row in self.rows]
        }


@dataclass
class StatusSummary:
    """Open/closed AJL group counts"""
    open: int = 0
    closed: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {'open': self.open, 'closed': self.closed}


@dataclass
class LoadResult:
    """Rows from one load plus the file they came from"""
    rows: List[RawRow]
    source: Optional[Any] = None
