"""
Tracker Service - Query and Status Logic

Ties the record loader, status store and credential list together:
    - search: filter rows, rebuild merged cells, attach AJL status
    - get_meta: distinct aircraft and system values for the filter dropdowns
    - summarize_statuses: open/closed AJL groups for the tracked aircraft
    - update_status: persist one AJL status and return the new summary
    - login: check an id/password pair against the credential list

Every call reloads its data; nothing is cached between requests.

Usage:
    from app.config import get_config
    from services import TrackerService

    tracker = TrackerService.from_config(get_config())
    result = tracker.search(aircraft='9M-LNR')
    print(result.count)
"""

from typing import Any, Dict, Iterable, List, Optional
import logging

from app.config import TRACKED_AIRCRAFT, AppConfig, get_config
from app.errors import AuthenticationError, ValidationError
from models.record import (
    DISPLAY_COLUMNS,
    GROUP_KEY_COLUMN,
    DisplayRow,
    GroupStatus,
    RawRow,
    SearchResult,
    StatusSummary,
)
from services.base_service import ICredentialRepository, IRecordSource, IStatusRepository
from services.credential_store import JsonCredentialStore
from services.record_loader import SpreadsheetRecordLoader
from services.status_store import JsonStatusStore
from utils.forward_fill import FILL_DOWN_COLUMNS, iter_forward_filled

logger = logging.getLogger(__name__)


def unique_sorted(values: Iterable[str]) -> List[str]:
    """Distinct non-blank values in ascending order"""
    return sorted({v for v in values if v})


def filter_rows(
    rows: Iterable[RawRow],
    aircraft: Optional[str] = None,
    system: Optional[str] = None
) -> List[RawRow]:
    """Exact, case-sensitive match on trimmed Aircraft/System; None skips a filter"""
    results = list(rows)
    if aircraft is not None:
        aircraft = str(aircraft).strip()
        results = [r for r in results if r.aircraft_key == aircraft]
    if system is not None:
        system = str(system).strip()
        results = [r for r in results if r.system_key == system]
    return results


def build_display_rows(rows: List[RawRow], statuses: Dict[str, Any]) -> List[DisplayRow]:
    """
    Project filtered rows onto the display columns

    Fill-down runs over the rows as given, so merged cells resolve against
    the nearest row that survived filtering.
    """
    out = []
    for row, filled in zip(rows, iter_forward_filled(rows, FILL_DOWN_COLUMNS)):
        values = {}
        for column in DISPLAY_COLUMNS:
            if column in filled:
                values[column] = filled[column]
            else:
                values[column] = row.get(column)
        group_key = filled[GROUP_KEY_COLUMN]
        out.append(DisplayRow(
            row_id=row.row_id,
            values=values,
            system=row.system,
            aircraft=row.aircraft,
            status=statuses.get(str(group_key)) or GroupStatus.OPEN.value
        ))
    return out


def summarize_statuses(
    rows: Iterable[RawRow],
    statuses: Dict[str, Any],
    aircraft: str = TRACKED_AIRCRAFT
) -> StatusSummary:
    """
    Count open and closed AJL groups for one aircraft

    Groups use the raw AJL/DMI cell, not the filled value, so all blank
    cells for the aircraft form a single group keyed ''.

    Args:
        rows: Loaded rows (all aircraft)
        statuses: AJL -> status mapping
        aircraft: Only rows with this trimmed Aircraft value are counted

    Returns:
        StatusSummary with group counts
    """
    groups = {}
    for row in rows:
        if row.aircraft_key != aircraft:
            continue
        ajl = '' if row.ajl in (None, '') else str(row.ajl)
        if ajl not in groups:
            groups[ajl] = statuses.get(ajl) or GroupStatus.OPEN.value

    summary = StatusSummary()
    for status in groups.values():
        if GroupStatus.is_closed(status):
            summary.closed += 1
        else:
            summary.open += 1
    return summary


class TrackerService:
    """
    Query, status and login operations over injected storage

    Args:
        records: Row source
        statuses: Status repository
        credentials: Credential list
        tracked_aircraft: Aircraft counted by the status summary
    """

    def __init__(
        self,
        records: IRecordSource,
        statuses: IStatusRepository,
        credentials: ICredentialRepository,
        tracked_aircraft: str = TRACKED_AIRCRAFT
    ):
        self.records = records
        self.statuses = statuses
        self.credentials = credentials
        self.tracked_aircraft = tracked_aircraft

    @classmethod
    def from_config(cls, config: AppConfig) -> 'TrackerService':
        """File-backed service rooted at config.data_dir"""
        return cls(
            records=SpreadsheetRecordLoader(config.data_xlsx, config.data_csv),
            statuses=JsonStatusStore(config.status_file),
            credentials=JsonCredentialStore(config.users_file),
            tracked_aircraft=config.tracked_aircraft
        )

    def get_meta(self) -> Dict[str, List[str]]:
        """Distinct Aircraft and System values"""
        rows = self.records.load().rows
        return {
            'aircrafts': unique_sorted(r.aircraft_key for r in rows),
            'systems': unique_sorted(r.system_key for r in rows)
        }

    def search(self, aircraft: Optional[str] = None, system: Optional[str] = None) -> SearchResult:
        rows = filter_rows(self.records.load().rows, aircraft, system)
        statuses = self.statuses.load()
        return SearchResult(rows=build_display_rows(rows, statuses))

    def get_summary(self) -> StatusSummary:
        rows = self.records.load().rows
        return summarize_statuses(rows, self.statuses.load(), self.tracked_aircraft)

    def update_status(self, ajl: Any, status: Any) -> StatusSummary:
        """
        Store the status of one AJL group and return the new summary

        Raises:
            ValidationError: ajl is missing
        """
        if not ajl:
            raise ValidationError("Missing AJL", field='ajl')

        statuses = self.statuses.load()
        statuses[str(ajl)] = status
        self.statuses.save(statuses)
        logger.info(f"AJL {ajl} set to {status}")

        rows = self.records.load().rows
        return summarize_statuses(rows, statuses, self.tracked_aircraft)

    def login(self, user_id: Any, password: Any) -> bool:
        """
        Raises:
            AuthenticationError: no matching id/password pair
            ConfigurationError: credential list missing or unreadable
        """
        if not self.credentials.verify(user_id, password):
            logger.info(f"Rejected login for id {user_id!r}")
            raise AuthenticationError()
        return True

