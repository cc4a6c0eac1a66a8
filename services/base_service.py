"""
Base Repository Interfaces

Defines abstract interfaces for the storage the tracker reads and writes.
File-backed implementations are used by the server, in-memory ones by tests.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from models.record import LoadResult


class IRecordSource(ABC):
    """
    Source of tracker rows

    Implemented by:
    - SpreadsheetRecordLoader: data.xlsx / data.csv on disk
    - InMemoryRecordLoader: fixed rows
    """

    @abstractmethod
    def load(self) -> LoadResult:
        """
        Load every row of the active source

        Returns:
            LoadResult with rows in sheet order (empty on any failure)
        """
        pass


class IStatusRepository(ABC):
    """
    Persisted AJL/DMI -> status mapping

    Implemented by:
    - JsonStatusStore: status.json on disk
    - InMemoryStatusStore: dict kept in memory
    """

    @abstractmethod
    def load(self) -> Dict[str, Any]:
        """Full mapping; empty when nothing has been stored or it is unreadable"""
        pass

    @abstractmethod
    def save(self, statuses: Dict[str, Any]) -> None:
        """Overwrite the full mapping"""
        pass


class ICredentialRepository(ABC):
    """
    List of {id, password} login records

    Implemented by:
    - JsonCredentialStore: users.json on disk
    - InMemoryCredentialStore: fixed list
    """

    @abstractmethod
    def load(self) -> List[Dict[str, Any]]:
        """All credential records; raises ConfigurationError if unavailable"""
        pass

    def verify(self, user_id: Any, password: Any) -> bool:
        """True if some record matches both id and password exactly"""
        return any(
            user.get('id') == user_id and user.get('password') == password
            for user in self.load()
            if isinstance(user, dict)
        )
