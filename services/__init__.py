"""
Services Package - Business Logic Layer
"""

from services.base_service import IRecordSource, IStatusRepository, ICredentialRepository
from services.record_loader import SpreadsheetRecordLoader, InMemoryRecordLoader
from services.status_store import JsonStatusStore, InMemoryStatusStore
from services.credential_store import JsonCredentialStore, InMemoryCredentialStore
from services.tracker_service import TrackerService, summarize_statuses

__all__ = [
    'IRecordSource',
    'IStatusRepository',
    'ICredentialRepository',
    'SpreadsheetRecordLoader',
    'InMemoryRecordLoader',
    'JsonStatusStore',
    'InMemoryStatusStore',
    'JsonCredentialStore',
    'InMemoryCredentialStore',
    'TrackerService',
    'summarize_statuses'
]
