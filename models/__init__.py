"""
Models Package - Data Models and Interfaces
"""

from models.record import (
    DISPLAY_COLUMNS,
    GroupStatus,
    RawRow,
    DisplayRow,
    SearchResult,
    StatusSummary,
    LoadResult
)

__all__ = [
    'DISPLAY_COLUMNS',
    'GroupStatus',
    'RawRow',
    'DisplayRow',
    'SearchResult',
    'StatusSummary',
    'LoadResult'
]
