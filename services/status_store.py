"""
Status Store

Persists the AJL/DMI -> OPEN/CLOSED mapping as one pretty-printed JSON
document. The whole document is rewritten on every save.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional
import logging

from services.base_service import IStatusRepository

logger = logging.getLogger(__name__)


class JsonStatusStore(IStatusRepository):
    """status.json backed store"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                statuses = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read status file {self.path}: {e}")
            return {}

        if not isinstance(statuses, dict):
            logger.warning(f"Status file {self.path} is not a JSON object - ignoring")
            return {}
        return statuses

    def save(self, statuses: Dict[str, Any]) -> None:
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(statuses, f, indent=2, ensure_ascii=False)
        logger.debug(f"Saved {len(statuses)} statuses to {self.path}")


class InMemoryStatusStore(IStatusRepository):
    """Keeps the mapping in memory"""

    def __init__(self, statuses: Optional[Dict[str, Any]] = None):
        self._statuses = dict(statuses or {})

    def load(self) -> Dict[str, Any]:
        return dict(self._statuses)

    def save(self, statuses: Dict[str, Any]) -> None:
        self._statuses = dict(statuses)
