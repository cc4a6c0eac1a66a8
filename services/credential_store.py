"""
Credential Store

Reads the flat users.json list used by the login endpoint. Unlike the data
files, a missing list is a configuration error rather than an empty result.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from app.errors import ConfigurationError
from services.base_service import ICredentialRepository

logger = logging.getLogger(__name__)


class JsonCredentialStore(ICredentialRepository):
    """users.json backed credential list"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            raise ConfigurationError(f"{self.path.name} missing", setting='users_file')

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                users = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Login error: could not read {self.path}: {e}")
            raise ConfigurationError("Server error", setting='users_file', reason=str(e))

        if not isinstance(users, list):
            logger.error(f"Login error: {self.path} is not a JSON array")
            raise ConfigurationError("Server error", setting='users_file', reason='not a list')
        return users


class InMemoryCredentialStore(ICredentialRepository):
    """Fixed credential list"""

    def __init__(self, users: Optional[List[Dict[str, Any]]] = None):
        self.users = users

    def load(self) -> List[Dict[str, Any]]:
        if self.users is None:
            raise ConfigurationError("users.json missing", setting='users_file')
        return list(self.users)
