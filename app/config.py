"""
Application Configuration

Centralized configuration management with validation.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Only this aircraft is counted by the status summary
TRACKED_AIRCRAFT = '9M-LNR'

DATA_XLSX_NAME = 'data.xlsx'
DATA_CSV_NAME = 'data.csv'
STATUS_FILE_NAME = 'status.json'
USERS_FILE_NAME = 'users.json'


@dataclass
class AppConfig:
    """Main application configuration"""
    debug: bool
    log_level: str
    port: int
    data_dir: Path
    static_dir: Path
    tracked_aircraft: str = TRACKED_AIRCRAFT
    cors_origins: str = '*'

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load all configuration from environment"""
        return cls(
            debug=os.environ.get('DEBUG', 'false').lower() == 'true',
            log_level=os.environ.get('LOG_LEVEL', 'INFO'),
            port=int(os.environ.get('PORT', '5000')),
            data_dir=Path(os.environ.get('DATA_DIR', str(PROJECT_ROOT))),
            static_dir=Path(os.environ.get('STATIC_DIR', str(PROJECT_ROOT / 'public'))),
            tracked_aircraft=os.environ.get('TRACKED_AIRCRAFT', TRACKED_AIRCRAFT).strip(),
            cors_origins=os.environ.get('CORS_ORIGINS', '*')
        )

    @property
    def data_xlsx(self) -> Path:
        return self.data_dir / DATA_XLSX_NAME

    @property
    def data_csv(self) -> Path:
        return self.data_dir / DATA_CSV_NAME

    @property
    def status_file(self) -> Path:
        return self.data_dir / STATUS_FILE_NAME

    @property
    def users_file(self) -> Path:
        return self.data_dir / USERS_FILE_NAME

    def cors_origin_list(self) -> List[str]:
        """CORS origins as a list ('*' stays a plain wildcard)"""
        origins = [o.strip() for o in self.cors_origins.split(',') if o.strip()]
        if not origins or origins == ['*']:
            return ['*']
        return origins

    def validate(self) -> list:
        """Validate configuration and return list of issues"""
        issues = []

        if not self.data_dir.is_dir():
            issues.append(f"DATA_DIR {self.data_dir} does not exist - data set will be empty")
        elif not self.data_xlsx.exists() and not self.data_csv.exists():
            issues.append(f"No {DATA_XLSX_NAME} or {DATA_CSV_NAME} in {self.data_dir}")

        if not self.users_file.exists():
            issues.append(f"{USERS_FILE_NAME} missing - login will fail")

        if not self.tracked_aircraft:
            issues.append("TRACKED_AIRCRAFT is blank - status summary will always be empty")

        return issues


# Singleton config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create application config singleton"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()

        # Log configuration status
        issues = _config.validate()
        for issue in issues:
            logger.warning(f"Config: {issue}")

        logger.info(f"Config loaded - Debug: {_config.debug}, data dir: {_config.data_dir}")

    return _config
