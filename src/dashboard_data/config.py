# config.py
import logging
import os
from dataclasses import dataclass
from datetime import date
from typing import Optional


class DashboardDataError(Exception):
    """Base class for errors raised by the dashboard dataset package."""


class ConfigurationError(DashboardDataError):
    """Raised when an environment setting cannot be parsed."""


class DatasetIntegrityError(DashboardDataError):
    """Raised when a generated dataset breaks one of its invariants."""

    def __init__(self, issues):
        self.issues = list(issues)
        summary = '; '.join(issue['message'] for issue in self.issues[:5])
        super().__init__(f"{len(self.issues)} dataset issue(s): {summary}")


DEFAULT_EXPIRY_CUTOFF = date(2026, 4, 1)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw in (None, ''):
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _iso_date(name: str, default: date) -> date:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an ISO date (YYYY-MM-DD), got {raw!r}") from None


@dataclass
class AppConfig:
    # Output
    output_dir: str = 'data/dashboard'

    # Generation
    seed: Optional[int] = None
    expiry_cutoff: date = DEFAULT_EXPIRY_CUTOFF

    # Logging
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls) -> 'AppConfig':
        log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"LOG_LEVEL {log_level!r} is not a logging level")
        return cls(
            output_dir=os.getenv('DASHBOARD_OUTPUT_DIR', 'data/dashboard'),
            seed=_optional_int('DASHBOARD_SEED'),
            expiry_cutoff=_iso_date('DASHBOARD_EXPIRY_CUTOFF', DEFAULT_EXPIRY_CUTOFF),
            log_level=log_level,
        )


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
