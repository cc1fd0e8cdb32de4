"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_MAX_OCCURRENCES
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger storage and recurrence engine.

    Attributes:
        database_url: SQLAlchemy URL of the ledger database.
        max_occurrences: Cap on occurrences generated per template and call.
    """

    database_url: str
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from the .env file and environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_url = os.getenv("LEDGER_DB_URL", "").strip()
        database_url = raw_url or cls._default_database_url()
        max_occurrences = cls._parse_max_occurrences(
            os.getenv("LEDGER_MAX_OCCURRENCES"),
            logger=logger,
        )
        return cls(database_url=database_url, max_occurrences=max_occurrences)

    @staticmethod
    def _default_database_url() -> str:
        """Return the SQLite database stored in the project data directory."""
        data_dir = get_project_root() / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'ledger.db'}"

    @staticmethod
    def _parse_max_occurrences(raw_value: str | None, logger) -> int:
        """Parse the occurrence cap.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            int: Positive cap, the default when missing or invalid.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_MAX_OCCURRENCES
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_MAX_OCCURRENCES '{raw_value}'. "
                f"Using {DEFAULT_MAX_OCCURRENCES}."
            )
            return DEFAULT_MAX_OCCURRENCES
        if value <= 0:
            logger.warning(
                f"LEDGER_MAX_OCCURRENCES must be positive, got {value}. "
                f"Using {DEFAULT_MAX_OCCURRENCES}."
            )
            return DEFAULT_MAX_OCCURRENCES
        return value


__all__ = ["LedgerSettings"]
