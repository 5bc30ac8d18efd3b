"""
Configuration loader for the circulation store.

Loads settings from environment variables (.env file).
MongoDB connection settings are read by RepositoryConfig.from_env();
this module covers logging and the bundled data corpus.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("simple", "json")


class Config:
    """
    Script settings shared by the loader and the checks driver.

    All values loaded from environment variables - NO SECRETS IN CODE.
    """

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "simple")  # "simple" or "json"
    DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "false").lower() == "true"

    # ===== Data =====
    CIRCULATION_DATA_PATH: str = os.getenv(
        "CIRCULATION_DATA_PATH",
        str(PROJECT_ROOT / "data" / "circulation.json")
    )

    @classmethod
    def validate(cls) -> None:
        """
        Validate the logging settings before a script configures logging.
        Raises ValueError naming the offending variable.
        """
        if cls.LOG_LEVEL.upper() not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{cls.LOG_LEVEL}'"
            )

        if cls.LOG_FORMAT not in LOG_FORMATS:
            raise ValueError(
                f"LOG_FORMAT must be 'simple' or 'json', got '{cls.LOG_FORMAT}'"
            )

    @classmethod
    def summary(cls) -> str:
        """Return a summary of the current configuration (safe for logging)."""
        data_status = "✓" if Path(cls.CIRCULATION_DATA_PATH).exists() else "✗ Missing"
        return f"""
Configuration Summary:
  Log level: {cls.LOG_LEVEL} ({cls.LOG_FORMAT})
  Debug mode: {'Enabled' if cls.DEBUG_MODE else 'Disabled'}
  Data file: {cls.CIRCULATION_DATA_PATH} {data_status}
        """.strip()
