"""
Repository Configuration and Factory

Provides a factory function that builds the circulation repository from
environment configuration and keeps one shared instance per process.
"""

import os
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import CirculationRepositoryInterface

logger = logging.getLogger(__name__)


class ConnectionStrategy(str, Enum):
    """How the repository reaches MongoDB for each operation."""
    POOLED = "pooled"      # Shared client, connected once
    PER_CALL = "per_call"  # Fresh connection per operation, always closed


@dataclass
class RepositoryConfig:
    """
    Configuration for repository initialization.

    Loaded from environment variables with sensible defaults.
    """
    mongodb_uri: str

    # Database/collection names
    database: str = "circulation"
    collection: str = "newspaper"

    strategy: ConnectionStrategy = ConnectionStrategy.POOLED
    timeout_ms: int = 5000

    @classmethod
    def from_env(cls) -> "RepositoryConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - MONGODB_URI (required): MongoDB connection string
        - MONGODB_DATABASE: Database name (default: circulation)
        - CIRCULATION_COLLECTION: Collection name (default: newspaper)
        - MONGODB_CONNECTION_STRATEGY: pooled/per_call (default: pooled)
        - MONGODB_TIMEOUT_MS: Connect timeout in milliseconds (default: 5000)

        Returns:
            RepositoryConfig instance

        Raises:
            ValueError: If MONGODB_URI is not set or MONGODB_TIMEOUT_MS is not an integer
        """
        mongodb_uri = os.getenv("MONGODB_URI")
        if not mongodb_uri:
            raise ValueError("MONGODB_URI environment variable is required")

        strategy_str = os.getenv("MONGODB_CONNECTION_STRATEGY", "pooled").lower()
        try:
            strategy = ConnectionStrategy(strategy_str)
        except ValueError:
            logger.warning(
                f"Invalid MONGODB_CONNECTION_STRATEGY '{strategy_str}', defaulting to pooled"
            )
            strategy = ConnectionStrategy.POOLED

        timeout_str = os.getenv("MONGODB_TIMEOUT_MS", "5000")
        try:
            timeout_ms = int(timeout_str)
        except ValueError:
            raise ValueError(f"MONGODB_TIMEOUT_MS must be an integer, got '{timeout_str}'")

        return cls(
            mongodb_uri=mongodb_uri,
            database=os.getenv("MONGODB_DATABASE", "circulation"),
            collection=os.getenv("CIRCULATION_COLLECTION", "newspaper"),
            strategy=strategy,
            timeout_ms=timeout_ms,
        )


# Singleton repository instance
_repository_instance: Optional[CirculationRepositoryInterface] = None


def get_circulation_repository(
    config: Optional[RepositoryConfig] = None,
) -> CirculationRepositoryInterface:
    """
    Get the circulation repository instance.

    Uses singleton pattern so the pooled client is shared process-wide.
    The config argument is only used when the singleton is first created.

    Args:
        config: Explicit configuration (default: RepositoryConfig.from_env())

    Returns:
        CirculationRepositoryInterface implementation

    Raises:
        ValueError: If MongoDB URI is not configured
    """
    global _repository_instance

    if _repository_instance is None:
        config = config or RepositoryConfig.from_env()

        from .mongo_repository import MongoCirculationRepository
        _repository_instance = MongoCirculationRepository(
            mongodb_uri=config.mongodb_uri,
            database=config.database,
            collection=config.collection,
            strategy=config.strategy,
            timeout_ms=config.timeout_ms,
        )
        logger.info(
            f"Initialized circulation repository: {config.database}.{config.collection} "
            f"({config.strategy.value})"
        )

    return _repository_instance


async def close_circulation_repository() -> None:
    """
    Close the shared client and reset the repository singleton.

    Called on shutdown, or from tests when configuration changes.
    """
    global _repository_instance

    if _repository_instance is not None:
        from .mongo_repository import MongoCirculationRepository
        if isinstance(_repository_instance, MongoCirculationRepository):
            await _repository_instance.close()

    _repository_instance = None
    logger.info("Circulation repository singleton reset")
