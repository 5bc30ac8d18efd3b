"""
Bulk input loading.

The corpus is a JSON array of flat circulation records, read wholesale.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

logger = logging.getLogger(__name__)


def load_records(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Load circulation records from a JSON file.

    Args:
        path: Path to a JSON file containing an array of objects

    Returns:
        List of record dicts

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON array of objects
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array, got {type(data).__name__}")

    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"{path}: item {index} is not an object")

    logger.info(f"Loaded {len(data)} records from {path}")
    return data
