"""
Canonical record types for the circulation store.

The store is schema-less; these types document the expected shape of a
newspaper circulation record and are never enforced at runtime.
"""

from typing import Any, Dict, List, TypedDict

from bson import ObjectId
from typing_extensions import NotRequired

# Field names as they appear in the source dataset
NEWSPAPER = "Newspaper"
CIRCULATION_2004 = "Daily Circulation, 2004"
CIRCULATION_2013 = "Daily Circulation, 2013"
CIRCULATION_CHANGE = "Change in Daily Circulation, 2004-2013"
PULITZER_1990_2003 = "Pulitzer Prize Winners and Finalists, 1990-2003"
PULITZER_2004_2014 = "Pulitzer Prize Winners and Finalists, 2004-2014"
PULITZER_1990_2014 = "Pulitzer Prize Winners and Finalists, 1990-2014"

RECORD_FIELDS: List[str] = [
    NEWSPAPER,
    CIRCULATION_2004,
    CIRCULATION_2013,
    CIRCULATION_CHANGE,
    PULITZER_1990_2003,
    PULITZER_2004_2014,
    PULITZER_1990_2014,
]

# Keys contain spaces and commas, so the functional TypedDict form is required
CirculationRecord = TypedDict(
    "CirculationRecord",
    {
        "_id": NotRequired[ObjectId],           # Assigned by the store on insert
        "Newspaper": str,
        "Daily Circulation, 2004": float,
        "Daily Circulation, 2013": float,
        "Change in Daily Circulation, 2004-2013": float,    # Percent
        "Pulitzer Prize Winners and Finalists, 1990-2003": int,
        "Pulitzer Prize Winners and Finalists, 2004-2014": int,
        "Pulitzer Prize Winners and Finalists, 1990-2014": int,
    },
)

# Filters are plain MongoDB query documents
RecordFilter = Dict[str, Any]


def strip_identifier(record: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of a record without its store-generated _id."""
    return {key: value for key, value in record.items() if key != "_id"}
