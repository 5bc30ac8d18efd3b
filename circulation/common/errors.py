"""
Error taxonomy for the circulation store.

Only two errors originate here: StoreConnectionError from the connection
factory and InvalidIdentifier from identifier parsing. Everything the driver
reports during find/insert/replace/delete propagates unchanged; it is exported
as StoreOperationError (pymongo's base error) so callers can catch it by name.

"Not found" is not an exception: lookups return None, deletes return False.
"""

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Driver-reported failures are never wrapped
StoreOperationError = PyMongoError


class CirculationStoreError(Exception):
    """Base class for errors raised by this package."""


class StoreConnectionError(CirculationStoreError, ConnectionError):
    """The store is unreachable or rejected the credentials."""

    def __init__(self, message: str, uri: str = ""):
        super().__init__(message)
        self.uri = uri


class InvalidIdentifier(CirculationStoreError, ValueError):
    """A record identifier is not a well-formed ObjectId."""

    def __init__(self, value):
        super().__init__(f"Invalid record identifier: {value!r}")
        self.value = value


def to_object_id(value) -> ObjectId:
    """
    Convert an identifier string (or ObjectId) to an ObjectId.

    Args:
        value: 24-character hex string or ObjectId

    Returns:
        ObjectId instance

    Raises:
        InvalidIdentifier: If value is not a well-formed identifier
    """
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str):
        raise InvalidIdentifier(value)
    try:
        return ObjectId(value)
    except InvalidId as e:
        raise InvalidIdentifier(value) from e
