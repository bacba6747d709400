"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortLinkNotFoundError:
        Raised when a ShortLinkModel is not found in the data store.

    ShortLinkAlreadyExistsError:
        Raised when a conditional insert finds the identifier already taken.

    DataStoreError:
        Raised when the data store is unavailable (e.g., connection issues, timeouts, OOM, etc.).

Example:
    >>> from edgelinks.dao.exceptions import DataStoreError
    >>> raise DataStoreError("Can't connect to Redis at localhost:6379/0.")
    Traceback (most recent call last):
        ...
    edgelinks.dao.exceptions.DataStoreError: Can't connect to Redis at localhost:6379/0.
"""

from edgelinks.exceptions import EdgeLinksError


class DAOError(EdgeLinksError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'DAO_ERROR'


class ShortLinkNotFoundError(DAOError):
    """Exception raised when a ShortLinkModel is not found in the data store."""

    error_code = 'SHORT_LINK_NOT_FOUND'


class ShortLinkAlreadyExistsError(DAOError):
    """Exception raised when inserting a ShortLinkModel whose identifier is already taken."""

    error_code = 'SHORT_LINK_ALREADY_EXISTS'


class DataStoreError(DAOError):
    """Exception raised when the data store is unavailable.

    e.g. connection issues, timeouts, OOM, etc.
    """

    error_code = 'STORE_UNAVAILABLE'
