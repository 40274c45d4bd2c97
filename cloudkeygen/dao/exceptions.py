"""Exceptions raised by the counter DAOs.

DAO errors never leave the generators: CounterKeyGenerator turns a
DataStoreError into a retryable CounterUnavailableError. The Lambda handler
only sees DataStoreError directly when the counter DAO is built at cold start.

Example:
    >>> from cloudkeygen.dao.exceptions import DataStoreError
    >>> raise DataStoreError("Can't connect to Redis at localhost:6379/0.")
    Traceback (most recent call last):
        ...
    cloudkeygen.dao.exceptions.DataStoreError: Can't connect to Redis at localhost:6379/0.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class DataStoreError(DAOError):
    """The counter store failed: unreachable, timed out or refused the command (e.g. READONLY)."""

    pass
