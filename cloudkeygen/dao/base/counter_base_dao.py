"""Abstract base class for shared counter data access objects (DAOs).

A shared counter is an atomically incremented integer keyed by a namespace.
It is owned by the data store: this process never caches or resets it, it
only reads the value returned by each increment.

Responsibilities:
    - Provide an interface for the increment-and-return operation.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from cloudkeygen.dao.redis import CounterRedisDAO

        >>> dao = CounterRedisDAO(...)
        >>> dao.increment('permutation')
        1
        >>> dao.increment('permutation')
        2
        >>> dao.increment('sequential')
        1
"""

from abc import ABC, abstractmethod


class CounterBaseDAO(ABC):
    """Interface for shared counter data access objects (DAOs).

    Methods:
        increment(namespace: str, **kwargs) -> int:
            Atomically increment the namespace's counter and return the new value.
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Datastore-specific implementations (e.g., CounterRedisDAO) must extend
        this class and implement all abstract methods. The returned value must
        be strictly greater than every value previously returned for the same
        namespace, to any caller.

    NOTE:
        - Counters are created on first increment (first value 1) and are
          never reset through this interface.
    """

    @abstractmethod
    def increment(self, namespace: str, **kwargs) -> int:
        """Atomically increment a namespaced counter.

        Args:
            namespace (str):
                Counter name, e.g. 'permutation'.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: The counter value after the increment.

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
