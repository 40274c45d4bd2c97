"""In-process shared counter

A drop-in CounterBaseDAO for tests and single-process local runs. It gives the
same increment-and-return contract as CounterRedisDAO, but its state lives
and dies with the process, so it must never back more than one instance.
"""

import threading
from collections import defaultdict

from beartype import beartype

from cloudkeygen.dao.base import CounterBaseDAO


class InMemoryCounterDAO(CounterBaseDAO):
    """Thread-safe, in-memory namespaced counters.

    Example:
        >>> dao = InMemoryCounterDAO()
        >>> dao.increment('sequential')
        1
        >>> dao.increment('sequential')
        2
        >>> InMemoryCounterDAO(start={'sequential': 99}).increment('sequential')
        100
    """

    def __init__(self, start: dict[str, int] | None = None):
        self._lock = threading.Lock()
        self._counters: defaultdict[str, int] = defaultdict(int, start or {})

    @beartype
    def increment(self, namespace: str, **kwargs) -> int:
        if not namespace:
            raise ValueError(f'Counter namespace must be a non-empty string (given value: {namespace!r}).')
        with self._lock:
            self._counters[namespace] += 1
            return self._counters[namespace]

    @beartype
    def current(self, namespace: str, **kwargs) -> int:
        with self._lock:
            return self._counters.get(namespace, 0)
