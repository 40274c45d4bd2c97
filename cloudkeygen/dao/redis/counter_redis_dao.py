"""Data Access Object (DAO) implementation for shared counters in Redis

Each namespace maps to one Redis integer key. Redis executes INCR atomically
and returns the incremented value in the same round trip, so concurrent
callers across any number of processes never observe the same value.

Classes:
    CounterRedisDAO:
        DAO for incrementing namespaced counters in a Redis datastore.

Example:
    >>> from cloudkeygen.dao.redis import CounterRedisDAO

    >>> dao = CounterRedisDAO(redis_url='redis://localhost:6379/0', prefix='cloudkeygen:dev')
    >>> dao.increment('permutation')
    1
    >>> dao.current('permutation')
    1
"""

import logging

from beartype import beartype

from cloudkeygen.dao.base import CounterBaseDAO
from cloudkeygen.dao.redis.mixins import RedisClientMixin
from cloudkeygen.dao.redis.helpers import handle_redis_connection_error


logger = logging.getLogger(__name__)


class CounterRedisDAO(RedisClientMixin, CounterBaseDAO):
    """Redis-based Data Access Object (DAO) for shared counters

    This class implements the CounterBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        increment(namespace: str, **kwargs) -> int:
            Atomically increment and return a counter (INCR).
            Raises DataStoreError on any Redis failure.

        current(namespace: str, **kwargs) -> int:
            Operator inspection helper, not used for key generation: read a
            counter without incrementing it (0 if it doesn't exist yet), e.g.
            to see how much of the permutation period p-1 is used up.
            Raises DataStoreError on any Redis failure.
    """

    @handle_redis_connection_error
    @beartype
    def increment(self, namespace: str, **kwargs) -> int:
        """Increment a namespaced counter with a single INCR round trip

        NOTE: no value is cached locally. Every call goes to Redis, which is
              the only owner of the counter state.

        Args:
            namespace (str):
                Counter namespace, e.g. 'permutation'.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int: counter value after the increment.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.increment('permutation')
            42
        """
        value = int(self.redis.incr(self.keys.counter_key(namespace)))
        logger.debug('Incremented shared counter.', extra={'namespace': namespace, 'counter': value})
        return value

    @handle_redis_connection_error
    @beartype
    def current(self, namespace: str, **kwargs) -> int:
        """Read a counter without incrementing it. Never called while generating keys."""
        value = self.redis.get(self.keys.counter_key(namespace))
        return 0 if value is None else int(value)
