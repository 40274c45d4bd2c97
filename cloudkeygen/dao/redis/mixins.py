"""Redis connection shared by the Redis-backed counter DAOs.

A counter DAO is built once per container, at cold start, so the connection
is verified eagerly: a container that can't reach Redis fails its first
request with DataStoreError instead of handing out keys later.

Example:
    >>> class CounterRedisDAO(RedisClientMixin, CounterBaseDAO):
    ...     pass
    ...
    >>> dao = CounterRedisDAO(redis_url='redis://localhost:6379/0', prefix='cloudkeygen:dev')
    >>> dao._healthcheck()
    True
"""

from typing import Optional

import redis

from cloudkeygen.dao.redis.redis_key_schema import RedisKeySchema
from cloudkeygen.dao.redis.helpers import redis_endpoint
from cloudkeygen.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Attach a Redis client and a key schema to a DAO.

    The client comes from, in order of precedence:
        1. `redis_client`, e.g. a mock in tests;
        2. `redis_url`, e.g. from the REDIS_URL environment variable;
        3. the individual `redis_*` parameters, e.g. from AppConfig.

    Attributes:
        redis (redis.Redis):
            Client holding the shared counters.
        keys (RedisKeySchema):
            Counter key names, namespaced by `prefix` (e.g. 'cloudkeygen:prod').

    Raises:
        DataStoreError:
            If Redis doesn't answer PING during initialization.
    """

    def __init__(
        self,
        redis_host: Optional[str] = 'localhost',
        redis_port: Optional[int] = 6379,
        redis_db: Optional[int] = 0,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_url: Optional[str] = None,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
    ):
        if redis_client is None:
            redis_client = self._connect(
                url=redis_url,
                host=redis_host,
                port=redis_port,
                db=redis_db,
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    @staticmethod
    def _connect(url: Optional[str], host, port, db, decode_responses, username, password) -> redis.Redis:
        # redis-py connects lazily, nothing goes over the wire here
        if url is not None:
            return redis.Redis.from_url(url, decode_responses=decode_responses)
        return redis.Redis(
            host=host,
            port=int(port),
            db=int(db),
            decode_responses=decode_responses,
            username=username,
            password=password,
        )

    def _healthcheck(self) -> bool:
        """PING Redis

        Raises:
            DataStoreError:
                If Redis didn't answer the PING.
        """
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_endpoint(self.redis)}. Check the provided configuration parameters.") from e
        return True
