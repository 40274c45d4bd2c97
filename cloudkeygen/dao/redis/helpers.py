import functools
import redis
from typing import Any
from collections.abc import Callable

from cloudkeygen.dao.exceptions import DataStoreError


__all__ = []


def redis_endpoint(client: redis.Redis) -> str:
    """Describe the server a client talks to as 'host:port/db' for error messages."""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error[F: Callable[..., Any]](method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis errors into DataStoreError

    Every redis-py error is translated: connectivity failures (refused,
    timed out) as well as commands Redis refused (READONLY during a failover,
    OOM, LOADING, WRONGTYPE or overflow on a corrupted counter key). Callers
    only ever see DataStoreError, chained to the redis-py cause.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise any
            redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_connection_error
        ... def increment(self, namespace):
        ...     return self.redis.incr(namespace)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.TimeoutError as e:
            raise DataStoreError(f'Timed out talking to Redis at {redis_endpoint(self.redis)}.') from e
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_endpoint(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {redis_endpoint(self.redis)} rejected the command: {e}') from e

    return wrapper
