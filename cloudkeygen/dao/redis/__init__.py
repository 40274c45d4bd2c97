from cloudkeygen.dao.redis.redis_key_schema import RedisKeySchema
from cloudkeygen.dao.redis.mixins import RedisClientMixin
from cloudkeygen.dao.redis.counter_redis_dao import CounterRedisDAO


__all__ = [
    'RedisKeySchema',
    'CounterRedisDAO',
    'RedisClientMixin',
]
