from edgelinks.dao.redis.redis_key_schema import RedisKeySchema
from edgelinks.dao.redis.mixins import RedisClientMixin
from edgelinks.dao.redis.short_link_redis_dao import ShortLinkRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShortLinkRedisDAO',
]
