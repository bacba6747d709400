from edgelinks.dao.base import ShortLinkBaseDAO
from edgelinks.dao.memory import ShortLinkMemoryDAO
from edgelinks.dao.redis import ShortLinkRedisDAO


__all__ = [
    'ShortLinkBaseDAO',
    'ShortLinkMemoryDAO',
    'ShortLinkRedisDAO',
]
