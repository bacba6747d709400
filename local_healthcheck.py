"""Check that the link registry works against a Redis running on your local machine

Connection details:
- redis: 127.0.0.1:6379
- redisinsight: 127.0.0.1:5540

Expect to see the allocated short link and its resolved target printed in
your local console. You can also access the Redis Insight UI at
localhost:5540 and find the key 'edgelinks:local:links:<identifier>:url'.
"""

from edgelinks.dao.redis import ShortLinkRedisDAO
from edgelinks.registry import LinkRegistry
from edgelinks.utils import initialize_logging


def main():
    initialize_logging()

    dao = ShortLinkRedisDAO(redis_host='localhost', redis_port=6379, redis_db=0, prefix='edgelinks:local')
    registry = LinkRegistry(dao)

    result = registry.allocate('https://redis.io/docs/latest/')
    print(f'{result.kind} short link: {result.short_link}')
    print(f'resolves to: {registry.resolve(result.identifier)}')


if __name__ == '__main__':
    main()
