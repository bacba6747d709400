"""Redis client setup shared by Redis-backed DAOs

A DAO either receives a ready client (tests, local tooling) or builds one from
the `redis_*` keyword arguments, which mirror the keys of the `redis` section
in AppConfig prefixed with `redis_`:

    {"host": "...", "port": 6379, "db": 0, "socket_timeout": 2}
        -> ShortLinkRedisDAO(redis_host="...", redis_port=6379, redis_db=0, redis_socket_timeout=2)

The client is pinged once on construction, so an unreachable store is
reported before the first read or write.

Example:
    >>> class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    ...     pass
    ...
    >>> dao = ShortLinkRedisDAO(redis_host='localhost', prefix='edgelinks:local')
    >>> dao.keys.link_url_key('my-link')
    'edgelinks:local:links:my-link:url'
"""

import redis

from edgelinks.dao.redis.redis_key_schema import RedisKeySchema
from edgelinks.dao.redis.helpers import connection_label
from edgelinks.dao.exceptions import DataStoreError


DEFAULT_SOCKET_TIMEOUT = 2.0  # seconds


class RedisClientMixin:
    """Attach a Redis client and a key schema to a DAO.

    Attributes:
        redis (redis.Redis):
            Client used by the DAO methods.
        keys (RedisKeySchema):
            Key builder for the DAO's namespace.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int | str = 6379,
        redis_db: int | str = 0,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_socket_timeout: float | None = DEFAULT_SOCKET_TIMEOUT,
        redis_decode_responses: bool = True,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        """
        Args:
            redis_host, redis_port, redis_db, redis_username, redis_password:
                Connection parameters, ignored when `redis_client` is given.
                Port and db may come as strings from configuration documents.
            redis_socket_timeout (float | None):
                Connect and command timeout in seconds. None blocks indefinitely.
            redis_decode_responses (bool):
                Return str instead of bytes. Defaults to True.
            redis_client (redis.Redis | None):
                Pre-initialized client.
            prefix (str | None):
                Namespace prefix for all keys, e.g. 'edgelinks:prod'.

        Raises:
            DataStoreError: if the initial ping fails.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                username=redis_username,
                password=redis_password,
                socket_timeout=redis_socket_timeout,
                socket_connect_timeout=redis_socket_timeout,
                decode_responses=redis_decode_responses,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self) -> None:
        """PING Redis; raise DataStoreError if it does not answer."""
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            raise DataStoreError(
                f"Can't connect to Redis at {connection_label(self.redis)}. Check the provided configuration parameters."
            ) from e
