"""Data Access Object (DAO) implementation for managing short links in Redis

This module provides a Redis-based implementation of ShortLinkBaseDAO.

Responsibilities:
    - Write short link mappings to Redis, conditionally or unconditionally;
    - Retrieve short link mappings from Redis;
    - Raise appropriate DAO exceptions.

Classes:
    ShortLinkRedisDAO:
        DAO for storing and retrieving ShortLinkModel in a Redis datastore.

Example:
    >>> from edgelinks.models import ShortLinkModel
    >>> from edgelinks.dao.redis import ShortLinkRedisDAO

    >>> dao = ShortLinkRedisDAO(prefix="edgelinks:dev")

    >>> short_link = ShortLinkModel(identifier="abc123", target="https://example.com/page")
    >>> dao.insert(short_link)
    <ShortLinkRedisDAO>

    >>> dao.get("abc123").target
    'https://example.com/page'
"""

from beartype import beartype

from edgelinks.models import ShortLinkModel
from edgelinks.dao.base import ShortLinkBaseDAO
from edgelinks.dao.redis.mixins import RedisClientMixin
from edgelinks.dao.redis.helpers import handle_redis_connection_error
from edgelinks.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short link mappings

    Each mapping is a single string key (<prefix>:links:<identifier>:url)
    holding the target URL. Keys carry no TTL.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        get(identifier: str, **kwargs) -> ShortLinkModel:
            GET the mapping. Raises ShortLinkNotFoundError when missing.

        put(short_link: ShortLinkModel, **kwargs) -> ShortLinkRedisDAO:
            SET the mapping, overwriting any previous value.

        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkRedisDAO:
            SET NX the mapping. Raises ShortLinkAlreadyExistsError when the key exists.

        All methods raise DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def get(self, identifier: str, **kwargs) -> ShortLinkModel:
        """Retrieve a stored short link mapping by identifier

        Args:
            identifier (str):
                The identifier of the short link.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkModel:
                The retrieved ShortLinkModel instance.

        Raises:
            ShortLinkNotFoundError:
                If the short link does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('abc123')
            ShortLinkModel(identifier='abc123', target='https://example.com')
        """
        target = self.redis.get(self.keys.link_url_key(identifier))
        if target is None:
            raise ShortLinkNotFoundError(f"Short link with identifier '{identifier}' not found.")

        return ShortLinkModel(identifier=identifier, target=target)

    @handle_redis_connection_error
    @beartype
    def put(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        """Unconditionally write a short link mapping into Redis

        Args:
            short_link (ShortLinkModel):
                The mapping to be written.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkRedisDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        self.redis.set(self.keys.link_url_key(short_link.identifier), short_link.target)
        return self

    @handle_redis_connection_error
    @beartype
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        """Insert a short link mapping into Redis only if its identifier is free

        NOTE: The existence check and the write are a single SET NX command.
              A separate EXISTS followed by SET would let two concurrent
              allocations claim the same identifier:

              (lambda 1): EXISTS <app>:links:<identifier>:url  => 0
                          ... interruption
              (lambda 2): EXISTS <app>:links:<identifier>:url  => 0
              (lambda 2): SET <app>:links:<identifier>:url <url 2>
              (lambda 1): SET <app>:links:<identifier>:url <url 1>
                          => lambda 2's mapping is silently clobbered

        Args:
            short_link (ShortLinkModel):
                The mapping to be inserted.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkRedisDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a short link with the same identifier already exists.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        created = self.redis.set(self.keys.link_url_key(short_link.identifier), short_link.target, nx=True)
        if not created:
            raise ShortLinkAlreadyExistsError(f"Short link with identifier '{short_link.identifier}' already exists.")
        return self
