import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from edgelinks.dao.exceptions import DataStoreError


__all__ = ['connection_label', 'handle_redis_connection_error']

F = TypeVar('F', bound=Callable[..., Any])


def connection_label(client: redis.Redis) -> str:
    """Return '<host>:<port>/<db>' for a Redis client, used in error messages."""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_connection_error[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to turn Redis errors into DataStoreError

    Any Redis failure (connection loss, timeouts, replicas turned read-only
    during failover, OOM rejections) surfaces as DataStoreError, which the
    registry propagates to its caller unchanged. No retry happens here.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise
            redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_connection_error
        ... def get_target(self, identifier):
        ...     return self.redis.get(identifier)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {connection_label(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f"Redis at {connection_label(self.redis)} rejected the command: {e}") from e

    return wrapper
