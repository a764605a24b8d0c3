import functools
from typing import Any
from collections.abc import Callable

import redis

from sharelinks.dao.exceptions import DataStoreError


__all__ = ['handle_redis_errors', 'redis_location']


def redis_location(client: redis.Redis) -> str:
    """Return '<host>:<port>/<db>' of a Redis client, for error messages"""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_errors[F: Callable[..., Any]](method: F) -> F:
    """Wrap Redis-interacting DAO methods so Redis faults surface as DataStoreError

    Connectivity issues (ConnectionError, TimeoutError) and every other
    redis.exceptions.RedisError, e.g. OOM, READONLY or WRONGTYPE replies,
    are re-raised as DataStoreError chained to the Redis exception.

    Example:
        >>> @handle_redis_errors
        ... def get_record(self, token):
        ...     return self.redis.get(token)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {redis_location(self.redis)} rejected the command: {e}') from e

    return wrapper
