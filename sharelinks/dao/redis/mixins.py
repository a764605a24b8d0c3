"""Shared Redis client setup for the share link DAOs

Both ShareRecordRedisDAO and DocumentRedisDAO talk to the same Redis
deployment. RedisClientMixin gives them one constructor: connection
parameters come straight from the lambda's `redis` config section (see
sharelinks.utils.config.redis_kwargs), and a PING on construction makes a
misconfigured lambda fail before it touches any share.
"""

import redis

from sharelinks.dao.exceptions import DataStoreError
from sharelinks.dao.redis.helpers import redis_location
from sharelinks.dao.redis.redis_key_schema import RedisKeySchema


class RedisClientMixin:
    """Redis client and key schema for Redis-backed DAOs.

    Pass either `redis_client` (tests, shared clients) or the connection
    parameters. All keys are namespaced with `prefix`, usually app_prefix().

    Attributes:
        redis (redis.Redis): Client used by the DAO methods.
        keys (RedisKeySchema): Key builder bound to `prefix`.

    Raises:
        DataStoreError: If Redis doesn't answer the PING.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int | str = 6379,
        redis_db: int | str = 0,
        redis_decode_responses: bool = True,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
    ):
        if redis_client is None:
            # AppConfig documents may carry port and db as strings
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis; return False instead of raising when raise_error is False"""
        try:
            self.redis.ping()
        except redis.exceptions.RedisError as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't connect to Redis at {redis_location(self.redis)}. Check the lambda's redis configuration."
                ) from e
            return False
        return True
