from sharelinks.dao.redis.redis_key_schema import RedisKeySchema
from sharelinks.dao.redis.mixins import RedisClientMixin
from sharelinks.dao.redis.share_record_redis_dao import ShareRecordRedisDAO
from sharelinks.dao.redis.document_redis_dao import DocumentRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'ShareRecordRedisDAO',
    'DocumentRedisDAO',
]
