"""Data Access Object (DAO) implementation for managing share records in Redis

This module provides a Redis-based implementation of ShareRecordBaseDAO for CRUD-like
operations with ShareRecordModel instances.

Responsibilities:
    - Insert, retrieve and delete share records from Redis;
    - Enforce token uniqueness atomically (SET NX);
    - Maintain a per-document index of issued tokens;
    - Let Redis reclaim expired records after a retention period (TTL);
    - Provide defensive error handling and raise appropriate DAO exceptions.

Classes:
    ShareRecordRedisDAO:
        DAO for storing and retrieving ShareRecordModel in a Redis datastore.

Storage layout (see RedisKeySchema):
    <prefix>:shares:<token>                  -> JSON share record (string)
    <prefix>:share_index:<document id>       -> tokens issued for the document (set)

Example:
    >>> from datetime import datetime, UTC
    >>> from sharelinks.models import ShareRecordModel
    >>> from sharelinks.dao.redis import ShareRecordRedisDAO

    >>> dao = ShareRecordRedisDAO(prefix="sharelinks:dev")

    >>> record = ShareRecordModel(
    ...     token='Zk3u9QwErTy0pLmN_aB-cD12',
    ...     document_id='doc-1',
    ...     created_at=datetime.now(UTC),
    ... )
    >>> dao.insert(record)
    <ShareRecordRedisDAO>

    >>> dao.get('Zk3u9QwErTy0pLmN_aB-cD12').document_id
    'doc-1'
"""

import json
import logging
from datetime import datetime
from typing import Any

from beartype import beartype

from sharelinks.models import AccessMode, ShareRecordModel
from sharelinks.dao.base import ShareRecordBaseDAO
from sharelinks.dao.redis.mixins import RedisClientMixin
from sharelinks.dao.redis.helpers import handle_redis_errors
from sharelinks.dao.exceptions import DataStoreError, ShareRecordAlreadyExistsError, ShareRecordNotFoundError
from sharelinks.utils.helpers import isoformat_utc, parse_datetime, token_fingerprint
from sharelinks.utils.constants import EXPIRED_SHARE_RETENTION_SECONDS


logger = logging.getLogger(__name__)


class ShareRecordRedisDAO(RedisClientMixin, ShareRecordBaseDAO):
    """Redis-based Data Access Object (DAO) for managing share records

    This class implements the ShareRecordBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(record: ShareRecordModel, **kwargs) -> ShareRecordRedisDAO:
            Insert a share record and index it under its document.
            Raises ShareRecordAlreadyExistsError when the token exists.

        get(token: str, **kwargs) -> ShareRecordModel:
            Retrieve a share record by token.
            Raises ShareRecordNotFoundError when the token doesn't exist.

        delete(token: str, **kwargs) -> None:
            Delete a share record by token. No-op when the token doesn't exist.

        list_by_document(document_id: str, **kwargs) -> list[ShareRecordModel]:
            Retrieve every stored record of a document, oldest first.

        purge_expired(now: datetime, **kwargs) -> int:
            Delete every record expired at `now`.

        All methods raise DataStoreError on connectivity issues or error replies from Redis.
    """

    @handle_redis_errors
    @beartype
    def insert(self, record: ShareRecordModel, **kwargs) -> 'ShareRecordRedisDAO':
        """Insert a share record into Redis

        The record is written with a single SET NX, which is the serialization
        point for token uniqueness: of two concurrent inserts with the same
        token, exactly one succeeds.

        Records of expiring links get a Redis TTL of their expiry plus a
        retention period, so they answer "expired" for a while before Redis
        reclaims them. Records of links which never expire have no TTL.

        Args:
            record (ShareRecordModel):
                ShareRecordModel instance representing the share.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShareRecordRedisDAO: self (for method chaining)

        Raises:
            ShareRecordAlreadyExistsError:
                If a share record with the same token already exists.
            DataStoreError:
                If a Redis connection issue occurs.
        """
        share_key = self.keys.share_key(record.token)
        exat = None
        if record.expires_at is not None:
            exat = int(record.expires_at.timestamp()) + EXPIRED_SHARE_RETENTION_SECONDS

        created = self.redis.set(share_key, self._encode(record), nx=True, exat=exat)
        if not created:
            raise ShareRecordAlreadyExistsError(f'Share record with token fingerprint {token_fingerprint(record.token)} already exists.')

        # NOTE: Index only after SET NX succeeded. An unindexed record still
        #       resolves and can be revoked; it only misses from list_by_document().
        self.redis.sadd(self.keys.document_shares_key(record.document_id), record.token)
        return self

    @handle_redis_errors
    @beartype
    def get(self, token: str, **kwargs) -> ShareRecordModel:
        """Retrieve a stored share record by token

        Args:
            token (str):
                The share token.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShareRecordModel:
                The retrieved record, expired or not.

        Raises:
            ShareRecordNotFoundError:
                If the share record does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur or the stored record is corrupted.
        """
        raw = self.redis.get(self.keys.share_key(token))
        if raw is None:
            raise ShareRecordNotFoundError(f'Share record with token fingerprint {token_fingerprint(token)} not found.')
        return self._decode(raw)

    @handle_redis_errors
    @beartype
    def delete(self, token: str, **kwargs) -> None:
        """Delete a share record by token

        GET and DEL run in one transaction so the record that gets deleted is
        the one whose document index entry is cleaned up afterwards.

        Args:
            token (str):
                The share token.
            **kwargs:
                Optional keyword arguments (for future use).

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        share_key = self.keys.share_key(token)
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.get(share_key)
            pipe.delete(share_key)
            raw, _ = pipe.execute()

        if raw is None:
            return

        try:
            record = self._decode(raw)
        except DataStoreError:
            # The record is gone; its stale index entry is pruned by list_by_document()
            logger.warning('Deleted a corrupted share record.', extra={'token': token_fingerprint(token)})
            return
        self.redis.srem(self.keys.document_shares_key(record.document_id), token)

    @handle_redis_errors
    @beartype
    def list_by_document(self, document_id: str, **kwargs) -> list[ShareRecordModel]:
        """Retrieve every stored share record of a document, oldest first

        Index entries whose record no longer exists (revoked elsewhere, or
        reclaimed by Redis TTL) are pruned from the index on the way.
        Corrupted records are logged and left out.

        Args:
            document_id (str):
                Identifier of the shared document.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            list[ShareRecordModel]: Records sorted by created_at.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        index_key = self.keys.document_shares_key(document_id)
        tokens = sorted(self.redis.smembers(index_key))
        if not tokens:
            return []

        raws = self.redis.mget([self.keys.share_key(token) for token in tokens])

        records, stale = [], []
        for token, raw in zip(tokens, raws):
            if raw is None:
                stale.append(token)
                continue

            try:
                records.append(self._decode(raw))
            except DataStoreError:
                logger.warning(
                    'Skipping a corrupted share record.',
                    extra={'token': token_fingerprint(token), 'documentId': document_id},
                )

        if stale:
            self.redis.srem(index_key, *stale)

        return sorted(records, key=lambda record: record.created_at)

    @handle_redis_errors
    @beartype
    def purge_expired(self, now: datetime, **kwargs) -> int:
        """Delete every share record expired at the given instant

        Walks the share keyspace with SCAN, so it never blocks Redis the way
        KEYS would. Corrupted records can never resolve and are deleted too.

        Args:
            now (datetime):
                Instant the expiry of each record is evaluated against.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int: Number of deleted records.

        Raises:
            DataStoreError:
                If Redis connectivity issues occur.
        """
        purged = 0
        for share_key in self.redis.scan_iter(match=self.keys.share_key('*'), count=500):
            raw = self.redis.get(share_key)
            if raw is None:
                continue

            try:
                record = self._decode(raw)
            except DataStoreError:
                # Its document is unknown, so the index entry is left to list_by_document()
                token = share_key.rsplit(':', 1)[-1]
                logger.warning('Purging a corrupted share record.', extra={'token': token_fingerprint(token)})
                purged += self.redis.delete(share_key)
                continue

            if not record.is_expired(now):
                continue

            purged += self.redis.delete(share_key)
            self.redis.srem(self.keys.document_shares_key(record.document_id), record.token)

        return purged

    @staticmethod
    def _encode(record: ShareRecordModel) -> str:
        return json.dumps(
            {
                'token': record.token,
                'document_id': record.document_id,
                'created_at': isoformat_utc(record.created_at),
                'expires_at': isoformat_utc(record.expires_at),
                'access_mode': str(record.access_mode),
            }
        )

    @staticmethod
    def _decode(raw: Any) -> ShareRecordModel:
        try:
            data = json.loads(raw)
            return ShareRecordModel(
                token=data['token'],
                document_id=data['document_id'],
                created_at=parse_datetime(data['created_at']),
                expires_at=parse_datetime(data.get('expires_at')),
                access_mode=AccessMode(data.get('access_mode', AccessMode.READ_ONLY)),
            )
        except (TypeError, ValueError, KeyError) as e:
            raise DataStoreError('Corrupted share record in Redis.') from e
