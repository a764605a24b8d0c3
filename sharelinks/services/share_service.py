"""Share link lifecycle: create, resolve, revoke

ShareService is the only place where share tokens are minted, where expiry is
evaluated and where documents are projected for viewers. It talks to storage
exclusively through DAOs and reads the current time through an injected
clock, so every rule below can be exercised without Redis and without waiting.

Rules:
    - A token is minted per create_share() call, never reused, never overwritten.
    - A link with expires_at is expired from expires_at onwards (now >= expires_at).
    - Expiry is evaluated when a link is resolved; resolving never alters a record.
    - Viewers only ever receive ReadOnlyDocument fields.
    - Revoking is idempotent; revoking an unknown token succeeds.
    - Storage failures surface as InternalError, chained to the DAO error.

Example:
    >>> from sharelinks.dao.memory import ShareRecordMemoryDAO, DocumentMemoryDAO
    >>> from sharelinks.models import DocumentModel
    >>> service = ShareService(
    ...     share_dao=ShareRecordMemoryDAO(),
    ...     document_dao=DocumentMemoryDAO([DocumentModel(id='doc-1')]),
    ...     base_url='https://notes.example.com',
    ... )
    >>> link = service.create_share('doc-1')
    >>> service.resolve_share(link.token).to_dict()['note']['title']
    'Untitled'
"""

import logging
import functools
from datetime import timedelta
from collections.abc import Callable
from numbers import Real

from sharelinks.types import Clock, TokenFactory
from sharelinks.models import ShareRecordModel, ShareLink, SharedDocument, ReadOnlyDocument
from sharelinks.dao.base import ShareRecordBaseDAO, DocumentBaseDAO
from sharelinks.dao.exceptions import (
    DataStoreError,
    DocumentDoesNotExistError,
    ShareRecordAlreadyExistsError,
    ShareRecordNotFoundError,
)
from sharelinks.exceptions import (
    DocumentNotFoundError,
    InternalError,
    InvalidRequestError,
    LinkExpiredError,
    ShareNotFoundError,
)
from sharelinks.utils.helpers import build_share_url, token_fingerprint, utc_now
from sharelinks.utils.tokens import generate_token
from sharelinks.services.constants import (
    DOCUMENT_NOT_FOUND,
    MAX_TOKEN_ATTEMPTS,
    ORPHANED_SHARE,
    SHARE_CREATED,
    SHARE_EXPIRED,
    SHARE_NOT_FOUND,
    SHARE_RESOLVED,
    SHARE_REVOKED,
    SHARE_STORE_UNAVAILABLE,
    SHARE_TOKEN_COLLISION,
    SHARES_PURGED,
)


logger = logging.getLogger(__name__)


def translate_data_store_error[F: Callable](method: F) -> F:
    """Decorator: re-raise DataStoreError as InternalError

    Storage details (hosts, ports, Redis messages) never reach the caller;
    they stay in the exception chain for the logged traceback.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except DataStoreError as e:
            logger.error(
                'Share store unavailable during %s.',
                method.__name__,
                extra={'event': SHARE_STORE_UNAVAILABLE, 'reason': str(e)},
            )
            raise InternalError('Share store unavailable') from e

    return wrapper


class ShareService:
    """Create, resolve, revoke and list read-only share links.

    Args:
        share_dao (ShareRecordBaseDAO):
            Store of share records.
        document_dao (DocumentBaseDAO):
            Read-only access to the document store.
        base_url (str):
            Public base URL share links are built on, e.g. 'https://notes.example.com'.
        clock (Clock):
            Returns the current timezone-aware UTC instant. Defaults to utc_now.
        token_factory (TokenFactory):
            Mints a new share token. Defaults to generate_token.
    """

    def __init__(
        self,
        share_dao: ShareRecordBaseDAO,
        document_dao: DocumentBaseDAO,
        base_url: str,
        clock: Clock = utc_now,
        token_factory: TokenFactory = generate_token,
    ):
        self.share_dao = share_dao
        self.document_dao = document_dao
        self.base_url = base_url.rstrip('/')
        self.clock = clock
        self.token_factory = token_factory

    @translate_data_store_error
    def create_share(self, document_id: str, expires_in_seconds: float | None = None) -> ShareLink:
        """Mint a new share link for a document

        Args:
            document_id (str):
                Identifier of an existing document.
            expires_in_seconds (float | None):
                Lifetime of the link. None, zero or a negative value creates
                a link which never expires.

        Returns:
            ShareLink: url, token and expiry of the new link.

        Raises:
            InvalidRequestError: If document_id is blank or expires_in_seconds is not a number.
            DocumentNotFoundError: If the document doesn't exist. Nothing is persisted.
            InternalError: If two minted tokens in a row collide, or the store is unavailable.
        """
        document_id = self._require(document_id, 'documentId')
        if expires_in_seconds is not None and (isinstance(expires_in_seconds, bool) or not isinstance(expires_in_seconds, Real)):
            raise InvalidRequestError("'expiresInSeconds' must be a number")

        try:
            self.document_dao.get(document_id)
        except DocumentDoesNotExistError as e:
            logger.info('Refusing to share a missing document.', extra={'event': DOCUMENT_NOT_FOUND, 'documentId': document_id})
            raise DocumentNotFoundError('Note not found') from e

        now = self.clock()
        expires_at = None
        if expires_in_seconds is not None and expires_in_seconds > 0:
            try:
                expires_at = now + timedelta(seconds=expires_in_seconds)
            except OverflowError as e:
                raise InvalidRequestError("'expiresInSeconds' is too large") from e

        record = self._insert_with_fresh_token(document_id, now, expires_at)

        logger.info(
            'Share link created.',
            extra={
                'event': SHARE_CREATED,
                'documentId': document_id,
                'token': token_fingerprint(record.token),
                'expiresAt': record.expires_at.isoformat() if record.expires_at else None,
            },
        )
        return self._to_link(record)

    @translate_data_store_error
    def resolve_share(self, token: str) -> SharedDocument:
        """Return the read-only projection of the document a token grants access to

        Raises:
            InvalidRequestError: If token is blank.
            ShareNotFoundError: If the token never existed or was revoked.
            LinkExpiredError: If the link is past its expiry.
            DocumentNotFoundError: If the shared document no longer exists.
            InternalError: If the store is unavailable.
        """
        token = self._require(token, 'token')
        fingerprint = token_fingerprint(token)

        try:
            record = self.share_dao.get(token)
        except ShareRecordNotFoundError as e:
            logger.info('Share link not found.', extra={'event': SHARE_NOT_FOUND, 'token': fingerprint})
            raise ShareNotFoundError('Share link not found') from e

        if record.is_expired(self.clock()):
            logger.info('Share link expired.', extra={'event': SHARE_EXPIRED, 'token': fingerprint})
            raise LinkExpiredError('Link has expired')

        try:
            document = self.document_dao.get(record.document_id)
        except DocumentDoesNotExistError as e:
            logger.warning(
                'Shared document no longer exists.',
                extra={'event': ORPHANED_SHARE, 'token': fingerprint, 'documentId': record.document_id},
            )
            raise DocumentNotFoundError('Note not found') from e

        logger.debug('Share link resolved.', extra={'event': SHARE_RESOLVED, 'token': fingerprint})
        return SharedDocument(document=ReadOnlyDocument.from_document(document), access_mode=record.access_mode)

    @translate_data_store_error
    def revoke_share(self, token: str) -> None:
        """Permanently invalidate a share token

        Succeeds whether or not the token exists.

        Raises:
            InvalidRequestError: If token is blank.
            InternalError: If the store is unavailable.
        """
        token = self._require(token, 'token')
        self.share_dao.delete(token)
        logger.info('Share link revoked.', extra={'event': SHARE_REVOKED, 'token': token_fingerprint(token)})

    @translate_data_store_error
    def list_shares(self, document_id: str) -> list[ShareLink]:
        """Return every live share link of a document, oldest first

        Raises:
            InvalidRequestError: If document_id is blank.
            InternalError: If the store is unavailable.
        """
        document_id = self._require(document_id, 'documentId')
        now = self.clock()
        records = self.share_dao.list_by_document(document_id)
        return [self._to_link(record) for record in records if not record.is_expired(now)]

    @translate_data_store_error
    def purge_expired(self) -> int:
        """Delete every expired share record and return how many were deleted"""
        purged = self.share_dao.purge_expired(self.clock())
        logger.info('Expired share links purged.', extra={'event': SHARES_PURGED, 'purged': purged})
        return purged

    def _insert_with_fresh_token(self, document_id, now, expires_at) -> ShareRecordModel:
        for attempt in range(1, MAX_TOKEN_ATTEMPTS + 1):
            record = ShareRecordModel(
                token=self.token_factory(),
                document_id=document_id,
                created_at=now,
                expires_at=expires_at,
            )
            try:
                self.share_dao.insert(record)
            except ShareRecordAlreadyExistsError:
                logger.warning(
                    'Minted share token already exists.',
                    extra={'event': SHARE_TOKEN_COLLISION, 'attempt': attempt, 'token': token_fingerprint(record.token)},
                )
            else:
                return record

        raise InternalError('Could not mint a unique share token')

    def _to_link(self, record: ShareRecordModel) -> ShareLink:
        return ShareLink(
            url=build_share_url(self.base_url, record.token),
            token=record.token,
            document_id=record.document_id,
            created_at=record.created_at,
            expires_at=record.expires_at,
            access_mode=record.access_mode,
        )

    @staticmethod
    def _require(value: str | None, name: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise InvalidRequestError(f"missing '{name}'")
        return value.strip()
