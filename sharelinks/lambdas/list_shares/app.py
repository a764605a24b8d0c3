import logging
from typing import Any

from sharelinks.types import LambdaEvent, LambdaContext, LambdaResponse
from sharelinks.models import ShareLink
from sharelinks.services import ShareService
from sharelinks.dao.redis import ShareRecordRedisDAO, DocumentRedisDAO
from sharelinks.dao.exceptions import DataStoreError
from sharelinks.exceptions import ConfigurationError, InternalError
from sharelinks.utils import load_config, redis_kwargs, app_prefix, share_base_url, isoformat_utc
from sharelinks.utils.helpers import guarantee_500_response
from sharelinks.utils.responses import response_200, response_400, response_500
from sharelinks.lambdas.list_shares.constants import (
    CONFIGURATION_ERROR,
    MISSING_DOCUMENT_ID,
    SHARES_LISTED,
    SHARE_STORE_UNAVAILABLE,
)


logger = logging.getLogger(__name__)


def share_summary(link: ShareLink) -> dict[str, Any]:
    return {
        **link.to_dict(),
        'createdAt': isoformat_utc(link.created_at),
        'accessMode': str(link.access_mode),
    }


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to list a document's live share links

    HTTP responses:
        200: {documentId, shares: [{url, token, expiresAt, createdAt, accessMode}]}
             Expired links are omitted. Shares are ordered oldest first.
        400: Missing documentId in path parameters
        500: Internal server error
    """
    # 1- Get application's config
    try:
        config = redis_kwargs(load_config('list_shares'))
    except (KeyError, ConfigurationError):
        logger.exception('Failed to load AppConfig for list shares function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(error_code=CONFIGURATION_ERROR)

    # 2- Extract document id from request's path
    document_id = (event.get('pathParameters') or {}).get('documentId')
    if not document_id or not document_id.strip():
        logger.info('Missing "documentId" in path. Responding with 400.', extra={'event': MISSING_DOCUMENT_ID})
        return response_400(message="missing 'documentId' in path", error_code=MISSING_DOCUMENT_ID)

    # 3- List live share links
    try:
        service = ShareService(
            share_dao=ShareRecordRedisDAO(**config, prefix=app_prefix()),
            document_dao=DocumentRedisDAO(**config, prefix=app_prefix()),
            base_url=share_base_url(event),
        )
        links = service.list_shares(document_id)
    except (InternalError, DataStoreError):
        logger.exception('Failed to list share links. Responding with 500.', extra={'event': SHARE_STORE_UNAVAILABLE})
        return response_500(error_code=SHARE_STORE_UNAVAILABLE)

    logger.debug('Listing %d share links.', len(links), extra={'event': SHARES_LISTED, 'documentId': document_id})
    return response_200({'documentId': document_id.strip(), 'shares': [share_summary(link) for link in links]})
