import logging

from sharelinks.types import LambdaEvent, LambdaContext, LambdaResponse
from sharelinks.services import ShareService
from sharelinks.dao.redis import ShareRecordRedisDAO, DocumentRedisDAO
from sharelinks.dao.exceptions import DataStoreError
from sharelinks.exceptions import ConfigurationError, InternalError
from sharelinks.utils import load_config, redis_kwargs, app_prefix, share_base_url, token_fingerprint, is_token_well_formed
from sharelinks.utils.helpers import guarantee_500_response
from sharelinks.utils.responses import response_200, response_400, response_500
from sharelinks.lambdas.revoke_share.constants import (
    CONFIGURATION_ERROR,
    MISSING_TOKEN,
    REVOKED_MESSAGE,
    SHARE_REVOKED,
    SHARE_STORE_UNAVAILABLE,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to revoke a share link

    Revoking is idempotent: unknown, already revoked and expired tokens all
    answer 200, so the response never reveals whether a token existed.

    HTTP responses:
        200: {message: 'Share link revoked'}
        400: Missing token in path parameters
        500: Internal server error
    """
    # 1- Get application's config
    try:
        config = redis_kwargs(load_config('revoke_share'))
    except (KeyError, ConfigurationError):
        logger.exception('Failed to load AppConfig for revoke share function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(error_code=CONFIGURATION_ERROR)

    # 2- Extract token from request's path
    token = (event.get('pathParameters') or {}).get('token')
    if not token:
        logger.info('Missing "token" in path. Responding with 400.', extra={'event': MISSING_TOKEN})
        return response_400(message="missing 'token' in path", error_code=MISSING_TOKEN)

    # Malformed tokens can't exist in the store, so there is nothing to delete
    if not is_token_well_formed(token):
        logger.info('Malformed share token. Responding with 200.', extra={'event': SHARE_REVOKED, 'token': token_fingerprint(token)})
        return response_200({'message': REVOKED_MESSAGE})

    # 3- Revoke the share link
    try:
        service = ShareService(
            share_dao=ShareRecordRedisDAO(**config, prefix=app_prefix()),
            document_dao=DocumentRedisDAO(**config, prefix=app_prefix()),
            base_url=share_base_url(event),
        )
        service.revoke_share(token)
    except (InternalError, DataStoreError):
        logger.exception('Failed to revoke share link. Responding with 500.', extra={'event': SHARE_STORE_UNAVAILABLE})
        return response_500(error_code=SHARE_STORE_UNAVAILABLE)

    return response_200({'message': REVOKED_MESSAGE})
