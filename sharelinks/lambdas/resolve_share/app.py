import logging

from sharelinks.types import LambdaEvent, LambdaContext, LambdaResponse
from sharelinks.services import ShareService
from sharelinks.dao.redis import ShareRecordRedisDAO, DocumentRedisDAO
from sharelinks.dao.exceptions import DataStoreError
from sharelinks.exceptions import (
    ConfigurationError,
    DocumentNotFoundError,
    InternalError,
    LinkExpiredError,
    ShareNotFoundError,
)
from sharelinks.utils import load_config, redis_kwargs, app_prefix, share_base_url, token_fingerprint, is_token_well_formed
from sharelinks.utils.helpers import guarantee_500_response
from sharelinks.utils.responses import response_200, response_400, response_404, response_410, response_500
from sharelinks.lambdas.resolve_share.constants import (
    CONFIGURATION_ERROR,
    DOCUMENT_NOT_FOUND,
    LINK_EXPIRED,
    MISSING_TOKEN,
    SHARE_NOT_FOUND,
    SHARE_RESOLVED,
    SHARE_STORE_UNAVAILABLE,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to view a shared document

    This Lambda handler follows this procedure to resolve share links:
    - Step 1: Load the application's config
    - Step 2: Extract the token from the request path
    - Step 3: Resolve the token to a read-only document (via ShareService)

    HTTP responses:
        200: Shared document
            note: {id, title, content, createdAt, updatedAt}
            readOnly: true
        400: Missing token in path parameters
        404: Unknown or revoked token, or the shared document no longer exists
        410: Link has expired
        500: Internal server error

    Example:
        >>> event = {'pathParameters': {'token': 'Zk3u9QwErTy0pLmN_aB-cD12'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
    """
    # 1- Get application's config
    try:
        config = redis_kwargs(load_config('resolve_share'))
    except (KeyError, ConfigurationError):
        logger.exception('Failed to load AppConfig for resolve share function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(error_code=CONFIGURATION_ERROR)

    # 2- Extract token from request's path
    token = (event.get('pathParameters') or {}).get('token')
    if not token:
        logger.info('Missing "token" in path. Responding with 400.', extra={'event': MISSING_TOKEN})
        return response_400(message="missing 'token' in path", error_code=MISSING_TOKEN)

    # Tokens which could never have been minted are not looked up
    if not is_token_well_formed(token):
        logger.info('Malformed share token. Responding with 404.', extra={'event': SHARE_NOT_FOUND, 'token': token_fingerprint(token)})
        return response_404(message='Share link not found', error_code=SHARE_NOT_FOUND)

    # 3- Resolve token to a read-only document
    try:
        service = ShareService(
            share_dao=ShareRecordRedisDAO(**config, prefix=app_prefix()),
            document_dao=DocumentRedisDAO(**config, prefix=app_prefix()),
            base_url=share_base_url(event),
        )
        shared = service.resolve_share(token)
    except ShareNotFoundError as e:
        return response_404(message=str(e), error_code=SHARE_NOT_FOUND)
    except LinkExpiredError as e:
        return response_410(message=str(e), error_code=LINK_EXPIRED)
    except DocumentNotFoundError as e:
        return response_404(message=str(e), error_code=DOCUMENT_NOT_FOUND)
    except (InternalError, DataStoreError):
        logger.exception('Failed to resolve share link. Responding with 500.', extra={'event': SHARE_STORE_UNAVAILABLE})
        return response_500(error_code=SHARE_STORE_UNAVAILABLE)

    logger.info('Serving shared document. Responding with 200.', extra={'event': SHARE_RESOLVED, 'token': token_fingerprint(token)})
    return response_200(shared.to_dict())
