import logging

from sharelinks.types import LambdaEvent, LambdaContext, LambdaResponse
from sharelinks.services import ShareService
from sharelinks.dao.redis import ShareRecordRedisDAO, DocumentRedisDAO
from sharelinks.dao.exceptions import DataStoreError
from sharelinks.exceptions import ConfigurationError, DocumentNotFoundError, InternalError, InvalidRequestError
from sharelinks.utils import load_config, redis_kwargs, app_prefix, share_base_url, token_fingerprint
from sharelinks.utils.helpers import guarantee_500_response
from sharelinks.utils.responses import response_201, response_400, response_404, response_500
from sharelinks.lambdas.create_share.request import CreateShareRequest
from sharelinks.lambdas.create_share.constants import (
    CONFIGURATION_ERROR,
    DOCUMENT_NOT_FOUND,
    SHARE_CREATED,
    SHARE_STORE_UNAVAILABLE,
)


logger = logging.getLogger(__name__)


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to share a document

    This Lambda handler follows this procedure to create share links:
    - Step 1: Load the application's config
    - Step 2: Validate the request body
    - Step 3: Mint, persist and return the share link (via ShareService)

    HTTP responses:
        201: Share link created
            url: <share base url>/s/<token>
            token: newly minted share token
            expiresAt: ISO 8601 UTC expiry, null if the link never expires
        400: Bad client request
            message: invalid JSON, missing 'documentId' or invalid 'expiresInSeconds'
        404: Document not found
        500: Internal server error

    Example:
        >>> event = {'body': '{"documentId": "doc-1"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['expiresAt'] is None
        True
    """
    # 1- Get application's config
    try:
        config = redis_kwargs(load_config('create_share'))
    except (KeyError, ConfigurationError):
        logger.exception('Failed to load AppConfig for create share function. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(error_code=CONFIGURATION_ERROR)

    # 2- Validate request body
    try:
        request = CreateShareRequest.from_event(event)
    except InvalidRequestError as e:
        logger.info('Invalid create share request. Responding with 400.', extra={'event': e.error_code, 'reason': str(e)})
        return response_400(message=str(e), error_code=e.error_code)

    # 3- Mint and persist the share link
    try:
        service = ShareService(
            share_dao=ShareRecordRedisDAO(**config, prefix=app_prefix()),
            document_dao=DocumentRedisDAO(**config, prefix=app_prefix()),
            base_url=share_base_url(event),
        )
        link = service.create_share(request.document_id, request.expires_in_seconds)
    except InvalidRequestError as e:
        return response_400(message=str(e), error_code=e.error_code)
    except DocumentNotFoundError as e:
        return response_404(message=str(e), error_code=DOCUMENT_NOT_FOUND)
    except (InternalError, DataStoreError):
        logger.exception('Failed to create share link. Responding with 500.', extra={'event': SHARE_STORE_UNAVAILABLE})
        return response_500(error_code=SHARE_STORE_UNAVAILABLE)

    logger.info(
        'Share link created. Responding with 201.',
        extra={'event': SHARE_CREATED, 'documentId': link.document_id, 'token': token_fingerprint(link.token)},
    )
    return response_201(link.to_dict())
